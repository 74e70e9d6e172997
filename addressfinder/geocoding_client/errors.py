"""
Address Finder - Geocoder Exceptions

Every failure a lookup can produce derives from ``GeocoderError`` so that
callers can catch the whole family at the task boundary.
"""


class GeocoderError(Exception):
    """Base class for all geocoding failures."""


class TransportError(GeocoderError):
    """The backend could not be reached or returned an unusable response."""


class LimitExceededError(GeocoderError):
    """The backend rejected the request because a quota or rate limit was hit."""
