"""Address Finder - Geocoding backend."""

from geocoding_client.address import Address
from geocoding_client.client import Geocoder, make_lookup
from geocoding_client.errors import GeocoderError, LimitExceededError, TransportError

__all__ = [
    "Address",
    "Geocoder",
    "make_lookup",
    "GeocoderError",
    "LimitExceededError",
    "TransportError",
]
