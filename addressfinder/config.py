"""
Address Finder - Application Settings

Defaults for the tunable, non-core settings with ``QSettings`` override
support.  Usage: ``get_setting(settings, "request_timeout_s")`` returns the
stored value coerced to the default's type, or the default.

The search behaviour itself (minimum query length, debounce delay, result
cap) is fixed in ``live_search.controller`` and is not configurable here.
"""

SETTINGS = {
    "geocode_url": "https://maps.googleapis.com/maps/api/geocode/json",
    "request_timeout_s": 10.0,    # Per HTTP request
    "retry_attempts": 2,          # Attempts per lookup on transport errors
    "notification_ms": 3500,      # How long a transient error stays visible
    "language": "",               # Empty = use the system locale
}


def get_setting(store, key: str):
    """Get a setting, checking ``store`` first.

    Args:
        store: A ``QSettings`` (anything with ``value(key)``), or None for
            defaults only.
        key: Key from SETTINGS.

    Returns:
        The stored value converted to the default's type, or the default.

    Raises:
        KeyError: If key is not in SETTINGS.
    """
    if key not in SETTINGS:
        raise KeyError(f"Unknown setting key: {key!r}")
    default = SETTINGS[key]
    if store is not None:
        override = store.value(key)
        if override is not None and override != "":
            try:
                return type(default)(override)
            except (ValueError, TypeError):
                pass
    return default
