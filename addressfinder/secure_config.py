"""
Address Finder - Secure Credential Storage

Stores the geocoding API key in the system keyring when one is usable,
with a fallback to ``QSettings`` on systems without a keyring backend.
"""

import logging

import keyring

logger = logging.getLogger("addressfinder.security")

SERVICE_NAME = "AddressFinder"
SENSITIVE_KEYS = {"geocoding_api_key"}

# Stored in the fallback store when the real value lives in the keyring
_KEYRING_MARKER = "***"


def has_keyring() -> bool:
    """Return True if a working keyring backend is available."""
    try:
        keyring.get_password(SERVICE_NAME, "__test__")
        return True
    except Exception:
        return False


def get_secret(key: str, fallback_store=None) -> str | None:
    """Retrieve a secret, trying the keyring first, then ``fallback_store``.

    Args:
        key: One of the SENSITIVE_KEYS.
        fallback_store: Optional ``QSettings`` for fallback lookup.

    Returns:
        The credential value, or None if not found.
    """
    try:
        value = keyring.get_password(SERVICE_NAME, key)
        if value:
            return value
    except Exception as e:
        logger.debug("Keyring read failed for %s: %s", key, e)

    if fallback_store is not None:
        value = fallback_store.value(key)
        if value and value != _KEYRING_MARKER:
            return str(value)

    return None


def set_secret(key: str, value: str, fallback_store=None) -> None:
    """Store a secret in the keyring, falling back to ``fallback_store``.

    When the keyring accepts the value, the fallback entry is replaced with
    ``***`` to record that the real value lives in the keyring.
    """
    try:
        keyring.set_password(SERVICE_NAME, key, value)
        if fallback_store is not None:
            fallback_store.setValue(key, _KEYRING_MARKER)
        logger.info("Stored %s in system keyring", key)
        return
    except Exception as e:
        logger.warning("Keyring write failed for %s: %s, using settings fallback", key, e)

    if fallback_store is not None:
        fallback_store.setValue(key, value)
        logger.info("Stored %s in settings (no keyring available)", key)


def delete_secret(key: str, fallback_store=None) -> None:
    """Remove a secret from the keyring and the fallback store."""
    try:
        keyring.delete_password(SERVICE_NAME, key)
    except Exception as e:
        logger.debug("Keyring delete failed for %s: %s", key, e)

    if fallback_store is not None:
        fallback_store.remove(key)
