"""Tests for the settings module."""

import pytest
from config import SETTINGS, get_setting


def test_all_setting_keys_exist():
    expected_keys = {
        "geocode_url", "request_timeout_s", "retry_attempts",
        "notification_ms", "language",
    }
    assert expected_keys.issubset(set(SETTINGS.keys()))


def test_get_setting_returns_defaults(settings_store):
    for key, value in SETTINGS.items():
        assert get_setting(settings_store, key) == value


def test_get_setting_with_store_override(settings_store):
    settings_store.setValue("retry_attempts", "4")
    assert get_setting(settings_store, "retry_attempts") == 4
    settings_store.setValue("request_timeout_s", "2.5")
    assert get_setting(settings_store, "request_timeout_s") == 2.5


def test_get_setting_with_none_store():
    assert get_setting(None, "notification_ms") == 3500


def test_get_setting_unknown_key(settings_store):
    with pytest.raises(KeyError):
        get_setting(settings_store, "nonexistent_key")


def test_get_setting_bad_override_falls_back(settings_store):
    settings_store.setValue("retry_attempts", "not_a_number")
    assert get_setting(settings_store, "retry_attempts") == 2


def test_empty_override_falls_back(settings_store):
    settings_store.setValue("geocode_url", "")
    assert get_setting(settings_store, "geocode_url") == SETTINGS["geocode_url"]
