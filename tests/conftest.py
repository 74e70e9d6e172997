"""
Address Finder Test Fixtures

Shared pytest fixtures for the Qt application, event-loop pumping, a
scriptable lookup backend, and a temporary settings store.
"""

import os
import sys
import threading
import time

import pytest

# Ensure the addressfinder modules are importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "addressfinder"))

os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qt_app():
    """Create a single QApplication instance for the entire test session."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def pump(qt_app):
    """Run the Qt event loop for ``ms`` milliseconds."""
    from PyQt6.QtCore import QEventLoop, QTimer

    def _pump(ms: int) -> None:
        loop = QEventLoop()
        QTimer.singleShot(ms, loop.quit)
        loop.exec()

    return _pump


@pytest.fixture
def wait_until(pump):
    """Pump events until ``predicate()`` is true or ``timeout_ms`` elapses."""

    def _wait(predicate, timeout_ms: int = 3000) -> bool:
        deadline = time.monotonic() + timeout_ms / 1000
        while not predicate():
            if time.monotonic() > deadline:
                return False
            pump(10)
        return True

    return _wait


class FakeBackend:
    """Scriptable ``lookup_fn(query, should_stop)`` running on worker threads.

    ``results[query]`` is returned (or raised, if it is an exception);
    ``hold(query)`` blocks that lookup until ``release(query)``.
    """

    def __init__(self):
        self.results = {}
        self.calls = []           # (query, time.monotonic())
        self.stop_checks = {}     # query -> should_stop callable
        self._gates = {}
        self._lock = threading.Lock()

    def hold(self, *queries):
        for query in queries:
            self._gates[query] = threading.Event()

    def release(self, query):
        self._gates[query].set()

    def release_all(self):
        for gate in self._gates.values():
            gate.set()

    @property
    def queries(self):
        with self._lock:
            return [q for q, _ in self.calls]

    def __call__(self, query, should_stop=None):
        with self._lock:
            self.calls.append((query, time.monotonic()))
            self.stop_checks[query] = should_stop
        gate = self._gates.get(query)
        if gate is not None:
            gate.wait(5)
        result = self.results.get(query, [])
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def backend():
    fake = FakeBackend()
    yield fake
    fake.release_all()


@pytest.fixture
def settings_store(tmp_path, qt_app):
    """A fresh INI-backed QSettings in a temporary directory."""
    from PyQt6.QtCore import QSettings

    store = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    yield store
    store.sync()


@pytest.fixture
def make_address():
    """Build a minimal Address with the given formatted text."""
    from geocoding_client.address import Address

    def _make(name: str, lat: float = 48.85, lng: float = 2.35):
        return Address(formatted_address=name, latitude=lat, longitude=lng)

    return _make
