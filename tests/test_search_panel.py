"""Smoke tests: the search panel and main window wire the controller to the widgets."""

import pytest

from geocoding_client.errors import LimitExceededError
from live_search.outcome import PresentationState


@pytest.fixture
def panel(qt_app, backend):
    from search_panel import SearchPanel
    panel = SearchPanel(backend, debounce_ms=30)
    yield panel
    backend.release_all()
    panel.cleanup()


def test_typing_populates_results(panel, backend, wait_until, make_address):
    backend.results["paris"] = [make_address("Paris, France"), make_address("Paris, TX, USA")]
    panel.search_input.setText("paris")
    assert panel.state_stack.current_state() is PresentationState.LOADING

    assert wait_until(lambda: panel.results_list.count() == 2)
    assert panel.state_stack.current_state() is PresentationState.CONTENT
    assert backend.queries == ["paris"]


def test_clearing_input_shows_empty_page(panel, backend, wait_until, make_address):
    backend.results["paris"] = [make_address("Paris, France")]
    panel.search_input.setText("paris")
    assert wait_until(lambda: panel.results_list.count() == 1)

    panel.search_input.clear()
    assert panel.state_stack.current_state() is PresentationState.EMPTY
    assert panel.results_list.count() == 0


def test_item_activation_shows_details(panel, backend, wait_until, make_address, monkeypatch):
    backend.results["paris"] = [make_address("Paris, France")]
    shown = []
    monkeypatch.setattr(panel, "show_address_details", shown.append)
    panel.search_input.setText("paris")
    assert wait_until(lambda: panel.results_list.count() == 1)

    panel.on_item_activated(0)
    panel.on_item_activated(3)
    assert [a.formatted_address for a in shown] == ["Paris, France"]


def test_cleanup_disposes_controller(panel):
    panel.cleanup()
    assert panel.controller.disposed


class TestMainWindow:
    def test_transient_error_in_status_bar(self, qt_app, backend, settings_store, wait_until):
        from app import MainWindow
        backend.results["paris"] = LimitExceededError("Geocoding quota exceeded")
        window = MainWindow(lookup_fn=backend, settings=settings_store)
        window.panel.controller._scheduler._timer.setInterval(20)
        window.show()
        try:
            window.panel.search_input.setText("paris")
            assert wait_until(lambda: window.status_bar.currentMessage() != "")
            assert window.status_bar.currentMessage() == "Geocoding quota exceeded"
            assert window.panel.state_stack.current_state() is PresentationState.EMPTY
        finally:
            window.close()
        assert window.panel.controller.disposed

    def test_build_lookup_uses_settings(self, qt_app, settings_store, monkeypatch):
        import app
        monkeypatch.setattr(app, "get_secret", lambda key, fallback_store=None: "k-123")
        settings_store.setValue("language", "fr")
        settings_store.setValue("retry_attempts", "3")
        lookup, configured = app.build_lookup(settings_store)
        assert configured is True
        assert callable(lookup)
