"""Tests for shared widgets."""

from live_search.outcome import PresentationState


def test_state_stack_starts_empty(qt_app):
    from widgets.results_list import ResultsList
    from widgets.state_stack import StateStack
    stack = StateStack(ResultsList())
    assert stack.current_state() is PresentationState.EMPTY
    assert stack.empty_label.text() == "Type at least 3 characters to search"


def test_state_stack_switches_pages(qt_app):
    from widgets.results_list import ResultsList
    from widgets.state_stack import StateStack
    content = ResultsList()
    stack = StateStack(content)
    stack.show_state(PresentationState.LOADING)
    assert stack.current_state() is PresentationState.LOADING
    stack.show_state(PresentationState.CONTENT)
    assert stack.currentWidget() is content


def test_state_stack_ignores_same_state(qt_app):
    from widgets.results_list import ResultsList
    from widgets.state_stack import StateStack
    stack = StateStack(ResultsList())
    changes = []
    stack.currentChanged.connect(changes.append)
    stack.show_state(PresentationState.LOADING)
    stack.show_state(PresentationState.LOADING)
    assert changes == [1]


def test_results_list_shows_formatted_addresses(qt_app, make_address):
    from widgets.results_list import ResultsList
    results = ResultsList()
    addresses = [make_address("Paris, France"), make_address("Paris, TX, USA")]
    results.set_addresses(addresses)
    assert results.count() == 2
    assert results.item(1).text() == "Paris, TX, USA"
    assert results.addresses() == addresses
    assert results.address_at(5) is None

    results.set_addresses([])
    assert results.count() == 0


def test_results_list_activation_signal(qt_app, make_address):
    from widgets.results_list import ResultsList
    results = ResultsList()
    results.set_addresses([make_address("Paris, France")])
    received = []
    results.address_activated.connect(received.append)
    results.itemActivated.emit(results.item(0))
    assert [a.formatted_address for a in received] == ["Paris, France"]
