"""
Address Finder - Search Panel

Search field on top, results area below.  The panel owns the
``SearchController`` and wires it to the widgets; it holds no search
logic of its own.
"""

import logging

from PyQt6.QtWidgets import QLineEdit, QMessageBox, QVBoxLayout, QWidget

from live_search.controller import DEBOUNCE_DELAY_MS, SearchController
from live_search.outcome import PresentationState
from widgets.results_list import ResultsList
from widgets.state_stack import StateStack

logger = logging.getLogger("addressfinder.ui")


class SearchPanel(QWidget):
    """Address search view.

    Args:
        lookup_fn: Passed through to ``SearchController``.
        debounce_ms: Passed through to ``SearchController``.
    """

    def __init__(self, lookup_fn, debounce_ms: int = DEBOUNCE_DELAY_MS, parent=None):
        super().__init__(parent)
        self.controller = SearchController(lookup_fn, debounce_ms, self)
        self._init_ui()
        self._connect_signals()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search for an address or place...")
        self.search_input.setClearButtonEnabled(True)
        layout.addWidget(self.search_input)

        self.results_list = ResultsList()
        self.state_stack = StateStack(self.results_list)
        layout.addWidget(self.state_stack, stretch=1)

    def _connect_signals(self) -> None:
        self.search_input.textChanged.connect(self.controller.on_input_changed)
        self.controller.presentation_changed.connect(self._on_presentation_changed)
        self.controller.results_changed.connect(self.results_list.set_addresses)
        self.results_list.address_activated.connect(self.show_address_details)

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_presentation_changed(self, state: PresentationState) -> None:
        self.state_stack.show_state(state)

    def on_item_activated(self, index: int) -> None:
        """Show details for the address in row ``index``."""
        address = self.results_list.address_at(index)
        if address is not None:
            self.show_address_details(address)

    def show_address_details(self, address) -> None:
        logger.debug("Showing details for %s", address.formatted_address)
        QMessageBox.information(self, "Address", address.describe())

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def cleanup(self) -> None:
        """Stop the controller and wait for lookup threads.

        Called by ``MainWindow.closeEvent()``.
        """
        self.controller.shutdown()
