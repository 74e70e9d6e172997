"""
Address Finder - State Stack Widget

Switches the results area between the empty, loading and content pages.
"""

from PyQt6.QtWidgets import (
    QLabel,
    QProgressBar,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtCore import Qt

from live_search.outcome import PresentationState
from theme import Theme

_PAGE_ORDER = (
    PresentationState.EMPTY,
    PresentationState.LOADING,
    PresentationState.CONTENT,
)


class StateStack(QStackedWidget):
    """Three-page stack driven by ``PresentationState``.

    Args:
        content: Widget shown for ``PresentationState.CONTENT``.
        empty_text: Hint shown on the empty page.
    """

    def __init__(
        self,
        content: QWidget,
        empty_text: str = "Type at least 3 characters to search",
        parent=None,
    ):
        super().__init__(parent)

        self.empty_label = QLabel(empty_text)
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setWordWrap(True)
        self.empty_label.setStyleSheet(Theme.placeholder_label_style())
        self.addWidget(self.empty_label)

        self.addWidget(self._build_loading_page())
        self.addWidget(content)
        self.setCurrentIndex(0)

    def _build_loading_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch(1)

        label = QLabel("Searching...")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setStyleSheet(Theme.placeholder_label_style())
        layout.addWidget(label)

        self.progress = QProgressBar()
        self.progress.setRange(0, 0)  # indeterminate
        self.progress.setTextVisible(False)
        layout.addWidget(self.progress)

        layout.addStretch(1)
        return page

    def current_state(self) -> PresentationState:
        return _PAGE_ORDER[self.currentIndex()]

    def show_state(self, state: PresentationState) -> None:
        """Show the page for ``state``; no-op if it is already shown."""
        index = _PAGE_ORDER.index(state)
        if self.currentIndex() != index:
            self.setCurrentIndex(index)
