import logging

from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar
from PyQt6.QtCore import QLocale, QSettings
from PyQt6.QtGui import QKeySequence, QShortcut

from config import get_setting
from geocoding_client.client import Geocoder, make_lookup
from live_search.controller import MAX_RESULTS
from search_panel import SearchPanel
from secure_config import get_secret
from theme import Theme

logger = logging.getLogger("addressfinder.ui")


def build_lookup(settings: QSettings):
    """Create the production lookup function from stored settings."""
    language = get_setting(settings, "language") or QLocale.system().bcp47Name()
    api_key = get_secret("geocoding_api_key", fallback_store=settings)
    geocoder = Geocoder(
        api_key=api_key,
        language=language,
        base_url=get_setting(settings, "geocode_url"),
        timeout=get_setting(settings, "request_timeout_s"),
        max_attempts=get_setting(settings, "retry_attempts"),
    )
    logger.info(
        "Geocoder ready (language=%s, api key %s)",
        language, "configured" if api_key else "not configured",
    )
    return make_lookup(geocoder, MAX_RESULTS, language), bool(api_key)


class MainWindow(QMainWindow):
    def __init__(self, lookup_fn=None, settings: QSettings | None = None):
        super().__init__()
        self.setWindowTitle("Address Finder")
        self.setMinimumSize(640, 480)

        self.settings = settings or QSettings("AddressFinder", "AddressFinder")
        api_configured = None
        if lookup_fn is None:
            lookup_fn, api_configured = build_lookup(self.settings)

        self.panel = SearchPanel(lookup_fn, parent=self)
        self.setCentralWidget(self.panel)

        self._setup_status_bar(api_configured)
        self._setup_shortcuts()
        self.panel.controller.transient_error.connect(self.show_transient_error)

    def _setup_status_bar(self, api_configured):
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.status_bar.messageChanged.connect(self._on_status_message_changed)

        self.api_label = QLabel()
        self.status_bar.addPermanentWidget(self.api_label)
        if api_configured is None:
            return
        if api_configured:
            self.api_label.setText("API key: Configured")
            self.api_label.setStyleSheet(f"color: {Theme.SUCCESS};")
        else:
            self.api_label.setText("API key: Not configured")
            self.api_label.setStyleSheet(f"color: {Theme.DIMMED};")

    def _setup_shortcuts(self):
        """Register window-wide keyboard shortcuts."""
        QShortcut(QKeySequence("Ctrl+F"), self).activated.connect(self._focus_search)
        QShortcut(QKeySequence("Escape"), self).activated.connect(
            self.panel.search_input.clear
        )

    def _focus_search(self):
        self.panel.search_input.setFocus()
        self.panel.search_input.selectAll()

    def show_transient_error(self, message: str):
        """Show ``message`` in the status bar for a few seconds."""
        self.status_bar.setStyleSheet(Theme.error_message_style())
        self.status_bar.showMessage(message, get_setting(self.settings, "notification_ms"))

    def _on_status_message_changed(self, message: str):
        if not message:
            self.status_bar.setStyleSheet("")

    def closeEvent(self, event):
        self.panel.cleanup()
        event.accept()
