"""
Address Finder - Centralized Theme Module

Color constants and the global application stylesheet.  Widgets import
from this module instead of defining their own colors.
"""


class Theme:
    """Application-wide color and style constants."""

    # --- Core palette ---
    BG = "#2b2b2b"
    PANEL = "#353535"
    TEXT = "#e0e0e0"
    ACCENT = "#4FA3E0"
    DARK_TEXT = "#1a1a1a"
    DIMMED = "#808080"

    # --- Semantic colors ---
    SUCCESS = "#4CAF50"
    ERROR = "#F44336"

    # --- Structural colors ---
    BORDER = "#555555"
    HOVER = "#454545"
    STATUSBAR_BG = "#1e1e1e"

    # -----------------------------------------------------------------
    # Reusable style fragments
    # -----------------------------------------------------------------

    @staticmethod
    def placeholder_label_style() -> str:
        """Dimmed, centered hint text used on the empty and loading pages."""
        return f"""
            QLabel {{
                color: {Theme.DIMMED};
                font-size: 14px;
                padding: 24px;
            }}
        """

    @staticmethod
    def error_message_style() -> str:
        """Status bar text color while a transient error is shown."""
        return f"QStatusBar {{ color: {Theme.ERROR}; }}"

    @staticmethod
    def global_stylesheet() -> str:
        """Return the full application stylesheet."""
        return f"""
QMainWindow {{
    background-color: {Theme.BG};
}}
QWidget {{
    background-color: {Theme.BG};
    color: {Theme.TEXT};
}}
QLabel {{
    color: {Theme.TEXT};
}}
QLineEdit {{
    background-color: {Theme.PANEL};
    color: {Theme.TEXT};
    border: 1px solid {Theme.BORDER};
    border-radius: 4px;
    padding: 6px 8px;
    font-size: 14px;
    selection-background-color: {Theme.ACCENT};
    selection-color: {Theme.DARK_TEXT};
}}
QLineEdit:focus {{
    border: 1px solid {Theme.ACCENT};
}}
QListWidget {{
    background-color: {Theme.PANEL};
    color: {Theme.TEXT};
    border: 1px solid {Theme.BORDER};
    border-radius: 4px;
}}
QListWidget::item {{
    padding: 6px;
}}
QListWidget::item:selected {{
    background-color: {Theme.ACCENT};
    color: {Theme.DARK_TEXT};
}}
QListWidget::item:hover:!selected {{
    background-color: {Theme.HOVER};
}}
QProgressBar {{
    background-color: {Theme.PANEL};
    border: 1px solid {Theme.BORDER};
    border-radius: 4px;
    max-height: 6px;
}}
QProgressBar::chunk {{
    background-color: {Theme.ACCENT};
}}
QScrollBar:vertical {{
    background-color: {Theme.BG};
    width: 12px;
    margin: 0;
}}
QScrollBar::handle:vertical {{
    background-color: {Theme.BORDER};
    border-radius: 6px;
    min-height: 20px;
}}
QScrollBar::handle:vertical:hover {{
    background-color: {Theme.ACCENT};
}}
QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
    height: 0;
}}
QStatusBar {{
    background-color: {Theme.STATUSBAR_BG};
    color: {Theme.DIMMED};
    border-top: 1px solid {Theme.HOVER};
    font-size: 12px;
}}
QMessageBox {{
    background-color: {Theme.BG};
}}
QMessageBox QLabel {{
    color: {Theme.TEXT};
}}
"""
