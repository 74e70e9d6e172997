"""
Address Finder - Results List Widget

One row per address, showing its formatted address.
"""

from typing import Optional

from PyQt6.QtWidgets import QListWidget, QListWidgetItem
from PyQt6.QtCore import Qt, pyqtSignal

from geocoding_client.address import Address


class ResultsList(QListWidget):
    """List of geocoded addresses.

    Signals:
        address_activated(Address): A row was double-clicked or
            activated with the keyboard.
    """

    address_activated = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setUniformItemSizes(True)
        self.itemActivated.connect(self._on_item_activated)

    def set_addresses(self, addresses: list[Address]) -> None:
        """Replace the displayed rows."""
        self.clear()
        for address in addresses:
            item = QListWidgetItem(address.formatted_address)
            item.setData(Qt.ItemDataRole.UserRole, address)
            item.setToolTip(address.describe())
            self.addItem(item)

    def addresses(self) -> list[Address]:
        return [self.address_at(row) for row in range(self.count())]

    def address_at(self, row: int) -> Optional[Address]:
        item = self.item(row)
        if item is None:
            return None
        return item.data(Qt.ItemDataRole.UserRole)

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        address = item.data(Qt.ItemDataRole.UserRole)
        if address is not None:
            self.address_activated.emit(address)
