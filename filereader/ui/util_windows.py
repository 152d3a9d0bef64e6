"""
Auxiliary pop-up windows and small helpers shared by the pages.

Contains the key/value info table and the busy-cursor context manager.
"""


from contextlib import contextmanager

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QApplication,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)


@contextmanager
def busy_cursor(msg=None, window=None):
    """Temporarily set the cursor to busy; restores automatically."""
    QApplication.setOverrideCursor(Qt.WaitCursor)
    if window and hasattr(window, "statusBar") and msg:
        window.statusBar().showMessage(msg)
    try:
        yield
    finally:
        QApplication.restoreOverrideCursor()
        if window and hasattr(window, "statusBar"):
            window.statusBar().clearMessage()


class InfoTable(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.table = QTableWidget(0, 2, self)
        self.table.setHorizontalHeaderLabels(["Property", "Value"])
        self.table.horizontalHeader().setStretchLastSection(True)

        layout = QVBoxLayout(self)
        layout.addWidget(self.table)


    def add_row(self, key, value, editable=False):
        r = self.table.rowCount()
        self.table.insertRow(r)

        key_item = QTableWidgetItem(str(key))
        key_item.setFlags(key_item.flags() & ~Qt.ItemIsEditable)
        self.table.setItem(r, 0, key_item)

        val_item = QTableWidgetItem(str(value))
        if not editable:
            val_item.setFlags(val_item.flags() & ~Qt.ItemIsEditable)
        self.table.setItem(r, 1, val_item)


    def set_from_dict(self, d):
        self.table.setRowCount(0)
        for k, v in d.items():
            self.add_row(k, v, editable=False)

    def as_dict(self) -> dict:
        return {
            self.table.item(r, 0).text(): self.table.item(r, 1).text()
            for r in range(self.table.rowCount())
        }
