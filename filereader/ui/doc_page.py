"""
Document page: the file list on the left, the file's text on the right.
"""
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QTextCursor
from PyQt5.QtWidgets import QAbstractItemView, QListWidget, QListWidgetItem, QPlainTextEdit

from ..models import FileReference
from .base_page import BasePage


class TextViewer(QPlainTextEdit):
    """Read-only text pane that appends at the end without adding breaks."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setLineWrapMode(QPlainTextEdit.WidgetWidth)

    def append_text(self, text: str):
        # appendPlainText() would start a new paragraph
        self.moveCursor(QTextCursor.End)
        self.insertPlainText(text)

    def text(self) -> str:
        return self.toPlainText()


class DocumentPage(BasePage):
    """
    Emits
    -----
    fileSelected(FileReference)
        The selected list entry changed to one backed by a file.
    """

    fileSelected = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)

        self.list_widget = QListWidget(self)
        self.list_widget.setSelectionMode(QAbstractItemView.SingleSelection)
        self.list_widget.itemSelectionChanged.connect(self._on_selection_changed)
        self._add_left(self.list_widget)

        self.viewer = TextViewer(self)
        self._add_right(self.viewer)

        self._splitter.setStretchFactor(0, 1)
        self._splitter.setStretchFactor(1, 3)

    # ------------------------------------------------------------------ API

    def populate(self, files):
        """Add one list entry per FileReference, in the given order."""
        if not files:
            return
        for ref in files:
            item = QListWidgetItem(ref.name)
            item.setData(Qt.UserRole, ref)
            item.setToolTip(ref.full_name)
            self.list_widget.addItem(item)

    def show_error(self, message: str):
        """Add a single diagnostic entry that cannot be selected."""
        item = QListWidgetItem(message)
        item.setFlags(Qt.ItemIsEnabled)
        self.list_widget.addItem(item)

    def entries(self) -> list[str]:
        return [self.list_widget.item(i).text() for i in range(self.list_widget.count())]

    def file_at(self, row: int) -> FileReference | None:
        item = self.list_widget.item(row)
        return None if item is None else item.data(Qt.UserRole)

    def select_row(self, row: int):
        self.list_widget.setCurrentRow(row)

    # ------------------------------------------------------------------ internals

    def _on_selection_changed(self):
        items = self.list_widget.selectedItems()
        if not items:
            return
        ref = items[0].data(Qt.UserRole)
        # diagnostic entries carry no file
        if isinstance(ref, FileReference):
            self.fileSelected.emit(ref)
