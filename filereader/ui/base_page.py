"""
Shared page scaffolding: a horizontal splitter plus the current context.
"""


from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QSplitter, QVBoxLayout, QWidget

from ..models import CurrentContext


class BasePage(QWidget):
    """
    Common base: holds a horizontal QSplitter with a left and a right
    widget, and the shared CurrentContext handed in by the controller.
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self._splitter = QSplitter(Qt.Horizontal, self)
        self._left = None     # list of files
        self._right = None    # text pane

        lay = QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.addWidget(self._splitter)

        # Data model available to the page (set by controller)
        self._cxt = CurrentContext()

    @property
    def cxt(self) -> CurrentContext | None:
        return self._cxt

    @cxt.setter
    def cxt(self, new_cxt: CurrentContext | None):
        self._cxt = new_cxt

    # --- building helpers ----------------------------------------------------
    def _add_left(self, w: QWidget):
        self._left = w
        self._splitter.addWidget(w)

    def _add_right(self, w: QWidget):
        self._right = w
        self._splitter.addWidget(w)

