"""
UI module for FileReader.

Qt widgets making up the single window:

- DocumentPage:
    File list on the left, read-only text pane on the right.

- TextViewer:
    The display surface the file viewer writes into.

- InfoTable:
    Key/value table used by the Info window.

All pages inherit from `BasePage`, which owns the splitter layout and the
shared `CurrentContext`.
"""

from .base_page import BasePage
from .doc_page import DocumentPage, TextViewer
from .util_windows import InfoTable, busy_cursor

__all__ = [
    "BasePage",
    "DocumentPage",
    "TextViewer",
    "InfoTable",
    "busy_cursor",
]
