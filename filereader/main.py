"""
Entry point and main application window for FileReader.

This module defines `MainWindow`, the top-level Qt window. It owns the
application context (`CurrentContext`), builds the document page and the
status bar, and registers the two view handlers on an `EventDispatcher`:

    - window shown       → fill the list from the files loaded at startup
    - selection changed  → show the file's text and its full path

Startup happens in two phases. Construction reads the docs folder into
memory; the list itself is only filled once the window has been drawn for
the first time.

Run this module directly via:

    python -m filereader.main

or call the top-level `main()` function to launch the GUI.
"""
import logging
import sys
from datetime import datetime

from PyQt5.QtCore import QTimer
from PyQt5.QtWidgets import QAction, QApplication, QMainWindow

from . import config
from .interface import EventDispatcher
from .interface import tools as t
from .models import CurrentContext
from .ui import DocumentPage, InfoTable, busy_cursor

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main window that:
      - Hosts the DocumentPage (list + text pane) and a status bar
      - Loads the docs folder listing once, in the constructor
      - Populates the list on the first shown event only
      - Routes list selections to the file viewer
    """
    def __init__(self, parent=None, base_dir=None):
        super().__init__(parent)
        cfg = t.get_config()
        self.setWindowTitle(cfg["window_title"])
        self.resize(cfg["window_width"], cfg["window_height"])

        # hooks bound by the dispatcher
        self.on_shown = None
        self.on_selection_changed = None
        self.table_window = None

        self.page = DocumentPage(self)
        self.setCentralWidget(self.page)

        self.dispatcher = EventDispatcher(self)
        self.dispatcher.set_shown(self.populate_list)
        self.dispatcher.set_selection_changed(self.show_file)
        self.page.fileSelected.connect(lambda ref: self.on_selection_changed(ref))

        # --- read the folder once; the list stays empty until shown ---
        folder = t.docs_folder_path(base_dir)
        self.cxt = CurrentContext.from_listing(folder, t.load_files(folder))
        self.page.cxt = self.cxt

        self.info_act = QAction("Info", self)
        self.info_act.setShortcut("Ctrl+I")
        self.info_act.setToolTip("Show details of the selected file")
        self.info_act.triggered.connect(self.display_info)
        self.menuBar().addAction(self.info_act)

        self.statusBar().showMessage("Ready.")

    #======== lifecycle ================================================
    def showEvent(self, event):
        super().showEvent(event)
        if not self.dispatcher.shown_fired:
            # let the event loop finish drawing before filling the list
            QTimer.singleShot(0, self._emit_shown)

    def _emit_shown(self):
        if callable(self.on_shown):
            self.on_shown()

    #======== handlers =================================================
    def populate_list(self):
        if self.cxt.missing:
            self.page.show_error(t.missing_folder_message(self.cxt.folder))
            return
        self.page.populate(self.cxt.files)
        logger.info(f"List populated with {len(self.cxt.files)} entries")

    def show_file(self, file_ref):
        logger.info(f"File selected: {file_ref.name}")
        with busy_cursor("Reading....", window=self):
            t.display_file_contents(file_ref, self.page.viewer)
        self.cxt.selected = file_ref
        self.statusBar().showMessage(file_ref.full_name)

    #================= Global actions ==================================
    def file_details(self) -> dict:
        ref = self.cxt.selected
        if ref is None:
            return {
                "Folder": self.cxt.folder,
                "Files listed": len(self.cxt.files),
            }
        st = ref.path.stat()
        return {
            "Name": ref.name,
            "Path": ref.full_name,
            "Size (bytes)": st.st_size,
            "Modified": datetime.fromtimestamp(st.st_mtime).isoformat(sep=" ", timespec="seconds"),
        }

    def display_info(self):
        logger.info("Info window opened")
        self.table_window = InfoTable()
        self.table_window.set_from_dict(self.file_details())
        self.table_window.setWindowTitle("Info Table")
        self.table_window.resize(400, 300)
        self.table_window.show()

    @property
    def status_text(self) -> str:
        return self.statusBar().currentMessage()


def main():
    logging.basicConfig(
        level=config.con_dict["log_level"],
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    app = QApplication(sys.argv)
    win = MainWindow()
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
