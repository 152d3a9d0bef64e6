import os
import sys

import pytest

# No display on CI; must be set before Qt is imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the project root directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PyQt5.QtWidgets import QApplication  # noqa: E402

from filereader import config  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by every GUI test."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def docs_dir(tmp_path):
    """A working directory holding docs/a.txt, docs/b.txt and a subfolder."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "a.txt").write_text("line1\nline2\n")
    (docs / "b.txt").write_text("other\n")
    (docs / "nested").mkdir()
    (docs / "nested" / "c.txt").write_text("hidden\n")
    return docs


@pytest.fixture
def restore_config():
    """Put con_dict back the way it was after a test mutates it."""
    saved = dict(config.con_dict)
    yield config.con_dict
    config.con_dict.clear()
    config.con_dict.update(saved)
