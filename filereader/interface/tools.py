"""
High-level utility functions for listing the docs folder and reading files.
Used by the main window to fill the list and the text pane.
"""
import logging
from pathlib import Path

from .. import config
from ..models import FileReference

logger = logging.getLogger(__name__)

#======Getting and setting app configs ========================================


def get_config():
    """
    Loads the config dictionary - a single mutable dictionary of settings
    used across the app
    """
    return config.get_all()

def modify_config(key, value):
    """
    Sets user selected values in the config dictionary - a single mutable
    dictionary of settings used across the app
    """
    config.set_value(key, value)

#==== Directory listing =======================================================

def docs_folder_path(base=None) -> Path:
    """Return ``<base>/<docs_folder>``, with ``base`` defaulting to the cwd."""
    base = Path.cwd() if base is None else Path(base)
    return base / config.con_dict["docs_folder"]


def missing_folder_message(folder) -> str:
    return f"ERROR: directory {folder} does not exist."


def load_files(folder) -> list[FileReference] | None:
    """
    List the files directly inside ``folder``.

    Subdirectories are skipped and nothing is recursed into. Order is
    whatever the filesystem enumeration yields.

    Returns
    -------
    list[FileReference] | None
        None if ``folder`` is not an existing directory. Permission or I/O
        errors raised while enumerating are not caught.
    """
    folder = Path(folder)
    if not folder.is_dir():
        return None
    files = [FileReference.from_path(p) for p in folder.iterdir() if p.is_file()]
    logger.info(f"Loaded {len(files)} files from {folder}")
    return files

#==== File viewing ============================================================

def read_lines(file_ref):
    """
    Yield each line of ``file_ref`` with its line separator removed.

    The file is opened in text mode with universal newlines, so ``\\n``,
    ``\\r\\n`` and ``\\r`` are all stripped. The handle is closed however
    iteration ends.
    """
    path = file_ref.path if isinstance(file_ref, FileReference) else Path(file_ref)
    with open(path, "r") as fh:
        for line in fh:
            yield line.rstrip("\n")


def display_file_contents(file_ref, surface):
    """
    Clear ``surface`` then append the file's lines to it one by one.

    Lines are appended without separators, so a multi-line file ends up
    as a single run of text on the surface.

    ``surface`` needs ``clear()`` and ``append_text(str)``.
    """
    surface.clear()
    for line in read_lines(file_ref):
        surface.append_text(line)
