"""
Tracks the file list and current selection for the UI.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .file_ref import FileReference


@dataclass
class CurrentContext:
    """
    Lightweight container for the application's working state.

    Attributes
    ----------
    folder : Path | None
        Docs folder scanned at startup. Set once.
    files : tuple[FileReference, ...]
        Files found in the folder, in enumeration order. Empty when the
        folder is missing.
    missing : bool
        True when the folder did not exist at startup.
    selected : FileReference | None
        The file currently shown, if any.
    """

    folder: Path | None = None
    files: tuple = field(default_factory=tuple)
    missing: bool = False
    _selected: Optional[FileReference] = field(default=None, init=False, repr=False)

    @classmethod
    def from_listing(cls, folder, files):
        """Build a context from the result of ``tools.load_files``."""
        if files is None:
            return cls(folder=Path(folder), missing=True)
        return cls(folder=Path(folder), files=tuple(files))

    #----- selection is always one of the listed files, or nothing
    @property
    def selected(self) -> FileReference | None:
        return self._selected

    @selected.setter
    def selected(self, ref):
        if ref is not None and ref not in self.files:
            raise ValueError(f"{ref!r} is not one of the listed files")
        self._selected = ref

    @property
    def has_selection(self) -> bool:
        return self._selected is not None

    @property
    def state(self) -> str:
        return "viewing" if self.has_selection else "idle"
