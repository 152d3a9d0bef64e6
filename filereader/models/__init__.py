"""
FileReader filereader.models package.

Data structures describing what the viewer has loaded.

Classes
-------
FileReference
    Immutable name + absolute path pair for one file in the docs folder.
CurrentContext
    The docs folder, the files found in it, and the current selection.
"""

from .context import CurrentContext
from .file_ref import FileReference

__all__ = [
    "FileReference",
    "CurrentContext",
]
