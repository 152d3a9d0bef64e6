"""
Immutable handle on a single file found in the docs folder.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FileReference:
    """
    A file listed by the viewer.

    Parameters
    ----------
    path : Path
        Absolute path to the file. Equality and hashing use this only.
    name : str
        Display name shown in the list (the file's basename).
    """
    path: Path
    name: str = field(default="", compare=False)

    def __post_init__(self):
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "path", Path(self.path).absolute())
        if not self.name:
            object.__setattr__(self, "name", self.path.name)

    @classmethod
    def from_path(cls, path) -> "FileReference":
        p = Path(path).absolute()
        return cls(path=p, name=p.name)

    @property
    def full_name(self) -> str:
        return str(self.path)

    def __str__(self):
        return self.name
