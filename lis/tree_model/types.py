"""Tree entry datatypes used by the snapshot, reconciler, and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..git_status import GitKind


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"
    # Symlink whose target could not be resolved.
    SYMLINK = "symlink"


class SortKind(Enum):
    """Eight total orders; cycling follows declaration order."""

    NAME = "name"
    EXTENSION = "ext"
    SIZE = "size"
    TIME = "time"
    NAME_REV = "name-rev"
    EXTENSION_REV = "ext-rev"
    SIZE_REV = "size-rev"
    TIME_REV = "time-rev"

    @property
    def label(self) -> str:
        return self.value

    def next(self) -> SortKind:
        members = list(SortKind)
        return members[(members.index(self) + 1) % len(members)]


def canonical_path(path: Path) -> Path:
    """Return the absolute, symlink-resolved form of ``path``.

    Missing trailing components are kept as-is, so paths that vanished from
    disk still produce a stable key.
    """
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path.absolute()


@dataclass
class Entry:
    """One filesystem node as drawn in the Visible List."""

    name: str
    path: Path
    kind: EntryKind
    depth: int
    canonical: Path
    git: GitKind = GitKind.NONE
    is_hidden: bool = False
    is_readonly: bool = False
    is_selected: bool = False
    is_symlink: bool = False
    is_last: bool = False
    ancestor_has_more: list[bool] = field(default_factory=list)
    ancestors: tuple[Path, ...] = ()
    is_expanded: bool = False
    icon: str = ""
    size: int = 0
    mtime: int = 0
    extension: str = ""

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class Clipboard:
    """Paths staged by copy/cut; ``is_cut`` means move on paste."""

    paths: list[Path] = field(default_factory=list)
    is_cut: bool = False

    def replace(self, paths: list[Path], is_cut: bool) -> None:
        self.paths = list(paths)
        self.is_cut = is_cut

    def clear(self) -> None:
        self.paths = []
        self.is_cut = False
