from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path


class NodeType(str, Enum):
    FILE = "file"
    DIR = "dir"
    SYMLINK = "symlink"
    OTHER = "other"


class Classification(str, Enum):
    BINARY = "binary"
    SCRIPT = "script"
    PLAIN = "plain"


class NoticeKind(str, Enum):
    STRIPPED = "stripped"
    KEPT = "kept"
    SKIPPED = "skipped"


def _node_type(st_mode: int) -> NodeType:
    if stat.S_ISLNK(st_mode):
        return NodeType.SYMLINK
    if stat.S_ISDIR(st_mode):
        return NodeType.DIR
    if stat.S_ISREG(st_mode):
        return NodeType.FILE
    return NodeType.OTHER


@dataclass(frozen=True)
class PathEntry:
    path: Path
    node_type: NodeType
    mode: int

    @classmethod
    def fetch(cls, path: Path) -> PathEntry:
        """Stat `path` without following a final symlink."""
        st = os.lstat(path)
        return cls(path=path, node_type=_node_type(st.st_mode), mode=st.st_mode)

    def canonical(self) -> PathEntry:
        return replace(self, path=self.path.resolve(strict=True))


@dataclass(frozen=True)
class Notice:
    path: Path
    kind: NoticeKind
    message: str


@dataclass(frozen=True)
class RootOutcome:
    path: Path
    complete: bool


@dataclass
class RunReport:
    stripped: list[Path] = field(default_factory=list)
    kept: list[tuple[Path, Classification]] = field(default_factory=list)
    skipped: list[tuple[Path, str]] = field(default_factory=list)
    roots: list[RootOutcome] = field(default_factory=list)
    notices: list[Notice] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.skipped

    def merge(self, other: RunReport) -> None:
        self.stripped.extend(other.stripped)
        self.kept.extend(other.kept)
        self.skipped.extend(other.skipped)
        self.roots.extend(other.roots)
        self.notices.extend(other.notices)
