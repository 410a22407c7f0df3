from __future__ import annotations

import os
import stat
from pathlib import Path

from degreen.config import Settings
from degreen.models import Notice, PathEntry

ELF_HEADER = b"\x7fELF\x02\x01\x01\x00" + b"\x00" * 8
SCRIPT_BODY = b"#!/bin/sh\necho hello\n"
PLAIN_BODY = b"just some data\n"


def mk_file(path: Path, data: bytes = PLAIN_BODY, *, mode: int = 0o755) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    os.chmod(path, mode)
    return path


def mode_of(path: Path) -> int:
    return stat.S_IMODE(os.lstat(path).st_mode)


def mk_settings(*paths: Path, **kwargs) -> Settings:
    return Settings(paths=tuple(paths), **kwargs)


def entry_for(path: Path) -> PathEntry:
    return PathEntry.fetch(path)


class NoticeSink:
    def __init__(self) -> None:
        self.notices: list[Notice] = []

    def __call__(self, notice: Notice) -> None:
        self.notices.append(notice)

    def kinds(self) -> list[str]:
        return [notice.kind.value for notice in self.notices]
