from __future__ import annotations

import errno
from pathlib import Path

from .config import ELF_MAGIC, PREFIX_SIZE, SHEBANG
from .errors import IoError
from .models import Classification


def classify(prefix: bytes) -> Classification:
    if prefix[:4] == ELF_MAGIC:
        return Classification.BINARY
    if prefix[:2] == SHEBANG:
        return Classification.SCRIPT
    return Classification.PLAIN


def read_prefix(path: Path) -> bytes:
    """Read exactly the leading `PREFIX_SIZE` bytes of `path`.

    A file shorter than that is reported as a read failure rather than
    classified on a partial prefix.
    """
    try:
        with open(path, "rb") as fh:
            prefix = fh.read(PREFIX_SIZE)
    except OSError as exc:
        raise IoError("read", path, exc) from exc
    if len(prefix) < PREFIX_SIZE:
        raise IoError(
            "read",
            path,
            OSError(errno.EIO, f"file is shorter than {PREFIX_SIZE} bytes"),
        )
    return prefix
