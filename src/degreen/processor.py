from __future__ import annotations

import os
import stat
from collections.abc import Callable

from .classifier import classify, read_prefix
from .config import Settings
from .errors import IoError
from .models import Classification, Notice, NoticeKind, PathEntry
from .permissions import has_execute_bits, strip_execute

_KEPT_REASONS = {
    Classification.BINARY: "looks like an ELF file",
    Classification.SCRIPT: "looks like it has a shebang line",
}


def process_file(
    entry: PathEntry,
    settings: Settings,
    notify: Callable[[Notice], None] | None = None,
) -> Classification:
    """Clear the execute bits of one regular file unless it is a program.

    Returns the classification; only `Classification.PLAIN` files are chmod-ed.
    Read and chmod failures are raised as `IoError` whatever `settings.force` says.
    """
    kind = classify(read_prefix(entry.path))

    if kind is not Classification.PLAIN:
        if settings.verbose and notify is not None:
            notify(
                Notice(
                    path=entry.path,
                    kind=NoticeKind.KEPT,
                    message=f"'{entry.path}' {_KEPT_REASONS[kind]}",
                )
            )
        return kind

    current = stat.S_IMODE(entry.mode)
    mode = strip_execute(current)
    try:
        os.chmod(entry.path, mode)
    except OSError as exc:
        raise IoError("change permissions of", entry.path, exc) from exc

    if settings.verbose and notify is not None:
        notify(
            Notice(
                path=entry.path,
                kind=NoticeKind.STRIPPED,
                message=(
                    f"'{entry.path}' is now {mode:04o}"
                    if has_execute_bits(current)
                    else f"'{entry.path}' was not executable"
                ),
            )
        )
    return kind
