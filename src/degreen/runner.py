from __future__ import annotations

from collections.abc import Callable

from .config import Settings
from .errors import (
    InvariantViolationError,
    IoError,
    NotFoundError,
    RecursionNotRequestedError,
    SymlinkDeniedError,
)
from .models import Notice, NodeType, PathEntry, RootOutcome, RunReport
from .walker import collector, record_skip, walk


def _preflight(settings: Settings) -> None:
    """Raise every always-fatal top-level error before anything is modified."""
    for path in settings.paths:
        try:
            entry = PathEntry.fetch(path)
        except FileNotFoundError as exc:
            raise NotFoundError(path) from exc
        except OSError:
            # reported or raised again by the main pass
            continue
        if entry.node_type == NodeType.SYMLINK:
            raise SymlinkDeniedError(path)
        if entry.node_type == NodeType.DIR and not settings.recursive:
            raise RecursionNotRequestedError(path)
        if entry.node_type == NodeType.OTHER:
            raise InvariantViolationError(path)


def run(
    settings: Settings,
    notify: Callable[[Notice], None] | None = None,
) -> RunReport:
    """Process every path of `settings` in order and return the merged report.

    Any `DegreenError` escaping this function aborts the whole run. Entries
    skipped under force are listed in `RunReport.skipped` and do not make
    the run fail.
    """
    _preflight(settings)

    report = RunReport()
    emit = collector(report, notify)
    for path in settings.paths:
        try:
            entry = PathEntry.fetch(path)
        except FileNotFoundError as exc:
            raise NotFoundError(path) from exc
        except OSError as exc:
            if not settings.force:
                raise IoError("read metadata of", path, exc) from exc
            record_skip(report, emit, path, exc)
            report.roots.append(RootOutcome(path=path, complete=False))
            continue

        walked = walk(entry, settings, notify, top_level=True)
        report.merge(walked)
        report.roots.append(RootOutcome(path=path, complete=walked.complete))
    return report
