from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .config import Settings
from .errors import (
    InvariantViolationError,
    IoError,
    RecursionNotRequestedError,
    SymlinkDeniedError,
)
from .models import Classification, Notice, NoticeKind, NodeType, PathEntry, RunReport
from .processor import process_file


def collector(
    report: RunReport, notify: Callable[[Notice], None] | None
) -> Callable[[Notice], None]:
    def emit(notice: Notice) -> None:
        report.notices.append(notice)
        if notify is not None:
            notify(notice)

    return emit


def _admit(entry: PathEntry) -> PathEntry:
    # Symlinks are rejected on the path as given, before resolve() can follow them.
    if entry.node_type == NodeType.SYMLINK:
        raise SymlinkDeniedError(entry.path)
    return entry.canonical()


def record_skip(
    report: RunReport,
    emit: Callable[[Notice], None],
    path: Path,
    exc: OSError,
) -> None:
    reason = exc.strerror or str(exc)
    report.skipped.append((path, reason))
    emit(
        Notice(
            path=path,
            kind=NoticeKind.SKIPPED,
            message=f"skipping '{path}': {reason}",
        )
    )


def _handle_file(
    entry: PathEntry,
    settings: Settings,
    report: RunReport,
    emit: Callable[[Notice], None],
) -> None:
    kind = process_file(entry, settings, emit)
    if kind is Classification.PLAIN:
        report.stripped.append(entry.path)
    else:
        report.kept.append((entry.path, kind))


def _children(
    directory: Path,
    settings: Settings,
    report: RunReport,
    emit: Callable[[Notice], None],
) -> list[PathEntry]:
    try:
        names = sorted(child.name for child in directory.iterdir())
    except OSError as exc:
        if settings.force:
            record_skip(report, emit, directory, exc)
            return []
        raise IoError("read directory", directory, exc) from exc

    entries: list[PathEntry] = []
    for name in names:
        child_path = directory / name
        try:
            entries.append(_admit(PathEntry.fetch(child_path)))
        except OSError as exc:
            if settings.force:
                record_skip(report, emit, child_path, exc)
                continue
            raise IoError("read metadata of", child_path, exc) from exc
    return entries


def walk(
    entry: PathEntry,
    settings: Settings,
    notify: Callable[[Notice], None] | None = None,
    *,
    top_level: bool = True,
) -> RunReport:
    """Strip execute bits from `entry` and, for directories, everything below it.

    Traversal is depth-first over an explicit stack. The recursive setting only
    gates entry into a top-level directory; nested directories are always
    descended. Listing and stat failures below the root are skipped when
    `settings.force` is set.
    """
    report = RunReport()
    emit = collector(report, notify)

    try:
        entry = _admit(entry)
    except OSError as exc:
        raise IoError("resolve", entry.path, exc) from exc

    if entry.node_type == NodeType.FILE:
        _handle_file(entry, settings, report, emit)
        return report
    if entry.node_type != NodeType.DIR:
        raise InvariantViolationError(entry.path)
    if top_level and not settings.recursive:
        raise RecursionNotRequestedError(entry.path)

    pending: list[Path] = [entry.path]
    while pending:
        directory = pending.pop()
        subdirs: list[Path] = []
        for child in _children(directory, settings, report, emit):
            if child.node_type == NodeType.FILE:
                _handle_file(child, settings, report, emit)
            elif child.node_type == NodeType.DIR:
                subdirs.append(child.path)
            else:
                raise InvariantViolationError(child.path)
        pending.extend(reversed(subdirs))

    return report
