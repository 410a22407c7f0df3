from __future__ import annotations

from .config import EXECUTE_BITS


def strip_execute(mode: int) -> int:
    return mode & ~EXECUTE_BITS


def has_execute_bits(mode: int) -> bool:
    return bool(mode & EXECUTE_BITS)
