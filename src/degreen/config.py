from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

APP_NAME = "degreen"
VERSION = "0.1.0"

ABOUT = "Strip stray executable bits from files that are not programs"
AFTER_HELP = (
    "By default degreen will only run on the files. Use the --recursive (-r) "
    "flag to run recursively over directories along with their contents."
)

ELF_MAGIC = b"\x7fELF"
SHEBANG = b"#!"
PREFIX_SIZE = 4

# owner, group and other execute bits
EXECUTE_BITS = 0o111


@dataclass(frozen=True)
class Settings:
    force: bool = False
    recursive: bool = False
    verbose: bool = False
    paths: tuple[Path, ...] = ()
