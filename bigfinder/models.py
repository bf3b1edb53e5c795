from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

@dataclass(frozen=True)
class ChildEntry:
    name: str
    size: int
    is_dir: bool

@dataclass(frozen=True)
class FileRecord:
    path: str                                       # absolute
    size: int                                       # dirs: sum of immediate children only
    is_dir: bool
    children: Tuple[ChildEntry, ...] = ()

@dataclass
class ScanReport:
    root: FileRecord
    top_dirs: List[FileRecord] = field(default_factory=list)   # size desc
    top_files: List[FileRecord] = field(default_factory=list)  # size desc
    files: int = 0
    dirs: int = 0
    skipped: int = 0
    tasks: int = 0
    elapsed_sec: float = 0.0
