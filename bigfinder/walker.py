from __future__ import annotations
import os
from typing import Callable, Optional
from .logger import get_logger
from .models import ChildEntry, FileRecord
from .records import build_record

log = get_logger(__name__)

EmitCb = Callable[[FileRecord], None]
SkipCb = Callable[[str], None]  # path that could not be described

def walk(entry: ChildEntry, base_path: str, emit: EmitCb, skip: Optional[SkipCb] = None) -> None:
    """Emit a record for `base_path/entry.name` and everything below it.

    A path that cannot be described is logged and dropped together with its
    subtree; siblings and ancestors carry on.
    """
    path = os.path.join(base_path, entry.name)
    try:
        rec = build_record(path)
    except OSError as e:
        log.warning("failed to create FileRecord, skipping", path=path, error=str(e))
        if skip:
            skip(path)
        return

    emit(rec)

    if rec.is_dir:
        for child in rec.children:
            walk(child, rec.path, emit, skip)
