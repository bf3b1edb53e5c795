from __future__ import annotations
from typing import List
from .models import FileRecord

DEFAULT_LIMIT = 10

def insert_sorted(records: List[FileRecord], record: FileRecord, limit: int) -> List[FileRecord]:
    """Return a new list holding `record` and `records`, largest first, at most `limit` long.

    The sort is stable, so records of equal size keep their arrival order.
    """
    if limit <= 0:
        return []
    merged = list(records)
    merged.append(record)
    merged.sort(key=lambda r: r.size, reverse=True)
    return merged[:limit]
