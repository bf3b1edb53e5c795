from __future__ import annotations
import os
import stat as statmod
from typing import List
from .models import ChildEntry, FileRecord

def _list_children(dir_path: str) -> List[ChildEntry]:
    children: List[ChildEntry] = []
    with os.scandir(dir_path) as it:
        for entry in it:
            try:
                st = entry.stat(follow_symlinks=False)
            except FileNotFoundError:
                # removed between listing and stat
                continue
            children.append(ChildEntry(
                name=entry.name,
                size=int(st.st_size),
                is_dir=statmod.S_ISDIR(st.st_mode),
            ))
    return children

def build_record(path: str) -> FileRecord:
    """Resolve `path` and describe it without following symlinks.

    Directories get their immediate entries as `children` and the sum of
    those entries' sizes as `size`. Raises FileNotFoundError, PermissionError
    or OSError.
    """
    abs_path = os.path.abspath(path)
    st = os.lstat(abs_path)

    if statmod.S_ISDIR(st.st_mode):
        children = _list_children(abs_path)
        return FileRecord(
            path=abs_path,
            size=sum(c.size for c in children),
            is_dir=True,
            children=tuple(children),
        )
    return FileRecord(path=abs_path, size=int(st.st_size), is_dir=False)
