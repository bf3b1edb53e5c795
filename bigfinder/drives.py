from __future__ import annotations
import os
from typing import Dict, Union
import psutil

def volume_usage(path: str) -> Dict[str, Union[str, int, float]]:
    """Usage of the filesystem holding `path`. Raises OSError if psutil cannot stat it."""
    ap = os.path.abspath(path)
    u = psutil.disk_usage(ap)
    return {
        "path": ap,
        "total": int(u.total),
        "used": int(u.used),
        "free": int(u.free),
        "percent": float(u.percent),
    }
