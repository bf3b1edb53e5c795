from __future__ import annotations

UNITS = ("KB", "MB", "GB", "TB", "PB")

def format_bytes(num: int, human: bool = True, precision: int = 2) -> str:
    """Render a byte count for the report.

    Plain mode gives the exact count (`"1536 bytes"`); human mode scales by
    1024 (`"1.50 KB"`), keeping counts below 1 KB exact (`"512 B"`).
    """
    if not human:
        return f"{num} bytes"
    if num < 1024:
        return f"{num} B"
    x = float(num)
    unit = UNITS[0]
    for unit in UNITS:
        x /= 1024.0
        if x < 1024.0:
            break
    return f"{x:.{precision}f} {unit}"
