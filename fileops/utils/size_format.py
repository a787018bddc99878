"""
Human-readable byte counts for directory listings.
"""

from __future__ import annotations

_UNITS = ("KB", "MB", "GB", "TB")


def format_file_size(size: int) -> str:
    """Format a byte count in human-readable form ("512 B", "1.5 KB")."""
    if size < 0:
        raise ValueError(f"Size cannot be negative: {size}")
    if size < 1024:
        return f"{size} B"
    value = float(size)
    unit = _UNITS[0]
    for unit in _UNITS:
        value /= 1024.0
        # Pick the unit on the value as printed, so 1048575 shows "1.0 MB"
        if round(value, 1) < 1024.0:
            break
    return f"{value:.1f} {unit}"
