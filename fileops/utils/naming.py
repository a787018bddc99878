"""
Collision-free file names: `data.txt`, `data_1.txt`, `data_2.txt`...
"""

from __future__ import annotations

import os
from itertools import count
from typing import Iterator


def split_name(file_name: str) -> tuple[str, str]:
    """Split `file_name` at its last dot into (base, extension).

    Names without a dot, or whose only dot is leading (".bashrc"), keep the
    whole name as base and get an empty extension.
    """
    return os.path.splitext(file_name)


def candidate_names(file_name: str) -> Iterator[str]:
    """Yield `file_name`, then `<base>_1<ext>`, `<base>_2<ext>`, ..."""
    yield file_name
    base, ext = split_name(file_name)
    for n in count(1):
        yield f"{base}_{n}{ext}"


def first_free_path(directory: str, file_name: str) -> str:
    """Return the first candidate path under `directory` with no existing entry."""
    candidates = (os.path.join(directory, name) for name in candidate_names(file_name))
    return next(path for path in candidates if not os.path.lexists(path))
