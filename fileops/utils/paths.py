"""Path algebra against an explicit current directory.

Nothing here touches the filesystem or the process working directory; the
caller always passes the directory that relative paths are resolved against.
"""

from __future__ import annotations

import os


def resolve_path(raw: str, current_directory: str) -> str:
    """Return `raw` as an absolute, normalized path.

    Absolute inputs are only normalized; relative ones are joined onto
    `current_directory` first.
    """
    s = str(raw or "").strip()
    if os.path.isabs(s):
        return os.path.normpath(s)
    return os.path.normpath(os.path.join(current_directory, s))


def resolve_target_directory(raw: str, current_directory: str) -> str:
    # os.path.join drops current_directory when raw is absolute
    return os.path.normpath(os.path.join(current_directory, str(raw or "").strip()))
