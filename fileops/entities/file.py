"""
Directory entry entity shown in listings.
"""

import os
from dataclasses import dataclass

from fileops.exceptions import FileRepositoryError


@dataclass(frozen=True)
class File:
    """A file or folder inside a listed directory.

    Folder sizes are not computed; `size` is 0 for folders.
    """

    path: str
    name: str
    is_dir: bool
    size: int = 0

    @classmethod
    def from_path(cls, path: str) -> "File":
        """
        Read an entry's metadata from the file system.

        Args:
            path: Path to the file or folder

        Returns:
            File entity with an absolute path

        Raises:
            FileRepositoryError: If path is empty, missing or its size cannot be read
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        if not os.path.lexists(path):
            raise FileRepositoryError(f"File does not exist: {path}")

        path = os.path.abspath(path)
        is_dir = os.path.isdir(path)
        try:
            size = 0 if is_dir else os.path.getsize(path)
        except OSError as e:
            raise FileRepositoryError(f"Cannot get file size: {e}")
        return cls(path=path, name=os.path.basename(path), is_dir=is_dir, size=size)
