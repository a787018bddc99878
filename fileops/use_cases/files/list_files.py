"""
Use case for listing the entries of a directory in display order.
"""

import logging
from typing import Optional

from fileops.entities.file import File
from fileops.exceptions import FileRepositoryError
from fileops.ports.files.file_repository_port import FileRepositoryPort


def display_order(entry: File) -> tuple[bool, str, str]:
    """Sort key: folders before files, then names case-insensitively."""
    return (not entry.is_dir, entry.name.casefold(), entry.name)


class ListFilesUseCase:
    """List a directory's folders and files, folders first."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str) -> list[File]:
        """
        Read a directory and order its entries for display.

        Args:
            directory: Path to the directory to list

        Returns:
            File entities, folders first, each group sorted by name

        Raises:
            FileRepositoryError: If the directory cannot be read
        """
        self._logger.info(f"Listing directory: {directory}")
        try:
            entries = self._file_repository.list_files(directory)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory {directory}: {e}")
            raise FileRepositoryError(f"Failed to list {directory}: {str(e)}")

        ordered = sorted(entries, key=display_order)
        folders = sum(1 for entry in ordered if entry.is_dir)
        self._logger.info(
            f"Found {len(ordered) - folders} files and {folders} folders in {directory}"
        )
        return ordered
