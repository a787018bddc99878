"""
Local file system adapter implementation for file operations.
"""

import logging
import os
import shutil
from typing import Optional

from typing_extensions import override

from fileops.entities.file import File
from fileops.exceptions import (
    CopyIOError,
    FileRepositoryError,
    SourceIsDirectoryError,
    SourceNotFoundError,
    SourceUnreadableError,
    TargetNotADirectoryError,
)
from fileops.ports.files.file_repository_port import FileRepositoryPort
from fileops.utils.naming import first_free_path


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    def _create_file_entities(self, file_paths: list[str]) -> list[File]:
        """
        Create File entities from a list of paths, skipping unreadable entries.

        Args:
            file_paths: List of paths to convert to File entities

        Returns:
            List of File entities
        """
        files: list[File] = []
        for file_path in file_paths:
            try:
                files.append(File.from_path(file_path))
            except FileRepositoryError as e:
                self._logger.warning(f"Could not process file {file_path}: {e}")
                continue

        return files

    @override
    def list_files(self, directory: str) -> list[File]:
        """
        List every entry (files and folders) of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of File entities in directory order

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._validate_directory(directory)

            file_paths: list[str] = [
                os.path.join(directory, item) for item in os.listdir(directory)
            ]
            return self._create_file_entities(file_paths)

        except FileRepositoryError:
            raise
        except Exception as e:
            raise FileRepositoryError(f"Failed to list files in {directory}: {str(e)}")

    @override
    def validate_source_file(self, path: str) -> None:
        if not os.path.exists(path):
            raise SourceNotFoundError(f"Source file does not exist: {path}")
        if os.path.isdir(path):
            raise SourceIsDirectoryError(
                f"Source path is a directory, not a file: {path}"
            )
        if not os.access(path, os.R_OK):
            raise SourceUnreadableError(f"Source file is not readable: {path}")

    @override
    def ensure_directory(self, path: str) -> bool:
        # No depth limit: every missing parent is created
        if not os.path.exists(path):
            try:
                os.makedirs(path)
            except FileExistsError:
                if not os.path.isdir(path):
                    raise TargetNotADirectoryError(
                        f"Target path is not a directory: {path}"
                    )
                return False
            except OSError as e:
                raise CopyIOError(f"Cannot create directory {path}: {e}")
            self._logger.info(f"Created target directory: {path}")
            return True

        if not os.path.isdir(path):
            raise TargetNotADirectoryError(f"Target path is not a directory: {path}")
        return False

    @override
    def copy_file(self, source: str, target_directory: str) -> str:
        """
        Copy a file into a directory under a name that does not collide.

        The destination is ``<target_directory>/<name>``; when taken, a numeric
        suffix goes before the extension (``data_1.txt``, ``data_2.txt``...).
        The existence check and the write are not atomic: a concurrent writer
        that takes the same name in between is overwritten.

        Args:
            source: Absolute path to a validated source file
            target_directory: Absolute path to an existing directory

        Returns:
            Absolute path of the written file

        Raises:
            CopyIOError: If the bytes cannot be copied
        """
        destination = first_free_path(target_directory, os.path.basename(source))
        self._logger.debug(f"Copying {source} -> {destination}")
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            raise CopyIOError(f"Failed to copy {source} to {destination}: {e}")
        return os.path.abspath(destination)
