"""
Use case for copying a file into a directory from a ``copy`` command line.
"""

import logging
import os
from typing import Optional

from fileops.entities.copy_command import CopyCommand, CopyResult
from fileops.exceptions import CopyError, CopyIOError
from fileops.ports.files.file_repository_port import FileRepositoryPort
from fileops.utils.paths import resolve_path, resolve_target_directory


class CopyFileUseCase:
    """Parse a copy command, then validate, ensure the target and copy."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, command: str, current_directory: str) -> CopyResult:
        """
        Run a ``copy <source> <target>`` command.

        Relative source and target tokens are resolved against
        current_directory, never against the process working directory.

        Args:
            command: Raw command line
            current_directory: Directory relative tokens are resolved against

        Returns:
            CopyResult describing the written file

        Raises:
            CopyError: If parsing, validation, directory creation or copying fails
        """
        parsed = CopyCommand.parse(command)
        source = resolve_path(parsed.source, current_directory)
        target_directory = resolve_target_directory(parsed.target, current_directory)
        self._logger.info(f"Copying {source} into {target_directory}")

        try:
            self._file_repository.validate_source_file(source)
            created = self._file_repository.ensure_directory(target_directory)
            destination = self._file_repository.copy_file(source, target_directory)
        except CopyError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying file: {e}")
            raise CopyIOError(f"Failed to copy {source} to {target_directory}: {str(e)}")

        self._logger.info(f"Copied {source} to {destination}")
        return CopyResult(
            source=source,
            destination=destination,
            renamed=os.path.basename(destination) != os.path.basename(source),
            created_directory=created,
        )
