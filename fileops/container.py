"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any, Callable, Optional

from rich.console import Console

from fileops.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fileops.ports.files.file_repository_port import FileRepositoryPort
from fileops.ui.console import CopyCommandHandler, DirectoryDisplay
from fileops.ui.shell import FileShell
from fileops.ui.theme import make_console
from fileops.use_cases.files.copy_file import CopyFileUseCase
from fileops.use_cases.files.list_files import ListFilesUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(
        self,
        language: str = "en",
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self._instances: dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)
        self._language = language
        self._console = console
        self._error_console = error_console

    def get_console(self) -> Console:
        if self._console is None:
            self._console = make_console()
        return self._console

    def get_error_console(self) -> Console:
        if self._error_console is None:
            self._error_console = make_console(stderr=True)
        return self._error_console

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_list_files_use_case(self) -> ListFilesUseCase:
        """
        Get list files use case with injected dependencies.

        Returns:
            Configured ListFilesUseCase
        """
        if "list_files_use_case" not in self._instances:
            file_repository = self.get_file_repository()
            self._instances["list_files_use_case"] = ListFilesUseCase(
                file_repository, self._logger
            )
        return self._instances["list_files_use_case"]

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        """
        Get copy file use case with injected dependencies.

        Returns:
            Configured CopyFileUseCase
        """
        if "copy_file_use_case" not in self._instances:
            file_repository = self.get_file_repository()
            self._instances["copy_file_use_case"] = CopyFileUseCase(
                file_repository, self._logger
            )
        return self._instances["copy_file_use_case"]

    def get_directory_display(self) -> DirectoryDisplay:
        if "directory_display" not in self._instances:
            self._instances["directory_display"] = DirectoryDisplay(
                self.get_list_files_use_case(),
                console=self.get_console(),
                error_console=self.get_error_console(),
                language=self._language,
                logger=self._logger,
            )
        return self._instances["directory_display"]

    def get_copy_command_handler(self) -> CopyCommandHandler:
        if "copy_command_handler" not in self._instances:
            self._instances["copy_command_handler"] = CopyCommandHandler(
                self.get_copy_file_use_case(),
                console=self.get_console(),
                error_console=self.get_error_console(),
                logger=self._logger,
            )
        return self._instances["copy_command_handler"]

    def create_shell(
        self,
        current_directory: str,
        input_func: Optional[Callable[[str], str]] = None,
    ) -> FileShell:
        """Build a new shell; shells hold state and are not cached."""
        return FileShell(
            current_directory,
            self.get_directory_display(),
            self.get_copy_command_handler(),
            console=self.get_console(),
            input_func=input_func,
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
