"""
Console presenters for the listing and copy operations.

Both presenters are the boundary where domain errors become one line of
user-facing text; nothing raised below them reaches the caller.
"""

import logging
import os
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from fileops.entities.copy_command import CopyResult
from fileops.entities.file import File
from fileops.exceptions import CopyError, FileRepositoryError, MalformedCommandError
from fileops.ui.theme import labels_for, make_console, printable
from fileops.use_cases.files.copy_file import CopyFileUseCase
from fileops.use_cases.files.list_files import ListFilesUseCase
from fileops.utils.size_format import format_file_size


class DirectoryDisplay:
    """Render a directory listing as a three-column table."""

    def __init__(
        self,
        list_files_uc: ListFilesUseCase,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        language: str = "en",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the display.

        Args:
            list_files_uc: Use case for listing files
            console: Console for the table (stdout by default)
            error_console: Console for diagnostics (stderr by default)
            language: Language of the column headers and type labels
            logger: Logger instance to use for logging
        """
        self._list_files_uc = list_files_uc
        self._console = console or make_console()
        self._error_console = error_console or make_console(stderr=True)
        self._labels = labels_for(language)
        self._logger = logger or logging.getLogger(__name__)

    def _row(self, entry: File) -> tuple[Text, Text, Text]:
        name = printable(entry.name)
        if entry.is_dir:
            return (
                Text(name, style="folder"),
                Text(self._labels["folder"]),
                Text("-"),
            )
        return (
            Text(name),
            Text(self._labels["file"]),
            Text(format_file_size(entry.size)),
        )

    def build_table(self, directory: str, entries: list[File]) -> Table:
        table = Table(
            title=Text(f"{self._labels['heading']} {printable(directory)}"),
            title_style="heading",
            title_justify="left",
            box=box.SIMPLE_HEAD,
        )
        table.add_column(self._labels["name"], justify="left", min_width=30)
        table.add_column(self._labels["type"], justify="left", min_width=15)
        table.add_column(self._labels["size"], justify="left", min_width=20)
        for entry in entries:
            table.add_row(*self._row(entry))
        return table

    def _error(self, message: str) -> None:
        self._error_console.print(Text(printable(message), style="error"))

    def display_directory_contents(self, directory_path: str) -> bool:
        """
        Print the entries of a directory with their type and size.

        Args:
            directory_path: Directory to display

        Returns:
            True if the table was printed, False if a diagnostic was printed instead
        """
        path = os.path.abspath(os.path.normpath(directory_path))
        if not os.path.isdir(path):
            self._error(f"Directory does not exist or is not accessible: {directory_path}")
            return False

        try:
            entries = self._list_files_uc.execute(path)
        except FileRepositoryError as e:
            self._error(f"Error reading directory: {e}")
            return False

        self._logger.debug(f"Displaying {len(entries)} entries of {path}")
        self._console.print(self.build_table(path, entries))
        return True


class CopyCommandHandler:
    """Run ``copy`` commands and report the outcome as one line."""

    def __init__(
        self,
        copy_file_uc: CopyFileUseCase,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._copy_file_uc = copy_file_uc
        self._console = console or make_console()
        self._error_console = error_console or make_console(stderr=True)
        self._logger = logger or logging.getLogger(__name__)

    def _say(self, console: Console, message: str, style: str) -> None:
        console.print(Text(printable(message), style=style))

    def handle_copy_command(
        self, command: str, current_directory: str
    ) -> Optional[CopyResult]:
        """
        Execute a copy command, printing the destination or a diagnostic.

        Args:
            command: Raw ``copy <source> <target>`` line
            current_directory: Directory relative tokens are resolved against

        Returns:
            The CopyResult on success, None on any failure
        """
        try:
            result = self._copy_file_uc.execute(command, current_directory)
        except MalformedCommandError as e:
            self._say(self._error_console, str(e), "error")
            return None
        except CopyError as e:
            self._logger.debug(f"Copy failed ({type(e).__name__}): {e}")
            self._say(self._error_console, f"Error copying file: {e}", "error")
            return None

        if result.created_directory:
            self._say(
                self._console,
                f"Created target directory: {os.path.dirname(result.destination)}",
                "info",
            )
        self._say(self._console, f"File copied successfully: {result.destination}", "success")
        return result
