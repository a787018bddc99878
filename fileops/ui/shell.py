"""
Interactive command loop around the listing and copy presenters.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from fileops.entities.copy_command import COPY_VERB, USAGE
from fileops.ui.console import CopyCommandHandler, DirectoryDisplay
from fileops.ui.theme import make_console, printable
from fileops.utils.paths import resolve_path

HELP_TEXT = (
    "Commands:\n"
    "  ls [path]      list a directory (current directory by default)\n"
    "  cd <path>      change the current directory\n"
    "  pwd            print the current directory\n"
    f"  {USAGE}\n"
    "                 copy a file, renaming it if the name is taken\n"
    "  help           show this help\n"
    "  exit, quit     leave the shell"
)


class FileShell:
    """Read commands line by line and dispatch them.

    The shell keeps its own current directory; the process working directory
    is never changed.
    """

    def __init__(
        self,
        current_directory: str,
        display: DirectoryDisplay,
        copy_handler: CopyCommandHandler,
        console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.current_directory = os.path.abspath(current_directory)
        self._display = display
        self._copy_handler = copy_handler
        self._console = console or make_console()
        self._input = input_func or input
        self._logger = logger or logging.getLogger(__name__)

    def _say(self, message: str, style: Optional[str] = None) -> None:
        self._console.print(Text(printable(message), style=style or ""))

    def _change_directory(self, arg: str) -> None:
        if not arg:
            self._say("Usage: cd <path>", "warning")
            return
        target = resolve_path(arg, self.current_directory)
        if not os.path.isdir(target):
            self._say(f"Not a directory: {target}", "error")
            return
        self.current_directory = target
        self._logger.info(f"Current directory: {target}")

    def execute(self, line: str) -> bool:
        """
        Run one command line.

        Returns:
            False when the shell should stop, True otherwise
        """
        line = line.strip()
        if not line:
            return True
        verb, _, arg = line.partition(" ")
        arg = arg.strip()

        if verb in ("exit", "quit"):
            return False
        if verb == "help":
            self._say(HELP_TEXT)
        elif verb == "pwd":
            self._say(self.current_directory)
        elif verb == "ls":
            path = resolve_path(arg, self.current_directory) if arg else self.current_directory
            self._display.display_directory_contents(path)
        elif verb == "cd":
            self._change_directory(arg)
        elif verb == COPY_VERB:
            self._copy_handler.handle_copy_command(line, self.current_directory)
        else:
            self._say(f"Unknown command: {verb}. Type 'help' for the list.", "warning")
        return True

    def run(self) -> None:
        """Prompt until exit/quit or end of input."""
        self._say("Type 'help' for the list of commands.", "info")
        while True:
            try:
                line = self._input(f"{printable(self.current_directory)}> ")
            except (EOFError, KeyboardInterrupt):
                self._say("")
                break
            if not self.execute(line):
                break
