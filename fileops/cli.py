"""
Command line entry point: one-shot `ls` and `copy`, or the interactive shell.
"""

import argparse
import logging
import os
import sys
from typing import Optional

from fileops import __version__
from fileops.config.settings import get_settings
from fileops.container import DependencyContainer
from fileops.entities.copy_command import COPY_VERB
from fileops.exceptions import ConfigurationError
from fileops.ui.theme import available_languages

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileops",
        description="List directories and copy files without overwriting existing ones.",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Directory relative paths are resolved against (default: process cwd)",
    )
    parser.add_argument(
        "--lang",
        choices=available_languages(),
        default=None,
        help="Language of listing labels (default: FILEOPS_LANGUAGE or en)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    sub = parser.add_subparsers(dest="command")
    ls_parser = sub.add_parser("ls", help="List a directory")
    ls_parser.add_argument("path", nargs="?", default=".", help="Directory to list")

    copy_parser = sub.add_parser("copy", help="Copy a file into a directory")
    copy_parser.add_argument("source", help="File to copy")
    copy_parser.add_argument(
        "target", help="Target directory (created if missing, no spaces)"
    )

    sub.add_parser("shell", help="Start the interactive shell (default)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level_value,
        format=LOG_FORMAT,
    )

    current_directory = os.path.abspath(args.cwd or os.getcwd())
    container = DependencyContainer(language=args.lang or settings.language)

    if args.command == "ls":
        display = container.get_directory_display()
        path = os.path.join(current_directory, args.path)
        return 0 if display.display_directory_contents(path) else 1

    if args.command == "copy":
        if any(ch.isspace() for ch in args.target):
            parser.error("target directory must not contain spaces")
        handler = container.get_copy_command_handler()
        command = f"{COPY_VERB} {args.source} {args.target}"
        result = handler.handle_copy_command(command, current_directory)
        return 0 if result is not None else 1

    container.create_shell(current_directory).run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
