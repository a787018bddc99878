"""
Terminal theme, listing labels and console construction.
"""

from __future__ import annotations

from typing import IO, Literal, Optional

from rich.console import Console
from rich.theme import Theme

LanguageName = Literal["en", "ru"]

FILEOPS_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "heading": "bold magenta",
        "folder": "bold blue",
    }
)

# Column headers and entry type labels per language
_LABELS: dict[str, dict[str, str]] = {
    "en": {
        "name": "Name",
        "type": "Type",
        "size": "Size",
        "file": "File",
        "folder": "Folder",
        "heading": "Contents of",
    },
    "ru": {
        "name": "Имя файла/папки",
        "type": "Тип",
        "size": "Размер",
        "file": "Файл",
        "folder": "Папка",
        "heading": "Содержимое директории:",
    },
}


def available_languages() -> list[LanguageName]:
    return ["en", "ru"]


def labels_for(language: str) -> dict[str, str]:
    """Return the listing labels for `language`, falling back to English."""
    return _LABELS.get(language, _LABELS["en"])


def printable(value: str) -> str:
    """Escape characters a strict UTF-8 stream cannot encode.

    File names that are not valid UTF-8 come back from the OS with surrogate
    escapes (`bad\\udcff.txt`); they are shown as backslash sequences instead.
    """
    return value.encode("utf-8", "backslashreplace").decode("utf-8")


def make_console(file: Optional[IO[str]] = None, stderr: bool = False) -> Console:
    """Build a themed rich Console; pass `file` to capture output."""
    if file is not None:
        return Console(file=file, theme=FILEOPS_THEME, soft_wrap=True)
    return Console(stderr=stderr, theme=FILEOPS_THEME, soft_wrap=True)
