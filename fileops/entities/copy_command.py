"""
Copy command and copy result domain entities.
"""

from dataclasses import dataclass

from fileops.exceptions import MalformedCommandError

COPY_VERB = "copy"
USAGE = "copy <source_file> <target_directory>"

# "copy" plus the separating space
_VERB_PREFIX_LENGTH = len(COPY_VERB) + 1


@dataclass(frozen=True)
class CopyResult:
    """Outcome of one successful copy; `destination` is the path actually written."""

    source: str
    destination: str
    renamed: bool = False
    created_directory: bool = False


class CopyCommand:
    """
    A parsed ``copy <source> <target>`` line.

    The target token is everything after the last space, so the source token
    may contain spaces while the target cannot.
    """

    source: str
    target: str

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target

    @classmethod
    def parse(cls, raw: str) -> "CopyCommand":
        """
        Split a raw command line into source and target tokens.

        Args:
            raw: Full command line, starting with the ``copy`` verb

        Returns:
            Parsed CopyCommand

        Raises:
            MalformedCommandError: If the line has no separable target token
        """
        line = raw.strip()
        if line.split(" ", 1)[0] != COPY_VERB:
            raise MalformedCommandError(f"Not a copy command. Usage: {USAGE}")

        last_space = line.rfind(" ")
        if last_space < _VERB_PREFIX_LENGTH:
            raise MalformedCommandError(f"Malformed command. Usage: {USAGE}")

        source = line[_VERB_PREFIX_LENGTH:last_space].strip()
        target = line[last_space + 1 :].strip()
        if not source or not target:
            raise MalformedCommandError(f"Malformed command. Usage: {USAGE}")
        return cls(source=source, target=target)

    def __repr__(self) -> str:
        return f"CopyCommand(source='{self.source}', target='{self.target}')"
