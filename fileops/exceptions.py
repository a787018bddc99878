"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class CopyError(BaseAppError):
    """Base exception for failures of a copy command."""

    pass


class MalformedCommandError(CopyError):
    """Raised when a copy command cannot be split into source and target."""

    pass


class SourceNotFoundError(CopyError):
    """Raised when the source file does not exist."""

    pass


class SourceIsDirectoryError(CopyError):
    """Raised when the source path is a directory."""

    pass


class SourceUnreadableError(CopyError):
    """Raised when the source file cannot be read."""

    pass


class TargetNotADirectoryError(CopyError):
    """Raised when the target path exists but is not a directory."""

    pass


class CopyIOError(CopyError):
    """Raised for I/O failures while creating directories or copying bytes."""

    pass
