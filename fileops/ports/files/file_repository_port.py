"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from fileops.entities.file import File


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def list_files(self, directory: str) -> list[File]:
        """
        List every entry (files and folders) of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of File entities

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def validate_source_file(self, path: str) -> None:
        """
        Check that a copy source exists, is not a directory and is readable.

        Args:
            path: Absolute path to the source file

        Raises:
            SourceNotFoundError: If nothing exists at path
            SourceIsDirectoryError: If path is a directory
            SourceUnreadableError: If path cannot be read
        """
        pass

    @abstractmethod
    def ensure_directory(self, path: str) -> bool:
        """
        Create a directory and its missing parents unless it already exists.

        Args:
            path: Absolute directory path

        Returns:
            True if the directory was created, False if it already existed

        Raises:
            TargetNotADirectoryError: If path exists but is not a directory
            CopyIOError: If the directory cannot be created
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, target_directory: str) -> str:
        """
        Copy a file into a directory under a name that does not collide.

        Args:
            source: Absolute path to a validated source file
            target_directory: Absolute path to an existing directory

        Returns:
            Absolute path of the written file

        Raises:
            CopyIOError: If the bytes cannot be copied
        """
        pass
