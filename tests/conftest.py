"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from fileops.container import DependencyContainer
from fileops.ui.theme import FILEOPS_THEME


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def output():
    """In-memory stream that the test consoles write to."""
    return io.StringIO()


@pytest.fixture
def console(output):
    """Uncoloured themed console writing to the `output` stream."""
    return Console(
        file=output, theme=FILEOPS_THEME, soft_wrap=True, color_system=None, width=120
    )


@pytest.fixture
def dependency_container(mock_logger, console):
    """
    Create a dependency container with captured consoles and a mocked logger.

    Returns:
        DependencyContainer instance
    """
    container = DependencyContainer(console=console, error_console=console)
    container._logger = mock_logger
    return container
