"""fileops package: directory listing and collision-safe file copying.

Subpackages follow a ports/adapters/use-cases layout; import them directly.
"""

__version__ = "0.1.0"

__all__: list[str] = []
