"""Physical path shapes a directory URI can describe."""

from enum import Enum


class PathShape(str, Enum):
    """Shape of the native path produced from a directory URI."""

    UNIX = "unix"
    WINDOWS_LOCAL = "windows_local"
    UNC = "unc"

    @property
    def uses_backslash(self) -> bool:
        """Return True for Windows-shaped paths."""
        return self is not PathShape.UNIX
