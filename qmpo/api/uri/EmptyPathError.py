"""Empty path error."""

from .DirectoryUriError import DirectoryUriError


class EmptyPathError(DirectoryUriError):
    """Raised when a directory URI carries no path."""

    def __init__(self, uri: str = ""):
        self.uri = uri
        super().__init__("empty path in URI")
