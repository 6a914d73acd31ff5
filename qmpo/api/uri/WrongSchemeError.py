"""Wrong URI scheme error."""

from .DirectoryUriError import DirectoryUriError


class WrongSchemeError(DirectoryUriError):
    """Raised when the URI scheme is something other than ``directory``."""

    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f"invalid URI scheme: expected 'directory', got '{scheme}'")
