"""Malformed URI error."""

from .DirectoryUriError import DirectoryUriError


class MalformedUriError(DirectoryUriError):
    """Raised when the input is not a structurally valid directory URI."""

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(f"invalid URI format: {reason}")
