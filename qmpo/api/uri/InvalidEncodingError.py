"""Invalid percent-encoding error."""

from .DirectoryUriError import DirectoryUriError


class InvalidEncodingError(DirectoryUriError):
    """Raised when percent-decoded bytes are not valid UTF-8."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"invalid UTF-8 in percent-encoded path: {reason}")
