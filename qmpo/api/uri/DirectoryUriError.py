"""Base error for directory URI parsing."""


class DirectoryUriError(ValueError):
    """Raised when a string cannot be converted into a DirectoryUri."""
