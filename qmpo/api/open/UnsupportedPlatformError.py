"""Unsupported platform error."""


class UnsupportedPlatformError(RuntimeError):
    """Raised when no file manager integration exists for the running platform."""

    def __init__(self, system: str):
        self.system = system
        super().__init__(f"Unsupported operating system: {system}")
