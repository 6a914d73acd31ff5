"""Handler public API - registers qmpo as the directory:// scheme handler."""

import importlib
import platform
from pathlib import Path
from typing import Any

from ._AbstractImpl import _AbstractImpl

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKENDS = ("darwin", "linux", "windows")


class Handler:
    """Public API for scheme handler registration."""

    def __init__(self, backend_type: str | None = None):
        self.backend_type = backend_type or self.detect_os()
        self._impl: _AbstractImpl | None = None

    @staticmethod
    def detect_os() -> str:
        """Detect the current operating system.

        Returns:
            OS identifier string matching platform.system().lower() (e.g., "darwin", "linux", "windows")
        """
        return platform.system().lower()

    def __enter__(self):
        if self.backend_type not in _BACKENDS:
            raise RuntimeError(f"Unsupported operating system: {self.backend_type} (supported: {list(_BACKENDS)})")
        module = importlib.import_module(f"{__package__}._{self.backend_type}._Impl")
        self._impl = module._Impl()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Handler not initialized. Use as context manager first.")
        return self._impl

    def register(self, executable: Path) -> dict[str, Any]:
        """Register executable as the directory:// handler."""
        return self._require_impl().register(executable)

    def unregister(self) -> dict[str, Any]:
        """Remove the directory:// registration."""
        return self._require_impl().unregister()

    def status(self) -> dict[str, Any]:
        """Report the directory:// registration."""
        return self._require_impl().status()
