"""Abstract base class for directory:// scheme handler registration backends."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific scheme registration.

    Registration binds the ``directory://`` scheme to ``<executable> open <uri>``
    for the current user only.
    """

    @abstractmethod
    def register(self, executable: Path) -> dict[str, Any]:
        """Register executable as the directory:// handler.

        Returns:
            Dictionary with registration result (success plus files or keys written)
        """
        pass

    @abstractmethod
    def unregister(self) -> dict[str, Any]:
        """Remove the directory:// registration.

        Returns:
            Dictionary with unregistration result
        """
        pass

    @abstractmethod
    def status(self) -> dict[str, Any]:
        """Report the directory:// registration.

        Returns:
            Dictionary with a ``registered`` flag and backend-specific details
        """
        pass
