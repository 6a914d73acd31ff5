"""Handler module - directory:// scheme registration."""

from .Handler import Handler

__all__ = ["Handler"]
