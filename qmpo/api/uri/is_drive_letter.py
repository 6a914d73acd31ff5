"""Drive-letter predicates for Windows-shaped path text."""

from string import ascii_letters


def is_drive_letter(text: str) -> bool:
    """Return True if text starts with a single ASCII letter followed by ':' (e.g. ``C:``)."""
    return len(text) >= 2 and text[0] in ascii_letters and text[1] == ":"


def is_drive_letter_without_colon(text: str) -> bool:
    """Return True if text starts with a single ASCII letter followed by '/' (e.g. ``C/``).

    Browsers translating ``file://`` URLs sometimes drop the colon after the drive letter.
    """
    return len(text) >= 2 and text[0] in ascii_letters and text[1] == "/"
