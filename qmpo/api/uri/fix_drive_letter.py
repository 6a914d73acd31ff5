"""Restore the colon a browser stripped from a Windows drive letter."""

from .is_drive_letter import is_drive_letter_without_colon


def fix_drive_letter(text: str) -> str:
    """Turn ``C/path`` into ``C:/path``; any other text is returned unchanged."""
    if is_drive_letter_without_colon(text):
        return f"{text[0]}:{text[1:]}"
    return text
