"""Decide the path shape of a directory URI and build its native path.

Order of checks:

1. Raw suffix starts with ``/`` (``directory:///...``): Unix, unless the text
   after that slash is a drive letter without colon (``/C/Windows``), which
   makes it a Windows local path.
2. Decoded text (after drive-letter correction) starts with ``X:``: Windows local.
3. Anything else: UNC share (``server/share`` -> ``\\\\server\\share``).

The shape is decided by the raw, undecoded suffix so that an encoded slash
(``%2F``) never counts as a leading slash.
"""

from .fix_drive_letter import fix_drive_letter
from .is_drive_letter import is_drive_letter, is_drive_letter_without_colon
from .PathShape import PathShape


def _to_backslashes(text: str) -> str:
    return text.replace("/", "\\")


def classify_path(raw_suffix: str, decoded: str) -> tuple[PathShape, str]:
    """Classify a URI path suffix and return (shape, native path text).

    Args:
        raw_suffix: Text after ``directory://`` exactly as given
        decoded: The same text after percent-decoding

    Returns:
        Tuple of the path shape and the native path string
    """
    if raw_suffix.startswith("/"):
        after_slash = decoded[1:] if decoded.startswith("/") else decoded
        if is_drive_letter_without_colon(after_slash):
            return PathShape.WINDOWS_LOCAL, _to_backslashes(fix_drive_letter(after_slash))
        return PathShape.UNIX, decoded

    corrected = fix_drive_letter(decoded)
    if is_drive_letter(corrected):
        return PathShape.WINDOWS_LOCAL, _to_backslashes(corrected)

    return PathShape.UNC, "\\\\" + _to_backslashes(corrected)
