"""Percent-decode URI text into a UTF-8 string."""

from urllib.parse import unquote_to_bytes

from .InvalidEncodingError import InvalidEncodingError


def percent_decode(text: str) -> str:
    """Decode ``%XX`` escapes to bytes and interpret the result as UTF-8.

    Escapes that are not two hex digits are kept literally.

    Raises:
        InvalidEncodingError: If the decoded bytes are not valid UTF-8
    """
    raw = unquote_to_bytes(text)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(text, str(e)) from e
