"""Generic URI syntax validation."""

import re
from urllib.parse import urlsplit

from .MalformedUriError import MalformedUriError
from .SplitUri import SplitUri

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Code points never allowed in a host (whitespace, controls, < > \ ^ |)
FORBIDDEN_HOST_PATTERN = re.compile(r"[\x00-\x20\x7f<>\\^|]")


def split_uri(text: str) -> SplitUri:
    """Validate generic URI syntax and return the lowercased scheme.

    Raises:
        MalformedUriError: If the text has no scheme, an invalid authority, or cannot be split
    """
    if not isinstance(text, str):
        raise MalformedUriError(repr(text), "URI must be a string")
    try:
        parts = urlsplit(text)
        # Accessing port validates it (digits only, 0-65535)
        parts.port
    except ValueError as e:
        raise MalformedUriError(text, str(e)) from e

    if not parts.scheme:
        raise MalformedUriError(text, "relative URL without a base")
    if not SCHEME_PATTERN.match(parts.scheme):
        raise MalformedUriError(text, f"invalid scheme {parts.scheme!r}")

    forbidden = FORBIDDEN_HOST_PATTERN.search(parts.netloc)
    if forbidden:
        raise MalformedUriError(text, f"invalid host character {forbidden.group()!r}")

    _, _, rest = text.partition(":")
    return SplitUri(scheme=parts.scheme.lower(), has_authority=rest.startswith("//"))
