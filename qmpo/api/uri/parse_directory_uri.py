"""Parse a ``directory://`` URI into a native filesystem path."""

from ...constants import SCHEME, SCHEME_PREFIX
from .classify_path import classify_path
from .DirectoryUri import DirectoryUri
from .EmptyPathError import EmptyPathError
from .MalformedUriError import MalformedUriError
from .percent_decode import percent_decode
from .split_uri import split_uri
from .WrongSchemeError import WrongSchemeError


def parse_directory_uri(uri: str) -> DirectoryUri:
    """Parse a directory URI and convert it to a native path.

    Detection:
        - ``directory:///...`` (triple slash): Unix absolute path
        - ``directory://X:/...`` or ``directory://X/...``: Windows local path
        - ``directory://server/...``: Windows UNC path

    Raises:
        WrongSchemeError: Scheme is not ``directory``
        MalformedUriError: Not a URI, or missing the literal ``directory://`` prefix
        EmptyPathError: Nothing after the prefix
        InvalidEncodingError: Percent-decoded bytes are not UTF-8
    """
    split = split_uri(uri)
    if split.scheme != SCHEME:
        raise WrongSchemeError(split.scheme)
    if not split.has_authority:
        raise MalformedUriError(uri, "missing scheme prefix")

    # Slash count after the prefix is what tells the shapes apart, so work on the raw text.
    if not uri.startswith(SCHEME_PREFIX):
        raise MalformedUriError(uri, "missing scheme prefix")
    raw_suffix = uri[len(SCHEME_PREFIX) :]
    if not raw_suffix:
        raise EmptyPathError(uri)

    decoded = percent_decode(raw_suffix)
    _shape, native_path = classify_path(raw_suffix, decoded)

    if not native_path:
        raise EmptyPathError(uri)
    return DirectoryUri(native_path)
