"""Directory URI parsing."""

from .DirectoryUri import DirectoryUri
from .DirectoryUriError import DirectoryUriError
from .EmptyPathError import EmptyPathError
from .InvalidEncodingError import InvalidEncodingError
from .MalformedUriError import MalformedUriError
from .parse_directory_uri import parse_directory_uri
from .PathShape import PathShape
from .WrongSchemeError import WrongSchemeError

__all__ = [
    "DirectoryUri",
    "DirectoryUriError",
    "EmptyPathError",
    "InvalidEncodingError",
    "MalformedUriError",
    "PathShape",
    "WrongSchemeError",
    "parse_directory_uri",
]
