"""qmpo - Open Directory With Browser.

Parses ``directory://`` URIs into native filesystem paths and opens them in the
platform file manager.

| OS | Filesystem Path | URI |
|----|-----------------|-----|
| Windows (local) | ``C:\\Users\\tagawa`` | ``directory://C:/Users/tagawa`` |
| Windows (UNC) | ``\\\\server\\share\\folder`` | ``directory://server/share/folder`` |
| Unix | ``/home/tagawa`` | ``directory:///home/tagawa`` |
"""

from qmpo.api.uri import (
    DirectoryUri,
    DirectoryUriError,
    EmptyPathError,
    InvalidEncodingError,
    MalformedUriError,
    PathShape,
    WrongSchemeError,
    parse_directory_uri,
)

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
