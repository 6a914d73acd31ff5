"""Parsed ``directory://`` URI value object."""

from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from .EmptyPathError import EmptyPathError
from .is_drive_letter import is_drive_letter
from .PathShape import PathShape


@dataclass(frozen=True)
class DirectoryUri:
    """Native filesystem path parsed from a ``directory://`` URI.

    Supported forms:

    | URI | native_path |
    |-----|-------------|
    | ``directory:///home/tagawa`` | ``/home/tagawa`` |
    | ``directory://C:/Users/tagawa`` | ``C:\\Users\\tagawa`` |
    | ``directory://server/share/folder`` | ``\\\\server\\share\\folder`` |

    The path is never canonicalized: ``..`` segments and symlinks are kept as given.
    """

    native_path: str

    def __post_init__(self):
        if not isinstance(self.native_path, str):
            raise TypeError("DirectoryUri native_path must be a string")
        if not self.native_path:
            raise EmptyPathError()

    def __str__(self):
        return self.native_path

    def __repr__(self):
        return f"DirectoryUri('{self.native_path}')"

    @classmethod
    def parse(cls, uri: str) -> "DirectoryUri":
        """Parse a ``directory://`` URI string.

        Raises:
            DirectoryUriError: WrongSchemeError, MalformedUriError, EmptyPathError or InvalidEncodingError
        """
        from .parse_directory_uri import parse_directory_uri

        return parse_directory_uri(uri)

    @property
    def shape(self) -> PathShape:
        """Shape of the native path, recovered from its text."""
        if self.native_path.startswith("\\\\"):
            return PathShape.UNC
        if is_drive_letter(self.native_path):
            return PathShape.WINDOWS_LOCAL
        return PathShape.UNIX

    @property
    def path(self) -> PurePath:
        """Pure path flavoured after the shape (no filesystem access)."""
        if self.shape.uses_backslash:
            return PureWindowsPath(self.native_path)
        return PurePosixPath(self.native_path)

    def into_path(self) -> Path:
        """Concrete path on the running host."""
        return Path(self.native_path)
