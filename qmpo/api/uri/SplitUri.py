"""Result of the generic URI syntax check."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SplitUri:
    """Scheme and authority flag of a syntactically valid URI."""

    scheme: str
    has_authority: bool
