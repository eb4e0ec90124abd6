"""Media type value objects.

Provides a small parsed representation of ``type/subtype`` strings as used
in the ``MimeType`` attribute of desktop entry files. Names follow the
RFC 6838 restricted-name grammar. Comparison is exact on type and subtype,
ignoring ASCII case; there is no wildcard, alias or hierarchy matching.
"""

import re
from dataclasses import dataclass, field

from desktop_entry_filter.exceptions import MalformedMediaTypeError

# restricted-name = restricted-name-first *126restricted-name-chars
_RESTRICTED_NAME = r"[A-Za-z0-9][A-Za-z0-9!#$&\-^_.+]{0,126}"

_MEDIA_TYPE_RE = re.compile(
    rf"""
    (?P<type>{_RESTRICTED_NAME})
    /
    (?P<subtype>{_RESTRICTED_NAME})
    """,
    re.VERBOSE,
)


@dataclass(frozen=True, eq=False)
class MediaType:
    """Parsed ``type/subtype`` pair."""

    type: str
    subtype: str
    _key: tuple[str, str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the case-folded comparison key."""
        object.__setattr__(
            self, "_key", (self.type.lower(), self.subtype.lower())
        )

    @classmethod
    def parse(cls, text: str) -> "MediaType":
        """Parse a ``type/subtype`` string.

        Args:
            text: Media type string such as ``text/html``

        Returns:
            Parsed MediaType preserving the original spelling

        Raises:
            MalformedMediaTypeError: If text is not a valid media type

        """
        match = _MEDIA_TYPE_RE.fullmatch(text)
        if match is None:
            raise MalformedMediaTypeError(text)
        return cls(match.group("type"), match.group("subtype"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaType):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return f"{self.type}/{self.subtype}"
