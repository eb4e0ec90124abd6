"""MimeType extraction and denylist filtering.

The MimeType attribute is a ``;``-terminated list: ``a/b;c/d;`` holds two
entries. Entries are parsed strictly, the first malformed entry aborts the
file. Denied entries are removed by exact type/subtype equality only.
"""

from collections.abc import Iterable

from desktop_entry_filter.constants import (
    DENIED_MEDIA_TYPE_NAMES,
    MIME_TYPE_KEY,
    MIME_TYPE_SEPARATOR,
)
from desktop_entry_filter.domain.document import Section
from desktop_entry_filter.domain.media_type import MediaType
from desktop_entry_filter.exceptions import MissingAttributeError
from desktop_entry_filter.logger import get_logger

logger = get_logger(__name__)

DENIED_MEDIA_TYPES: frozenset[MediaType] = frozenset(
    MediaType.parse(name) for name in DENIED_MEDIA_TYPE_NAMES
)


def parse_mime_types(raw: str) -> list[MediaType]:
    """Parse a MimeType attribute value.

    Args:
        raw: Raw attribute value, e.g. ``text/html;image/png;``

    Returns:
        Parsed media types in source order

    Raises:
        MalformedMediaTypeError: On the first token that is not a valid
            media type

    """
    tokens = (token.strip() for token in raw.split(MIME_TYPE_SEPARATOR))
    return [MediaType.parse(token) for token in tokens if token]


def filter_media_types(
    media_types: Iterable[MediaType],
    denied: frozenset[MediaType] = DENIED_MEDIA_TYPES,
) -> list[MediaType]:
    """Drop denied media types, keeping source order for the rest."""
    kept = []
    for media_type in media_types:
        if media_type in denied:
            logger.debug("Dropping denied media type %s", media_type)
            continue
        kept.append(media_type)
    return kept


def join_media_types(media_types: Iterable[MediaType]) -> str:
    """Join media types with ``;`` and no trailing separator."""
    return MIME_TYPE_SEPARATOR.join(str(m) for m in media_types)


def filter_mime_type_value(section: Section) -> str:
    """Return the filtered MimeType value of a section.

    Args:
        section: Validated Desktop Entry section

    Returns:
        Surviving media types joined by ``;``; empty when none survive

    Raises:
        MissingAttributeError: If the section has no MimeType attribute
        MalformedMediaTypeError: If an entry fails to parse

    """
    raw = section.get(MIME_TYPE_KEY)
    if raw is None:
        raise MissingAttributeError(MIME_TYPE_KEY)

    return join_media_types(filter_media_types(parse_mime_types(raw)))
