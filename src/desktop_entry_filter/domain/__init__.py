"""Domain types for desktop entry filtering.

Pure value types without any IO or infrastructure dependencies.
"""

from desktop_entry_filter.domain.document import Document, Section
from desktop_entry_filter.domain.media_type import MediaType

__all__ = ["Document", "MediaType", "Section"]
