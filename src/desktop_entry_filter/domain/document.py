"""Read-only projections of a parsed desktop entry file.

A Document is an ordered set of named Sections; each Section maps
attribute keys to their raw string values in source order. Both are built
once per file by the loader and never mutated afterwards.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Section:
    """Named group of key/value attributes."""

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze attributes behind a read-only view."""
        object.__setattr__(
            self, "attributes", MappingProxyType(dict(self.attributes))
        )

    def get(self, key: str) -> str | None:
        """Return the raw value for key, or None if absent."""
        return self.attributes.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.attributes


@dataclass(frozen=True)
class Document:
    """Ordered collection of sections parsed from one file."""

    sections: tuple[Section, ...] = ()

    @classmethod
    def from_mapping(
        cls, sections: Mapping[str, Mapping[str, str]]
    ) -> "Document":
        """Build a document from a section name -> attributes mapping."""
        return cls(
            tuple(Section(name, attrs) for name, attrs in sections.items())
        )

    @property
    def section_names(self) -> list[str]:
        """Return section names in source order."""
        return [section.name for section in self.sections]

    def has_section(self, name: str) -> bool:
        """Check whether a section with the given name exists."""
        return any(section.name == name for section in self.sections)

    def section(self, name: str) -> Section:
        """Return the section with the given name.

        Raises:
            KeyError: If no such section exists

        """
        for section in self.sections:
            if section.name == name:
                return section
        raise KeyError(name)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)
