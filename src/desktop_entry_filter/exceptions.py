"""Exception classes for desktop-entry-filter operations.

The class of an error is its kind. Every error may carry the path of the
file being processed as its target; the processor fills the target in
before the error leaves the pipeline.
"""


class DesktopEntryFilterError(Exception):
    """Base exception for desktop-entry-filter operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional path of the file that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    @property
    def kind(self) -> str:
        """Return the error kind name."""
        return type(self).__name__

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ParseError(DesktopEntryFilterError):
    """Raised when a file is not valid INI-style text."""

    error_prefix = "Error parsing file"


class StructureError(DesktopEntryFilterError):
    """Raised on a wrong section count or a missing Desktop Entry section."""

    error_prefix = "Invalid structure"


class MissingAttributeError(DesktopEntryFilterError):
    """Raised when a required attribute is absent from the section."""

    error_prefix = "Missing attribute"

    def __init__(
        self,
        attribute: str,
        message: str | None = None,
        target: str | None = None,
    ) -> None:
        """Initialize error with the missing attribute name.

        Args:
            attribute: Name of the attribute that was not found.
            message: Optional message overriding the default one.
            target: Optional path of the file that failed.

        """
        super().__init__(
            message or f"Can't find {attribute} entry in file", target
        )
        self.attribute = attribute


class MalformedMediaTypeError(DesktopEntryFilterError):
    """Raised when a MIME token is not a valid type/subtype pair."""

    error_prefix = "Malformed media type"

    def __init__(
        self,
        token: str,
        message: str | None = None,
        target: str | None = None,
    ) -> None:
        """Initialize error with the offending token.

        Args:
            token: The MIME token that failed to parse.
            message: Optional message overriding the default one.
            target: Optional path of the file that failed.

        """
        super().__init__(message or f"Invalid media type {token!r}", target)
        self.token = token


class FileAccessError(DesktopEntryFilterError):
    """Raised when a file cannot be read, written or replaced."""

    error_prefix = "File access failed"
