"""Custom exceptions for prose."""


class ProseError(Exception):
    """Base exception for prose operations."""


class ResourceLimitError(ProseError):
    """A configured resource ceiling was breached while rendering."""


class DocumentTooLargeError(ResourceLimitError):
    """Source text is longer than the configured maximum."""


class NestingTooDeepError(ResourceLimitError):
    """List or inline span nesting exceeds the configured maximum depth."""
