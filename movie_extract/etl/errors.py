"""Failure taxonomy for the extraction run.

Each class marks the scope a failure is contained to: the
run (usage, serialization), a listing page (transport, parse
tree), a detail page (transport, structured data) or a single
listing item.
"""


class ExtractionError(Exception):
    """Base exception for extraction errors."""

    pass


class TransportFailure(ExtractionError):
    """Raised when a listing or detail request fails.

    Attributes:
        context: Where the request was made ("page 3" or a detail URL).
    """

    def __init__(self, message: str, context: str) -> None:
        super().__init__(f"{context}: {message}")
        self.message = message
        self.context = context


class ParseTreeFailure(ExtractionError):
    """Raised when markup cannot be turned into a parse tree."""

    pass


class StructuredDataFailure(ExtractionError):
    """Raised when an embedded metadata block is malformed."""

    pass


class ItemExtractionFailure(ExtractionError):
    """Raised when a listing item has an unexpected shape."""

    pass


class SerializationFailure(ExtractionError):
    """Raised on unsupported output format or write error."""

    pass


class UsageError(ExtractionError):
    """Raised on invalid command line arguments."""

    pass
