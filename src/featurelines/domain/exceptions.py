"""Domain exceptions: all public errors of featurelines.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""

INVALID_IDENTIFIER_HINT = "is not valid. Try URI[:LINE]*"


class FeatureLinesError(Exception):
    """Base for all featurelines error exceptions.

    Allows: except FeatureLinesError to catch all library errors.
    """


class MalformedIdentifierError(FeatureLinesError, ValueError):
    """Text does not follow the URI[:LINE]* grammar.

    Raised by the top-level parse entry point. The underlying failure
    (unresolvable locator, bad line segment) is kept in __cause__.
    Inherits ValueError for semantic correctness.

    Attributes:
        text: Full identifier text as given by the caller.
    """

    def __init__(self, text: str) -> None:
        """Initialize with offending text."""
        self.text = text
        super().__init__(f"{text} {INVALID_IDENTIFIER_HINT}")


class InvalidFeatureLocatorError(FeatureLinesError, ValueError):
    """Locator cannot be resolved to a single feature resource.

    Attributes:
        locator: Locator text that failed.
        reason: Why resolution failed.
    """

    def __init__(self, locator: str, reason: str) -> None:
        """Initialize with locator and reason."""
        self.locator = locator
        self.reason = reason
        super().__init__(f"{locator!r}: {reason}")


class InvalidLineNumberError(FeatureLinesError, ValueError):
    """Line segment is not a base-10 integer within range.

    Attributes:
        segment: Offending segment text.
        reason: Why the segment was rejected.
    """

    def __init__(self, segment: str, reason: str) -> None:
        """Initialize with segment and reason."""
        self.segment = segment
        self.reason = reason
        super().__init__(f"line {segment!r}: {reason}")
