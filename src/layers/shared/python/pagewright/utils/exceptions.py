"""Exception types raised by the page pipeline."""

from typing import Any


class PagewrightError(Exception):
    """Base class for pipeline errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human readable description.
            details: Optional structured context for logging.
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ContractError(PagewrightError, TypeError):
    """Raised when a pipeline function is called with the wrong argument shapes.

    These are programming errors, not data-quality problems, and are never
    swallowed by the pipeline.
    """

    def __init__(self, argument: str, expected: str, received: Any) -> None:
        """Initialize contract error.

        Args:
            argument: Name of the offending argument.
            expected: Description of the accepted shape.
            received: The value actually passed.
        """
        self.argument = argument
        self.expected = expected
        super().__init__(
            f"Argument '{argument}' must be {expected} (got {type(received).__name__})",
            details={"argument": argument, "expected": expected},
        )
