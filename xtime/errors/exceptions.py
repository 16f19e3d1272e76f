"""
Exception hierarchy for xtime.

Boundary and formatting functions are total over real Instants. Exceptions
here come from parsing, timezone lookup, or being handed NaT.
"""

from typing import Any, Optional


class XtimeError(Exception):
    """
    Base exception class for all xtime errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for reference and documentation
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize a new XtimeError.

        Args:
            message: Human-readable error message
            error_code: Optional error code for reference and documentation
            details: Optional dictionary with additional error details
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize error to dictionary.

        Returns:
            Dictionary with all error information
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }

    def __str__(self) -> str:
        """String representation of the error."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


# --- Parse Errors ---


class ParseError(XtimeError, ValueError):
    """
    Exception raised when a value cannot be turned into an Instant.

    Raised for strings that do not match the "YYYY-MM-DD HH:MM:SS" layout
    and for epoch values outside the representable range.

    Examples:
        >>> raise ParseError(
        ...     message="Cannot parse '2020/01/01' as YYYY-MM-DD HH:MM:SS",
        ...     error_code="PARSE-InvalidLayout",
        ...     details={"value": "2020/01/01"}
        ... )
    """

    pass


class UnsupportedTypeError(XtimeError, TypeError):
    """Exception raised when parse() receives a type it does not understand."""

    pass


# --- Instant Errors ---


class InvalidInstantError(XtimeError, ValueError):
    """Exception raised when a calendar helper receives NaT instead of a time."""

    pass


# --- Location Errors ---


class InvalidLocationError(XtimeError, ValueError):
    """Exception raised when a timezone name cannot be resolved."""

    pass
