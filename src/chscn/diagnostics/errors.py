"""chscn exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["ChscnError", "CursorContractError", "MarkerNotSetError"]


class ChscnError(Exception):
    """Base exception for all chscn errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ChscnError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CursorContractError(ChscnError):
    """Cursor used in a way its contract forbids.

    Indicates a bug in the calling lexer, not a problem with the scanned
    text. Not meant to be caught as part of normal control flow.
    """


class MarkerNotSetError(CursorContractError):
    """slice_from_marker() called while no marker is set."""
