"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from chscn.position import Position

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def marker_not_set(position: Position) -> Diagnostic:
        """slice_from_marker() called without an active marker.

        Args:
            position: Cursor position at the time of the call

        Returns:
            Diagnostic for MARKER_NOT_SET
        """
        msg = f"No marker set at line {position.line}, column {position.column}"
        return Diagnostic(
            code=DiagnosticCode.MARKER_NOT_SET,
            message=msg,
            position=position.copy(),
            hint="Call set_marker() before slice_from_marker()",
        )

    @staticmethod
    def invalid_source_type(source: object) -> Diagnostic:
        """Cursor constructed from something other than str.

        Args:
            source: The rejected source object

        Returns:
            Diagnostic for INVALID_SOURCE_TYPE
        """
        msg = f"Source must be str, got {type(source).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SOURCE_TYPE,
            message=msg,
            hint="Decode bytes before constructing a cursor, e.g. data.decode('utf-8')",
        )
