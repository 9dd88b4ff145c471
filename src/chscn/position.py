"""Line/column position tracking.

Provides the Position value type shared by the text cursor and the
diagnostics package.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from chscn.constants import FIRST_COLUMN, UNSET_COLUMN, UNSET_LINE

__all__ = ["Position"]


@dataclass(order=True, slots=True)
class Position:
    """Position in a text by line and column number.

    Both counters are 1-based. ``Position()`` builds the unset sentinel
    (0, 0), meaning "not positioned in any text".

    Mutability Note:
        Intentionally mutable (not frozen=True). The owning cursor advances
        its position in place on every consumed character and hands out
        copies, so callers never see a position change under them.

    Ordering:
        Positions compare as (line, column) tuples, which is read order
        for positions produced by the same cursor.

    Attributes:
        line: Line number (starts counting with 1)
        column: Character number within the current line (starts counting with 1)

    Example:
        >>> pos = Position(1, 1)
        >>> pos.advance_char()
        >>> pos
        Position(line=1, column=2)
        >>> pos.advance_line()
        >>> str(pos)
        '2:1'
        >>> Position().is_set
        False
    """

    line: int = UNSET_LINE
    column: int = UNSET_COLUMN

    def __str__(self) -> str:
        """Return position as "line:column"."""
        return f"{self.line}:{self.column}"

    @property
    def is_set(self) -> bool:
        """False only for the (0, 0) sentinel."""
        return self.line != UNSET_LINE or self.column != UNSET_COLUMN

    def advance_char(self) -> None:
        """Advance position by one (non-new-line) character."""
        self.column += 1

    def advance_line(self) -> None:
        """Advance position by one line.

        Sets the column to the position of the first character within the
        new line.
        """
        self.line += 1
        self.column = FIRST_COLUMN

    def copy(self) -> Position:
        """Return an independent Position with the same counters."""
        return Position(self.line, self.column)
