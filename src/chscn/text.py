"""Text cursor with line/column tracking and marker slicing.

Implements a forward-only scanning cursor for hand-written lexers.
Python 3.13+. Zero external dependencies.

Design:
    - Source is the original str; every read is by index, never a copy of
      the remainder
    - At most one code point of lookahead, buffered explicitly
    - Position is updated incrementally on consume, never by peeking and
      never by re-scanning
    - Marker is a saved read offset; a slice is source[marker:offset]

Line Ending Support:
    - LF (Unix, \\n): One line break
    - CRLF (Windows, \\r\\n): One line break (LF completes the pair)
    - CR-only (Classic Mac, \\r): One line break
    - FF, NEL, LS, PS: One line break each
    - VT: Next line, column unchanged

Thread Safety:
    Not thread-safe. Use one cursor per worker.

Example:
    >>> text = Text(" some_value_ 1")
    >>> text.advance()
    ' '
    >>> text.set_marker()
    >>> text.advance_while(lambda ch: ch != " ")
    11
    >>> text.slice_from_marker()
    'some_value_'
    >>> str(text.position)
    '1:13'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from chscn.constants import CR, FIRST_COLUMN, FIRST_LINE, LF, LINE_SEPARATORS, VT
from chscn.diagnostics import ErrorTemplate, MarkerNotSetError
from chscn.position import Position

__all__ = ["Text"]

logger = logging.getLogger(__name__)


class Text:
    """Cursor over a source text.

    Consumes the text one code point at a time, tracking the line/column
    of the NEXT character to be returned.

    Attributes:
        source: The complete source text (read-only)
        offset: Index of the next unconsumed code point
        position: Copy of the position of the next unconsumed code point
        is_eof: True when every code point has been consumed
    """

    __slots__ = (
        "_last_was_cr",
        "_marker",
        "_marker_position",
        "_next",
        "_offset",
        "_position",
        "_source",
    )

    def __init__(self, source: str) -> None:
        """Create a cursor at the start of source.

        Args:
            source: Already-decoded source text

        Raises:
            TypeError: If source is not a str
        """
        if not isinstance(source, str):
            diagnostic = ErrorTemplate.invalid_source_type(source)
            raise TypeError(diagnostic.message)
        self._source = source
        self._offset = 0  # index of NEXT character to be returned by advance()
        self._position = Position(FIRST_LINE, FIRST_COLUMN)
        self._next: str | None = None
        self._marker: int | None = None
        self._marker_position: Position | None = None
        self._last_was_cr = False

    @classmethod
    def with_source(cls, source: str) -> Text:
        """Create a cursor that wraps the given source text."""
        return cls(source)

    def __repr__(self) -> str:
        marker = "none" if self._marker is None else str(self._marker)
        return (
            f"Text(len={len(self._source)}, offset={self._offset}, "
            f"position={self._position}, marker={marker})"
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def source(self) -> str:
        """The complete source text."""
        return self._source

    @property
    def offset(self) -> int:
        """Index of the next unconsumed code point.

        A character held in the lookahead buffer is still unconsumed, so
        peeking does not change the offset.
        """
        return self._offset

    @property
    def position(self) -> Position:
        """Position of the NEXT character that will be returned by advance()."""
        return self._position.copy()

    @property
    def is_eof(self) -> bool:
        """Check if all code points have been consumed."""
        return self._offset >= len(self._source)

    def peek_next(self) -> str | None:
        """Return the next character without consuming it.

        The position is not updated.

        Returns:
            The next character, or None at end of input
        """
        if self._next is None and self._offset < len(self._source):
            self._next = self._source[self._offset]
        return self._next

    # ------------------------------------------------------------------
    # Consuming
    # ------------------------------------------------------------------

    def advance(self) -> str | None:
        """Consume and return the next character.

        The position is updated according to the read character.

        Returns:
            The consumed character, or None at end of input. Once None has
            been returned, every later call returns None.
        """
        ch = self._next
        if ch is not None:
            self._next = None
        elif self._offset < len(self._source):
            ch = self._source[self._offset]
        else:
            return None

        self._offset += 1
        self._advance_position(ch)
        return ch

    def advance_while(self, predicate: Callable[[str], bool]) -> int:
        """Consume characters while predicate holds for the next one.

        Stops before the first character for which predicate is false, so
        that character is left for peek_next()/advance().

        Args:
            predicate: Called with each candidate character

        Returns:
            Number of characters consumed
        """
        count = 0
        while (ch := self.peek_next()) is not None and predicate(ch):
            self.advance()
            count += 1
        return count

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        ch = self.advance()
        if ch is None:
            raise StopIteration
        return ch

    def _advance_position(self, ch: str) -> None:
        """Apply line-break classification for one consumed character."""
        if ch == CR:
            self._last_was_cr = True
            self._position.advance_line()
        elif ch == LF:
            if not self._last_was_cr:
                self._position.advance_line()
            # LF completing a CRLF pair adds no line
            self._last_was_cr = False
        elif ch == VT:
            self._position.line += 1
            self._last_was_cr = False
        elif ch in LINE_SEPARATORS:
            self._last_was_cr = False
            self._position.advance_line()
        else:
            self._last_was_cr = False
            self._position.advance_char()

    # ------------------------------------------------------------------
    # Marker
    # ------------------------------------------------------------------

    def set_marker(self) -> None:
        """Set the marker at the current reading position.

        A character already held in the lookahead buffer is the first
        character of a later slice. Any previous marker is discarded.
        """
        if self._marker is not None:
            logger.debug(
                "Replacing marker at offset %d with offset %d", self._marker, self._offset
            )
        self._marker = self._offset
        self._marker_position = self._position.copy()

    def clear_marker(self) -> None:
        """Clear the marker if one is set."""
        self._marker = None
        self._marker_position = None

    def has_marker(self) -> bool:
        """Return True when a marker is set."""
        return self._marker is not None

    @property
    def marker_position(self) -> Position | None:
        """Position captured by set_marker(), or None without a marker."""
        if self._marker_position is None:
            return None
        return self._marker_position.copy()

    def slice_from_marker(self) -> str:
        """Return the text from the marker up to (excluding) the current reading position.

        Peeking does not move the end of the slice.

        Returns:
            Substring of source between marker and current offset

        Raises:
            MarkerNotSetError: If no marker is set (caller bug)
        """
        if self._marker is None:
            diagnostic = ErrorTemplate.marker_not_set(self._position)
            logger.debug("slice_from_marker() without marker: %s", diagnostic.message)
            raise MarkerNotSetError(diagnostic)
        return self._source[self._marker : self._offset]

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def copy(self) -> Text:
        """Return an independent cursor with identical state.

        The copy shares the (immutable) source; position, lookahead, marker
        and CR state are duplicated. Useful for backtracking.
        """
        clone = type(self).__new__(type(self))
        clone._source = self._source
        clone._offset = self._offset
        clone._position = self._position.copy()
        clone._next = self._next
        clone._marker = self._marker
        clone._marker_position = (
            None if self._marker_position is None else self._marker_position.copy()
        )
        clone._last_was_cr = self._last_was_cr
        return clone

    __copy__ = copy
