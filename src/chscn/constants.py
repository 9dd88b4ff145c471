"""Shared constants for chscn.

Centralized configuration for position counters and line-break
classification. Placing constants here avoids circular imports between
the position and text modules and provides a single source of truth.

Constants are grouped by domain:
- Position counters: Start and sentinel values for line/column
- Line-break characters: Code points with special position handling

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Position counters
    "FIRST_LINE",
    "FIRST_COLUMN",
    "UNSET_LINE",
    "UNSET_COLUMN",
    # Line-break characters
    "CR",
    "LF",
    "VT",
    "LINE_SEPARATORS",
]

# ============================================================================
# POSITION COUNTERS
# ============================================================================
#
# Lines and columns are 1-based, like text editors. The (0, 0) pair is the
# "not positioned in any text" sentinel and never occurs for a cursor over
# real text.
#
# Counters are plain Python ints. They widen instead of wrapping, so there is
# no maximum line or column.

FIRST_LINE: int = 1
FIRST_COLUMN: int = 1

UNSET_LINE: int = 0
UNSET_COLUMN: int = 0

# ============================================================================
# LINE-BREAK CHARACTERS
# ============================================================================

# Carriage return. Always a line break; remembered so that a directly
# following LF is folded into the same break (CRLF).
CR: str = "\r"

# Line feed. A line break unless it completes a CRLF pair.
LF: str = "\n"

# Vertical tab. Moves to the next line but keeps the column.
VT: str = "\x0b"

# Form feed, next line (NEL), line separator, paragraph separator.
LINE_SEPARATORS: frozenset[str] = frozenset({"\x0c", "\x85", "\u2028", "\u2029"})
