"""chscn - character scanner cursor for hand-written lexers.

A cursor over an in-memory text that tracks line/column positions across
Unicode line-terminator conventions (LF, CR, CRLF, VT, FF, NEL, LS, PS)
and extracts the text between a settable marker and the current read
position.

Public API:
    Text - Forward-only cursor with one character of lookahead
    Position - Line/column value (1-based)

Exceptions:
    ChscnError - Base exception class
    CursorContractError - Cursor used against its contract (caller bug)
    MarkerNotSetError - slice_from_marker() without a marker

Submodules:
    chscn.constants - Position counters and line-break characters
    chscn.diagnostics - Diagnostic codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    ChscnError,
    CursorContractError,
    Diagnostic,
    DiagnosticCode,
    MarkerNotSetError,
)
from .position import Position
from .text import Text

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("chscn")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ChscnError",
    "CursorContractError",
    "Diagnostic",
    "DiagnosticCode",
    "MarkerNotSetError",
    "Position",
    "Text",
    "__version__",
]
