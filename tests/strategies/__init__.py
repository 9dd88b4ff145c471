"""Hypothesis strategies for chscn property-based testing.

Usage:
    from tests.strategies import line_break_texts, scan_scripts
"""

from .text import (
    LINE_BREAK_CHARS,
    line_break_texts,
    plain_texts,
    scan_scripts,
)

__all__ = [
    "LINE_BREAK_CHARS",
    "line_break_texts",
    "plain_texts",
    "scan_scripts",
]
