"""Tests for the chscn package namespace."""

from __future__ import annotations

import chscn


class TestPublicApi:
    """Test top-level exports."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is importable from chscn."""
        for name in chscn.__all__:
            assert hasattr(chscn, name), name

    def test_exports(self) -> None:
        """The cursor types are re-exported from their modules."""
        from chscn.position import Position
        from chscn.text import Text

        assert chscn.Text is Text
        assert chscn.Position is Position

    def test_version_is_string(self) -> None:
        """__version__ comes from metadata or the dev fallback."""
        assert isinstance(chscn.__version__, str)
        assert chscn.__version__

    def test_end_to_end(self) -> None:
        """Scan identifiers and record where each one starts."""
        text = chscn.Text("alpha beta\r\ngamma")
        tokens = []

        while text.peek_next() is not None:
            if text.peek_next() in (" ", "\r", "\n"):
                text.advance()
                continue
            text.set_marker()
            text.advance_while(str.isalpha)
            tokens.append((text.slice_from_marker(), str(text.marker_position)))
            text.clear_marker()

        assert tokens == [("alpha", "1:1"), ("beta", "1:7"), ("gamma", "2:1")]
