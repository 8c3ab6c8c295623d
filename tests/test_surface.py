"""
Tests for the Rich-backed terminal surface (helpoverlay/surface.py).

Output is captured with a Console writing to a StringIO. force_terminal is
set so Rich emits escape sequences the way it would on a real terminal.
"""

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from helpoverlay.area import ScrollableArea
from helpoverlay.markup import render_markup
from helpoverlay.surface import SCROLLBAR_THUMB, Surface


def capture_console(width: int = 40, height: int = 10) -> Console:
    return Console(
        file=io.StringIO(),
        width=width,
        height=height,
        force_terminal=True,
        color_system="256",
    )


def area_for(lines: list[str], height: int) -> ScrollableArea:
    area = ScrollableArea(1, height)
    area.set_content_length(len(lines))
    return area


class _BrokenFile(io.StringIO):
    def write(self, text):
        raise OSError(5, "Input/output error")


class TestGeometry:
    """Tests for surface size handling."""

    def test_size_from_console(self):
        surface = Surface(console=capture_console(width=50, height=12))
        assert surface.size() == (50, 12)

    def test_explicit_size_wins(self):
        surface = Surface(console=capture_console(width=50, height=12), width=30, height=5)
        assert surface.size() == (30, 5)

    def test_detached_defaults(self):
        assert Surface().size() == (80, 24)

    def test_resize(self):
        surface = Surface(width=10, height=3)
        surface.resize(100, 40)
        assert surface.size() == (100, 40)


class TestWriteLines:
    """Tests for write_lines() windowing and styling."""

    def test_writes_only_visible_rows(self):
        lines = [f"line {i}" for i in range(10)]
        area = area_for(lines, height=3)
        area.try_scroll(4)
        surface = Surface(width=40, height=5)
        surface.write_lines(area, lines)
        rows = surface.body.plain.split("\n")
        assert len(rows) == 3
        assert rows[0].startswith("line 4")
        assert rows[2].startswith("line 6")
        assert "line 3" not in surface.body.plain
        assert "line 7" not in surface.body.plain

    def test_area_decides_visible_rows(self):
        """Lines beyond the area's content length are never drawn."""
        lines = ["kept 0", "kept 1", "stale 2", "stale 3"]
        area = ScrollableArea(1, 4)
        area.set_content_length(2)
        surface = Surface(width=20, height=6)
        with patch.object(area, "visible_range", wraps=area.visible_range) as visible_range:
            surface.write_lines(area, lines)
        visible_range.assert_called_once_with()
        assert surface.body.plain.split("\n") == ["kept 0", "kept 1", "", ""]

    def test_short_content_padded_with_blank_rows(self):
        lines = ["only"]
        surface = Surface(width=20, height=6)
        surface.write_lines(area_for(lines, height=4), lines)
        assert surface.body.plain.split("\n") == ["only", "", "", ""]

    def test_no_scrollbar_when_content_fits(self):
        lines = ["a", "b"]
        surface = Surface(width=20, height=6)
        surface.write_lines(area_for(lines, height=4), lines)
        assert SCROLLBAR_THUMB not in surface.body.plain

    def test_scrollbar_in_last_column(self):
        lines = [f"{i}" for i in range(20)]
        surface = Surface(width=12, height=6)
        surface.write_lines(area_for(lines, height=4), lines)
        rows = surface.body.plain.split("\n")
        assert rows[0] == "0".ljust(11) + SCROLLBAR_THUMB
        assert SCROLLBAR_THUMB not in rows[3]

    def test_long_lines_cropped_to_width(self):
        lines = ["x" * 100]
        surface = Surface(width=30, height=3)
        surface.write_lines(area_for(lines, height=1), lines)
        assert surface.body.plain == "x" * 30

    def test_ansi_styles_become_rich_spans(self):
        lines = [render_markup("**bold** and `code`")]
        surface = Surface(width=40, height=3)
        surface.write_lines(area_for(lines, height=1), lines)
        body = surface.body
        assert body.plain == "bold and  code "
        bold_spans = [span for span in body.spans if "bold" in str(span.style)]
        assert bold_spans, "expected a bold span from the ANSI sequence"

    def test_prints_to_console(self):
        console = capture_console()
        lines = ["hello", "world"]
        surface = Surface(console=console)
        surface.write_lines(area_for(lines, height=2), lines)
        output = console.file.getvalue()
        assert "hello" in output
        assert "world" in output

    def test_write_failure_propagates(self):
        console = Console(file=_BrokenFile(), width=40, height=10, force_terminal=True)
        surface = Surface(console=console)
        with pytest.raises(OSError):
            surface.write_lines(area_for(["a"], height=1), ["a"])


class TestWriteStatusText:
    """Tests for write_status_text()."""

    def test_keeps_status(self):
        surface = Surface()
        surface.write_status_text("Hit <esc> to go back")
        assert surface.status.plain == "Hit <esc> to go back"

    def test_prints_to_console(self):
        console = capture_console()
        Surface(console=console).write_status_text("status line")
        assert "status line" in console.file.getvalue()

    def test_write_failure_propagates(self):
        console = Console(file=_BrokenFile(), width=40, height=10, force_terminal=True)
        with pytest.raises(OSError):
            Surface(console=console).write_status_text("status")
