"""
Terminal surface that application states draw into.

States never talk to the terminal directly. They hand a Surface the full list
of rendered lines plus the ScrollableArea describing the viewport, and the
Surface writes the visible window. Each frame is kept as Rich Text objects
(`body` and `status`) so the Textual host can push them into its widgets; when
a Console is attached the frame is also printed to it.

Write failures raised by the console (OSError on a closed or broken stream)
propagate to the caller unchanged.
"""

from rich.console import Console
from rich.text import Text

from .area import ScrollableArea

SCROLLBAR_THUMB = "▐"


class Surface:
    """Rectangular text surface backed by Rich."""

    def __init__(
        self,
        console: Console | None = None,
        width: int | None = None,
        height: int | None = None,
    ):
        self.console = console
        if console is not None:
            console_width, console_height = console.size
            width = width or console_width
            height = height or console_height
        self.width = width or 80
        self.height = height or 24
        self.body = Text()
        self.status = Text()

    def size(self) -> tuple[int, int]:
        """Return (columns, rows)."""
        return self.width, self.height

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def _row(self, line: str, thumb: bool) -> Text:
        row = Text.from_ansi(line, no_wrap=True, end="")
        content_width = self.width - 1 if thumb else self.width
        row.truncate(max(content_width, 0), overflow="crop", pad=thumb)
        if thumb:
            row.append(SCROLLBAR_THUMB)
        return row

    def write_lines(self, area: ScrollableArea, lines: list[str]) -> None:
        """Write the lines falling inside the area's viewport.

        The area decides which content lines are visible. Rows past the end
        of the content are left blank so the viewport always spans exactly
        `area.height` rows.
        """
        scrollbar = area.scrollbar()
        visible = [lines[index] for index in area.visible_range()]
        visible += [""] * (area.height - len(visible))
        rows = []
        for y, line in enumerate(visible):
            thumb = scrollbar is not None and scrollbar[0] <= y <= scrollbar[1]
            rows.append(self._row(line, thumb))
        self.body = Text("\n").join(rows)
        if self.console is not None:
            self.console.print(self.body, soft_wrap=True)

    def write_status_text(self, text: str) -> None:
        self.status = Text(text, style="dim", no_wrap=True)
        if self.console is not None:
            self.console.print(self.status, soft_wrap=True)
