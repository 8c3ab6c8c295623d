"""
Scrollable viewport over a block of content lines.

A ScrollableArea maps a window of `height` terminal rows, starting at screen
row `top`, onto a longer list of content lines. It only tracks numbers; the
Surface decides how the visible rows are drawn.

Invariant, re-established after every mutation:

    0 <= scroll <= max(0, content_length - height)

so scrolling past either end stops at the boundary instead of failing, and a
shrinking content length pulls the offset back into range.
"""


class ScrollableArea:
    """Vertical scroll state for a fixed-height region of the terminal."""

    def __init__(self, top: int, height: int):
        if height <= 0:
            raise ValueError(f"viewport height must be positive, got {height}")
        self.top = top
        self.height = height
        self.scroll = 0
        self.content_length = 0

    def __repr__(self) -> str:
        return (
            f"ScrollableArea(top={self.top}, height={self.height}, "
            f"scroll={self.scroll}, content_length={self.content_length})"
        )

    @property
    def max_scroll(self) -> int:
        return max(0, self.content_length - self.height)

    @property
    def page_size(self) -> int:
        return self.height

    def _clamp(self) -> None:
        self.scroll = min(max(self.scroll, 0), self.max_scroll)

    def try_scroll(self, dy: int) -> None:
        """Move the viewport by dy rows, clamped to the content."""
        self.scroll += dy
        self._clamp()

    def set_content_length(self, content_length: int) -> None:
        """Record the number of content lines and pull the offset back in range."""
        self.content_length = max(0, content_length)
        self._clamp()

    def visible_range(self) -> range:
        """Indices of the content lines that fall inside the viewport."""
        return range(self.scroll, min(self.scroll + self.height, self.content_length))

    def scrollbar(self) -> tuple[int, int] | None:
        """Viewport rows (inclusive) covered by the scrollbar thumb.

        Returns None when the whole content fits, in which case no scrollbar
        is drawn.
        """
        if self.content_length <= self.height:
            return None
        thumb = max(1, (self.height * self.height) // self.content_length)
        start = (self.scroll * self.height) // self.content_length
        # keep the thumb glued to the bottom row once the end is reached
        if self.scroll == self.max_scroll:
            start = self.height - thumb
        start = min(start, self.height - thumb)
        return start, start + thumb - 1
