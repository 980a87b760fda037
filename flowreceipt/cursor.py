"""Vertical layout cursor and the page-break space policy."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


@dataclass
class LayoutCursor:
    """Current write position on the current page.

    ``y`` grows downward from the top edge of the page. Content only ever
    moves it forward; ``relocated()`` is the one sanctioned way to jump
    elsewhere, and it puts the cursor back on exit.
    """

    page_width: float
    page_height: float
    top_margin: float
    bottom_margin: float
    line_height_factor: float = 1.15
    y: float = 0.0
    page_index: int = 0

    def __post_init__(self) -> None:
        if self.y < self.top_margin:
            self.y = self.top_margin

    @property
    def at_page_top(self) -> bool:
        return self.y <= self.top_margin

    def remaining_space(self) -> float:
        return self.page_height - self.y - self.bottom_margin

    def fits(self, required: float) -> bool:
        """Whether a unit needing ``required`` height can start here."""
        return self.remaining_space() >= required

    def line_height(self, font_size: float) -> float:
        return font_size * self.line_height_factor

    def advance(self, dy: float) -> float:
        """Move down by ``dy`` and return the new ``y``.

        Raises:
            ValueError: If ``dy`` is negative.
        """
        if dy < 0:
            raise ValueError(f"Cursor cannot move up within a page (dy={dy})")
        self.y += dy
        return self.y

    def move_down(self, lines: float, font_size: float) -> float:
        return self.advance(lines * self.line_height(font_size))

    def start_page(self, page_index: int) -> None:
        """Reset to the top margin of a freshly added page."""
        self.page_index = page_index
        self.y = self.top_margin

    @contextmanager
    def relocated(self, y: float) -> Iterator[LayoutCursor]:
        """Temporarily place the cursor at absolute ``y``.

        Position and page index are restored on exit, including when the
        body raises.
        """
        saved_y, saved_page = self.y, self.page_index
        self.y = y
        try:
            yield self
        finally:
            self.y, self.page_index = saved_y, saved_page
