"""Finalize pass: stamps the footer on every page once the page count is known."""

from __future__ import annotations

import logging

from .sections import MUTED_COLOR, SectionContext, draw_divider
from .surface import FONT_REGULAR

logger = logging.getLogger(__name__)

T_NOTICE = 7
T_ISSUED = 6


def footer_line(ctx: SectionContext, issued_at: str, page_index: int, page_count: int) -> str:
    """Timestamp line; the page fragment only appears on multi-page documents."""
    line = ctx.labels.issued_at.format(timestamp=issued_at)
    if page_count > 1:
        line = f"{line} - {ctx.labels.page_fragment(page_index + 1, page_count)}"
    return line


def stamp_footers(ctx: SectionContext, issued_at: str, auth_code: str, offset: float) -> int:
    """Overlay the footer on pages ``0..M-1`` and return ``M``.

    The footer is drawn ``offset`` units above the bottom edge. The cursor
    and the surface's current page are the same afterwards as before.
    """
    surface, cursor = ctx.surface, ctx.cursor
    page_count = surface.page_count
    resume_page = surface.current_page
    footer_y = surface.height - offset

    for page_index in range(page_count):
        surface.switch_to_page(page_index)
        with cursor.relocated(footer_y):
            cursor.page_index = page_index
            _draw_footer(ctx, footer_line(ctx, issued_at, page_index, page_count), auth_code)

    surface.switch_to_page(resume_page)
    logger.debug("Stamped footer on %d page(s)", page_count)
    return page_count


def _draw_footer(ctx: SectionContext, issued_line: str, auth_code: str) -> None:
    surface, cursor = ctx.surface, ctx.cursor
    width = ctx.content_width

    draw_divider(ctx)
    cursor.move_down(0.5, T_NOTICE)
    surface.text(
        ctx.labels.authenticity_notice, ctx.margin, cursor.y,
        font=FONT_REGULAR, size=T_NOTICE, color=MUTED_COLOR,
        align="center", width=width,
    )
    cursor.advance(cursor.line_height(T_NOTICE))
    surface.text(
        ctx.labels.auth_code.format(code=auth_code), ctx.margin, cursor.y,
        font=FONT_REGULAR, size=T_NOTICE, color=MUTED_COLOR,
        align="center", width=width,
    )
    cursor.advance(cursor.line_height(T_NOTICE))
    cursor.move_down(0.5, T_NOTICE)
    surface.text(
        issued_line, ctx.margin, cursor.y,
        font=FONT_REGULAR, size=T_ISSUED, color=MUTED_COLOR,
        align="center", width=width,
    )
