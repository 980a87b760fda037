"""Section renderers.

Every renderer draws at the cursor of a ``SectionContext`` and moves it
down past what it drew. None of them decide on page breaks; that is the
paginator's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from .config import PaginationConfig
from .cursor import LayoutCursor
from .labels import Labels
from .models import Charge, ReceiptData
from .surface import FONT_BOLD, FONT_REGULAR, DrawingSurface

# Palette
TEXT_COLOR = "#555555"
DIVIDER_COLOR = "#eaeaea"
BAND_COLOR = "#f9f9f9"
MUTED_COLOR = "#888888"

# Type scale (pt)
T_TITLE = 12
T_SECTION = 10
T_FACT = 9
T_PAYMENT = 8
T_ROW = 8

# Value column per section
INFO_VALUE_X = 115
TOTALS_VALUE_X = 200
PAYMENT_VALUE_X = 120

# Charge row geometry, relative to the row's top-left corner
ROW_TEXT_X = 35
ROW_LINE1 = 5
ROW_LINE2 = 15
ROW_DESCRIPTION_W = 200
ROW_DUE_FROM_RIGHT = 145
ROW_AMOUNT_W = 100
ROW_PAD_RIGHT = 35


@dataclass
class SectionContext:
    """Everything a section renderer needs besides its data."""

    surface: DrawingSurface
    cursor: LayoutCursor
    margin: float
    pagination: PaginationConfig
    labels: Labels
    money: Callable[[Decimal], str]

    @property
    def content_width(self) -> float:
        return self.surface.width - 2 * self.margin


def section_title_height(ctx: SectionContext) -> float:
    """Vertical space taken by ``render_section_title``."""
    return (0.3 + 1 + 0.5) * ctx.cursor.line_height(T_SECTION)


def ellipsize(ctx: SectionContext, text: str, max_w: float, font: str, size: float) -> str:
    """Truncate with an ellipsis so ``text`` fits in ``max_w``."""
    txt = (text or "").strip()
    if ctx.surface.string_width(txt, font, size) <= max_w:
        return txt
    dots = "..."
    out = ""
    for ch in txt:
        if ctx.surface.string_width(out + ch + dots, font, size) > max_w:
            break
        out += ch
    return out.rstrip() + dots


def draw_divider(ctx: SectionContext) -> None:
    y = ctx.cursor.y
    ctx.surface.line(
        ctx.margin, y, ctx.surface.width - ctx.margin, y,
        color=DIVIDER_COLOR, width=0.5,
    )


def render_section_title(ctx: SectionContext, title: str) -> None:
    """Divider, then a bold title flush with the left margin."""
    cur = ctx.cursor
    draw_divider(ctx)
    cur.move_down(0.3, T_SECTION)
    ctx.surface.text(
        title, ctx.margin, cur.y,
        font=FONT_BOLD, size=T_SECTION, color=TEXT_COLOR,
    )
    cur.advance(cur.line_height(T_SECTION))
    cur.move_down(0.5, T_SECTION)


def _fact_row(
    ctx: SectionContext,
    label: str,
    value: str,
    value_x: float,
    size: float,
    align_right: bool = False,
    bold_value: bool = False,
) -> None:
    cur, surface = ctx.cursor, ctx.surface
    surface.text(label, ctx.margin, cur.y, font=FONT_BOLD, size=size, color=TEXT_COLOR)
    value_font = FONT_BOLD if bold_value else FONT_REGULAR
    if align_right:
        surface.text(
            value, value_x, cur.y, font=value_font, size=size, color=TEXT_COLOR,
            align="right", width=surface.width - ctx.margin - value_x,
        )
    else:
        surface.text(value, value_x, cur.y, font=value_font, size=size, color=TEXT_COLOR)
    cur.advance(cur.line_height(size))
    cur.move_down(0.5, size)


def render_header(ctx: SectionContext) -> None:
    cur = ctx.cursor
    ctx.surface.text(
        ctx.labels.title, ctx.margin, cur.y,
        size=T_TITLE, color=TEXT_COLOR, align="center", width=ctx.content_width,
    )
    cur.advance(cur.line_height(T_TITLE))
    cur.move_down(1, T_TITLE)


def render_receipt_info(ctx: SectionContext, data: ReceiptData) -> None:
    lb = ctx.labels
    render_section_title(ctx, lb.receipt_info)
    for label, value in (
        (lb.receipt_number, data.receipt_number),
        (lb.date, data.date),
        (lb.customer, data.customer_name),
        (lb.document, data.customer_document),
    ):
        _fact_row(ctx, label, value, INFO_VALUE_X, T_FACT)
    ctx.cursor.move_down(1, T_FACT)


def render_charges_title(ctx: SectionContext, continued: bool = False) -> None:
    title = ctx.labels.charges
    if continued:
        title = f"{title} {ctx.labels.continuation}"
    render_section_title(ctx, title)


def render_charge_row(ctx: SectionContext, charge: Charge, banded: bool) -> float:
    """Draw one charge row atomically and return the ``y`` it started at."""
    cur, surface = ctx.cursor, ctx.surface
    y = cur.y
    width = surface.width

    if banded:
        surface.rect(ctx.margin, y, ctx.content_width, ctx.pagination.row_height, fill=BAND_COLOR)

    surface.text(charge.id, ROW_TEXT_X, y + ROW_LINE1, font=FONT_BOLD, size=T_ROW, color=TEXT_COLOR)
    surface.text(
        ellipsize(ctx, charge.description, ROW_DESCRIPTION_W, FONT_REGULAR, T_ROW),
        ROW_TEXT_X, y + ROW_LINE2, size=T_ROW, color=TEXT_COLOR,
    )
    surface.text(
        f"{ctx.labels.due}: {charge.due_date}",
        width - ROW_DUE_FROM_RIGHT, y + ROW_LINE1, size=T_ROW, color=TEXT_COLOR,
    )
    surface.text(
        ctx.money(charge.amount),
        width - ROW_PAD_RIGHT - ROW_AMOUNT_W, y + ROW_LINE2,
        font=FONT_BOLD, size=T_ROW, color=TEXT_COLOR,
        align="right", width=ROW_AMOUNT_W,
    )

    cur.advance(ctx.pagination.row_advance)
    return y


def finish_charges(ctx: SectionContext) -> None:
    ctx.cursor.move_down(0.5, T_ROW)


def render_totals(ctx: SectionContext, data: ReceiptData) -> None:
    lb, money = ctx.labels, ctx.money
    render_section_title(ctx, lb.totals)
    for label, amount in (
        (lb.subtotal, data.subtotal),
        (lb.discount, data.discount),
        (lb.service_fee, data.service_fee),
        (lb.tax, data.tax),
    ):
        _fact_row(ctx, label, money(amount), TOTALS_VALUE_X, T_FACT, align_right=True)
    _fact_row(
        ctx, lb.total_paid, money(data.total_paid), TOTALS_VALUE_X, T_FACT,
        align_right=True, bold_value=True,
    )


def render_payment_info(ctx: SectionContext, data: ReceiptData) -> None:
    lb = ctx.labels
    render_section_title(ctx, lb.payment)
    _fact_row(ctx, lb.method, data.payment_method, PAYMENT_VALUE_X, T_PAYMENT)
    _fact_row(ctx, lb.payment_date, data.payment_date, PAYMENT_VALUE_X, T_PAYMENT)
    if data.transaction_id:
        _fact_row(ctx, lb.transaction_id, data.transaction_id, PAYMENT_VALUE_X, T_PAYMENT)
    ctx.cursor.move_down(0.5, T_PAYMENT)
