"""Render pass: lays out all sections and decides where pages break."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .models import ReceiptData
from .sections import (
    SectionContext,
    finish_charges,
    render_charge_row,
    render_charges_title,
    render_header,
    render_payment_info,
    render_receipt_info,
    render_totals,
    section_title_height,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowPlacement:
    """Where a charge row ended up."""

    index: int
    charge_id: str
    page_index: int
    y: float
    banded: bool


@dataclass
class LayoutResult:
    page_count: int
    rows: list[RowPlacement] = field(default_factory=list)
    continuation_pages: list[int] = field(default_factory=list)

    def rows_on_page(self, page_index: int) -> list[RowPlacement]:
        return [r for r in self.rows if r.page_index == page_index]


class Paginator:
    """Sequences the receipt sections and inserts page breaks.

    Breaks are checked per row in the charges table and per section for the
    totals and payment blocks. The header and receipt information always go
    on the first page.
    """

    def __init__(self, ctx: SectionContext) -> None:
        self._ctx = ctx

    def run(self, data: ReceiptData) -> LayoutResult:
        ctx = self._ctx
        cfg = ctx.pagination
        result = LayoutResult(page_count=1)

        render_header(ctx)
        render_receipt_info(ctx, data)
        self._render_charges(data, result)

        self._ensure_room(cfg.totals_threshold, "totals")
        render_totals(ctx, data)

        self._ensure_room(cfg.payment_threshold, "payment info")
        render_payment_info(ctx, data)

        result.page_count = ctx.surface.page_count
        logger.debug(
            "Layout finished: %d row(s) on %d page(s)",
            len(result.rows), result.page_count,
        )
        return result

    def _break_page(self) -> int:
        index = self._ctx.surface.add_page()
        self._ctx.cursor.start_page(index)
        return index

    def _ensure_room(self, required: float, unit: str) -> bool:
        """Start a new page if ``required`` height is not left.

        Never breaks at the top of a page, so a unit taller than a whole
        page is drawn anyway instead of looping. Returns whether a break
        happened.
        """
        cursor = self._ctx.cursor
        if cursor.fits(required) or cursor.at_page_top:
            return False
        remaining = cursor.remaining_space()
        index = self._break_page()
        logger.debug(
            "Page break before %s (%.1f left, %.1f needed) -> page %d",
            unit, remaining, required, index + 1,
        )
        return True

    def _render_charges(self, data: ReceiptData, result: LayoutResult) -> None:
        ctx = self._ctx
        cursor = ctx.cursor
        row_threshold = ctx.pagination.row_threshold

        render_charges_title(ctx)
        row_on_page = 0

        for index, charge in enumerate(data.charges):
            if self._ensure_room(row_threshold, f"charge row {index + 1}"):
                row_on_page = 0
                if cursor.fits(section_title_height(ctx) + row_threshold):
                    render_charges_title(ctx, continued=True)
                    result.continuation_pages.append(cursor.page_index)
                else:
                    logger.debug(
                        "No room for continuation header on page %d, drawing row only",
                        cursor.page_index + 1,
                    )

            banded = row_on_page % 2 == 0
            y = render_charge_row(ctx, charge, banded)
            result.rows.append(
                RowPlacement(
                    index=index,
                    charge_id=charge.id,
                    page_index=cursor.page_index,
                    y=y,
                    banded=banded,
                )
            )
            row_on_page += 1

        finish_charges(ctx)
