"""Receipt rendering entry points: render pass, footer pass, finished bytes."""

from __future__ import annotations

import asyncio
import functools
import logging
import random
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .config import RenderConfig
from .cursor import LayoutCursor
from .footer import stamp_footers
from .formatting import format_money, format_timestamp, generate_auth_code
from .labels import labels_for
from .models import ReceiptData
from .paginator import LayoutResult, Paginator
from .sections import SectionContext
from .surface import BufferedSurface, create_surface

logger = logging.getLogger(__name__)


@dataclass
class RenderedReceipt:
    content: bytes
    layout: LayoutResult
    issued_at: str
    auth_code: str


class ReceiptRenderer:
    """Turns a ReceiptData into a finished multi-page document.

    Each call builds its own surface and cursor, so one renderer can be
    shared freely.
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or RenderConfig()
        self._rng = rng
        self._labels = labels_for(self._config.document.locale)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def _context(self, surface: BufferedSurface) -> SectionContext:
        cfg = self._config
        cursor = LayoutCursor(
            page_width=surface.width,
            page_height=surface.height,
            top_margin=cfg.page.margin,
            bottom_margin=cfg.page.margin,
            line_height_factor=cfg.pagination.line_height_factor,
        )
        money = functools.partial(
            format_money,
            currency=cfg.document.currency,
            decimal_separator=cfg.document.decimal_separator,
        )
        return SectionContext(
            surface=surface,
            cursor=cursor,
            margin=cfg.page.margin,
            pagination=cfg.pagination,
            labels=self._labels,
            money=money,
        )

    def render_document(
        self,
        data: ReceiptData,
        *,
        surface: BufferedSurface | None = None,
        issued_at: datetime | None = None,
        auth_code: str | None = None,
    ) -> RenderedReceipt:
        """Lay out ``data``, stamp footers and finish the surface.

        Args:
            data: The receipt to render.
            surface: Target surface. Defaults to one for the configured
                output format.
            issued_at: Timestamp printed in the footer. Defaults to now.
            auth_code: Authentication code printed in the footer. Defaults
                to a freshly generated one.

        Raises:
            ValueError: If the configured output format is unknown.
            RuntimeError: If the surface was already finished.
        """
        if surface is None:
            surface = create_surface(self._config)
        ctx = self._context(surface)
        stamp = format_timestamp(issued_at, self._config.document.timestamp_format)
        code = auth_code or generate_auth_code(self._rng)

        logger.info(
            "Rendering receipt %s (%d charge(s))",
            data.receipt_number, len(data.charges),
        )
        layout = Paginator(ctx).run(data)
        stamp_footers(ctx, stamp, code, self._config.footer.offset)
        content = surface.finish()
        logger.info(
            "Receipt %s rendered: %d page(s), %d bytes",
            data.receipt_number, layout.page_count, len(content),
        )
        return RenderedReceipt(
            content=content, layout=layout, issued_at=stamp, auth_code=code
        )

    def render(self, data: ReceiptData, **kwargs) -> bytes:
        """Render ``data`` and return the finished document bytes."""
        return self.render_document(data, **kwargs).content

    async def render_async(self, data: ReceiptData, **kwargs) -> bytes:
        """Render in a worker thread; resolves once the whole buffer is ready."""
        return await asyncio.to_thread(self.render, data, **kwargs)

    def write(
        self,
        data: ReceiptData,
        output_path: str | Path | None = None,
        **kwargs,
    ) -> Path:
        """Render ``data`` to a file.

        Args:
            data: The receipt to render.
            output_path: Where to save the document. Defaults to
                ``[output] directory / filename`` from the config, with a
                ``.json`` suffix for the json format.

        Returns:
            Path to the written file.
        """
        if output_path is None:
            out = self._config.output
            output_path = Path(out.directory) / out.filename
            if out.format == "json":
                output_path = output_path.with_suffix(".json")
        output_path = Path(output_path)
        content = self.render(data, **kwargs)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(content)
        return output_path


def render_receipt(data: ReceiptData, config: RenderConfig | None = None) -> bytes:
    """Render ``data`` with a one-off renderer."""
    return ReceiptRenderer(config).render(data)
