"""PDF output for buffered pages using ReportLab."""

from __future__ import annotations

from io import BytesIO

from reportlab.lib import colors
from reportlab.pdfbase.pdfmetrics import getAscentDescent
from reportlab.pdfgen import canvas

from . import BufferedSurface, Line, Page, Rect, Text


class ReportLabSurface(BufferedSurface):
    """Replays buffered pages onto a ReportLab canvas on ``finish()``.

    Layout code works top-down from the upper page edge; ReportLab's origin
    is the lower-left corner, so every coordinate is flipped here.
    """

    def __init__(
        self,
        width: float,
        height: float,
        title: str = "",
        author: str = "",
    ) -> None:
        super().__init__(width, height)
        self._title = title
        self._author = author

    def _emit(self, pages: list[Page]) -> bytes:
        buf = BytesIO()
        c = canvas.Canvas(buf, pagesize=(self.width, self.height))
        if self._title:
            c.setTitle(self._title)
        if self._author:
            c.setAuthor(self._author)

        for page in pages:
            for primitive in page.primitives:
                self._replay(c, primitive)
            c.showPage()

        c.save()
        return buf.getvalue()

    def _replay(self, c: canvas.Canvas, p: Line | Rect | Text) -> None:
        h = self.height
        if isinstance(p, Line):
            c.saveState()
            c.setStrokeColor(colors.HexColor(p.color))
            c.setLineWidth(p.width)
            c.line(p.x1, h - p.y1, p.x2, h - p.y2)
            c.restoreState()
        elif isinstance(p, Rect):
            c.saveState()
            c.setFillColor(colors.HexColor(p.fill))
            c.rect(p.x, h - p.y - p.h, p.w, p.h, stroke=0, fill=1)
            c.restoreState()
        else:
            ascent, _ = getAscentDescent(p.font, p.size)
            baseline = h - p.y - ascent
            c.setFillColor(colors.HexColor(p.color))
            c.setFont(p.font, p.size)
            if p.align == "center":
                c.drawCentredString(p.x + p.width / 2.0, baseline, p.content)
            elif p.align == "right":
                c.drawRightString(p.x + p.width, baseline, p.content)
            else:
                c.drawString(p.x, baseline, p.content)
