"""In-memory surface whose output is a JSON display list."""

from __future__ import annotations

import json
from dataclasses import asdict

from . import BufferedSurface, Line, Page, Rect, Text

_KINDS = {Line: "line", Rect: "rect", Text: "text"}


class RecordingSurface(BufferedSurface):
    """Records primitives per page.

    ``finish()`` returns UTF-8 JSON of the form
    ``{"width": ..., "height": ..., "pages": [[{"kind": "text", ...}, ...]]}``.
    Useful for inspecting layouts without producing a PDF.
    """

    def _emit(self, pages: list[Page]) -> bytes:
        doc = {
            "width": self.width,
            "height": self.height,
            "pages": [
                [{"kind": _KINDS[type(p)], **asdict(p)} for p in page.primitives]
                for page in pages
            ],
        }
        return json.dumps(doc, ensure_ascii=False, indent=2).encode("utf-8")
