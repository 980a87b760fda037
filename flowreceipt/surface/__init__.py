"""Drawing surface base class, primitive types, and factory.

A surface buffers every page as a list of primitives in absolute,
top-down coordinates, so that any page can be revisited with
``switch_to_page()`` until ``finish()`` turns the buffer into bytes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from reportlab.pdfbase.pdfmetrics import stringWidth

if TYPE_CHECKING:
    from ..config import RenderConfig

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

_ALIGNMENTS = ("left", "center", "right")


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str = "#000000"
    width: float = 1.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float
    fill: str = "#000000"


@dataclass(frozen=True)
class Text:
    content: str
    x: float
    y: float  # top of the line box
    font: str = FONT_REGULAR
    size: float = 10
    color: str = "#000000"
    align: str = "left"
    width: float | None = None


Primitive = Union[Line, Rect, Text]


@dataclass
class Page:
    primitives: list[Primitive] = field(default_factory=list)

    def texts(self) -> list[Text]:
        return [p for p in self.primitives if isinstance(p, Text)]


class DrawingSurface(ABC):
    """Abstract page-buffered drawing target."""

    @property
    @abstractmethod
    def width(self) -> float: ...

    @property
    @abstractmethod
    def height(self) -> float: ...

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages buffered so far."""

    @property
    @abstractmethod
    def current_page(self) -> int: ...

    @abstractmethod
    def line(self, x1: float, y1: float, x2: float, y2: float, *,
             color: str = "#000000", width: float = 1.0) -> None: ...

    @abstractmethod
    def rect(self, x: float, y: float, w: float, h: float, *,
             fill: str = "#000000") -> None: ...

    @abstractmethod
    def text(self, content: str, x: float, y: float, *,
             font: str = FONT_REGULAR, size: float = 10,
             color: str = "#000000", align: str = "left",
             width: float | None = None) -> None: ...

    @abstractmethod
    def add_page(self) -> int:
        """Append a page, make it current and return its index."""

    @abstractmethod
    def switch_to_page(self, index: int) -> None: ...

    @abstractmethod
    def string_width(self, content: str, font: str, size: float) -> float: ...

    @abstractmethod
    def finish(self) -> bytes:
        """Seal all pages and return the finished document."""


class BufferedSurface(DrawingSurface):
    """Keeps pages in memory; subclasses decide how they become bytes."""

    def __init__(self, width: float, height: float) -> None:
        self._width = width
        self._height = height
        self._pages: list[Page] = [Page()]
        self._current = 0
        self._finished = False

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def current_page(self) -> int:
        return self._current

    @property
    def pages(self) -> list[Page]:
        return self._pages

    def _draw(self, primitive: Primitive) -> None:
        if self._finished:
            raise RuntimeError("Surface is already finished")
        self._pages[self._current].primitives.append(primitive)

    def line(self, x1: float, y1: float, x2: float, y2: float, *,
             color: str = "#000000", width: float = 1.0) -> None:
        self._draw(Line(x1, y1, x2, y2, color=color, width=width))

    def rect(self, x: float, y: float, w: float, h: float, *,
             fill: str = "#000000") -> None:
        self._draw(Rect(x, y, w, h, fill=fill))

    def text(self, content: str, x: float, y: float, *,
             font: str = FONT_REGULAR, size: float = 10,
             color: str = "#000000", align: str = "left",
             width: float | None = None) -> None:
        if align not in _ALIGNMENTS:
            raise ValueError(f"Unknown text alignment: {align!r}")
        if align != "left" and width is None:
            raise ValueError(f"{align!r} alignment needs a width")
        self._draw(Text(str(content), x, y, font=font, size=size,
                        color=color, align=align, width=width))

    def add_page(self) -> int:
        if self._finished:
            raise RuntimeError("Surface is already finished")
        self._pages.append(Page())
        self._current = len(self._pages) - 1
        return self._current

    def switch_to_page(self, index: int) -> None:
        if not 0 <= index < len(self._pages):
            raise IndexError(
                f"switch_to_page({index}) out of bounds, "
                f"{len(self._pages)} page(s) buffered"
            )
        self._current = index

    def string_width(self, content: str, font: str, size: float) -> float:
        return stringWidth(content, font, size)

    def finish(self) -> bytes:
        if self._finished:
            raise RuntimeError("Surface is already finished")
        self._finished = True
        return self._emit(self._pages)

    @abstractmethod
    def _emit(self, pages: list[Page]) -> bytes: ...


def create_surface(config: RenderConfig, output_format: str | None = None) -> BufferedSurface:
    """Create a drawing surface for the configured output format."""
    fmt = output_format or config.output.format

    match fmt:
        case "pdf":
            from .pdf import ReportLabSurface

            return ReportLabSurface(
                config.page.width,
                config.page.height,
                title=config.document.title,
                author=config.document.author,
            )
        case "json":
            from .recording import RecordingSurface

            return RecordingSurface(config.page.width, config.page.height)
        case _:
            raise ValueError(
                f"Unknown output format: {fmt!r} (choose 'pdf' or 'json')"
            )


__all__ = [
    "FONT_BOLD",
    "FONT_REGULAR",
    "BufferedSurface",
    "DrawingSurface",
    "Line",
    "Page",
    "Primitive",
    "Rect",
    "Text",
    "create_surface",
]
