"""TOML configuration loader for receipt rendering."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class PageConfig:
    width: float = 400
    height: float = 700
    margin: float = 30


@dataclass
class PaginationConfig:
    row_threshold: float = 100
    totals_threshold: float = 200
    payment_threshold: float = 150
    row_height: float = 30
    row_advance: float = 35
    line_height_factor: float = 1.15


@dataclass
class FooterConfig:
    offset: float = 70


@dataclass
class DocumentConfig:
    title: str = "Comprovante de Pagamento FreeFlow"
    author: str = ""
    locale: str = "en"
    currency: str = "R$"
    decimal_separator: str = ","
    date_format: str = "%d/%m/%Y"
    timestamp_format: str = "%d/%m/%Y %H:%M:%S"


@dataclass
class OutputConfig:
    format: str = "pdf"
    directory: str = "."
    filename: str = "flow-receipt.pdf"


@dataclass
class RenderConfig:
    page: PageConfig = field(default_factory=PageConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    footer: FooterConfig = field(default_factory=FooterConfig)
    document: DocumentConfig = field(default_factory=DocumentConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(path: str | Path | None = None) -> RenderConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The document author and locale can be supplied via environment variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    pg = raw.get("page", {})
    pag = raw.get("pagination", {})
    ftr = raw.get("footer", {})
    doc = raw.get("document", {})
    out = raw.get("output", {})

    defaults = RenderConfig()

    # Resolve author / locale: config file → environment variable → default
    author = doc.get("author", "") or os.environ.get("FLOWRECEIPT_AUTHOR", "")
    locale = (
        doc.get("locale", "")
        or os.environ.get("FLOWRECEIPT_LOCALE", "")
        or defaults.document.locale
    )

    return RenderConfig(
        page=PageConfig(
            width=pg.get("width", defaults.page.width),
            height=pg.get("height", defaults.page.height),
            margin=pg.get("margin", defaults.page.margin),
        ),
        pagination=PaginationConfig(
            row_threshold=pag.get(
                "row_threshold", defaults.pagination.row_threshold
            ),
            totals_threshold=pag.get(
                "totals_threshold", defaults.pagination.totals_threshold
            ),
            payment_threshold=pag.get(
                "payment_threshold", defaults.pagination.payment_threshold
            ),
            row_height=pag.get("row_height", defaults.pagination.row_height),
            row_advance=pag.get("row_advance", defaults.pagination.row_advance),
            line_height_factor=pag.get(
                "line_height_factor", defaults.pagination.line_height_factor
            ),
        ),
        footer=FooterConfig(
            offset=ftr.get("offset", defaults.footer.offset),
        ),
        document=DocumentConfig(
            title=doc.get("title", defaults.document.title),
            author=author,
            locale=locale,
            currency=doc.get("currency", defaults.document.currency),
            decimal_separator=doc.get(
                "decimal_separator", defaults.document.decimal_separator
            ),
            date_format=doc.get("date_format", defaults.document.date_format),
            timestamp_format=doc.get(
                "timestamp_format", defaults.document.timestamp_format
            ),
        ),
        output=OutputConfig(
            format=out.get("format", defaults.output.format),
            directory=out.get("directory", defaults.output.directory),
            filename=out.get("filename", defaults.output.filename),
        ),
    )
