"""Paginated payment receipt rendering."""

from .config import (
    DocumentConfig,
    FooterConfig,
    OutputConfig,
    PageConfig,
    PaginationConfig,
    RenderConfig,
    load_config,
)
from .cursor import LayoutCursor
from .formatting import format_money, generate_auth_code
from .labels import EN, PT_BR, Labels, labels_for
from .models import Charge, ReceiptData, receipt_from_dict, receipt_to_dict
from .paginator import LayoutResult, Paginator, RowPlacement
from .renderer import ReceiptRenderer, RenderedReceipt, render_receipt
from .surface import DrawingSurface, create_surface

__all__ = [
    "Charge",
    "ReceiptData",
    "receipt_from_dict",
    "receipt_to_dict",
    "LayoutCursor",
    "Paginator",
    "LayoutResult",
    "RowPlacement",
    "ReceiptRenderer",
    "RenderedReceipt",
    "render_receipt",
    "DrawingSurface",
    "create_surface",
    "Labels",
    "EN",
    "PT_BR",
    "labels_for",
    "format_money",
    "generate_auth_code",
    "RenderConfig",
    "PageConfig",
    "PaginationConfig",
    "FooterConfig",
    "DocumentConfig",
    "OutputConfig",
    "load_config",
]
