"""CLI entry point for receipt rendering."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import load_config
from .models import receipt_from_dict, receipt_to_dict
from .renderer import ReceiptRenderer


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="flowreceipt",
        description="Render payment receipts as paginated documents",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML configuration file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # render
    render_parser = sub.add_parser("render", help="Render a receipt")
    render_parser.add_argument(
        "--data", type=str, default=None, metavar="FILE",
        help="Receipt data as JSON (defaults to the demonstration receipt)",
    )
    render_parser.add_argument(
        "--output", "-o", type=str, default=None, metavar="FILE",
        help="Output file (defaults to [output] directory/filename)",
    )
    render_parser.add_argument(
        "--format", choices=["pdf", "json"], default=None, dest="output_format",
        help="Output format (defaults to [output] format)",
    )

    # sample
    sub.add_parser("sample", help="Print the demonstration receipt as JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    match args.command:
        case "render":
            _cmd_render(config, args)
        case "sample":
            _cmd_sample(config)


def _load_data(path: str | None) -> dict | None:
    if path is None:
        return None
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Receipt data file not found: {p}")
    with open(p, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Receipt data must be a JSON object: {p}")
    return data


def _cmd_render(config, args) -> None:
    if args.output_format:
        config.output.format = args.output_format

    try:
        raw = _load_data(args.data)
        receipt = receipt_from_dict(raw, date_format=config.document.date_format)
        renderer = ReceiptRenderer(config)
        output = renderer.write(receipt, args.output)
    except (OSError, ValueError, TypeError, KeyError, IndexError, RuntimeError) as e:
        print(f"Render error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Receipt saved: {output}")


def _cmd_sample(config) -> None:
    receipt = receipt_from_dict(date_format=config.document.date_format)
    print(json.dumps(receipt_to_dict(receipt), ensure_ascii=False, indent=2))
