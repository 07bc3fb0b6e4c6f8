#!/usr/bin/env python3
"""
Sales Explorer CLI — query the sales dataset or run the API server.

USAGE:
  python -m sales_explorer.cli sales                                  # First page, newest first
  python -m sales_explorer.cli sales --search priya --limit 5
  python -m sales_explorer.cli sales --regions North,East --age-min 18 --age-max 25
  python -m sales_explorer.cli sales --sort-by quantity_desc --page 2
  python -m sales_explorer.cli filters                                # Filter choices

  python -m sales_explorer.cli serve                                  # Start API server
  python -m sales_explorer.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from sales_explorer.analytics.sales import get_filter_options, get_sales_page
from sales_explorer.config import DATA_FILE, DEFAULT_LIMIT, DEFAULT_PAGE, DEFAULT_SORT, LOG_LEVEL
from sales_explorer.data.errors import DatasetError
from sales_explorer.data.schemas import build_filter_set, parse_positive_int, parse_sort_key
from sales_explorer.data.store import DatasetCache
from sales_explorer.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_sales(args) -> int:
    """Print one page of sales as JSON."""
    cache = DatasetCache(Path(args.data))
    page = get_sales_page(
        cache,
        page=parse_positive_int(args.page, DEFAULT_PAGE),
        limit=parse_positive_int(args.limit, DEFAULT_LIMIT),
        sort_key=parse_sort_key(args.sort_by, DEFAULT_SORT),
        search=args.search or "",
        filters=build_filter_set(
            regions=args.regions,
            genders=args.genders,
            categories=args.categories,
            tags=args.tags,
            payment_methods=args.payment_methods,
            age_min=args.age_min,
            age_max=args.age_max,
            date_start=args.date_start,
            date_end=args.date_end,
        ),
    )
    _print_json(page.as_dict())
    return 0


def cmd_filters(args) -> int:
    """Print filter options as JSON."""
    cache = DatasetCache(Path(args.data))
    _print_json(get_filter_options(cache).as_dict())
    return 0


def cmd_serve(args) -> int:
    """Start the API server."""
    import uvicorn
    logger.info("Starting Sales Explorer API on port %s", args.port)
    uvicorn.run("sales_explorer.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sales Explorer — retail transaction search and filtering",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--data", default=str(DATA_FILE), help="Path to sales.json")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default INFO)")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # sales subcommand
    sales_parser = subparsers.add_parser("sales", help="List sales (JSON)")
    sales_parser.add_argument("--page", default=str(DEFAULT_PAGE), help="Page number (default 1)")
    sales_parser.add_argument("--limit", default=str(DEFAULT_LIMIT), help="Rows per page (default 10)")
    sales_parser.add_argument("--sort-by", default=DEFAULT_SORT, help="date_desc|date_asc|quantity_desc|quantity_asc|name_asc|name_desc")
    sales_parser.add_argument("--search", default="", help="Customer name or phone substring")
    sales_parser.add_argument("--regions", help="Comma-separated regions")
    sales_parser.add_argument("--genders", help="Comma-separated genders")
    sales_parser.add_argument("--categories", help="Comma-separated categories")
    sales_parser.add_argument("--tags", help="Comma-separated tags")
    sales_parser.add_argument("--payment-methods", help="Comma-separated payment methods")
    sales_parser.add_argument("--age-min", help="Minimum age (inclusive)")
    sales_parser.add_argument("--age-max", help="Maximum age (inclusive)")
    sales_parser.add_argument("--date-start", help="YYYY-MM-DD (inclusive)")
    sales_parser.add_argument("--date-end", help="YYYY-MM-DD (inclusive)")
    sales_parser.set_defaults(func=cmd_sales)

    # filters subcommand
    filters_parser = subparsers.add_parser("filters", help="List filter options (JSON)")
    filters_parser.set_defaults(func=cmd_filters)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    # stdout carries the JSON output
    configure_logging(args.log_level, stream=sys.stderr)
    try:
        return args.func(args)
    except DatasetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
