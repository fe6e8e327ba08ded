"""CLI for showing SNCF departures in a terminal."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp
from pydantic import ValidationError

from sncf_departures.adapters.config import AppConfig
from sncf_departures.adapters.sncf_api import SncfDepartureRepository
from sncf_departures.adapters.sncf_api.constants import departures_url
from sncf_departures.adapters.web.builders import DepartureViewBuilder
from sncf_departures.adapters.web.formatters import DepartureFormatter
from sncf_departures.application.services import DepartureLoadingService
from sncf_departures.domain.models import DeparturesModel

COLUMN_SEPARATOR = "  "


def _column_widths(headers: list[str], rows: list[list[str]]) -> list[int]:
    """Calculate the width of each column from its widest cell."""
    widths = [len(header) for header in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    return widths


def _format_line(cells: list[str], widths: list[int]) -> str:
    """Pad cells to their column width and join them."""
    return COLUMN_SEPARATOR.join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()


def format_view_as_text(view: dict[str, Any]) -> str:
    """Render a departures view tree as plain text."""
    lines = [view["title"], ""]

    if view["has_error"]:
        lines.append(view["error_message"])
        return "\n".join(lines)

    if view["is_empty"]:
        lines.append(view["empty_message"])
        return "\n".join(lines)

    headers: list[str] = view["headers"]
    rows = [
        [
            row["train"],
            row["direction"],
            row["departure_time"],
            row["physical_mode"],
            row["commercial_mode"],
        ]
        for row in view["rows"]
    ]
    widths = _column_widths(headers, rows)

    lines.append(_format_line(headers, widths))
    lines.append(_format_line(["-" * width for width in widths], widths))
    lines.extend(_format_line(row, widths) for row in rows)
    if view["date_line"]:
        lines.extend(["", view["date_line"]])
    return "\n".join(lines)


async def fetch_model(config: AppConfig) -> DeparturesModel:
    """Fetch departures once and return the resulting model."""
    async with aiohttp.ClientSession() as session:
        repository = SncfDepartureRepository(session=session, config=config)
        return await DepartureLoadingService(repository).load()


async def show_departures(config: AppConfig, format_json: bool = False) -> int:
    """Print the departures view and return the process exit code."""
    model = await fetch_model(config)
    view = DepartureViewBuilder(DepartureFormatter(), config.title).build(model)

    if format_json:
        print(json.dumps(view, indent=2, ensure_ascii=False))
    else:
        print(format_view_as_text(view))

    return 1 if view["has_error"] else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="SNCF Departures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration is read from the environment (or a .env file):
  SNCF_API_KEY, STOP_AREA_ID, QUERY_DATETIME, SNCF_API_BASE_URL

Examples:
  # Show the departures table
  sncf-departures-cli show

  # Show the view as JSON
  sncf-departures-cli show --json

  # Print the URL that would be requested
  sncf-departures-cli url
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    show_parser = subparsers.add_parser("show", help="Fetch and show departures")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("url", help="Print the departures URL")

    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "show":
            exit_code = await show_departures(config, format_json=args.json)
            if exit_code:
                sys.exit(exit_code)

        elif args.command == "url":
            print(
                departures_url(
                    config.sncf_api_base_url, config.stop_area_id, config.query_datetime
                )
            )

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
