"""CLI entry point for ShelfSift."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shelfsift.adapters.base.registry import AdapterRegistry
    from shelfsift.config.settings import Settings
    from shelfsift.models.result import ResultSet


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit status: 0 on success, 1 if the search failed, 2 on
        configuration or argument errors.
    """
    parser = argparse.ArgumentParser(
        prog="shelfsift",
        description="ShelfSift — Book metadata search adapters",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"ShelfSift {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Run one search and print the result set as JSON")
    search_parser.add_argument("query", help="Free-text query")
    field_group = search_parser.add_mutually_exclusive_group()
    field_group.add_argument("--field", "-f", default=None, help="Provider search field (e.g. intitle)")
    field_group.add_argument(
        "--semantic-field",
        "-s",
        default=None,
        help="Semantic search field (title, author, publisher, subject, isbn)",
    )
    offset_group = search_parser.add_mutually_exclusive_group()
    offset_group.add_argument("--start", type=int, default=None, help="Zero-based result offset")
    offset_group.add_argument("--page", type=int, default=None, help="One-based page number")
    search_parser.add_argument("--per-page", "-n", type=int, default=None, help="Results per page")
    search_parser.add_argument(
        "--no-key",
        action="store_true",
        help="Search without an API key (rate limited, for testing)",
    )

    subparsers.add_parser("fields", help="List supported search fields")

    args = parser.parse_args(argv)

    from shelfsift.adapters.base.registry import create_default_registry

    registry = create_default_registry()

    if args.command == "fields":
        adapter_class = registry.adapter_class("google_books")
        for field_name, semantic in adapter_class.search_field_definitions().items():
            print(f"{field_name}\t{semantic.value}")
        return 0

    try:
        settings = _load_settings(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if args.log_level:
        settings.observability.log_level = args.log_level
    if args.no_key:
        settings.google_books.suppress_key = True

    from shelfsift.observability.logging import setup_logging

    setup_logging(settings.observability)

    from shelfsift.adapters.base.exceptions import AdapterError

    try:
        results = asyncio.run(_run_search(registry, settings, args))
    except AdapterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(results.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return 1 if results.failed else 0


async def _run_search(registry: AdapterRegistry, settings: Settings, args: argparse.Namespace) -> ResultSet:
    adapter = await registry.initialize_adapter("google_books", settings=settings.google_books)
    try:
        request = adapter.parse_search_arguments(
            args.query,
            search_field=args.field,
            semantic_search_field=args.semantic_field,
            start=args.start,
            page=args.page,
            per_page=args.per_page,
        )
        return await adapter.search(request)
    finally:
        await registry.shutdown_all()


def _load_settings(config: str | None) -> Settings:
    from shelfsift.config.settings import Settings

    if config:
        return Settings.from_yaml(Path(config))
    return Settings()


def _get_version() -> str:
    """Get the package version."""
    try:
        from shelfsift import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    sys.exit(main())
