"""CLI entry point for the dashboard search and analytics engine."""

import argparse
import asyncio
import logging
import random
import sys

from pydantic import ValidationError

from corpdash.analytics.metrics import delta_percent, format_metric, metric_series
from corpdash.analytics.synthesizer import synthesize_analytics
from corpdash.core.config import Settings
from corpdash.core.demo_data import demo_rates
from corpdash.core.schemas import SearchFilters
from corpdash.currency.converter import convert, format_number, ordered_codes
from corpdash.pipeline.dashboard import format_relative
from corpdash.pipeline.orchestrator import (
    SearchSession,
    export_page_json,
    get_autocomplete_suggestions,
)

DEFAULT_CONFIG = "config/settings.yaml"


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help=f"Path to settings YAML file (default: {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Corporate dashboard engine - search, analytics and currency tools",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- search subcommand (default) ---
    search_parser = subparsers.add_parser("search", help="Search the demo corpus")
    search_parser.add_argument("--query", "-q", default="", help="Free-text query")
    search_parser.add_argument(
        "--type", choices=["all", "documents", "images"], default="all",
        help="Content type (default: all)",
    )
    search_parser.add_argument(
        "--period", choices=["all", "today", "week", "month"], default="all",
        help="Recency window (default: all)",
    )
    search_parser.add_argument("--author", default="any", help="Exact author name (default: any)")
    search_parser.add_argument(
        "--with-analysis", action="store_true", help="Only AI-analyzed results",
    )
    search_parser.add_argument(
        "--high-rating", action="store_true", help="Only results rated 4.5 or higher",
    )
    search_parser.add_argument("--page", type=int, default=1, help="1-based page number")
    search_parser.add_argument("--export", choices=["json"], help="Export results to format (json)")
    _add_common(search_parser)

    # --- analytics subcommand ---
    analytics_parser = subparsers.add_parser("analytics", help="Synthesize dashboard analytics")
    analytics_parser.add_argument(
        "--period", type=int, choices=[7, 14, 30],
        help="Period in days (default: from config)",
    )
    analytics_parser.add_argument("--seed", type=int, help="Random seed for reproducible output")
    _add_common(analytics_parser)

    # --- convert subcommand ---
    convert_parser = subparsers.add_parser("convert", help="Convert between currencies")
    convert_parser.add_argument("--amount", default="100", help="Amount; comma or period decimals")
    convert_parser.add_argument("--from", dest="from_code", default="USD", help="Source currency")
    convert_parser.add_argument("--to", dest="to_code", default="RUB", help="Target currency")
    convert_parser.add_argument("--seed", type=int, help="Random seed for the demo rate table")
    _add_common(convert_parser)

    # --- suggest subcommand ---
    suggest_parser = subparsers.add_parser("suggest", help="Autocomplete a query")
    suggest_parser.add_argument("--query", "-q", default="", help="Partial query")
    _add_common(suggest_parser)

    argv = list(sys.argv[1:] if argv is None else argv)

    # Default to search when no subcommand given
    if not argv or (argv[0] not in subparsers.choices and argv[0] not in ("-h", "--help")):
        argv.insert(0, "search")

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_settings(path: str) -> Settings:
    """Load settings, falling back to defaults when the default file is absent."""
    if path == DEFAULT_CONFIG:
        try:
            return Settings.from_yaml(path)
        except FileNotFoundError:
            logging.getLogger(__name__).debug("No %s - using default settings", path)
            return Settings()
    return Settings.from_yaml(path)


async def cmd_search(args: argparse.Namespace, settings: Settings) -> None:
    """Handle search subcommand."""
    filters = SearchFilters(
        type=args.type,
        period=args.period,
        author=args.author,
        with_analysis=args.with_analysis,
        high_rating=args.high_rating,
    )
    session = SearchSession(settings.search)
    page = await session.run(args.query, filters, args.page)
    if page is None:
        return

    if args.export == "json":
        print(export_page_json(page))
        return

    print(f"Found {page.total} results in {page.elapsed_seconds:.2f}s "
          f"(page {page.page} of {page.page_count})")
    for c in page.items:
        print(f"  [{c.relevance}] {c.title} — {c.author or 'unknown'}, "
              f"{format_relative(c.timestamp)}")


async def cmd_analytics(args: argparse.Namespace, settings: Settings) -> None:
    """Handle analytics subcommand."""
    period = args.period or settings.analytics.default_period
    seed = args.seed if args.seed is not None else settings.analytics.seed
    rng = random.Random(seed)
    dataset = await synthesize_analytics(period, rng, latency=settings.analytics.latency_seconds)

    print(f"Analytics for the last {period} days:")
    for p in dataset.points:
        print(f"  {p.date:%Y-%m-%d}: {p.documents} docs, {p.ai_ops} AI ops, "
              f"{p.time_saved_hours} h saved, {p.accuracy}% accuracy")
    for key in ("documents", "ai_ops", "time_saved_hours", "accuracy"):
        values = metric_series(dataset.points, key)
        print(f"  {key}: {format_metric(values[-1], key)} ({delta_percent(values):+d}%)")
    print("By task:")
    for entry in dataset.by_task:
        print(f"  {entry.name}: {entry.value}")
    print("Sources:")
    for entry in dataset.sources:
        print(f"  {entry.name}: {entry.value}")


def cmd_convert(args: argparse.Namespace, settings: Settings) -> None:
    """Handle convert subcommand."""
    rates = demo_rates(random.Random(args.seed))
    codes = ordered_codes(rates, settings.currency.preferred_order)
    out = convert(rates, args.amount, args.from_code, args.to_code, settings.currency.base_code)

    print(f"Rates ({settings.currency.base_code} per unit): "
          + ", ".join(f"{r.code} {format_number(r.value)}" for r in rates))
    print(f"Available codes: {' '.join(codes)}")
    print(f"{args.amount} {args.from_code} = {format_number(out.result)} {args.to_code}")
    print(f"1 {args.from_code} = {format_number(out.cross_rate)} {args.to_code}")


async def cmd_suggest(args: argparse.Namespace, settings: Settings) -> None:
    """Handle suggest subcommand."""
    for s in await get_autocomplete_suggestions(args.query, settings.suggest):
        print(s)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "analytics":
        asyncio.run(cmd_analytics(args, settings))
    elif args.command == "convert":
        cmd_convert(args, settings)
    elif args.command == "suggest":
        asyncio.run(cmd_suggest(args, settings))
    else:
        # search (default)
        try:
            asyncio.run(cmd_search(args, settings))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
