"""
CLI entry point for Menu Match.

Usage:
    python -m menu_match --data restaurant_data.csv --items "burger,tofu_log"
    python -m menu_match --data a.csv b.xlsx --items "burger" --all --output-csv ranking.csv

Exit codes: 0 match found, 2 no vendor covers the request, 1 load error.
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_CONFIG_PATH, load_config
from .loader import load_catalog
from .matcher import rank_vendors
from .parser import RecordParseError
from .report import export_csv, format_best, format_console, generate_report_filename

EXIT_NO_MATCH = 2


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="menu_match",
        description="Menu Match - Find the cheapest vendor that offers every requested item",
    )

    parser.add_argument(
        "--data",
        nargs="+",
        required=True,
        metavar="FILE",
        help="Catalog files (text/CSV or XLSX)",
    )

    parser.add_argument(
        "--items",
        required=True,
        help='Comma-separated item names (e.g., "burger,tofu_log")',
    )

    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Ingestion config file (default: module's menu_match_config.json)",
    )

    parser.add_argument(
        "--all",
        action="store_true",
        help="List every vendor that covers the request",
    )

    parser.add_argument(
        "--output-csv",
        metavar="FILE",
        nargs="?",
        const="",
        help="Output CSV file path for the ranking (menu_match_<date>.csv if no path given)",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help='Only print "vendor_id, total"',
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log ingestion details",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(config_path)
        result = load_catalog(args.data, config)
    except RecordParseError as e:
        print(f"Error: Invalid catalog data: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for name in result.missing_sources:
        print(f"Warning: Catalog file not loaded: {name}", file=sys.stderr)

    if not result.ok:
        print("Error: No catalog files could be loaded", file=sys.stderr)
        sys.exit(1)

    ranking = rank_vendors(result.catalog, args.items)

    if args.quiet:
        print(format_best(ranking[0] if ranking else None))
    else:
        print(f"Loaded {len(result.catalog)} vendors from {len(result.loaded_sources)} file(s)")
        print(format_console(result.catalog, args.items, ranking, show_all=args.all))

    if args.output_csv is not None:
        output_path = Path(args.output_csv or generate_report_filename("csv"))
        with open(output_path, "w", newline="") as f:
            export_csv(ranking, output=f)
        if not args.quiet:
            print(f"\nCSV exported to: {output_path}")

    if not ranking:
        sys.exit(EXIT_NO_MATCH)


if __name__ == "__main__":
    main()
