"""
Report Generator - Format match results for human consumption.

Produces console output and CSV export for a vendor ranking.
"""

import csv
import io
from datetime import datetime
from typing import Optional, TextIO

from .catalog import Catalog
from .models import BestVendor
from .matcher import parse_requested_items, summarize_coverage


def format_best(best: Optional[BestVendor]) -> str:
    """One-line result: "vendor_id, total" or a no-match message."""
    if best is None:
        return "No vendor offers all requested items."
    return f"{best.vendor_id}, {best.total_price}"


def format_console(
    catalog: Catalog,
    items: str,
    ranking: list[BestVendor],
    show_all: bool = False,
) -> str:
    """
    Format a ranking for console display.

    Args:
        catalog: Catalog the ranking was computed from
        items: The original request
        ranking: Output of rank_vendors, cheapest first
        show_all: Whether to list every covering vendor (default False)

    Returns:
        Formatted string for console output
    """
    requested = parse_requested_items(items)
    lines = []

    lines.append(f"\nREQUEST: {', '.join(requested) if requested else '(empty)'}")
    lines.append("=" * 50)

    if not ranking:
        lines.append(format_best(None))
    else:
        best = ranking[0]
        lines.append(f"BEST VENDOR: {best.vendor_id}  TOTAL: {best.total_price}")

        if show_all and len(ranking) > 1:
            lines.append(f"\nALL COVERING VENDORS ({len(ranking)})")
            lines.append("-" * 50)
            lines.append(f"{'RANK':<6} {'VENDOR':<12} {'TOTAL':>12}")
            lines.append("-" * 50)
            for rank, match in enumerate(ranking, start=1):
                lines.append(f"{rank:<6} {match.vendor_id:<12} {str(match.total_price):>12}")

    summary = summarize_coverage(catalog, items)
    lines.append("\n" + "=" * 50)
    lines.append("SUMMARY")
    lines.append(f"  Vendors in catalog: {summary['vendors']}")
    lines.append(f"  Items requested:    {summary['requested']}")
    lines.append(f"  Covering vendors:   {summary['covering_vendors']}")
    if summary["unknown_items"]:
        lines.append(f"  Not on any menu:    {', '.join(summary['unknown_items'])}")
    lines.append("=" * 50)

    return "\n".join(lines)


def export_csv(
    ranking: list[BestVendor],
    output: TextIO | None = None,
) -> str:
    """
    Export a ranking to CSV format.

    Args:
        ranking: Covering vendors, cheapest first
        output: Optional file handle to write to

    Returns:
        CSV string (also writes to output if provided)
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow(["rank", "vendor_id", "total_price"])
    for rank, match in enumerate(ranking, start=1):
        writer.writerow([rank, match.vendor_id, str(match.total_price)])

    csv_content = buffer.getvalue()

    if output:
        output.write(csv_content)

    return csv_content


def generate_report_filename(extension: str = "csv") -> str:
    """
    Generate a filename for the report.

    Returns:
        Filename like "menu_match_2026-01-08.csv"
    """
    date_str = datetime.now().strftime("%Y-%m-%d")
    return f"menu_match_{date_str}.{extension}"
