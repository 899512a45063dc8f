"""
Tests for report generator.

Run with: pytest menu_match/tests/test_report.py -v
"""

import pytest
from decimal import Decimal
import io

from menu_match.catalog import build_catalog
from menu_match.matcher import rank_vendors
from menu_match.models import BestVendor
from menu_match.report import (
    export_csv,
    format_best,
    format_console,
    generate_report_filename,
)


@pytest.fixture
def catalog():
    return build_catalog([
        "1,4.00,burger",
        "2,5.00,burger",
        "3,3.00,burger",
        "3,2.00,fries",
    ])


class TestFormatBest:

    def test_match(self):
        assert format_best(BestVendor(2, Decimal("11.50"))) == "2, 11.50"

    def test_no_match(self):
        assert "No vendor" in format_best(None)


class TestFormatConsole:
    """Test console report formatting."""

    def test_best_only(self, catalog):
        ranking = rank_vendors(catalog, "burger")
        report = format_console(catalog, "burger", ranking)

        assert "REQUEST: burger" in report
        assert "BEST VENDOR: 3  TOTAL: 3.00" in report
        assert "ALL COVERING VENDORS" not in report
        assert "Covering vendors:   3" in report

    def test_show_all(self, catalog):
        ranking = rank_vendors(catalog, "burger")
        report = format_console(catalog, "burger", ranking, show_all=True)

        assert "ALL COVERING VENDORS (3)" in report
        # Cheapest listed first
        assert report.index("3.00", report.index("RANK")) < report.index("5.00")

    def test_no_match_lists_unknown_items(self, catalog):
        report = format_console(catalog, "Chef_Salad,burger", [])
        assert "No vendor offers all requested items." in report
        assert "Not on any menu:    chef_salad" in report

    def test_empty_request(self, catalog):
        ranking = rank_vendors(catalog, "")
        report = format_console(catalog, "", ranking)
        assert "REQUEST: (empty)" in report
        assert "BEST VENDOR: 1  TOTAL: 0" in report


class TestExportCsv:
    """Test CSV export."""

    def test_header_and_rows(self, catalog):
        content = export_csv(rank_vendors(catalog, "burger"))
        lines = content.strip().splitlines()
        assert lines[0] == "rank,vendor_id,total_price"
        assert lines[1] == "1,3,3.00"
        assert lines[2] == "2,1,4.00"
        assert lines[3] == "3,2,5.00"

    def test_empty(self):
        content = export_csv([])
        assert content.strip() == "rank,vendor_id,total_price"

    def test_writes_to_output(self, catalog):
        output = io.StringIO()
        content = export_csv(rank_vendors(catalog, "fries"), output=output)
        assert output.getvalue() == content
        assert "1,3,2.00" in content


class TestReportFilename:

    def test_format(self):
        name = generate_report_filename()
        assert name.startswith("menu_match_")
        assert name.endswith(".csv")

    def test_extension(self):
        assert generate_report_filename("txt").endswith(".txt")
