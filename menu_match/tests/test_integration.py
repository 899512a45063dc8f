"""
Integration tests for Menu Match.

These tests verify the full pipeline works end-to-end, from the reference
catalog file through to the CLI.
Run with: pytest menu_match/tests/test_integration.py -v
"""

import pytest
from decimal import Decimal
from pathlib import Path

from menu_match import load_catalog, pick_best_vendor
from menu_match.__main__ import EXIT_NO_MATCH, main


FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_DATA = FIXTURES_DIR / "restaurant_data.csv"


@pytest.fixture(scope="module")
def catalog():
    return load_catalog([SAMPLE_DATA]).catalog


class TestReferenceScenarios:
    """Known answers for the reference dataset."""

    def test_one_item(self, catalog):
        assert pick_best_vendor(catalog, "tofu_log").as_tuple() == (2, Decimal("6.5"))

    def test_two_items(self, catalog):
        assert pick_best_vendor(catalog, "burger,tofu_log").as_tuple() == (2, Decimal("11.50"))

    def test_combination_items_1(self, catalog):
        assert pick_best_vendor(catalog, "almond_biscuit,joe_frogger").as_tuple() == (12, Decimal("1.80"))

    def test_combination_items_2(self, catalog):
        result = pick_best_vendor(catalog, "fancy_european_water,extreme_fajita")
        assert result.as_tuple() == (6, Decimal("11.0"))

    def test_not_found(self, catalog):
        assert pick_best_vendor(catalog, "chef_salad,wine_spritzer") is None

    def test_single_vendor_item(self, catalog):
        assert pick_best_vendor(catalog, "gac").as_tuple() == (12, Decimal("3.36"))

    def test_query_normalization(self, catalog):
        result = pick_best_vendor(catalog, " Extreme_Fajita ,FANCY_EUROPEAN_WATER,extreme_fajita")
        assert result.as_tuple() == (6, Decimal("11.0"))


class TestCli:
    """Test the command-line entry point."""

    def test_match_quiet(self, capsys):
        main(["--data", str(SAMPLE_DATA), "--items", "burger,tofu_log", "--quiet"])
        assert capsys.readouterr().out.strip() == "2, 11.50"

    def test_match_report(self, capsys):
        main(["--data", str(SAMPLE_DATA), "--items", "almond_biscuit,joe_frogger", "--all"])
        out = capsys.readouterr().out
        assert "Loaded 6 vendors from 1 file(s)" in out
        assert "BEST VENDOR: 12  TOTAL: 1.80" in out
        assert "ALL COVERING VENDORS (2)" in out

    def test_no_match_exit_code(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--data", str(SAMPLE_DATA), "--items", "chef_salad", "--quiet"])
        assert exc_info.value.code == EXIT_NO_MATCH
        assert "No vendor" in capsys.readouterr().out

    def test_missing_data_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--data", str(tmp_path / "nope.csv"), "--items", "burger"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Catalog file not loaded" in err
        assert "No catalog files could be loaded" in err

    def test_one_missing_file_still_answers(self, tmp_path, capsys):
        main([
            "--data", str(tmp_path / "nope.csv"), str(SAMPLE_DATA),
            "--items", "tofu_log", "--quiet",
        ])
        captured = capsys.readouterr()
        assert captured.out.strip() == "2, 6.50"
        assert "nope.csv" in captured.err

    def test_bad_number_exit_code(self, tmp_path, capsys):
        bad = tmp_path / "bad.csv"
        bad.write_text("1,4.00,burger\nx,1.00,fries\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["--data", str(bad), "--items", "burger"])
        assert exc_info.value.code == 1
        assert "line 2" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([
                "--data", str(SAMPLE_DATA), "--items", "burger",
                "--config", str(tmp_path / "nope.json"),
            ])
        assert exc_info.value.code == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_output_csv(self, tmp_path, capsys):
        output = tmp_path / "ranking.csv"
        main([
            "--data", str(SAMPLE_DATA), "--items", "burger",
            "--quiet", "--output-csv", str(output),
        ])
        content = output.read_text().splitlines()
        assert content[0] == "rank,vendor_id,total_price"
        assert content[1] == "1,1,4.00"
        assert content[2] == "2,2,5.00"

    def test_output_csv_default_name(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        main([
            "--data", str(SAMPLE_DATA), "--items", "tofu_log",
            "--output-csv",
        ])
        written = list(tmp_path.glob("menu_match_*.csv"))
        assert len(written) == 1
        assert written[0].read_text().splitlines()[1] == "1,2,6.50"
        assert "CSV exported to: menu_match_" in capsys.readouterr().out
