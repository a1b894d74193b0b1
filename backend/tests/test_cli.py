"""Tests for the command line interface."""

import json
import pytest
from pathlib import Path

from bizcal.cli import main


class TestCli:
    """Tests for bizcal subcommands."""

    def test_check_holiday(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["check", "GBLO", "2024-12-25"]) == 0
        assert "2024-12-25 (Wednesday): holiday" in capsys.readouterr().out

    def test_check_business_day(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["check", "GBLO", "2024-12-24"]) == 0
        assert "business day" in capsys.readouterr().out

    def test_check_weekends_only(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["check", "GBLO", "2024-12-25", "--weekends-only"]) == 0
        assert "business day" in capsys.readouterr().out

    def test_adjust(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["adjust", "GBLO", "2021-12-25", "-c", "Following"]) == 0
        assert "2021-12-25 -> 2021-12-29 (Following)" in capsys.readouterr().out

    def test_adjust_weekends_only(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["adjust", "GBLO", "2021-12-25", "-c", "Following", "--weekends-only"]) == 0
        assert "2021-12-25 -> 2021-12-27" in capsys.readouterr().out

    def test_adjust_default_convention(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["adjust", "GBLO", "2024-08-31"]) == 0
        assert "2024-08-31 -> 2024-08-30 (Modified Following)" in capsys.readouterr().out

    def test_holidays_for_year(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["holidays", "EUTA", "--year", "2024"]) == 0
        out = capsys.readouterr().out
        assert "HOLIDAYS 2024 (6)" in out
        assert "2024-05-01" in out

    def test_calendar_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "calendar.json"
        path.write_text(json.dumps({
            "holidays": ["2024-06-10"],
            "weekend_days": ["FRIDAY", "SATURDAY"],
        }))
        assert main(["adjust", "CUST", "2024-06-07", "-c", "Following", "-f", str(path)]) == 0
        assert "2024-06-07 -> 2024-06-09" in capsys.readouterr().out

    def test_missing_calendar_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["check", "CUST", "2024-06-07", "-f", str(tmp_path / "missing.json")]) == 1
        assert "ERROR" in capsys.readouterr().out

    def test_invalid_calendar_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "calendar.json"
        path.write_text(json.dumps({"weekend_days": ["Funday", "Sunday"]}))
        assert main(["check", "CUST", "2024-06-07", "-f", str(path)]) == 1
        assert "CalendarSpecError" in capsys.readouterr().out

    def test_invalid_date_exits(self) -> None:
        with pytest.raises(SystemExit):
            main(["check", "GBLO", "25/12/2024"])

    def test_unknown_calendar_exits(self) -> None:
        with pytest.raises(SystemExit):
            main(["check", "XLON", "2024-12-25"])

    def test_calendar_file_id_mismatch(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """The calendar file must describe the calendar named on the command line."""
        path = tmp_path / "calendar.json"
        path.write_text(json.dumps({"calendar_id": "CUST", "holidays": ["2024-06-10"]}))
        assert main(["check", "GBLO", "2024-06-10", "-f", str(path)]) == 1
        out = capsys.readouterr().out
        assert "CalendarSpecError" in out
        assert "defines CUST, not GBLO" in out

    def test_adjust_past_last_date(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """A walk past 9999-12-31 is reported as an error, not a crash."""
        path = tmp_path / "calendar.json"
        path.write_text(json.dumps({"weekend_days": ["FRIDAY", "SATURDAY"]}))
        assert main(["adjust", "CUST", "9999-12-31", "-c", "Following", "-f", str(path)]) == 1
        assert "AdjustmentError" in capsys.readouterr().out
