"""Tests for the command line entry point."""

from pathlib import Path

import pytest

from netflix_insights import __main__ as cli
from netflix_insights.analytics import CatalogueReports
from netflix_insights.database import DatabaseConnection, connection


@pytest.fixture
def shared_db(monkeypatch: pytest.MonkeyPatch, memory_db: DatabaseConnection) -> DatabaseConnection:
    """Route get_database() to the in-memory database."""
    monkeypatch.setattr(connection, "_db", memory_db)
    return memory_db


class TestParser:
    @staticmethod
    def test_report_names_match_catalogue() -> None:
        reports = CatalogueReports.from_records([])
        assert set(cli.REPORT_NAMES) == set(reports.catalogue())

    @staticmethod
    def test_top_growth_window() -> None:
        args = cli.build_parser().parse_args(["top-growth", "--window", "4", "--csv", "x.csv"])
        assert args.window == 4
        assert args.csv == Path("x.csv")

    @staticmethod
    def test_unknown_report_rejected() -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["report", "nope"])


class TestMain:
    @staticmethod
    def test_no_command() -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == 1

    @staticmethod
    def test_missing_csv(tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["growth", "--csv", str(tmp_path / "absent.csv")])
        assert exc.value.code == 1

    @staticmethod
    def test_growth_from_csv(sample_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["growth", "--csv", str(sample_csv)])
        out = capsys.readouterr().out
        assert "category" in out
        assert "n/a" in out

    @staticmethod
    def test_top_growth_from_csv(sample_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["top-growth", "--csv", str(sample_csv), "--window", "3"])
        assert "average_growth" in capsys.readouterr().out

    @staticmethod
    def test_report_from_csv(sample_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["report", "longest-movie", "--csv", str(sample_csv)])
        assert "Long Epic" in capsys.readouterr().out

    @staticmethod
    def test_director_from_csv(sample_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["director", "Rajiv", "--csv", str(sample_csv)])
        out = capsys.readouterr().out
        assert "Kids Tale" in out
        assert "Long Epic" in out

    @staticmethod
    def test_all_from_csv(sample_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["all", "--csv", str(sample_csv)])
        out = capsys.readouterr().out
        assert "Total titles: 8" in out
        for name in cli.REPORT_NAMES:
            assert f"== {name} ==" in out


class TestDatabaseCommands:
    @staticmethod
    def test_load_then_report(
        shared_db: DatabaseConnection, sample_csv: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        cli.main(["load", "--csv", str(sample_csv)])
        assert "Loaded 8 titles (0 skipped, 0 replaced)" in capsys.readouterr().out

        cli.main(["report", "count-by-kind"])
        out = capsys.readouterr().out
        assert "Movie" in out
        assert "Series" in out

    @staticmethod
    def test_reload_skips_and_replace(
        shared_db: DatabaseConnection, sample_csv: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        cli.main(["load", "--csv", str(sample_csv)])
        cli.main(["load", "--csv", str(sample_csv)])
        assert "Loaded 0 titles (8 skipped, 0 replaced)" in capsys.readouterr().out

        cli.main(["load", "--csv", str(sample_csv), "--replace"])
        assert "Loaded 8 titles (0 skipped, 8 replaced)" in capsys.readouterr().out
