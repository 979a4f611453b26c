"""Unit tests for the Netflix CSV extractor."""

from pathlib import Path

import pytest

from netflix_insights.analytics.schemas import ContentKind
from netflix_insights.etl.extractors import CSVExtractor, ExtractionError, NetflixNormalizer

from tests.conftest import CSV_COLUMNS


@pytest.fixture()
def extractor() -> CSVExtractor:
    return CSVExtractor()


class TestExtract:
    @staticmethod
    def test_success(extractor: CSVExtractor, sample_csv: Path) -> None:
        result = extractor.extract(csv_path=sample_csv)
        assert result["success"] is True
        assert result["source"] == "netflix_csv"
        assert result["count"] == 8
        assert result["errors"] == []

    @staticmethod
    def test_missing_file(extractor: CSVExtractor, tmp_path: Path) -> None:
        result = extractor.extract(csv_path=tmp_path / "absent.csv")
        assert result["success"] is False
        assert result["count"] == 0
        assert "not found" in result["errors"][0]

    @staticmethod
    def test_missing_columns(extractor: CSVExtractor, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("show_id,name\ns1,x\n", encoding="utf-8")
        result = extractor.extract(csv_path=path)
        assert result["success"] is False

    @staticmethod
    def test_extraction_stats(extractor: CSVExtractor, tmp_path: Path) -> None:
        path = tmp_path / "partial.csv"
        header = ",".join(CSV_COLUMNS)
        rows = ["s1,Movie,A,,,,,2020,,,,", ",Movie,B,,,,,2020,,,,", "s3,Movie,,,,,,2021,,,,"]
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        extractor.extract(csv_path=path)
        stats = extractor.get_extraction_stats()
        assert stats["total_rows"] == 3
        assert stats["valid_rows"] == 1
        assert stats["skipped_rows"] == 2


class TestDataAccess:
    @staticmethod
    def test_extract_to_dicts(extractor: CSVExtractor, sample_csv: Path) -> None:
        rows = extractor.extract_to_dicts(sample_csv)
        assert len(rows) == 8
        assert rows[0]["show_id"] == "s1"
        assert rows[0]["release_year"] == 2020
        assert rows[0]["cast"] is None

    @staticmethod
    def test_extract_to_dicts_missing_file(extractor: CSVExtractor, tmp_path: Path) -> None:
        with pytest.raises(ExtractionError):
            extractor.extract_to_dicts(tmp_path / "absent.csv")

    @staticmethod
    def test_extract_batches(extractor: CSVExtractor, sample_csv: Path) -> None:
        batches = list(extractor.extract_batches(sample_csv, batch_size=3))
        assert [len(b) for b in batches] == [3, 3, 2]

    @staticmethod
    def test_extract_records(extractor: CSVExtractor, sample_csv: Path) -> None:
        records = extractor.extract_records(sample_csv)
        assert len(records) == 8
        kinds = {r.show_id: r.kind for r in records}
        assert kinds["s2"] is ContentKind.SERIES
        assert kinds["s1"] is ContentKind.MOVIE

    @staticmethod
    def test_extract_records_with_normalizer(extractor: CSVExtractor, sample_csv: Path) -> None:
        normalizer = NetflixNormalizer()
        extractor.extract_records(sample_csv, normalizer=normalizer)
        assert normalizer.get_stats()["normalized"] == 8

    @staticmethod
    def test_quoted_multi_values(extractor: CSVExtractor, sample_csv: Path) -> None:
        records = {r.show_id: r for r in extractor.extract_records(sample_csv)}
        assert records["s6"].country == ("India", "United States")
        assert records["s6"].date_added is None
