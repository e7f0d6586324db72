# tests/unit/test_analysis_store.py

import json
import pytest
from taqti.models.record import AnalysisRecord, EnrichmentResult
from taqti.models.report import PoemReport
from taqti.storage.analysis_store import AnalysisStore, StorageError


def make_record(text="काक काक", analyzer_used="HindiAnalyzer"):
    return AnalysisRecord(text=text, analyzer_used=analyzer_used, result=PoemReport.empty_input())


class TestAnalysisStore:
    """Unit tests for AnalysisStore"""

    def test_empty_store(self, store):
        assert store.load_all() == []
        assert store.count() == 0

    def test_append(self, store):
        data = store.append(make_record())

        assert data["text"] == "काक काक"
        assert data["analyzerUsed"] == "HindiAnalyzer"
        assert "timestamp" in data
        assert store.count() == 1

    def test_append_writes_json_lines(self, store):
        store.append(make_record("one"))
        store.append(make_record("two"))

        lines = store.path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert json.loads(lines[1])["text"] == "two"

    def test_devanagari_stored_unescaped(self, store):
        store.append(make_record("काक"))

        assert "काक" in store.path.read_text(encoding="utf-8")

    def test_append_creates_parent_directories(self, tmp_path):
        store = AnalysisStore(tmp_path / "nested" / "dir" / "analyses.jsonl")
        store.append(make_record())

        assert store.path.exists()

    def test_append_failure(self, tmp_path):
        store = AnalysisStore(tmp_path)

        with pytest.raises(StorageError):
            store.append(make_record())

    def test_invalid_json(self, store):
        store.path.write_text("{not json}\n", encoding="utf-8")

        with pytest.raises(StorageError):
            store.load_all()

    def test_blank_lines_skipped(self, store):
        store.append(make_record())
        with open(store.path, "a", encoding="utf-8") as f:
            f.write("\n\n")

        assert store.count() == 1

    def test_enrichment_serialized(self, store):
        record = make_record()
        record.enrichment = EnrichmentResult(meter_name="बहर ए मुतदारिक", source="MockEnrichmentProvider")
        data = store.append(record)

        assert data["enrichment"] == {
            "meterName": "बहर ए मुतदारिक",
            "meterDescription": None,
            "source": "MockEnrichmentProvider"
        }


class TestListAnalyses:
    """Test paginated listing"""

    @pytest.fixture
    def filled_store(self, store):
        for i in range(5):
            store.append(make_record(f"poem {i}"))
        return store

    def test_newest_first(self, filled_store):
        listing = filled_store.list_analyses()

        assert listing["status"] == "success"
        assert listing["count"] == 5
        assert listing["total"] == 5
        assert listing["page"] == 1
        assert listing["totalPages"] == 1
        assert [record["text"] for record in listing["data"]] == [f"poem {i}" for i in range(4, -1, -1)]

    def test_pagination(self, filled_store):
        listing = filled_store.list_analyses(limit=2, page=3)

        assert listing["count"] == 1
        assert listing["totalPages"] == 3
        assert listing["data"][0]["text"] == "poem 0"

    def test_page_past_end(self, filled_store):
        listing = filled_store.list_analyses(limit=2, page=4)

        assert listing["count"] == 0
        assert listing["data"] == []

    def test_empty_store_listing(self, store):
        listing = store.list_analyses()

        assert listing["total"] == 0
        assert listing["totalPages"] == 0

    @pytest.mark.parametrize("limit,page", [(0, 1), (10, 0), (-1, 1)])
    def test_invalid_arguments(self, store, limit, page):
        with pytest.raises(ValueError):
            store.list_analyses(limit=limit, page=page)
