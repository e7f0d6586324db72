# tests/conftest.py
import json
import pytest
import sys
from pathlib import Path

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from taqti.core.poem_analyzer import PoemAnalyzer
from taqti.data.meter_table import MeterTable
from taqti.enrichment.meter_enrichment import MockEnrichmentProvider
from taqti.models.meter import MeterEntry
from taqti.storage.analysis_store import AnalysisStore


@pytest.fixture(scope="session")
def project_root_path():
    """Return the project root path"""
    return Path(__file__).parent.parent

@pytest.fixture(scope="session")
def sample_poems():
    """Load sample poems with expected outcomes from fixtures"""
    test_file = Path(__file__).parent / "fixtures" / "sample_poems.json"
    with open(test_file, 'r', encoding='utf-8') as f:
        return json.load(f)

@pytest.fixture
def poem_analyzer():
    """PoemAnalyzer with the default lexicon and meter table"""
    return PoemAnalyzer()

@pytest.fixture
def single_meter_table():
    """Meter table holding only the four-foot mutakarib pattern"""
    return MeterTable([MeterEntry(name="मुतकारिब महज़ूफ़", pattern="21212121", description="फ़इलुन फ़इलुन फ़इलुन फ़इलुन")])

@pytest.fixture
def store(tmp_path):
    """Analysis store in a temporary directory"""
    return AnalysisStore(tmp_path / "analyses.jsonl")

@pytest.fixture
def mock_enrichment_provider():
    """Mock enrichment provider using MockEnrichmentProvider"""
    return MockEnrichmentProvider()

@pytest.fixture
def config_file(tmp_path):
    """Write a configuration file with storage in a temporary directory"""
    def _write(storage_enabled=True, enrichment_enabled=False, provider="mock"):
        path = tmp_path / "config.yaml"
        path.write_text(
            "analysis:\n"
            "  max_alternatives: 2\n"
            "storage:\n"
            f"  enabled: {'true' if storage_enabled else 'false'}\n"
            f"  path: {tmp_path / 'store' / 'analyses.jsonl'}\n"
            "enrichment:\n"
            f"  enabled: {'true' if enrichment_enabled else 'false'}\n"
            f"  provider: {provider}\n"
            "  timeout: 3\n"
            "logging:\n"
            "  level: WARNING\n",
            encoding="utf-8"
        )
        return path
    return _write

@pytest.fixture(autouse=True)
def clear_taqti_env(monkeypatch):
    """Keep TAQTI_* variables from the outer environment out of tests"""
    for name in ("TAQTI_STORE_PATH", "TAQTI_ENRICHMENT_URL", "TAQTI_ENRICHMENT_ENABLED", "TAQTI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
