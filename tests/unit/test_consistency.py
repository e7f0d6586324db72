# tests/unit/test_consistency.py

import pytest
from taqti.matching.consistency import ConsistencyAnalyzer


class TestConsistencyAnalyzer:
    """Unit tests for ConsistencyAnalyzer"""

    @pytest.fixture
    def analyzer(self):
        return ConsistencyAnalyzer()

    def test_exact(self, analyzer):
        result = analyzer.analyze(["2121", "2121"])

        assert result.kind == "exact"
        assert result.is_consistent
        assert result.representative_pattern == "2121"
        assert result.variations == []
        assert result.discount == 1.0

    def test_single_line(self, analyzer):
        result = analyzer.analyze(["212"])

        assert result.kind == "exact"
        assert result.common_matra_count == 5

    def test_matra(self, analyzer):
        """Test lines with different patterns but equal matra totals"""
        result = analyzer.analyze(["2121", "1212"])

        assert result.kind == "matra"
        assert not result.is_consistent
        assert result.is_matra_consistent
        assert result.representative_pattern == "2121"
        assert result.common_matra_count == 6
        assert result.variations == ["1212"]
        assert result.discount == 0.8

    def test_matra_most_frequent_pattern(self, analyzer):
        result = analyzer.analyze(["2121", "1212", "1212"])

        assert result.kind == "matra"
        assert result.representative_pattern == "1212"
        assert result.pattern_frequency == {"2121": 1, "1212": 2}

    def test_mixed_tie_goes_to_first_seen(self, analyzer):
        result = analyzer.analyze(["2121", "212121"])

        assert result.kind == "mixed"
        assert not result.is_matra_consistent
        assert result.representative_pattern == "2121"
        assert result.discount == 0.6

    def test_mixed_most_frequent(self, analyzer):
        result = analyzer.analyze(["21", "212121", "212121"])

        assert result.kind == "mixed"
        assert result.representative_pattern == "212121"
        assert result.common_matra_count == 9
        assert result.variations == ["21"]

    def test_empty(self, analyzer):
        result = analyzer.analyze([])

        assert result.kind == "exact"
        assert result.representative_pattern == ""
        assert result.common_matra_count == 0

    def test_to_dict(self, analyzer):
        data = analyzer.analyze(["2121", "1212"]).to_dict()

        assert data == {
            "kind": "matra",
            "isConsistent": False,
            "isMatraConsistent": True,
            "representativePattern": "2121",
            "commonMatraCount": 6,
            "patternFrequency": {"2121": 1, "1212": 1},
            "variations": ["1212"]
        }
