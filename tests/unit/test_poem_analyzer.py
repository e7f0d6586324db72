# tests/unit/test_poem_analyzer.py

import pytest
import taqti
from taqti.core.poem_analyzer import PoemAnalyzer, MIXED_INVALID_ANALYZER, split_lines
from taqti.models.meter import MatchKind
from taqti.models.report import (
    PoemReport,
    SUCCESS_MESSAGE,
    SCRIPT_ERROR_MESSAGE,
    EMPTY_INPUT_MESSAGE,
    INTERNAL_ERROR_MESSAGE
)


class TestSplitLines:
    """Test poem line splitting"""

    def test_blank_lines_dropped(self):
        assert split_lines("काक\n\n   \n  काक  ") == ["काक", "काक"]

    def test_windows_line_endings(self):
        assert split_lines("a\r\nb") == ["a", "b"]

    def test_empty(self):
        assert split_lines("") == []
        assert split_lines(None) == []


class TestPoemAnalyzer:
    """Unit tests for PoemAnalyzer"""

    @pytest.mark.parametrize("name", ["devanagari_exact", "devanagari_matra", "devanagari_mixed"])
    def test_devanagari_poems(self, poem_analyzer, sample_poems, name):
        expected = sample_poems[name]
        report = poem_analyzer.analyze(expected["text"])

        assert report.is_success
        assert report.message == SUCCESS_MESSAGE
        assert report.analyzer_used == expected["analyzer"]
        assert report.pattern == [expected["pattern"]]
        assert report.match.kind.value == expected["match_kind"]
        assert report.confidence == pytest.approx(expected["confidence"])

    def test_exact_poem(self, poem_analyzer):
        report = poem_analyzer.analyze("काक काक काक काक\nकाक काक काक काक")

        assert report.bahr_type.startswith("मुतकारिब")
        assert report.meter_description
        assert report.alternatives == []
        assert report.consistency.kind == "exact"
        assert len(report.lines) == 2
        assert [len(section.syllables) for section in report.lines[0].sections] == [3, 3, 2]

    def test_matra_consistent_poem(self, poem_analyzer):
        report = poem_analyzer.analyze("काक काक\nकका कका")

        assert report.consistency.kind == "matra"
        assert report.bahr_type == "मिश्रित छोटा"
        assert [line.pattern for line in report.lines] == ["2121", "1212"]

    def test_hinglish_poem(self, poem_analyzer, sample_poems):
        expected = sample_poems["hinglish_known_line"]
        report = poem_analyzer.analyze(expected["text"])

        assert report.is_success
        assert report.analyzer_used == expected["analyzer"]
        assert report.lines[0].pattern == expected["line_pattern"]
        assert report.lines[0].script == "romanized"
        assert report.match is not None

    @pytest.mark.parametrize("name", ["digits", "mixed_scripts", "romanized_majority"])
    def test_script_violations(self, poem_analyzer, sample_poems, name):
        expected = sample_poems[name]
        report = poem_analyzer.analyze(expected["text"])

        assert not report.is_success
        assert report.message == SCRIPT_ERROR_MESSAGE
        assert report.analyzer_used == MIXED_INVALID_ANALYZER
        assert report.error_lines == expected["error_lines"]
        assert report.match is None
        assert report.lines == []

    def test_script_violation_line_validity(self, poem_analyzer):
        report = poem_analyzer.analyze("दिल की बात\nmera dil")

        data = report.to_dict()
        assert data["lines"] == [
            {"text": "दिल की बात", "valid": True, "lineNumber": 1},
            {"text": "mera dil", "valid": False, "lineNumber": 2}
        ]
        assert data["errorLines"] == [2]
        assert data["errorMessage"] == SCRIPT_ERROR_MESSAGE
        assert data["analyzerUsed"] == MIXED_INVALID_ANALYZER

    @pytest.mark.parametrize("text", ["", "   ", "\n\n  \n"])
    def test_empty_input(self, poem_analyzer, text):
        report = poem_analyzer.analyze(text)

        assert report.status == "error"
        assert report.message == EMPTY_INPUT_MESSAGE
        assert report.error_lines == []

    def test_alternatives(self, poem_analyzer):
        """Test that the remaining candidates become alternatives"""
        report = poem_analyzer.analyze("काकका काकका")

        assert report.match.kind == MatchKind.REPEATING
        assert report.bahr_type.startswith("रमल")
        assert len(report.alternatives) == 2
        assert report.alternatives[-1].confidence == pytest.approx(0.85)

    def test_max_alternatives(self):
        analyzer = PoemAnalyzer(max_alternatives=1)
        report = analyzer.analyze("काकका काकका")

        assert len(report.alternatives) == 1

    def test_alternatives_discounted(self, poem_analyzer):
        report = poem_analyzer.analyze("काकका\nकाकका\nकाकका काकका")

        assert report.consistency.kind == "mixed"
        assert report.consistency.representative_pattern == "212"
        assert report.match.kind == MatchKind.EXACT
        assert report.confidence == pytest.approx(0.6)
        assert report.pattern == ["212"]
        assert [alternative.confidence for alternative in report.alternatives] == [pytest.approx(0.6)]

    def test_custom_meter_table(self, single_meter_table):
        analyzer = PoemAnalyzer(meter_table=single_meter_table)
        report = analyzer.analyze("काक काक काक काक")

        assert report.bahr_type == single_meter_table.get_all_meters()[0].name
        assert report.confidence == 1.0

    def test_internal_error(self, poem_analyzer, monkeypatch):
        """Test that unexpected failures become an error report"""
        def fail(pattern):
            raise RuntimeError("broken table")

        monkeypatch.setattr(poem_analyzer.matcher, "match", fail)
        report = poem_analyzer.analyze("काक काक")

        assert report.status == "error"
        assert report.message == INTERNAL_ERROR_MESSAGE
        assert report.error_message == "broken table"

    def test_success_to_dict(self, poem_analyzer):
        data = poem_analyzer.analyze("काक काक").to_dict()

        assert data["status"] == "success"
        assert data["bahrType"] == "मिश्रित छोटा"
        assert data["pattern"] == ["2121"]
        assert data["matchKind"] == "exact"
        assert data["confidence"] == 1.0
        assert data["analyzerUsed"] == "HindiAnalyzer"
        assert data["lines"][0]["syllables"] == ["का", "क", "का", "क"]
        assert data["consistency"]["kind"] == "exact"

    def test_run(self, poem_analyzer):
        output = poem_analyzer.run({'text': "काक काक"})

        assert isinstance(output['report'], PoemReport)
        assert output['report'].is_success

    def test_run_missing_text(self, poem_analyzer):
        with pytest.raises(ValueError):
            poem_analyzer.run({})

    def test_node_interface(self, poem_analyzer):
        assert poem_analyzer.get_required_inputs() == ['text']
        assert poem_analyzer.get_output_keys() == ['report']
        assert str(poem_analyzer).startswith("PoemAnalyzer")

    @pytest.mark.parametrize("name", ["devanagari_exact", "devanagari_mixed", "hinglish_known_line", "mixed_scripts", "digits"])
    def test_analysis_is_deterministic(self, poem_analyzer, sample_poems, name):
        text = sample_poems[name]["text"]

        first = poem_analyzer.analyze(text).to_dict()

        assert poem_analyzer.analyze(text).to_dict() == first
        assert PoemAnalyzer().analyze(text).to_dict() == first

    def test_zero_width_joiner_keeps_pattern(self, poem_analyzer):
        plain = poem_analyzer.analyze("\u0915\u094d\u0937\u092e\u093e")
        joined = poem_analyzer.analyze("\u0915\u094d\u200d\u0937\u092e\u093e")

        assert joined.pattern == plain.pattern
        assert joined.match.name == plain.match.name


class TestPackageAnalyze:
    """Test the package-level convenience function"""

    def test_analyze(self):
        report = taqti.analyze("काक काक")

        assert report.is_success
        assert report.bahr_type == "मिश्रित छोटा"

    def test_version(self):
        assert taqti.__version__ == "1.0.0"
