# taqti/core/poem_analyzer.py

from typing import Dict, Any, List, Optional

from taqti.core.node import Node
from taqti.analysis.script_detector import Script, ScriptDetector
from taqti.analysis.script_analyzers import ScriptAnalyzer, get_analyzer
from taqti.data.lexicon import Lexicon
from taqti.data.meter_table import MeterTable
from taqti.matching.consistency import ConsistencyAnalyzer
from taqti.matching.matcher import MeterMatcher
from taqti.matching.ranking import RankingPolicy
from taqti.models.report import PoemReport, LineValidity, SUCCESS_MESSAGE
from taqti.models.syllable import LineAnalysis

MIXED_INVALID_ANALYZER = "Mixed_Invalid"
DEFAULT_MAX_ALTERNATIVES = 3


def split_lines(text: str) -> List[str]:
    """Non-blank lines of a poem, trimmed"""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


class PoemAnalyzer(Node):
    """
    Analyzes a whole poem and reports its bahr.

    Lines are checked for script consistency first; a poem with any line
    outside the primary script is rejected with the offending line numbers.
    Otherwise each line is syllabified, weighed and segmented, the line
    patterns are compared for consistency and the representative pattern is
    matched against the meter table.
    """

    def __init__(self,
                 lexicon: Optional[Lexicon] = None,
                 meter_table: Optional[MeterTable] = None,
                 policy: Optional[RankingPolicy] = None,
                 max_alternatives: int = DEFAULT_MAX_ALTERNATIVES,
                 **kwargs):
        super().__init__(**kwargs)
        self.policy = policy or RankingPolicy()
        self.detector = ScriptDetector()
        self.analyzers: Dict[Script, ScriptAnalyzer] = {
            script: get_analyzer(script, lexicon)
            for script in (Script.DEVANAGARI, Script.ROMANIZED)
        }
        self.matcher = MeterMatcher(meter_table, self.policy)
        self.consistency = ConsistencyAnalyzer(self.policy)
        self.max_alternatives = max_alternatives

    def run(self, input_data: Dict[str, Any], context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Analyze the poem in input_data['text'].

        Returns:
            Dictionary with the PoemReport under 'report'
        """
        if not self.validate_input(input_data):
            raise ValueError(f"Missing required inputs: {self.get_required_inputs()}")
        return {'report': self.analyze(input_data['text'])}

    def get_required_inputs(self) -> list:
        return ['text']

    def get_output_keys(self) -> list:
        return ['report']

    def analyze(self, text: str) -> PoemReport:
        """
        Analyze a poem.

        Never raises: unexpected failures are logged and reported as errors.

        Args:
            text: Poem text, one line per verse

        Returns:
            PoemReport in success or error state
        """
        try:
            return self._analyze(text)
        except Exception as e:
            self.logger.error(f"Analysis failed: {e}", exc_info=True)
            return PoemReport.internal_error(str(e))

    def _analyze(self, text: str) -> PoemReport:
        lines = split_lines(text)
        if not lines:
            self.logger.info("Empty input")
            return PoemReport.empty_input()

        poem_script = self.detector.detect_poem(lines)
        if poem_script.has_violations:
            line_validity = [
                LineValidity(
                    text=line,
                    valid=poem_script.is_line_valid(index),
                    line_number=index + 1,
                    script=poem_script.line_scripts[index].value
                )
                for index, line in enumerate(lines)
            ]
            report = PoemReport.script_violation(line_validity, MIXED_INVALID_ANALYZER)
            self.logger.info(f"Script violation in lines {report.error_lines}")
            return report

        analyzer = self.analyzers[poem_script.primary]
        line_analyses = [
            analyzer.analyze_line(line, index + 1)
            for index, line in enumerate(lines)
        ]
        return self._build_report(line_analyses, analyzer.name)

    def _build_report(self, line_analyses: List[LineAnalysis], analyzer_name: str) -> PoemReport:
        consistency = self.consistency.analyze([line.pattern for line in line_analyses])
        candidates = [
            self.policy.discount(candidate, consistency.kind)
            for candidate in self.matcher.match(consistency.representative_pattern)
        ]
        best = candidates[0]

        self.logger.info(f"Matched {best.display_name} ({best.kind.value}, "
                         f"confidence {best.confidence:.2f}, consistency {consistency.kind})")

        return PoemReport(
            status="success",
            message=SUCCESS_MESSAGE,
            analyzer_used=analyzer_name,
            bahr_type=best.display_name,
            meter_description=best.description,
            pattern=[best.pattern],
            match=best,
            alternatives=candidates[1:1 + self.max_alternatives],
            consistency=consistency,
            lines=line_analyses
        )
