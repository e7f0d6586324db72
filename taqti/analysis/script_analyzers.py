# taqti/analysis/script_analyzers.py

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple
import logging

from taqti.analysis.script_detector import Script
from taqti.analysis.syllabifier import Syllabifier
from taqti.analysis.weights import WeightClassifier
from taqti.analysis.sections import FootSegmenter, ROMAN_FOOT_NAMES, DEVANAGARI_FOOT_NAMES
from taqti.data.lexicon import Lexicon
from taqti.models.syllable import LineAnalysis, Section, Syllable


class ScriptAnalyzer(ABC):
    """
    Abstract base class for per-script line analyzers.

    Each analyzer owns the syllabification, weighting and foot segmentation
    of lines written in one script.
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.name = self.__class__.__name__
        self.syllabifier = Syllabifier(lexicon)
        self.weights = WeightClassifier()
        self.segmenter = FootSegmenter(self.foot_names())

    @property
    @abstractmethod
    def script(self) -> Script:
        """Script this analyzer handles"""
        pass

    @abstractmethod
    def foot_names(self) -> Dict[int, List[str]]:
        """Foot names per section count"""
        pass

    def applies_to(self, script: Script) -> bool:
        return script == self.script

    def syllabify(self, line: str) -> List[Tuple[str, int]]:
        return self.syllabifier.syllabify_line(line, self.script)

    def weight(self, syllable: str) -> int:
        return self.weights.weight(syllable, self.script)

    def segment(self, syllables: Sequence[Syllable]) -> List[Section]:
        return self.segmenter.segment(syllables)

    def analyze_line(self, line: str, line_number: int) -> LineAnalysis:
        """
        Build the full prosodic breakdown of one line.

        Args:
            line: Trimmed poem line
            line_number: 1-based line number in the poem

        Returns:
            LineAnalysis with weighted syllables and sections
        """
        syllables = tuple(
            Syllable(text=text, weight=self.weight(text), word_index=word_index)
            for text, word_index in self.syllabify(line)
        )
        sections = tuple(self.segment(syllables))

        analysis = LineAnalysis(
            text=line,
            line_number=line_number,
            script=self.script.value,
            valid=True,
            syllables=syllables,
            sections=sections
        )
        self.logger.debug(f"Line {line_number}: {analysis.pattern} ({analysis.total_matras} matras)")
        return analysis


class HindiAnalyzer(ScriptAnalyzer):
    """Analyzer for lines in Devanagari script"""

    @property
    def script(self) -> Script:
        return Script.DEVANAGARI

    def foot_names(self) -> Dict[int, List[str]]:
        return DEVANAGARI_FOOT_NAMES


class HinglishAnalyzer(ScriptAnalyzer):
    """Analyzer for romanized Hindi/Urdu lines"""

    @property
    def script(self) -> Script:
        return Script.ROMANIZED

    def foot_names(self) -> Dict[int, List[str]]:
        return ROMAN_FOOT_NAMES


ANALYZERS = {
    Script.DEVANAGARI: HindiAnalyzer,
    Script.ROMANIZED: HinglishAnalyzer,
}


def get_analyzer(script: Script, lexicon: Optional[Lexicon] = None) -> ScriptAnalyzer:
    """
    Create the analyzer for a script.

    Args:
        script: Devanagari or romanized
        lexicon: Lexicon to use instead of the default one

    Returns:
        ScriptAnalyzer instance

    Raises:
        ValueError: If no analyzer handles the script
    """
    analyzer_class = ANALYZERS.get(script)
    if analyzer_class is None:
        raise ValueError(f"No analyzer for script: {script.value}")
    return analyzer_class(lexicon)
