"""
Taqti - prosodic scansion of Hindi and Hinglish poetry.

Splits lines into syllables, weighs them, groups them into metrical feet and
matches the resulting pattern against classical bahr patterns.
"""

from typing import Optional

from taqti.core.poem_analyzer import PoemAnalyzer
from taqti.core.service import AnalysisService
from taqti.models.report import PoemReport

__version__ = "1.0.0"

_default_analyzer: Optional[PoemAnalyzer] = None


def analyze(text: str) -> PoemReport:
    """Analyze a poem with a shared default PoemAnalyzer"""
    global _default_analyzer

    if _default_analyzer is None:
        _default_analyzer = PoemAnalyzer()

    return _default_analyzer.analyze(text)


__all__ = ['analyze', 'PoemAnalyzer', 'AnalysisService', 'PoemReport', '__version__']
