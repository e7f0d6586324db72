# taqti/models/__init__.py

from .syllable import Syllable, Section, LineAnalysis
from .meter import MeterEntry, MatchKind, MatchResult, matra_count
from .report import PoemReport, LineValidity, ConsistencyResult
from .record import AnalysisRecord, EnrichmentResult

__all__ = [
    'Syllable',
    'Section',
    'LineAnalysis',
    'MeterEntry',
    'MatchKind',
    'MatchResult',
    'matra_count',
    'PoemReport',
    'LineValidity',
    'ConsistencyResult',
    'AnalysisRecord',
    'EnrichmentResult'
]
