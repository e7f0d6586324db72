from .ranking import RankingPolicy
from .matcher import MeterMatcher
from .consistency import ConsistencyAnalyzer

__all__ = ['RankingPolicy', 'MeterMatcher', 'ConsistencyAnalyzer']
