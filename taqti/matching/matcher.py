# taqti/matching/matcher.py

import logging
from typing import List, Optional

from taqti.data.meter_table import MeterTable, DEFAULT_METER_TABLE
from taqti.matching.ranking import RankingPolicy
from taqti.models.meter import MatchKind, MatchResult, MeterEntry, matra_count

logger = logging.getLogger(__name__)

# Qualifier for a meter that repeats the line pattern
CONTAINED_REPETITION_LABEL = "आंशिक"


class MeterMatcher:
    """
    Matches a weight pattern against the meter table.

    Tiers are tried in order and the first one that yields candidates wins:
    exact, repeating, partial, matra-based, fuzzy. When every tier is empty
    a generic classification by matra count is returned, so the result is
    never empty.
    """

    def __init__(self, table: Optional[MeterTable] = None, policy: RankingPolicy = None):
        self.table = table if table is not None else DEFAULT_METER_TABLE
        self.policy = policy or RankingPolicy()

    def match(self, pattern: str) -> List[MatchResult]:
        """
        Find candidate meters for a weight pattern.

        Args:
            pattern: String of '1' and '2' digits

        Returns:
            Non-empty list of MatchResult, best candidate first
        """
        if pattern:
            for tier in (self._exact, self._repeating, self._partial, self._matra_based, self._fuzzy):
                results = tier(pattern)
                if results:
                    logger.debug(f"Pattern {pattern} matched {len(results)} meters ({results[0].kind.value})")
                    return results

        logger.debug(f"No meter for pattern {pattern!r}, using generic classification")
        return [self._generic(pattern)]

    def best_match(self, pattern: str) -> MatchResult:
        """Get the highest ranked candidate for a pattern"""
        return self.match(pattern)[0]

    def _result(self, entry: MeterEntry, kind: MatchKind, confidence: float,
                qualifier: Optional[str] = None) -> MatchResult:
        return MatchResult(
            name=entry.name,
            description=entry.description,
            pattern=entry.pattern,
            kind=kind,
            confidence=confidence,
            qualifier=qualifier
        )

    def _exact(self, pattern: str) -> List[MatchResult]:
        return [
            self._result(entry, MatchKind.EXACT, self.policy.EXACT_CONFIDENCE)
            for entry in self.table if entry.pattern == pattern
        ]

    def _repeating(self, pattern: str) -> List[MatchResult]:
        results = []
        for entry in self.table:
            if self.policy.is_repetition(pattern, entry.pattern):
                results.append(self._result(entry, MatchKind.REPEATING, self.policy.REPEATING_CONFIDENCE))
            if self.policy.is_repetition(entry.pattern, pattern):
                results.append(self._result(entry, MatchKind.REPEATING,
                                            self.policy.CONTAINED_REPEATING_CONFIDENCE,
                                            qualifier=CONTAINED_REPETITION_LABEL))
        return results

    def _partial(self, pattern: str) -> List[MatchResult]:
        results = [
            self._result(entry, MatchKind.PARTIAL,
                         len(pattern) / len(entry.pattern) * self.policy.PARTIAL_WEIGHT)
            for entry in self.table if pattern in entry.pattern
        ]
        return self.policy.rank(results)

    def _matra_based(self, pattern: str) -> List[MatchResult]:
        results = []
        for entry in self.table.get_meters_by_matra_count(matra_count(pattern)):
            similarity = self.policy.similarity(pattern, entry.pattern)
            if similarity > self.policy.MATRA_SIMILARITY_THRESHOLD:
                results.append(self._result(entry, MatchKind.MATRA_BASED,
                                            similarity * self.policy.MATRA_WEIGHT))
        return self.policy.rank(results)

    def _fuzzy(self, pattern: str) -> List[MatchResult]:
        results = []
        for entry in self.table:
            similarity = self.policy.similarity(pattern, entry.pattern)
            if similarity >= self.policy.FUZZY_SIMILARITY_THRESHOLD:
                results.append(self._result(entry, MatchKind.FUZZY,
                                            similarity * self.policy.FUZZY_WEIGHT))
        return self.policy.rank(results)[:self.policy.FUZZY_LIMIT]

    def _generic(self, pattern: str) -> MatchResult:
        matras = matra_count(pattern)
        classification, description = self.policy.generic_classification(matras)
        return MatchResult(
            name=f"{classification} ({matras} मात्रा)",
            description=description,
            pattern=pattern,
            kind=MatchKind.GENERIC,
            confidence=self.policy.GENERIC_CONFIDENCE
        )
