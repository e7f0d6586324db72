# taqti/matching/consistency.py

import logging
from collections import Counter
from typing import Sequence

from taqti.matching.ranking import RankingPolicy
from taqti.models.meter import matra_count
from taqti.models.report import ConsistencyResult

logger = logging.getLogger(__name__)


class ConsistencyAnalyzer:
    """
    Decides how uniformly the lines of a poem follow one weight pattern and
    which pattern represents the poem.

    - exact: every line has the same pattern
    - matra: patterns differ but every line has the same matra total; the
      representative is the most frequent pattern among lines with the most
      common matra total
    - mixed: anything else; the representative is the most frequent pattern
      overall, ties going to the pattern seen first
    """

    def __init__(self, policy: RankingPolicy = None):
        self.policy = policy or RankingPolicy()

    def analyze(self, patterns: Sequence[str]) -> ConsistencyResult:
        """
        Analyze the weight patterns of a poem's lines.

        Args:
            patterns: One weight pattern per line, in line order

        Returns:
            ConsistencyResult with the representative pattern and discount
        """
        pattern_frequency = Counter(patterns)
        matra_frequency = Counter(matra_count(pattern) for pattern in patterns)

        common_matra_count = matra_frequency.most_common(1)[0][0] if matra_frequency else 0

        if len(pattern_frequency) <= 1:
            kind = "exact"
            representative = patterns[0] if patterns else ""
        elif len(matra_frequency) == 1:
            kind = "matra"
            representative = self._most_frequent_with_matras(patterns, common_matra_count)
        else:
            kind = "mixed"
            representative = pattern_frequency.most_common(1)[0][0]

        result = ConsistencyResult(
            kind=kind,
            representative_pattern=representative,
            common_matra_count=common_matra_count,
            pattern_frequency=dict(pattern_frequency),
            variations=[pattern for pattern in pattern_frequency if pattern != representative],
            discount=self.policy.CONSISTENCY_DISCOUNTS[kind]
        )
        logger.debug(f"Consistency {kind}: representative {representative}, "
                     f"{len(result.variations)} variations")
        return result

    @staticmethod
    def _most_frequent_with_matras(patterns: Sequence[str], matras: int) -> str:
        candidates = Counter(pattern for pattern in patterns if matra_count(pattern) == matras)
        return candidates.most_common(1)[0][0]
