# taqti/matching/ranking.py

from typing import Iterable, List

from taqti.models.meter import MatchResult


class RankingPolicy:
    """
    Confidence constants and ordering rules for meter matching.

    Every number that decides how candidates are scored or ordered lives
    here, so the matcher and the poem analyzer share one policy.
    """

    EXACT_CONFIDENCE = 1.0
    REPEATING_CONFIDENCE = 0.9            # line pattern repeats a meter
    CONTAINED_REPEATING_CONFIDENCE = 0.85  # meter repeats the line pattern
    PARTIAL_WEIGHT = 0.8
    MATRA_SIMILARITY_THRESHOLD = 0.6      # strictly greater
    MATRA_WEIGHT = 0.7
    FUZZY_SIMILARITY_THRESHOLD = 0.7      # greater or equal
    FUZZY_WEIGHT = 0.6
    FUZZY_LIMIT = 3
    GENERIC_CONFIDENCE = 0.5

    # (max matras, classification, description); anything longer is the last bucket
    GENERIC_BUCKETS = (
        (8, "लघु छंद", "छोटा छंद पैटर्न"),
        (16, "मध्यम छंद", "मध्यम लंबाई का छंद"),
        (24, "दीर्घ छंद", "लंबा छंद पैटर्न"),
    )
    GENERIC_FALLBACK = ("अति दीर्घ छंद", "बहुत लंबा छंद पैटर्न")

    # Confidence multiplier per consistency kind
    CONSISTENCY_DISCOUNTS = {
        "exact": 1.0,
        "matra": 0.8,
        "mixed": 0.6,
    }

    @staticmethod
    def similarity(first: str, second: str) -> float:
        """
        Positional similarity of two weight patterns in [0, 1].

        Counts equal digits over the shorter length, divides by the longer
        length and scales down by the relative length difference.
        """
        max_len = max(len(first), len(second))
        if max_len == 0:
            return 0.0
        min_len = min(len(first), len(second))
        matches = sum(1 for i in range(min_len) if first[i] == second[i])
        length_penalty = (max_len - min_len) / max_len
        return (matches / max_len) * (1 - length_penalty)

    @staticmethod
    def is_repetition(longer: str, unit: str) -> bool:
        """True if `longer` is `unit` repeated two or more times"""
        if not unit or len(longer) <= len(unit):
            return False
        if len(longer) % len(unit) != 0:
            return False
        return longer == unit * (len(longer) // len(unit))

    @classmethod
    def generic_classification(cls, matras: int):
        """Classification label and description for a matra total"""
        for max_matras, classification, description in cls.GENERIC_BUCKETS:
            if matras <= max_matras:
                return classification, description
        return cls.GENERIC_FALLBACK

    @staticmethod
    def rank(results: Iterable[MatchResult]) -> List[MatchResult]:
        """Sort by confidence, highest first; equal scores keep table order"""
        return sorted(results, key=lambda result: -result.confidence)

    @classmethod
    def discount(cls, result: MatchResult, consistency_kind: str) -> MatchResult:
        """Scale a match confidence by how consistently the poem follows one pattern"""
        factor = cls.CONSISTENCY_DISCOUNTS.get(consistency_kind, cls.CONSISTENCY_DISCOUNTS["mixed"])
        return result.with_confidence(result.confidence * factor)
