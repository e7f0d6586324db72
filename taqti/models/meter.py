# taqti/models/meter.py

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Any, Optional


class MatchKind(Enum):
    """Tier of the matching cascade that produced a candidate"""
    EXACT = "exact"
    REPEATING = "repeating"
    PARTIAL = "partial"
    MATRA_BASED = "matra_based"
    FUZZY = "fuzzy"
    GENERIC = "generic"


# Qualifier appended to a meter name when the match is not exact
MATCH_KIND_LABELS = {
    MatchKind.EXACT: "",
    MatchKind.REPEATING: "पुनरावृत्ति",
    MatchKind.PARTIAL: "आंशिक मिलान",
    MatchKind.MATRA_BASED: "मात्रा आधारित",
    MatchKind.FUZZY: "समान पैटर्न",
    MatchKind.GENERIC: "",
}


def matra_count(pattern: str) -> int:
    """Sum of the digits of a weight pattern"""
    return sum(int(digit) for digit in pattern)


@dataclass(frozen=True)
class MeterEntry:
    """A canonical bahr pattern from the meter table"""

    name: str
    pattern: str
    description: str
    family: str = ""

    @property
    def matra_count(self) -> int:
        return matra_count(self.pattern)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "pattern": self.pattern,
            "description": self.description,
            "family": self.family,
            "matra_count": self.matra_count
        }


@dataclass(frozen=True)
class MatchResult:
    """A candidate meter for a weight pattern"""

    name: str
    description: str
    pattern: str
    kind: MatchKind
    confidence: float
    qualifier: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Meter name with the match-kind qualifier, e.g. 'रमल (आंशिक मिलान)'"""
        label = self.qualifier if self.qualifier is not None else MATCH_KIND_LABELS.get(self.kind, "")
        return f"{self.name} ({label})" if label else self.name

    def with_confidence(self, confidence: float) -> "MatchResult":
        return replace(self, confidence=confidence)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.display_name,
            "description": self.description,
            "pattern": self.pattern,
            "matchKind": self.kind.value,
            "confidence": round(self.confidence, 4)
        }
