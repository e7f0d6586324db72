# taqti/models/report.py

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from taqti.models.syllable import LineAnalysis
from taqti.models.meter import MatchResult

SUCCESS_MESSAGE = "आप की रचना निम्नलिखित बहर में है:"
SCRIPT_ERROR_MESSAGE = "The system could not match the Bahr in the highlighted lines"
EMPTY_INPUT_MESSAGE = "Please enter some poetry to analyze"
INTERNAL_ERROR_MESSAGE = "Internal error while analyzing the poem"


@dataclass
class LineValidity:
    """Script validity of a single input line"""

    text: str
    valid: bool
    line_number: int
    script: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "valid": self.valid,
            "lineNumber": self.line_number
        }


@dataclass
class ConsistencyResult:
    """How uniformly the lines of a poem follow one pattern"""

    kind: str  # exact, matra, mixed
    representative_pattern: str
    common_matra_count: int
    pattern_frequency: Dict[str, int] = field(default_factory=dict)
    variations: List[str] = field(default_factory=list)
    discount: float = 1.0

    @property
    def is_consistent(self) -> bool:
        return self.kind == "exact"

    @property
    def is_matra_consistent(self) -> bool:
        return self.kind in ("exact", "matra")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "isConsistent": self.is_consistent,
            "isMatraConsistent": self.is_matra_consistent,
            "representativePattern": self.representative_pattern,
            "commonMatraCount": self.common_matra_count,
            "patternFrequency": dict(self.pattern_frequency),
            "variations": list(self.variations)
        }


@dataclass
class PoemReport:
    """
    Result of analyzing a whole poem.

    A report is either a success (meter found, full per-line breakdown) or an
    error (empty input, or lines with characters invalid for the poem's script).
    """

    status: str
    message: str
    analyzer_used: str = ""

    # Success fields
    bahr_type: Optional[str] = None
    meter_description: Optional[str] = None
    pattern: List[str] = field(default_factory=list)
    match: Optional[MatchResult] = None
    alternatives: List[MatchResult] = field(default_factory=list)
    consistency: Optional[ConsistencyResult] = None
    lines: List[LineAnalysis] = field(default_factory=list)

    # Error fields
    line_validity: List[LineValidity] = field(default_factory=list)
    error_lines: List[int] = field(default_factory=list)
    error_message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def confidence(self) -> float:
        return self.match.confidence if self.match else 0.0

    @classmethod
    def empty_input(cls) -> "PoemReport":
        return cls(status="error", message=EMPTY_INPUT_MESSAGE)

    @classmethod
    def internal_error(cls, detail: str = "") -> "PoemReport":
        return cls(status="error", message=INTERNAL_ERROR_MESSAGE, error_message=detail or None)

    @classmethod
    def script_violation(cls, line_validity: List[LineValidity], analyzer_used: str) -> "PoemReport":
        return cls(
            status="error",
            message=SCRIPT_ERROR_MESSAGE,
            analyzer_used=analyzer_used,
            line_validity=line_validity,
            error_lines=[line.line_number for line in line_validity if not line.valid],
            error_message=SCRIPT_ERROR_MESSAGE
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire format returned to callers"""
        if not self.is_success:
            return {
                "status": self.status,
                "message": self.message,
                "lines": [line.to_dict() for line in self.line_validity],
                "errorLines": list(self.error_lines),
                "errorMessage": self.error_message,
                "analyzerUsed": self.analyzer_used
            }

        return {
            "status": self.status,
            "message": self.message,
            "bahrType": self.bahr_type,
            "meterDescription": self.meter_description,
            "pattern": list(self.pattern),
            "matchKind": self.match.kind.value if self.match else None,
            "confidence": round(self.confidence, 4),
            "consistency": self.consistency.to_dict() if self.consistency else None,
            "alternatives": [alternative.to_dict() for alternative in self.alternatives],
            "lines": [line.to_dict() for line in self.lines],
            "analyzerUsed": self.analyzer_used
        }
