# taqti/models/syllable.py

from dataclasses import dataclass, field
from typing import Tuple, List, Dict, Any


@dataclass(frozen=True)
class Syllable:
    """A single prosodic syllable of a line"""

    text: str
    weight: int
    word_index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "text": self.text,
            "weight": self.weight,
            "word_index": self.word_index
        }


@dataclass(frozen=True)
class Section:
    """A named metrical foot: consecutive syllables of a line with their weights"""

    name: str
    syllables: Tuple[str, ...]
    weights: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "name": self.name,
            "syllables": list(self.syllables),
            "weights": list(self.weights)
        }


@dataclass(frozen=True)
class LineAnalysis:
    """
    Prosodic breakdown of one poem line.

    Built once per line by the poem analyzer; the pattern string and matra
    total are derived from the syllables, never stored separately.
    """

    text: str
    line_number: int
    script: str
    valid: bool = True
    syllables: Tuple[Syllable, ...] = field(default_factory=tuple)
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    @property
    def total_syllables(self) -> int:
        return len(self.syllables)

    @property
    def total_matras(self) -> int:
        return sum(syllable.weight for syllable in self.syllables)

    @property
    def pattern(self) -> str:
        return "".join(str(syllable.weight) for syllable in self.syllables)

    @property
    def syllable_texts(self) -> List[str]:
        return [syllable.text for syllable in self.syllables]

    @property
    def weight_strings(self) -> List[str]:
        return [str(syllable.weight) for syllable in self.syllables]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the per-line wire format"""
        return {
            "line": self.text,
            "lineNumber": self.line_number,
            "syllables": self.syllable_texts,
            "weights": self.weight_strings,
            "sections": [section.to_dict() for section in self.sections],
            "totalSyllables": self.total_syllables,
            "totalMatras": self.total_matras,
            "pattern": self.pattern
        }
