# taqti/analysis/script_detector.py

import re
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

logger = logging.getLogger(__name__)


class Script(Enum):
    """Writing system of a line of text"""
    DEVANAGARI = "devanagari"
    ROMANIZED = "romanized"
    MIXED = "mixed"
    INVALID = "invalid"
    UNKNOWN = "unknown"


# Devanagari letters and signs; dandas (U+0964, U+0965), digits and the
# abbreviation sign are not letters
DEVANAGARI_LETTER_RE = re.compile(r"[\u0900-\u0963\u0971-\u097F]")
LATIN_LETTER_RE = re.compile(r"[a-zA-ZāīūēōḌḍṭṇṛṣśḥṃṅñḷĀĪŪĒŌṬṆṚṢŚḤṂṄÑḶ]")
DIGIT_RE = re.compile(r"[0-9\u0966-\u096F]")


@dataclass
class PoemScript:
    """Primary script of a poem and the script of each of its lines"""

    primary: Script
    line_scripts: List[Script] = field(default_factory=list)

    def is_line_valid(self, index: int) -> bool:
        return self.line_scripts[index] == self.primary

    @property
    def invalid_line_indices(self) -> List[int]:
        return [i for i in range(len(self.line_scripts)) if not self.is_line_valid(i)]

    @property
    def has_violations(self) -> bool:
        return bool(self.invalid_line_indices)


class ScriptDetector:
    """
    Classifies text as Devanagari, romanized (Hinglish), mixed or invalid.

    A single line must belong to one script: digits make a line invalid and
    Devanagari letters next to Latin letters make it mixed.
    """

    def detect(self, text: str) -> Script:
        """
        Detect the script of a line of text.

        Args:
            text: Line of text

        Returns:
            Script of the text
        """
        if not text:
            return Script.UNKNOWN

        if DIGIT_RE.search(text):
            return Script.INVALID

        has_devanagari = bool(DEVANAGARI_LETTER_RE.search(text))
        has_latin = bool(LATIN_LETTER_RE.search(text))

        if has_devanagari and has_latin:
            return Script.MIXED
        if has_devanagari:
            return Script.DEVANAGARI
        if has_latin:
            return Script.ROMANIZED
        return Script.UNKNOWN

    def detect_poem(self, lines: Sequence[str]) -> PoemScript:
        """
        Detect the primary script of a poem.

        The primary script is Devanagari when at least as many lines are
        Devanagari as romanized. Lines in any other script (including mixed,
        invalid and unknown lines) do not match the primary script.

        Args:
            lines: Non-empty poem lines

        Returns:
            PoemScript with the primary script and per-line scripts
        """
        line_scripts = [self.detect(line) for line in lines]
        devanagari_count = line_scripts.count(Script.DEVANAGARI)
        romanized_count = line_scripts.count(Script.ROMANIZED)

        primary = Script.DEVANAGARI if devanagari_count >= romanized_count else Script.ROMANIZED

        logger.debug(f"Detected primary script {primary.value} "
                     f"({devanagari_count} devanagari, {romanized_count} romanized lines)")
        return PoemScript(primary=primary, line_scripts=line_scripts)
