# taqti/analysis/weights.py

import re
import unicodedata
import logging
from typing import Optional

from taqti.analysis.script_detector import Script
from taqti.analysis.syllabifier import contains_devanagari

logger = logging.getLogger(__name__)

SHORT = 1
LONG = 2

# ा ी ू े ै ो ौ
LONG_VOWEL_SIGNS = frozenset("ाीूेैोौ")
# आ ई ऊ ए ऐ ओ औ
LONG_INDEPENDENT_VOWELS = frozenset("आईऊएऐओऔ")
HALANT = "\u094D"
NASAL_SIGNS = frozenset("\u0901\u0902\u0903")
NUKTA = "\u093C"

KNOWN_HEAVY_DEVANAGARI = frozenset([
    'हैं', 'में', 'तुम', 'हम', 'क्या', 'क्यों', 'कहां', 'जहां', 'वहां', 'यहां'
])

_ROMAN_CONSONANT_CLASS = "bcdfghjklmnpqrstvwxyz"

# Any match makes a romanized syllable long
ROMAN_LONG_PATTERNS = tuple(re.compile(pattern) for pattern in (
    r"[āīūēōḥ]",                                  # marked long vowels
    r"aa|ii|uu|ee|oo",                            # doubled vowels
    r"ai|au|oi|ou|ei|ay|ey",                      # diphthongs
    r"[aeiou][ṃṅñ]",                              # nasalized vowels
    r"[aeiou]n$",
    rf"[aeiou][{_ROMAN_CONSONANT_CLASS}]{{2,}}",  # vowel + cluster
    rf"[aeiou][{_ROMAN_CONSONANT_CLASS}]$",       # closed syllable
    r"[kg]h|[td]h|[pb]h|[jc]h",                   # aspirates
    r"[ḍṭṇṛṣśḥṃṅñḷ]",                             # retroflex and special letters
))

KNOWN_HEAVY_ROMAN = frozenset([
    'hain', 'main', 'kaan', 'jaan', 'yaar', 'haar', 'maar', 'taar', 'saar',
    'gham', 'josh', 'ishq', 'khwaab', 'saab', 'kaab', 'raab', 'taab',
    'dil', 'fil', 'mil', 'til', 'sil', 'kil', 'pil',
    'men', 'ten', 'yen', 'zen', 'hen', 'den', 'sen'
])

TRAILING_CLUSTER_RE = re.compile(rf"[{_ROMAN_CONSONANT_CLASS}]{{2,}}$")


class WeightClassifier:
    """
    Assigns prosodic weight to syllables: 1 (short, laghu) or 2 (long, guru).

    The rules approximate classical scansion from the written form alone;
    word-boundary effects and metrical position are not modeled.
    """

    def weight(self, syllable: str, script: Optional[Script] = None) -> int:
        """
        Get the weight of a syllable.

        A syllable containing Devanagari is weighed by the Devanagari rules,
        any other by the romanized rules, whatever the line's script.

        Args:
            syllable: Syllable text
            script: Script of the line (informational)

        Returns:
            1 or 2
        """
        if not syllable:
            return SHORT
        # NFC splits precomposed nukta letters into consonant + nukta
        syllable = unicodedata.normalize("NFC", syllable)
        if contains_devanagari(syllable):
            return self.devanagari_weight(syllable)
        return self.roman_weight(syllable)

    def devanagari_weight(self, syllable: str) -> int:
        if any(char in LONG_VOWEL_SIGNS for char in syllable):
            return LONG
        if any(char in LONG_INDEPENDENT_VOWELS for char in syllable):
            return LONG
        if HALANT in syllable:
            return LONG
        if any(char in NASAL_SIGNS for char in syllable):
            return LONG
        if NUKTA in syllable:
            return LONG
        if syllable in KNOWN_HEAVY_DEVANAGARI:
            return LONG
        return SHORT

    def roman_weight(self, syllable: str) -> int:
        syllable = syllable.lower()
        for pattern in ROMAN_LONG_PATTERNS:
            if pattern.search(syllable):
                return LONG
        if syllable in KNOWN_HEAVY_ROMAN:
            return LONG
        if TRAILING_CLUSTER_RE.search(syllable):
            return LONG
        return SHORT

    def pattern(self, syllables) -> str:
        """Concatenated weights of a sequence of syllables, e.g. '2121'"""
        return "".join(str(self.weight(syllable)) for syllable in syllables)
