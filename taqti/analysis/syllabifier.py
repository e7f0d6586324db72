# taqti/analysis/syllabifier.py

import logging
from typing import List, Optional, Sequence, Tuple

from taqti.analysis.script_detector import Script
from taqti.data.lexicon import Lexicon, DEFAULT_LEXICON, normalize_text

logger = logging.getLogger(__name__)

# Devanagari code point classes
HALANT = 0x094D
CONSONANT_RANGES = ((0x0915, 0x0939), (0x0958, 0x095F))
INDEPENDENT_VOWEL_RANGES = ((0x0905, 0x0914), (0x0960, 0x0961))
# Dependent vowel signs; the halant (U+094D) sits inside U+093E-U+094F and is excluded
MATRA_RANGES = ((0x093E, 0x094C), (0x094E, 0x094F), (0x0962, 0x0963))
# Chandrabindu, anusvara, visarga, nukta and the accent marks
MODIFIER_RANGES = ((0x0901, 0x0903), (0x093C, 0x093C), (0x0951, 0x0954))
DEVANAGARI_RANGE = (0x0900, 0x097F)

# Roman letter classes; ḥ is listed in both and is read as a consonant
# when it starts a syllable
ROMAN_VOWELS = frozenset("aeiouāīūēōḥ")
ROMAN_CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyzḍṭṇṛṣśḥṃṅñḷ")
MAX_TRAILING_CONSONANTS = 2


def _in_ranges(char: str, ranges) -> bool:
    code = ord(char)
    return any(low <= code <= high for low, high in ranges)


def is_devanagari(char: str) -> bool:
    return DEVANAGARI_RANGE[0] <= ord(char) <= DEVANAGARI_RANGE[1]


def contains_devanagari(text: str) -> bool:
    return any(is_devanagari(char) for char in text)


def _is_consonant(char: str) -> bool:
    return _in_ranges(char, CONSONANT_RANGES)


def _is_dependent(char: str) -> bool:
    return _in_ranges(char, MATRA_RANGES) or _in_ranges(char, MODIFIER_RANGES)


def syllabify_devanagari(word: str) -> List[str]:
    """
    Split a Devanagari word into syllables.

    A consonant starts a syllable and absorbs its vowel signs and modifiers,
    then every halant+consonant conjunct that follows (with that consonant's
    own signs). An independent vowel starts a syllable and absorbs trailing
    modifiers. A halant that is not followed by a consonant closes the
    syllable. Non-Devanagari characters are skipped.

    Args:
        word: Word in Devanagari script

    Returns:
        List of syllables; the word itself when nothing could be
        extracted, empty for an empty word
    """
    if not word:
        return []

    syllables = []
    i = 0
    n = len(word)

    while i < n:
        char = word[i]
        if not is_devanagari(char):
            i += 1
            continue

        syllable = char
        i += 1

        if _is_consonant(char):
            while i < n and _is_dependent(word[i]):
                syllable += word[i]
                i += 1

            closed = False
            while i < n and ord(word[i]) == HALANT:
                if i + 1 < n and _is_consonant(word[i + 1]):
                    syllable += word[i] + word[i + 1]
                    i += 2
                    while i < n and _is_dependent(word[i]):
                        syllable += word[i]
                        i += 1
                else:
                    syllable += word[i]
                    i += 1
                    closed = True
                    break

            if not closed:
                while i < n and _in_ranges(word[i], MODIFIER_RANGES):
                    syllable += word[i]
                    i += 1

        elif _in_ranges(char, INDEPENDENT_VOWEL_RANGES):
            while i < n and _in_ranges(word[i], MODIFIER_RANGES):
                syllable += word[i]
                i += 1

        syllables.append(syllable)

    return syllables if syllables else [word]


def _next_vowel_offset(word: str, start: int) -> int:
    """Offset of the first vowel in word[start:], or -1"""
    for offset, char in enumerate(word[start:]):
        if char in ROMAN_VOWELS:
            return offset
    return -1


def syllabify_roman(word: str) -> List[str]:
    """
    Split a romanized (Hinglish) word into syllables.

    Each syllable is a leading consonant cluster, a vowel nucleus (adjacent
    vowels stay together) and at most two trailing consonants. A trailing
    consonant is taken when no vowel follows, or when the next vowel is more
    than one position past it; otherwise it starts the next syllable.
    Consonants left without a vowel form a syllable of their own. Characters
    that are neither vowels nor consonants become one-character fragments.

    Args:
        word: Lowercased romanized word

    Returns:
        List of syllables; the word itself when nothing could be
        extracted, empty for an empty word
    """
    if not word:
        return []
    if contains_devanagari(word):
        return syllabify_devanagari(word)

    syllables = []
    i = 0
    n = len(word)

    while i < n:
        start = i
        syllable = ""

        while i < n and word[i] in ROMAN_CONSONANTS:
            syllable += word[i]
            i += 1

        if i < n and word[i] in ROMAN_VOWELS:
            while i < n and word[i] in ROMAN_VOWELS:
                syllable += word[i]
                i += 1

            taken = 0
            while i < n and word[i] in ROMAN_CONSONANTS and taken < MAX_TRAILING_CONSONANTS:
                next_vowel = _next_vowel_offset(word, i + 1)
                if next_vowel == -1:
                    syllable += word[i]
                    i += 1
                    taken += 1
                elif next_vowel > 1:
                    syllable += word[i]
                    i += 1
                    break
                else:
                    break

        if i == start:
            # Neither vowel nor consonant
            syllable = word[i]
            i += 1

        if syllable.strip():
            syllables.append(syllable)

    return syllables if syllables else [word]


def syllabify_word(word: str, script: Optional[Script] = None) -> List[str]:
    """
    Split one word into syllables with the algorithm for its script.

    Words containing Devanagari characters always use the Devanagari rules.

    Args:
        word: Word to split
        script: Script of the surrounding line, if known

    Returns:
        Non-empty list of syllables for a non-empty word
    """
    if not word:
        return []
    if script == Script.DEVANAGARI or contains_devanagari(word):
        return syllabify_devanagari(word)
    return syllabify_roman(word)


def _attribute_to_words(syllables: Sequence[str], words: Sequence[str]) -> List[Tuple[str, int]]:
    """
    Pair each syllable of a known line with the word it starts in.

    Positions are counted over the line with spaces removed; a syllable
    starting past the last word belongs to the last word.
    """
    word_ends = []
    offset = 0
    for word in words:
        offset += len(word)
        word_ends.append(offset)

    result = []
    position = 0
    word_index = 0
    for syllable in syllables:
        while word_index < len(word_ends) - 1 and position >= word_ends[word_index]:
            word_index += 1
        result.append((syllable, word_index))
        position += len(syllable)
    return result


class Syllabifier:
    """
    Splits poem lines into syllables.

    The lexicon is consulted first for the whole line, then for each word;
    words not in the lexicon are split algorithmically.
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon if lexicon is not None else DEFAULT_LEXICON

    def syllabify_line(self, line: str, script: Optional[Script] = None) -> List[Tuple[str, int]]:
        """
        Split a line into syllables.

        Args:
            line: Raw poem line
            script: Script of the line, if known

        Returns:
            List of (syllable text, index of the originating word) pairs
        """
        text = normalize_text(line)
        if not text:
            return []

        known_line = self.lexicon.lookup_line(text)
        if known_line is not None:
            logger.debug(f"Line found in lexicon: {text}")
            return _attribute_to_words(known_line, text.split())

        result = []
        for word_index, word in enumerate(text.split()):
            syllables = self.lexicon.lookup_word(word)
            if syllables is None:
                syllables = syllabify_word(word, script)
            result.extend((syllable, word_index) for syllable in syllables)
        return result

    def syllabify_words(self, line: str, script: Optional[Script] = None) -> List[str]:
        """Split a line into syllable strings only"""
        return [syllable for syllable, _ in self.syllabify_line(line, script)]
