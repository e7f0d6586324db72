# taqti/data/lexicon.py

import re
import logging
import unicodedata
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DANDAS = "।॥"
# Keep word characters, the Devanagari block, combining diacritics and whitespace
_PUNCTUATION_RE = re.compile(r"[^\w\u0900-\u097F\u0300-\u036F\s]+", re.UNICODE)
# Zero-width joiner and non-joiner are rendering hints inside a word
_JOINER_RE = re.compile(r"[\u200c\u200d]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Normalize text for lexicon lookup and syllabification.

    Applies NFC (so precomposed and decomposed nukta letters compare equal),
    drops zero-width joiners, lowercases Latin letters, removes dandas and
    punctuation and collapses whitespace.
    """
    if not text:
        return ""
    text = _JOINER_RE.sub("", unicodedata.normalize("NFC", text)).lower()
    for danda in DANDAS:
        text = text.replace(danda, " ")
    text = _PUNCTUATION_RE.sub(" ", text).replace("_", " ")
    return _WHITESPACE_RE.sub(" ", text).strip()


# Whole lines with known syllable breaks
LINE_ENTRIES: Dict[str, Sequence[str]] = {
    # Devanagari
    'हर एक बात पे कहते हो तुम कि तू क्या है': ['हर', 'ए', 'क', 'बा', 'त', 'पे', 'कह', 'ते', 'हो', 'तुम', 'कि', 'तू', 'क्या', 'है'],
    'तुम्हीं कहो कि ये अंदाज़ ए गुफ़्तगू क्या है': ['तुम', 'हीं', 'क', 'हो', 'कि', 'ये', 'अं', 'दा', 'ज़', 'ए', 'गु', 'फ़्त', 'गू', 'क्या', 'है'],

    # Hinglish
    'mere kamre men ik aisi khiḌki hai': ['me', 're', 'kam', 're', 'men', 'ik', 'ai', 'si', 'khi', 'Ḍki', 'hai'],
    'jo in ankhon ke khulne par khulti hai': ['jo', 'in', 'an', 'khon', 'ke', 'khul', 'ne', 'par', 'khul', 'ti', 'hai'],
    'aise tevar dushman hi hote hain': ['ai', 'se', 'te', 'var', 'dush', 'man', 'hi', 'ho', 'te', 'hain'],
    'pata karo ye laḌki kis ki beTi hai': ['pa', 'ta', 'ka', 'ro', 'ye', 'laḌ', 'ki', 'kis', 'ki', 'be', 'Ti', 'hai'],
}

# Single words with known syllable breaks
WORD_ENTRIES: Dict[str, Sequence[str]] = {
    # Devanagari vocabulary
    'मोहब्बत': ['मो', 'हब्', 'बत'],
    'इश्क़': ['इश्क़'],
    'दिलबर': ['दिल', 'बर'],
    'गुलशन': ['गुल', 'शन'],
    'बुलबुल': ['बुल', 'बुल'],
    'तकदीर': ['तक', 'दीर'],
    'नसीब': ['न', 'सीब'],
    'परवाना': ['पर', 'वा', 'ना'],
    'शमामा': ['श', 'मा', 'मा'],
    'दीवाना': ['दी', 'वा', 'ना'],
    'हरदम': ['हर', 'दम'],
    'जमाना': ['ज', 'मा', 'ना'],
    'अफ़साना': ['अफ़', 'सा', 'ना'],
    'कहानी': ['क', 'हा', 'नी'],
    'गुफ़्तगू': ['गुफ़्त', 'गू'],
    'बातचीत': ['बात', 'ची', 'त'],
    'हकीकत': ['ह', 'की', 'कत'],
    'हसरत': ['हस', 'रत'],
    'आरज़ू': ['आर', 'ज़ू'],
    'तमन्ना': ['त', 'मन्', 'ना'],
    'ख्वाहिश': ['ख्वा', 'हिश'],
    'फ़रियाद': ['फ़', 'रि', 'याद'],
    'और': ['और'],
    'या': ['या'],
    'न': ['न'],
    'ना': ['ना'],
    'नहीं': ['न', 'हीं'],

    # Hinglish vocabulary
    'mere': ['me', 're'],
    'kamre': ['kam', 're'],
    'men': ['men'],
    'ik': ['ik'],
    'aisi': ['ai', 'si'],
    'khiḌki': ['khi', 'Ḍki'],
    'hai': ['hai'],
    'hain': ['hain'],
    'main': ['main'],
    'jo': ['jo'],
    'in': ['in'],
    'ankhon': ['an', 'khon'],
    'ke': ['ke'],
    'ki': ['ki'],
    'ka': ['ka'],
    'se': ['se'],
    'ko': ['ko'],
    'khulne': ['khul', 'ne'],
    'par': ['par'],
    'khulti': ['khul', 'ti'],
    'aise': ['ai', 'se'],
    'tevar': ['te', 'var'],
    'dushman': ['dush', 'man'],
    'hi': ['hi'],
    'hote': ['ho', 'te'],
    'pata': ['pa', 'ta'],
    'karo': ['ka', 'ro'],
    'ye': ['ye'],
    'laḌki': ['laḌ', 'ki'],
    'kis': ['kis'],
    'beTi': ['be', 'Ti'],
    'mohabbat': ['mo', 'hab', 'bat'],
    'ishq': ['ishq'],
    'dil': ['dil'],
    'pyar': ['py', 'ar'],
    'zindagi': ['zin', 'da', 'gi'],
    'duniya': ['du', 'ni', 'ya'],
    'khushi': ['khu', 'shi'],
    'gham': ['gham'],
    'aansu': ['aan', 'su'],
    'muskaan': ['mus', 'kaan'],
    'sapna': ['sap', 'na'],
    'haqeeqat': ['ha', 'qee', 'qat'],
    'umang': ['u', 'mang'],
    'josh': ['josh'],
    'junoon': ['ju', 'noon'],
    'deewana': ['dee', 'wa', 'na'],
    'parwana': ['par', 'wa', 'na'],
    'kahani': ['ka', 'ha', 'ni'],
    'salam': ['sa', 'lam'],
    'adab': ['a', 'dab'],
    'khayal': ['kha', 'yal'],
    'jazbaat': ['jaz', 'baat'],
    'ehsaas': ['eh', 'saas'],
    'intezar': ['in', 'te', 'zar'],
    'tamanna': ['ta', 'man', 'na'],
    'hasrat': ['has', 'rat'],
    'arzoo': ['ar', 'zoo'],
    'khwaab': ['khwaab'],
}


def _normalize_entries(entries: Mapping[str, Sequence[str]]) -> Dict[str, Tuple[str, ...]]:
    normalized = {}
    for key, syllables in entries.items():
        normalized_key = normalize_text(key)
        normalized_syllables = tuple(normalize_text(syllable) for syllable in syllables)
        if not normalized_key or not all(normalized_syllables):
            raise ValueError(f"Invalid lexicon entry: {key!r}")
        normalized[normalized_key] = normalized_syllables
    return normalized


class Lexicon:
    """
    Known syllable breaks for whole lines and single words.

    Consulted before algorithmic syllabification: a whole-line entry wins over
    word entries. Instances are immutable; use `with_entries` to derive an
    extended lexicon.
    """

    def __init__(self,
                 line_entries: Optional[Mapping[str, Sequence[str]]] = None,
                 word_entries: Optional[Mapping[str, Sequence[str]]] = None):
        self._lines = MappingProxyType(_normalize_entries(line_entries or {}))
        self._words = MappingProxyType(_normalize_entries(word_entries or {}))

    def __len__(self) -> int:
        return len(self._lines) + len(self._words)

    def lookup_line(self, line: str) -> Optional[Tuple[str, ...]]:
        """Get the syllable breakdown of a whole line, if known"""
        return self._lines.get(normalize_text(line))

    def lookup_word(self, word: str) -> Optional[Tuple[str, ...]]:
        """Get the syllable breakdown of a single word, if known"""
        return self._words.get(normalize_text(word))

    def lookup(self, text: str) -> Optional[Tuple[str, ...]]:
        """
        Look up a line or word, line entries first.

        Args:
            text: A full line or a single word

        Returns:
            Tuple of syllable strings or None if the text is not in the lexicon
        """
        result = self.lookup_line(text)
        if result is None:
            result = self.lookup_word(text)
        return result

    def with_entries(self,
                     word_entries: Optional[Mapping[str, Sequence[str]]] = None,
                     line_entries: Optional[Mapping[str, Sequence[str]]] = None) -> "Lexicon":
        """
        Build a new lexicon with additional entries; this instance is unchanged.

        Args:
            word_entries: Word breakdowns to add or override
            line_entries: Line breakdowns to add or override

        Returns:
            New Lexicon instance
        """
        lines = dict(self._lines)
        lines.update(line_entries or {})
        words = dict(self._words)
        words.update(word_entries or {})
        logger.debug(f"Extending lexicon with {len(word_entries or {})} words and {len(line_entries or {})} lines")
        return Lexicon(line_entries=lines, word_entries=words)


DEFAULT_LEXICON = Lexicon(line_entries=LINE_ENTRIES, word_entries=WORD_ENTRIES)
