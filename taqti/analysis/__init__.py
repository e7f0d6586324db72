from .script_detector import Script, ScriptDetector, PoemScript
from .syllabifier import Syllabifier, syllabify_word, syllabify_devanagari, syllabify_roman
from .weights import WeightClassifier
from .sections import FootSegmenter, ROMAN_FOOT_NAMES, DEVANAGARI_FOOT_NAMES
from .script_analyzers import ScriptAnalyzer, HindiAnalyzer, HinglishAnalyzer, get_analyzer

__all__ = ['Script', 'ScriptDetector', 'PoemScript',
           'Syllabifier', 'syllabify_word', 'syllabify_devanagari', 'syllabify_roman',
           'WeightClassifier',
           'FootSegmenter', 'ROMAN_FOOT_NAMES', 'DEVANAGARI_FOOT_NAMES',
           'ScriptAnalyzer', 'HindiAnalyzer', 'HinglishAnalyzer', 'get_analyzer']
