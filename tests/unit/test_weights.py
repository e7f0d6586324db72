# tests/unit/test_weights.py

import pytest
from taqti.analysis.weights import WeightClassifier, SHORT, LONG


class TestWeightClassifier:
    """Unit tests for WeightClassifier"""

    @pytest.fixture
    def classifier(self):
        return WeightClassifier()

    @pytest.mark.parametrize("syllable,expected", [
        ("क", SHORT),
        ("कि", SHORT),
        ("कु", SHORT),
        ("का", LONG),
        ("की", LONG),
        ("के", LONG),
        ("कौ", LONG),
        ("आ", LONG),
        ("अ", SHORT),
        ("त्", LONG),
        ("प्रे", LONG),
        ("हिं", LONG),
        ("दुः", LONG),
        ("ज़", LONG),
    ])
    def test_devanagari(self, classifier, syllable, expected):
        assert classifier.weight(syllable) == expected

    def test_devanagari_override(self, classifier):
        """Test that listed words are heavy even without a long vowel"""
        assert classifier.weight("तुम") == LONG
        assert classifier.weight("हम") == LONG
        assert classifier.weight("तक") == SHORT

    def test_precomposed_nukta_letter(self, classifier):
        """Test that a precomposed nukta letter weighs the same as its decomposed form"""
        assert classifier.weight("\u0958") == LONG
        assert classifier.weight("\u0915\u093C") == LONG

    @pytest.mark.parametrize("syllable,expected", [
        ("ka", SHORT),
        ("se", SHORT),
        ("hi", SHORT),
        ("ā", LONG),
        ("baat", LONG),
        ("hai", LONG),
        ("kaṃ", LONG),
        ("man", LONG),
        ("var", LONG),
        ("dost", LONG),
        ("kha", LONG),
        ("bha", LONG),
        ("ḍa", LONG),
        ("bst", LONG),
    ])
    def test_roman(self, classifier, syllable, expected):
        assert classifier.weight(syllable) == expected

    def test_roman_case_insensitive(self, classifier):
        assert classifier.weight("HAI") == LONG
        assert classifier.weight("Ka") == SHORT

    def test_empty_syllable(self, classifier):
        assert classifier.weight("") == SHORT

    def test_devanagari_rules_follow_content(self, classifier):
        """Test that syllable content, not line script, selects the rule set"""
        from taqti.analysis.script_detector import Script
        assert classifier.weight("का", Script.ROMANIZED) == LONG
        assert classifier.weight("ka", Script.DEVANAGARI) == SHORT

    def test_pattern(self, classifier):
        assert classifier.pattern(["का", "क", "का", "क"]) == "2121"
        assert classifier.pattern(["ai", "se", "te", "var"]) == "2112"
        assert classifier.pattern([]) == ""
