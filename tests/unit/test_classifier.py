"""
Unit tests for hadith classification.
"""

import pytest

from adhkar.core.classifier import Classification, classify, is_remembrance, is_supplication
from adhkar.models import RawHadith


def make_hadith(english: str, arabic: str = "نص") -> RawHadith:
    return RawHadith.model_validate({"id": 1, "english": {"text": english}, "arabic": arabic})


class TestIsSupplication:
    """Test the supplication classifier."""

    @pytest.mark.parametrize("text", [
        "O Allah, forgive me",
        "oh allah, guide us",
        "My Lord, have mercy on me",
        "I seek refuge in You",
        "Whenever he went out he would say this",
        "He taught us to recite it",
        "In the name of Allah",
        "Before sleeping he used to read",
    ])
    def test_english_matches(self, text):
        """Test English keyword and pattern matches."""
        assert is_supplication(text)

    @pytest.mark.parametrize("text", ["اللهم اغفر لي", "أعوذ بالله", "رب ارحمني"])
    def test_arabic_matches(self, text):
        """Test Arabic keyword matches."""
        assert is_supplication(text)

    def test_case_insensitive(self):
        """Test that matching ignores case."""
        assert is_supplication("O ALLAH, FORGIVE ME")
        assert is_supplication("allahumma")

    def test_no_match(self):
        """Test that narrative text is not a supplication."""
        assert not is_supplication("He sold a camel at the market باع جملا")


class TestIsRemembrance:
    """Test the remembrance classifier."""

    @pytest.mark.parametrize("text", [
        "Say Subhan Allah 33 times",
        "Alhamdulillah",
        "There is no god but Allah",
        "Whoever says it gains a reward",
        "The best words after the Quran",
        "Remember Allah often",
    ])
    def test_english_matches(self, text):
        """Test English keyword and pattern matches."""
        assert is_remembrance(text)

    @pytest.mark.parametrize("text", ["سبحان الله", "لا إله إلا الله", "سُبْحَانَ اللَّهِ"])
    def test_arabic_matches(self, text):
        """Test Arabic keyword matches."""
        assert is_remembrance(text)

    def test_no_match(self):
        """Test that narrative text is not a remembrance."""
        assert not is_remembrance("He sold a camel at the market باع جملا")


class TestClassify:
    """Test classify() on whole hadiths."""

    def test_supplication_only(self):
        """Test the forgiveness supplication yields a supplication only."""
        result = classify(make_hadith("O Allah, forgive me", "اللهم اغفر لي"))
        assert result == Classification(supplication=True, remembrance=False)
        assert result
        assert not result.is_dual

    def test_remembrance_only(self):
        """Test a counted glorification yields a remembrance only."""
        result = classify(make_hadith("Say Subhan Allah 33 times", "سُبْحَانَ اللَّهِ"))
        assert result == Classification(supplication=False, remembrance=True)

    def test_dual_classification(self):
        """Test that a hadith can match both classifiers."""
        result = classify(make_hadith(
            "Whoever says this in the morning will be protected. Subhan Allah.",
            "سُبْحَانَ اللَّهِ وَبِحَمْدِهِ",
        ))
        assert result.supplication
        assert result.remembrance
        assert result.is_dual

    def test_neither(self):
        """Test that unrelated hadiths do not classify."""
        result = classify(make_hadith("He sold a camel at the market", "باع جملا"))
        assert not result

    def test_no_arabic_never_classifies(self):
        """Test that hadiths without Arabic text are excluded even on strong matches."""
        result = classify(make_hadith("O Allah, forgive me. Subhan Allah 33 times.", ""))
        assert result == Classification()

    def test_arabic_alone_classifies(self):
        """Test that Arabic text is enough when the English is empty."""
        result = classify(make_hadith("", "اللهم اغفر لي"))
        assert result.supplication
