"""
Heuristic hadith classification.

Decides whether a hadith reads as a supplication (dua) and/or a remembrance
formula (zikr). Matching is two-tiered: plain substring containment against a
keyword list, then a regex search against a list of phrase patterns. Both
tiers are case-insensitive.

The two categories are not mutually exclusive. Many glorification formulas
are also supplications, so a hadith may satisfy both classifiers.
"""

import re
from dataclasses import dataclass

from adhkar.models import RawHadith


SUPPLICATION_KEYWORDS: tuple[str, ...] = (
    # English
    "dua", "supplication", "prayer", "invoke", "invocation", "ask allah", "implore",
    "beseech", "entreaty", "petition", "plea", "appeal", "entreated", "beseeched",
    "supplicate", "supplicated", "seeking refuge", "seek refuge", "protect", "protection",
    "forgive", "forgiveness", "mercy", "grant", "bestow", "bless", "blessing",
    "pray", "prayed", "would say", "used to say", "taught", "recite", "seeking protection",
    # Arabic
    "دعاء", "يدعو", "اللهم", "ادع", "استغفر", "استغفار", "رب", "اللَّهُمَّ",
    "أعوذ", "أَعُوذُ", "بسم", "بِسْمِ", "صلى", "سبحان", "الحمد", "استعاذ",
    "يستعيذ", "غفر", "اغفر", "ارحم", "احفظ", "انصر", "اهد", "بارك",
)

SUPPLICATION_PATTERNS: tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        # Address forms
        r"O Allah", r"Oh Allah", r"My Lord",
        r"Allahumma", r"I seek refuge", r"we seek refuge",
        # Habitual practice
        r"Allah's Messenger.*used to", r"Prophet.*used to",
        r"when.*would", r"whenever.*would",
        r"In the name of Allah",
        r"taught.*(say|recite|dua|supplication)",
        # Temporal triggers
        r"when entering", r"when leaving",
        r"when waking", r"before sleeping",
        r"upon seeing", r"after completing",
        r"after (the|) prayer", r"before (the|) prayer",
    )
)

REMEMBRANCE_KEYWORDS: tuple[str, ...] = (
    # English
    "dhikr", "zikr", "remembrance", "glorify", "praise", "tasbih", "takbir",
    "glorification", "exaltation", "remembering", "extol", "magnify", "exalt",
    "glory", "glorified", "praised", "extolled", "magnified", "exalted",
    "celebrate", "revere", "venerate", "honor", "worship", "holy", "hallowed",
    "blessed", "prayer", "recitation", "litany", "formula", "invocation",
    "glorifying", "remembers", "remember", "extols", "magnifies", "exalts",
    "praises", "exalteth", "extolleth", "magnifieth",
    # Arabic
    "ذكر", "أذكار", "تسبيح", "تهليل", "تكبير", "تحميد", "تمجيد",
    "سبحان", "الحمد", "لا إله", "الله اكبر", "استغفر",
    "سُبْحَانَ", "الْحَمْدُ", "لَا إِلَهَ", "اللَّهُ أَكْبَرُ", "أَسْتَغْفِرُ",
    # Transliterated and translated formulas
    "subhan allah", "alhamdulillah", "allahu akbar", "la ilaha",
    "glory be to allah", "praise be to allah", "allah is the greatest",
    "there is no god but allah", "there is no deity except allah",
    "glory and praise", "laa hawla", "la hawla", "bismillah",
    "bismillahir rahmanir rahim", "subhanahu wa taala",
    "azza wa jall", "jalla jalaluhu", "wallahu alam",
)

REMEMBRANCE_PATTERNS: tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"glorify.*Allah", r"praise.*Allah", r"exalt.*Allah",
        r"remember.*Allah", r"remembrance.*Allah",
        # Repetition markers
        r"repeat.*times", r"say.*times", r"recite.*times",
        r"morning.*evening", r"after.*prayer",
        r"repeated.*(morning|evening)", r"said in the (morning|evening)",
        r"whoever says", r"whoever recites", r"one who says",
        # Virtue announcements
        r"virtues of", r"excellence of", r"reward for",
        r"best words", r"best of words", r"beloved to Allah",
    )
)

_SUPPLICATION_TERMS = tuple(k.lower() for k in SUPPLICATION_KEYWORDS)
_REMEMBRANCE_TERMS = tuple(k.lower() for k in REMEMBRANCE_KEYWORDS)


def _matches(text: str, terms: tuple[str, ...], patterns: tuple[re.Pattern, ...]) -> bool:
    lower_text = text.lower()
    if any(term in lower_text for term in terms):
        return True
    return any(pattern.search(lower_text) for pattern in patterns)


def is_supplication(text: str) -> bool:
    """
    Check whether text reads as a supplication.

    Args:
        text: Combined English and Arabic text of a hadith

    Returns:
        True if any supplication keyword or pattern matches

    Examples:
        >>> is_supplication("O Allah, forgive me")
        True
        >>> is_supplication("He sold the camel")
        False
    """
    return _matches(text, _SUPPLICATION_TERMS, SUPPLICATION_PATTERNS)


def is_remembrance(text: str) -> bool:
    """
    Check whether text reads as a remembrance formula.

    Args:
        text: Combined English and Arabic text of a hadith

    Returns:
        True if any remembrance keyword or pattern matches

    Examples:
        >>> is_remembrance("Say Subhan Allah thirty-three times")
        True
    """
    return _matches(text, _REMEMBRANCE_TERMS, REMEMBRANCE_PATTERNS)


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one hadith."""

    supplication: bool = False
    remembrance: bool = False

    @property
    def is_dual(self) -> bool:
        """Whether the hadith yields both a supplication and a remembrance."""
        return self.supplication and self.remembrance

    def __bool__(self) -> bool:
        return self.supplication or self.remembrance


def classify(hadith: RawHadith) -> Classification:
    """
    Classify a hadith once against both categories.

    Hadiths without Arabic text are unusable and never classify.

    Args:
        hadith: Raw hadith

    Returns:
        Classification with one flag per category
    """
    if not hadith.has_arabic:
        return Classification()
    text = hadith.combined_text()
    return Classification(
        supplication=is_supplication(text),
        remembrance=is_remembrance(text),
    )
