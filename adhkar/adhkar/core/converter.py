"""
Conversion of raw hadiths into normalized entities.

Both converters are pure and total: given a hadith that already passed
classification and its book/chapter context, they always produce an entity.
"""

import re
from typing import Iterable, Optional

from adhkar.models import RawHadith, Remembrance, Supplication


ELLIPSIS = "..."
DEFAULT_TITLE_LENGTH = 50

DEFAULT_SUPPLICATION_CATEGORY = "General"
DEFAULT_REMEMBRANCE_CATEGORY = "General Adhkar"

# (tag, substrings that trigger it), checked in this order
TOPIC_TAGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("morning", ("morning",)),
    ("evening", ("evening",)),
    ("prayer", ("prayer", "salah")),
    ("protection", ("protection",)),
    ("forgiveness", ("forgiveness",)),
    ("healing", ("illness", "sick")),
)

BENEFIT_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"whoever says this[^.]*will[^.]*", re.IGNORECASE),
    re.compile(r"the virtues? of[^.]*:", re.IGNORECASE),
    re.compile(r"the benefits? of[^.]*:", re.IGNORECASE),
    re.compile(r"this has the benefit of[^.]*", re.IGNORECASE),
)

NUMBER_WORDS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}

REPETITION_PATTERN = re.compile(
    r"(\d+|" + "|".join(NUMBER_WORDS) + r")\s+times",
    re.IGNORECASE,
)

_WHITESPACE = re.compile(r"\s+")


def first_available(values: Iterable[Optional[str]], default: str) -> str:
    """
    Return the first non-empty value, or the default.

    Args:
        values: Candidates in order of preference
        default: Returned when every candidate is None or empty

    Examples:
        >>> first_available(["", "Sahih Muslim"], "General")
        'Sahih Muslim'
        >>> first_available([None, None], "General")
        'General'
    """
    for value in values:
        if value:
            return value
    return default


def make_title(text: str, max_length: int = DEFAULT_TITLE_LENGTH) -> str:
    """
    Build a display title from English text.

    Text longer than `max_length` is cut so that the title, ellipsis
    included, is exactly `max_length` characters long.

    Examples:
        >>> make_title("a" * 51)[-3:]
        '...'
        >>> len(make_title("a" * 51))
        50
    """
    if len(text) > max_length:
        return text[: max_length - len(ELLIPSIS)] + ELLIPSIS
    return text


def book_tag(book_title: str) -> str:
    """Tag derived from a book title: lowercased, whitespace runs become hyphens."""
    return _WHITESPACE.sub("-", book_title.lower())


def derive_tags(text: str, book_title: str) -> list[str]:
    """
    Derive topical tags from English text, plus one book tag.

    Args:
        text: English text of the hadith
        book_title: Title of the containing book

    Returns:
        Tags in a fixed topic order, followed by the book tag
    """
    lower_text = text.lower()
    tags = [
        tag
        for tag, needles in TOPIC_TAGS
        if any(needle in lower_text for needle in needles)
    ]
    tags.append(book_tag(book_title))
    return tags


def extract_benefits(text: str) -> str:
    """
    Extract a benefit-announcing excerpt from English text.

    The first matching pattern wins.

    Returns:
        The matched excerpt, or an empty string
    """
    for pattern in BENEFIT_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return ""


def parse_repetition_count(text: str) -> int:
    """
    Parse how many times a formula is to be repeated.

    Looks for a numeral or a spelled-out number (one to ten) followed by
    "times". Anything else, including a zero count, yields 1.

    Examples:
        >>> parse_repetition_count("It is repeated 7 times")
        7
        >>> parse_repetition_count("say it three times")
        3
        >>> parse_repetition_count("say it")
        1
    """
    match = REPETITION_PATTERN.search(text)
    if not match:
        return 1

    token = match.group(1).lower()
    if token in NUMBER_WORDS:
        return NUMBER_WORDS[token]
    try:
        count = int(token)
    except ValueError:
        return 1
    return count if count > 0 else 1


def make_citation(book_title: str, id_in_book: str, chapter_title: Optional[str] = None) -> str:
    """
    Build a citation string.

    Examples:
        >>> make_citation("Sahih Muslim", "2692")
        'Sahih Muslim 2692'
        >>> make_citation("Sahih Muslim", "2692", "The Book of Dhikr")
        'Sahih Muslim, The Book of Dhikr (2692)'
    """
    if chapter_title:
        return f"{book_title}, {chapter_title} ({id_in_book})"
    return f"{book_title} {id_in_book}"


def supplication_id(book_code: str, id_in_book: str) -> str:
    return f"dua-{book_code}-{id_in_book}"


def remembrance_id(book_code: str, id_in_book: str) -> str:
    return f"zikr-{book_code}-{id_in_book}"


def to_supplication(
    hadith: RawHadith,
    book_code: str,
    book_title: str,
    chapter_title: Optional[str] = None,
    title_max_length: int = DEFAULT_TITLE_LENGTH,
) -> Supplication:
    """
    Convert a hadith into a Supplication.

    Args:
        hadith: A hadith that classified as a supplication
        book_code: Short code of the containing book
        book_title: Display title of the containing book
        chapter_title: Title of the hadith's chapter, if known
        title_max_length: Maximum title length

    Returns:
        Supplication entity
    """
    text = hadith.text
    return Supplication(
        id=supplication_id(book_code, hadith.id_in_book),
        title=make_title(text, title_max_length),
        arabic=hadith.arabic,
        transliteration="",  # The corpus carries no transliteration
        translation=text,
        reference=make_citation(book_title, hadith.id_in_book, chapter_title),
        category=first_available([chapter_title, book_title], DEFAULT_SUPPLICATION_CATEGORY),
        tags=derive_tags(text, book_title),
        benefits=extract_benefits(text),
    )


def to_remembrance(
    hadith: RawHadith,
    book_code: str,
    book_title: str,
    chapter_title: Optional[str] = None,
) -> Remembrance:
    """
    Convert a hadith into a Remembrance.

    Args:
        hadith: A hadith that classified as a remembrance
        book_code: Short code of the containing book
        book_title: Display title of the containing book
        chapter_title: Title of the hadith's chapter, if known

    Returns:
        Remembrance entity
    """
    text = hadith.text
    return Remembrance(
        id=remembrance_id(book_code, hadith.id_in_book),
        arabic=hadith.arabic,
        description=text,
        reference=make_citation(book_title, hadith.id_in_book, chapter_title),
        category=first_available([chapter_title, book_title], DEFAULT_REMEMBRANCE_CATEGORY),
        count=parse_repetition_count(text),
    )
