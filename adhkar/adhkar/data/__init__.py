"""
Hadith corpus data access.

The corpus is split into three collection groups, each a directory holding
one JSON document per book:

- the_9_books: the nine core collections
- forties: short compiled "forty hadith" collections
- other_books: supplementary collections
"""

from enum import Enum


class CollectionGroup(str, Enum):
    """A directory of the corpus, in loader priority order."""

    CORE = "the_9_books"
    SUPPLEMENTARY = "other_books"
    FORTIES = "forties"

    @property
    def label(self) -> str:
        """Human-readable group name."""
        return COLLECTION_LABELS[self]


COLLECTION_LABELS: dict[CollectionGroup, str] = {
    CollectionGroup.CORE: "The 9 Books",
    CollectionGroup.SUPPLEMENTARY: "Other Books",
    CollectionGroup.FORTIES: "Forties Collections",
}

# Order in which a book's document is looked up
LOOKUP_ORDER: tuple[CollectionGroup, ...] = (
    CollectionGroup.CORE,
    CollectionGroup.SUPPLEMENTARY,
    CollectionGroup.FORTIES,
)

CORE_BOOKS: tuple[str, ...] = (
    "bukhari",
    "muslim",
    "abudawud",
    "tirmidhi",
    "nasai",
    "ibnmajah",
    "malik",
    "ahmed",
    "darimi",
)

FORTIES_BOOKS: tuple[str, ...] = (
    "nawawi40",
    "qudsi40",
    "shahwaliullah40",
)

SUPPLEMENTARY_BOOKS: tuple[str, ...] = (
    "aladab_almufrad",
    "bulugh_almaram",
    "mishkat_almasabih",
    "riyad_assalihin",
    "shamail_muhammadiyah",
)

# Scan order of the corpus: core, forties, then supplementary
BOOK_CODES: tuple[str, ...] = CORE_BOOKS + FORTIES_BOOKS + SUPPLEMENTARY_BOOKS

_BOOK_GROUPS: dict[str, CollectionGroup] = {
    **{code: CollectionGroup.CORE for code in CORE_BOOKS},
    **{code: CollectionGroup.FORTIES for code in FORTIES_BOOKS},
    **{code: CollectionGroup.SUPPLEMENTARY for code in SUPPLEMENTARY_BOOKS},
}


def get_book_codes(group: CollectionGroup | None = None) -> list[str]:
    """
    Get the known book codes in scan order.

    Args:
        group: Restrict to one collection group

    Returns:
        List of book codes
    """
    if group is None:
        return list(BOOK_CODES)
    return [code for code in BOOK_CODES if _BOOK_GROUPS[code] is group]


def get_collection_group(book_code: str) -> CollectionGroup:
    """
    Get the collection group a known book belongs to.

    Unknown codes are reported as supplementary, matching how the corpus
    files unlisted books.

    Args:
        book_code: Short book code

    Returns:
        The book's CollectionGroup
    """
    return _BOOK_GROUPS.get(book_code, CollectionGroup.SUPPLEMENTARY)


def candidate_paths(book_code: str) -> list[str]:
    """
    Relative document paths to try for a book, in priority order.

    Args:
        book_code: Short book code

    Returns:
        Paths like "the_9_books/bukhari.json"

    Raises:
        ValueError: If the code is empty or contains a path separator
    """
    if not book_code or "/" in book_code or "\\" in book_code or book_code.startswith("."):
        raise ValueError(f"Invalid book code: {book_code!r}")
    return [f"{group.value}/{book_code}.json" for group in LOOKUP_ORDER]


__all__ = [
    "BOOK_CODES",
    "CORE_BOOKS",
    "FORTIES_BOOKS",
    "SUPPLEMENTARY_BOOKS",
    "COLLECTION_LABELS",
    "LOOKUP_ORDER",
    "CollectionGroup",
    "get_book_codes",
    "get_collection_group",
    "candidate_paths",
]
