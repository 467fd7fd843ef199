"""
Search and filter over loaded entity collections.

These functions work purely on collections already in memory; they never
load books or trigger a corpus scan.
"""

from typing import Optional, Protocol, Sequence, TypeVar

from adhkar.core.taxonomy import unslugify
from adhkar.models import EntityType, Remembrance, Supplication


class _Categorized(Protocol):
    category: str


E = TypeVar("E", bound=_Categorized)


def _normalize_query(query: Optional[str]) -> str:
    return (query or "").lower().strip()


def supplication_matches(dua: Supplication, query: str) -> bool:
    """Whether a supplication matches an already-normalized query."""
    return (
        query in dua.title.lower()
        or query in dua.translation.lower()
        or query in dua.transliteration.lower()
        # Arabic has no case; matched as-is
        or query in dua.arabic
        or query in dua.category.lower()
        or any(query in tag.lower() for tag in dua.tags)
    )


def remembrance_matches(zikr: Remembrance, query: str) -> bool:
    """Whether a remembrance matches an already-normalized query."""
    return (
        query in zikr.category.lower()
        or query in zikr.description.lower()
        or query in zikr.arabic
    )


def search_supplications(query: Optional[str], duas: Sequence[Supplication]) -> Sequence[Supplication]:
    """
    Case-insensitive substring search over supplications.

    Matches title, translation, transliteration, Arabic text, category and
    tags. An empty or whitespace-only query returns the input unchanged.

    Args:
        query: Search text
        duas: Collection to search

    Returns:
        Matching supplications in input order
    """
    needle = _normalize_query(query)
    if not needle:
        return duas
    return [dua for dua in duas if supplication_matches(dua, needle)]


def search_remembrances(query: Optional[str], azkar: Sequence[Remembrance]) -> Sequence[Remembrance]:
    """
    Case-insensitive substring search over remembrances.

    Matches category, description and Arabic text. An empty or
    whitespace-only query returns the input unchanged.
    """
    needle = _normalize_query(query)
    if not needle:
        return azkar
    return [zikr for zikr in azkar if remembrance_matches(zikr, needle)]


def resolve_category_name(category: str, prefix: str) -> str:
    """
    Turn a category id or name into the name to match against.

    Ids carrying `prefix` are unslugified; anything else is taken as a name.

    Examples:
        >>> resolve_category_name("dua-cat-morning-adhkar", "dua-cat-")
        'Morning Adhkar'
        >>> resolve_category_name("Morning Adhkar", "dua-cat-")
        'Morning Adhkar'
    """
    if category.startswith(prefix):
        return unslugify(category[len(prefix):])
    return category


def filter_by_category(entities: Sequence[E], category: Optional[str], prefix: str) -> Sequence[E]:
    """
    Keep the entities whose category matches a category id or name.

    Comparison is case-insensitive and exact. An empty or None category
    returns the input unchanged; no match returns an empty list.

    Args:
        entities: Collection to filter
        category: Category id (carrying `prefix`) or raw category name
        prefix: Category id prefix of this entity type

    Returns:
        Matching entities in input order
    """
    if not category:
        return entities
    wanted = resolve_category_name(category, prefix).lower()
    return [entity for entity in entities if entity.category.lower() == wanted]


def filter_supplications(duas: Sequence[Supplication], category: Optional[str]) -> Sequence[Supplication]:
    return filter_by_category(duas, category, EntityType.DUAS.category_prefix)


def filter_remembrances(azkar: Sequence[Remembrance], category: Optional[str]) -> Sequence[Remembrance]:
    return filter_by_category(azkar, category, EntityType.AZKAR.category_prefix)
