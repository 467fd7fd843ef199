"""
Category taxonomy derivation.

Categories are derived from the `category` field of the entities: one
Category per distinct name, per entity type. Ids are a type prefix plus a
slug of the name. The slug is lossy (case folded, whitespace collapsed), so
`unslugify` only recovers an approximation of the original name.
"""

import re
from typing import Iterable, Protocol

from adhkar.models import Category, EntityType

_WHITESPACE = re.compile(r"\s+")


class _Categorized(Protocol):
    category: str


def slugify(name: str) -> str:
    """
    Slug of a category name: lowercased, whitespace runs replaced by hyphens.

    Examples:
        >>> slugify("Morning Adhkar")
        'morning-adhkar'
    """
    return _WHITESPACE.sub("-", name.lower())


def unslugify(slug: str) -> str:
    """
    Best-effort reconstruction of a category name from its slug.

    Hyphens become spaces and the first letter of each word is upper-cased.
    Punctuation and original casing beyond the first letter are not restored.

    Examples:
        >>> unslugify("morning-adhkar")
        'Morning Adhkar'
    """
    words = slug.replace("-", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def category_id(entity_type: EntityType, name: str) -> str:
    """
    Synthesize the id of a category.

    Examples:
        >>> category_id(EntityType.AZKAR, "Morning Adhkar")
        'zikr-cat-morning-adhkar'
    """
    return f"{entity_type.category_prefix}{slugify(name)}"


def count_categories(entities: Iterable[_Categorized]) -> dict[str, int]:
    """
    Count entities per category name, in first-seen order.

    Names differing only in case are counted together under the spelling
    seen first.
    """
    spellings: dict[str, str] = {}
    counts: dict[str, int] = {}
    for entity in entities:
        name = spellings.setdefault(entity.category.lower(), entity.category)
        counts[name] = counts.get(name, 0) + 1
    return counts


def build_categories(entities: Iterable[_Categorized], entity_type: EntityType) -> list[Category]:
    """
    Derive the categories of one entity collection.

    Args:
        entities: Supplications or remembrances
        entity_type: Which namespace the categories belong to

    Returns:
        One Category per case-insensitively distinct name, in first-seen order
    """
    return [
        Category(
            id=category_id(entity_type, name),
            name=name,
            description=f"Collection of {count} {entity_type.noun} related to {name}",
            count=count,
        )
        for name, count in count_categories(entities).items()
    ]


def general_category(entity_type: EntityType) -> Category:
    """Minimal category served when the taxonomy cannot be derived."""
    return Category(
        id=f"{entity_type.category_prefix}general",
        name="General",
        description=f"General {entity_type.noun}",
        count=1,
    )


def categories_of_type(categories: Iterable[Category], entity_type: EntityType) -> list[Category]:
    """Select the categories in one type's id namespace."""
    prefix = entity_type.category_prefix
    return [category for category in categories if category.id.startswith(prefix)]
