"""
Pydantic data models for Adhkar library.

These models represent the core data structures used throughout the library:
- RawBook, RawChapter, RawHadith: the hadith corpus as loaded from disk
- Supplication, Remembrance: normalized dua and zikr entities
- Category, EntityType: the derived category taxonomy
- BookInfo, HadithRecord, HadithPage: views for browsing books
"""

from adhkar.models.hadith import (
    BookMetadataBlock,
    BookTitle,
    HadithGrade,
    HadithText,
    RawBook,
    RawChapter,
    RawHadith,
)
from adhkar.models.entry import Supplication, Remembrance
from adhkar.models.category import Category, EntityType
from adhkar.models.record import BookInfo, GradeView, HadithRecord, HadithPage

__all__ = [
    "BookMetadataBlock",
    "BookTitle",
    "HadithGrade",
    "HadithText",
    "RawBook",
    "RawChapter",
    "RawHadith",
    "Supplication",
    "Remembrance",
    "Category",
    "EntityType",
    "BookInfo",
    "GradeView",
    "HadithRecord",
    "HadithPage",
]
