"""
Normalized supplication (dua) and remembrance (zikr) entities.
"""

from pydantic import BaseModel, Field


class Supplication(BaseModel):
    """
    A petition or prayer extracted from a hadith.

    Attributes:
        id: Stable corpus-wide identifier ("dua-{book}-{number}")
        title: Synopsis of the English text
        arabic: Arabic text
        transliteration: Latin transliteration (empty for corpus-derived entries)
        translation: English text verbatim
        reference: Citation string
        category: Chapter title, book title or "General"
        tags: Topical tags plus a book tag
        benefits: Benefit-announcing excerpt, empty if none
        favorite: Resolved from the favorites store at query time
    """

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "dua-bukhari-6306",
                    "title": "The most superior way of asking for forgivene...",
                    "arabic": "اللَّهُمَّ أَنْتَ رَبِّي لاَ إِلَهَ إِلاَّ أَنْتَ",
                    "transliteration": "",
                    "translation": "The most superior way of asking for forgiveness from Allah is ...",
                    "reference": "Sahih al-Bukhari, Invocations (6306)",
                    "category": "Invocations",
                    "tags": ["forgiveness", "sahih-al-bukhari"],
                    "benefits": "",
                    "favorite": False,
                }
            ]
        },
    }

    id: str = Field(..., min_length=1)
    title: str = Field(default="")
    arabic: str = Field(default="")
    transliteration: str = Field(default="")
    translation: str = Field(default="")
    reference: str = Field(default="")
    category: str = Field(default="General")
    tags: list[str] = Field(default_factory=list)
    benefits: str = Field(default="")
    favorite: bool = Field(default=False)

    def __str__(self) -> str:
        return f"Supplication({self.id})"


class Remembrance(BaseModel):
    """
    A repeatable glorification formula extracted from a hadith.

    Attributes:
        id: Stable corpus-wide identifier ("zikr-{book}-{number}")
        arabic: Arabic text
        description: English text verbatim
        reference: Citation string
        category: Chapter title, book title or "General Adhkar"
        count: How many times the formula is repeated
        favorite: Resolved from the favorites store at query time
    """

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "zikr-muslim-2692",
                    "arabic": "سُبْحَانَ اللَّهِ وَبِحَمْدِهِ",
                    "description": "He who says a hundred times ...",
                    "reference": "Sahih Muslim 2692",
                    "category": "Sahih Muslim",
                    "count": 100,
                    "favorite": False,
                }
            ]
        },
    }

    id: str = Field(..., min_length=1)
    arabic: str = Field(default="")
    description: str = Field(default="")
    reference: str = Field(default="")
    category: str = Field(default="General Adhkar")
    count: int = Field(default=1, ge=1)
    favorite: bool = Field(default=False)

    def __str__(self) -> str:
        return f"Remembrance({self.id} x{self.count})"
