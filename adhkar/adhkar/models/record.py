"""
Flattened views used when browsing the corpus by book.
"""

from typing import Optional

from pydantic import BaseModel, Field


class BookInfo(BaseModel):
    """Summary of one available book."""

    id: str = Field(..., description="Book code")
    name: str = Field(..., description="English title, or the code if untitled")
    arabic_name: str = Field(default="")
    author: str = Field(default="")
    category: str = Field(..., description="Collection group label")
    hadith_count: int = Field(default=0, ge=0)
    chapter_count: int = Field(default=0, ge=0)


class GradeView(BaseModel):
    grade: str
    graded_by: str


class HadithRecord(BaseModel):
    """A hadith together with its book and chapter context."""

    id: str = Field(..., description="'{book_code}-{hadith_number}'")
    book_id: str
    book_name: str
    hadith_number: str
    chapter_name: Optional[str] = None
    arabic: str = ""
    english: str = ""
    narrator: Optional[str] = None
    grades: list[GradeView] = Field(default_factory=list)


class HadithPage(BaseModel):
    """One page of hadith records plus the total before pagination."""

    results: list[HadithRecord] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)

    def __len__(self) -> int:
        return len(self.results)
