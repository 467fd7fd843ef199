"""
Raw hadith corpus data models.

These mirror the per-book JSON documents of the hadith corpus. Every optional
field is resolved to a default here, at load time, so downstream code never
re-checks for missing values.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator


_RAW_CONFIG = {
    "frozen": True,
    "populate_by_name": True,
    "coerce_numbers_to_str": True,
}


class HadithText(BaseModel):
    """English rendering of a hadith."""

    model_config = _RAW_CONFIG

    text: str = ""
    narrator: Optional[str] = None

    @field_validator("text", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class HadithGrade(BaseModel):
    """Authenticity grade given by a scholar."""

    model_config = _RAW_CONFIG

    grade: str = ""
    graded_by: str = ""


class RawHadith(BaseModel):
    """
    A single hadith as ingested from a book document.

    Attributes:
        id: Corpus-wide hadith identifier
        book_id: Identifier of the containing book
        chapter_id: Identifier of the containing chapter
        id_in_book: Hadith number within its book
        arabic: Arabic text (empty when the source has none)
        english: English narration
        grades: Authenticity grades, if the source carries them
    """

    model_config = _RAW_CONFIG

    id: str = Field(default="", description="Corpus-wide hadith identifier")
    book_id: str = Field(default="", alias="bookId")
    chapter_id: str = Field(default="", alias="chapterId")
    id_in_book: str = Field(default="", alias="idInBook")
    arabic: str = Field(default="", description="Arabic text of the hadith")
    english: HadithText = Field(default_factory=HadithText)
    grades: list[HadithGrade] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def resolve_missing_fields(cls, data: Any) -> Any:
        """Replace nulls with defaults and accept a bare string for `english`."""
        if not isinstance(data, dict):
            return data
        data = {k: v for k, v in data.items() if v is not None}
        english = data.get("english")
        if isinstance(english, str):
            data["english"] = {"text": english}
        if "idInBook" not in data and "id_in_book" not in data and "id" in data:
            data["idInBook"] = data["id"]
        return data

    @property
    def text(self) -> str:
        """English narration text."""
        return self.english.text

    @property
    def has_arabic(self) -> bool:
        return bool(self.arabic)

    def combined_text(self) -> str:
        """English and Arabic text joined for classification."""
        return f"{self.english.text} {self.arabic}"

    def __str__(self) -> str:
        return f"Hadith({self.book_id}:{self.id_in_book})"


class RawChapter(BaseModel):
    """A named subdivision of a book."""

    model_config = _RAW_CONFIG

    id: str = ""
    english: str = ""
    arabic: str = ""

    @field_validator("english", "arabic", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class BookTitle(BaseModel):
    """Title block of a book in one language."""

    model_config = _RAW_CONFIG

    title: str = ""
    author: str = ""

    @field_validator("title", "author", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class BookMetadataBlock(BaseModel):
    """Bilingual display metadata of a book."""

    model_config = _RAW_CONFIG

    english: BookTitle = Field(default_factory=BookTitle)
    arabic: BookTitle = Field(default_factory=BookTitle)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class RawBook(BaseModel):
    """
    A loaded book document.

    Identity is the book's short code (e.g. "bukhari"), which is also the
    file name of its source document. Books are never mutated after load.
    """

    model_config = _RAW_CONFIG

    code: str = Field(..., description="Short book code", min_length=1)
    metadata: BookMetadataBlock = Field(default_factory=BookMetadataBlock)
    chapters: list[RawChapter] = Field(default_factory=list)
    hadiths: list[RawHadith] = Field(default_factory=list)

    _chapter_titles: dict[str, str] = PrivateAttr(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def model_post_init(self, __context: Any) -> None:
        # First chapter wins if a book repeats a chapter id
        for chapter in self.chapters:
            self._chapter_titles.setdefault(chapter.id, chapter.english)

    @property
    def english_title(self) -> str:
        """English display title, falling back to the book code."""
        return self.metadata.english.title or self.code

    @property
    def arabic_title(self) -> str:
        return self.metadata.arabic.title

    def chapter_title(self, chapter_id: str) -> str | None:
        """English title of the chapter with `chapter_id`, or None if unknown."""
        return self._chapter_titles.get(chapter_id)

    def __str__(self) -> str:
        return f"Book({self.code}: {len(self.hadiths)} hadiths)"
