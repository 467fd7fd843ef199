"""
Browsing the hadith corpus by book.

Listing books, paging through a book's hadiths, looking one up by id and
plain-text search across books.
"""

import logging
from typing import Optional, Sequence

from adhkar.data import BOOK_CODES, get_collection_group
from adhkar.data.loader import CorpusLoader
from adhkar.models import BookInfo, GradeView, HadithPage, HadithRecord, RawBook, RawChapter, RawHadith

logger = logging.getLogger(__name__)


def make_record(book: RawBook, hadith: RawHadith) -> HadithRecord:
    """Flatten a hadith with its book and chapter context."""
    return HadithRecord(
        id=f"{book.code}-{hadith.id_in_book}",
        book_id=hadith.book_id,
        book_name=book.english_title,
        hadith_number=hadith.id_in_book,
        chapter_name=book.chapter_title(hadith.chapter_id),
        arabic=hadith.arabic,
        english=hadith.text,
        narrator=hadith.english.narrator,
        grades=[GradeView(grade=g.grade, graded_by=g.graded_by) for g in hadith.grades],
    )


def make_book_info(book: RawBook) -> BookInfo:
    return BookInfo(
        id=book.code,
        name=book.english_title,
        arabic_name=book.arabic_title,
        author=book.metadata.english.author,
        category=get_collection_group(book.code).label,
        hadith_count=len(book.hadiths),
        chapter_count=len(book.chapters),
    )


def _paginate(records: list[HadithRecord], limit: int, offset: int) -> HadithPage:
    offset = max(offset, 0)
    limit = max(limit, 0)
    return HadithPage(results=records[offset:offset + limit], total=len(records))


def parse_hadith_id(full_id: str) -> tuple[str, str] | None:
    """
    Split "{book_code}-{number}" into its parts.

    Returns:
        (book_code, number) or None if the id is malformed

    Examples:
        >>> parse_hadith_id("bukhari-123")
        ('bukhari', '123')
        >>> parse_hadith_id("bukhari") is None
        True
    """
    book_code, sep, number = full_id.rpartition("-")
    if not sep or not book_code:
        return None
    try:
        return book_code, str(int(number))
    except ValueError:
        return None


class HadithBrowser:
    """
    Read-only access to the books of the corpus.

    Shares its CorpusLoader (and so its book cache) with the corpus index.
    """

    def __init__(self, loader: CorpusLoader, book_codes: Sequence[str] | None = None):
        self._loader = loader
        self._book_codes = tuple(book_codes) if book_codes is not None else BOOK_CODES
        self._books: list[BookInfo] | None = None

    async def get_available_books(self) -> list[BookInfo]:
        """Summaries of every book that can be loaded, in scan order."""
        if self._books is not None:
            return self._books

        books = []
        for code in self._book_codes:
            book = await self._loader.load_book(code)
            if book is None:
                logger.warning("Book %s is unavailable", code)
                continue
            books.append(make_book_info(book))

        logger.debug("Found %d available books", len(books))
        self._books = books
        return books

    async def get_book_info(self, book_code: str) -> BookInfo | None:
        if self._books is not None:
            for info in self._books:
                if info.id == book_code:
                    return info

        book = await self._loader.load_book(book_code)
        if book is None:
            return None
        return make_book_info(book)

    async def get_chapters(self, book_code: str) -> list[RawChapter]:
        book = await self._loader.load_book(book_code)
        if book is None:
            return []
        return list(book.chapters)

    async def get_hadith(self, full_id: str) -> HadithRecord | None:
        """
        Look up a hadith by "{book_code}-{number}".

        Returns:
            The hadith record, or None if the id is malformed or unknown
        """
        parsed = parse_hadith_id(full_id)
        if parsed is None:
            logger.debug("Invalid hadith id: %s", full_id)
            return None

        book_code, number = parsed
        book = await self._loader.load_book(book_code)
        if book is None:
            return None

        for hadith in book.hadiths:
            if hadith.id_in_book == number:
                return make_record(book, hadith)
        return None

    async def get_hadiths_by_book(
        self,
        book_code: str,
        limit: int = 20,
        offset: int = 0,
        chapter_id: Optional[str] = None,
    ) -> HadithPage:
        """
        Page through a book, optionally restricted to one chapter.

        Args:
            book_code: Short book code
            limit: Page size
            offset: Number of hadiths to skip
            chapter_id: Only include hadiths of this chapter

        Returns:
            The requested page and the total before pagination
        """
        book = await self._loader.load_book(book_code)
        if book is None:
            return HadithPage()

        hadiths = book.hadiths
        if chapter_id is not None:
            chapter_id = str(chapter_id)
            hadiths = [h for h in hadiths if h.chapter_id == chapter_id]

        return _paginate([make_record(book, h) for h in hadiths], limit, offset)

    async def search_hadiths(
        self,
        query: str,
        book_codes: Sequence[str] | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> HadithPage:
        """
        Case-insensitive substring search over Arabic text, English text and narrator.

        Args:
            query: Search text; empty yields an empty page
            book_codes: Books to search (default: every available book)
            limit: Page size
            offset: Number of matches to skip

        Returns:
            The requested page and the total number of matches
        """
        needle = (query or "").lower().strip()
        if not needle:
            return HadithPage()

        if not book_codes:
            book_codes = [info.id for info in await self.get_available_books()]

        matches = []
        for code in book_codes:
            book = await self._loader.load_book(code)
            if book is None:
                continue
            for hadith in book.hadiths:
                if (
                    needle in hadith.arabic.lower()
                    or needle in hadith.text.lower()
                    or needle in (hadith.english.narrator or "").lower()
                ):
                    matches.append(make_record(book, hadith))

        logger.debug("Found %d hadiths matching %r", len(matches), needle)
        return _paginate(matches, limit, offset)
