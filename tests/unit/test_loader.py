"""
Unit tests for corpus data access and the book loader.
"""

import asyncio
import json

import pytest

from adhkar.config import AdhkarSettings
from adhkar.data import (
    BOOK_CODES,
    CollectionGroup,
    candidate_paths,
    get_book_codes,
    get_collection_group,
)
from adhkar.data.loader import (
    CorpusLoader,
    DocumentSource,
    FileSystemSource,
    HttpSource,
    is_book_document,
    make_source,
)
from adhkar.exceptions import CorpusFormatError, SourceUnavailableError


class TestBookCodes:
    """Test the book catalogue."""

    def test_seventeen_books(self):
        """Test that the corpus lists seventeen unique books."""
        assert len(BOOK_CODES) == 17
        assert len(set(BOOK_CODES)) == 17

    def test_scan_order(self):
        """Test that core books come first, then forties, then supplementary."""
        assert BOOK_CODES[0] == "bukhari"
        assert BOOK_CODES[9] == "nawawi40"
        assert BOOK_CODES[-1] == "shamail_muhammadiyah"

    @pytest.mark.parametrize("group,count", [
        (CollectionGroup.CORE, 9),
        (CollectionGroup.FORTIES, 3),
        (CollectionGroup.SUPPLEMENTARY, 5),
    ])
    def test_codes_per_group(self, group, count):
        """Test the group sizes."""
        assert len(get_book_codes(group)) == count

    def test_collection_group(self):
        """Test group lookup, unknown codes counting as supplementary."""
        assert get_collection_group("muslim") is CollectionGroup.CORE
        assert get_collection_group("qudsi40") is CollectionGroup.FORTIES
        assert get_collection_group("unknown_book") is CollectionGroup.SUPPLEMENTARY
        assert CollectionGroup.CORE.label == "The 9 Books"


class TestCandidatePaths:
    """Test document path resolution."""

    def test_lookup_order(self):
        """Test that candidate paths follow the collection priority."""
        assert candidate_paths("bukhari") == [
            "the_9_books/bukhari.json",
            "other_books/bukhari.json",
            "forties/bukhari.json",
        ]

    @pytest.mark.parametrize("code", ["", "../etc", "a/b", "a\\b", ".hidden"])
    def test_invalid_codes_rejected(self, code):
        """Test that codes which could escape the corpus root are refused."""
        with pytest.raises(ValueError):
            candidate_paths(code)


class TestIsBookDocument:
    """Test the structural check on decoded documents."""

    @pytest.mark.parametrize("document,expected", [
        ({"hadiths": []}, True),
        ({"hadiths": [{"id": 1}], "metadata": {}}, True),
        ({"hadiths": None}, False),
        ({"chapters": []}, False),
        ([], False),
        ("hadiths", False),
        (None, False),
    ])
    def test_structural_check(self, document, expected):
        assert is_book_document(document) is expected


class TestCorpusLoader:
    """Test CorpusLoader lookup, caching and single-flight behavior."""

    def test_load_core_book(self, loader, sample_source):
        """Test that a core book is found at the first candidate path."""
        book = asyncio.run(loader.load_book("bukhari"))

        assert book is not None
        assert book.code == "bukhari"
        assert len(book.hadiths) == 6
        assert sample_source.calls == ["the_9_books/bukhari.json"]

    def test_falls_through_collections(self, loader, sample_source):
        """Test that lookup tries each collection directory in order."""
        book = asyncio.run(loader.load_book("nawawi40"))

        assert book is not None
        assert book.english_title == "nawawi40"
        assert sample_source.calls == [
            "the_9_books/nawawi40.json",
            "other_books/nawawi40.json",
            "forties/nawawi40.json",
        ]

    def test_missing_book_is_none(self, loader, sample_source):
        """Test that an absent book is reported as None after trying every path."""
        assert asyncio.run(loader.load_book("muslim")) is None
        assert len(sample_source.calls) == 3

    def test_absence_not_cached(self, loader, sample_source):
        """Test that a later call retries a book that was missing."""
        asyncio.run(loader.load_book("muslim"))
        sample_source.documents["other_books/muslim.json"] = {"hadiths": []}

        book = asyncio.run(loader.load_book("muslim"))
        assert book is not None
        assert sample_source.fetches_for("muslim") == [
            "the_9_books/muslim.json",
            "other_books/muslim.json",
            "forties/muslim.json",
            "the_9_books/muslim.json",
            "other_books/muslim.json",
        ]

    def test_success_cached(self, loader, sample_source):
        """Test that a loaded book is served from cache without refetching."""
        async def load_twice():
            return await loader.load_book("bukhari"), await loader.load_book("bukhari")

        first, second = asyncio.run(load_twice())
        assert first is second
        assert len(sample_source.calls) == 1
        assert loader.cached_codes == ["bukhari"]
        assert loader.get_cached("bukhari") is first

    def test_single_flight(self, source_factory, settings):
        """Test that concurrent loads of one code share a single fetch."""
        source = source_factory(
            {"the_9_books/bukhari.json": {"hadiths": [{"id": 1}]}},
            delays={"the_9_books/bukhari.json": 0.05},
        )
        loader = CorpusLoader(source, settings)

        async def load_many():
            return await asyncio.gather(*(loader.load_book("bukhari") for _ in range(5)))

        books = asyncio.run(load_many())
        assert len(source.calls) == 1
        assert all(book is books[0] for book in books)

    def test_skips_document_without_hadith_list(self, source_factory, settings):
        """Test that a structurally invalid document counts as absent at that path."""
        source = source_factory({
            "the_9_books/malik.json": {"metadata": {}},
            "other_books/malik.json": {"hadiths": [{"id": 1, "arabic": "نص"}]},
        })
        loader = CorpusLoader(source, settings)

        book = asyncio.run(loader.load_book("malik"))
        assert book is not None
        assert len(book.hadiths) == 1

    def test_malformed_document_raises(self, source_factory, settings):
        """Test that a document passing the structural check but failing to parse raises."""
        source = source_factory({"the_9_books/malik.json": {"hadiths": ["not a hadith"]}})
        loader = CorpusLoader(source, settings)

        with pytest.raises(CorpusFormatError) as exc_info:
            asyncio.run(loader.load_book("malik"))
        assert exc_info.value.book_code == "malik"

    def test_invalid_code_is_none(self, loader, sample_source):
        """Test that an unsafe code is refused without fetching."""
        assert asyncio.run(loader.load_book("../secrets")) is None
        assert sample_source.calls == []

    def test_clear(self, loader, sample_source):
        """Test that clearing the cache forces a refetch."""
        asyncio.run(loader.load_book("bukhari"))
        loader.clear()
        asyncio.run(loader.load_book("bukhari"))
        assert len(sample_source.calls) == 2

    def test_dict_source_satisfies_protocol(self, sample_source):
        assert isinstance(sample_source, DocumentSource)


class TestFileSystemSource:
    """Test reading documents from disk."""

    def test_fetch_document(self, corpus_dir):
        """Test reading and decoding a book document."""
        source = FileSystemSource(corpus_dir)
        document = asyncio.run(source.fetch("the_9_books/bukhari.json"))
        assert document["metadata"]["english"]["title"] == "Sahih al-Bukhari"

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises SourceUnavailableError."""
        source = FileSystemSource(tmp_path)
        with pytest.raises(SourceUnavailableError) as exc_info:
            asyncio.run(source.fetch("the_9_books/bukhari.json"))
        assert exc_info.value.reason == "File not found"

    def test_invalid_json(self, tmp_path):
        """Test that undecodable content raises SourceUnavailableError."""
        (tmp_path / "forties").mkdir()
        (tmp_path / "forties" / "nawawi40.json").write_text("{not json", encoding="utf-8")

        source = FileSystemSource(tmp_path)
        with pytest.raises(SourceUnavailableError) as exc_info:
            asyncio.run(source.fetch("forties/nawawi40.json"))
        assert exc_info.value.reason.startswith("Invalid JSON")

    def test_loader_over_filesystem(self, corpus_dir, settings):
        """Test the loader end to end over a directory tree."""
        loader = CorpusLoader(FileSystemSource(corpus_dir), settings)
        book = asyncio.run(loader.load_book("nawawi40"))
        assert book is not None
        assert book.hadiths[0].id_in_book == "1"


class TestMakeSource:
    """Test source selection from settings."""

    def test_filesystem_by_default(self, tmp_path):
        """Test that a corpus root yields a file-system source."""
        source = make_source(AdhkarSettings(corpus_root=tmp_path))
        assert isinstance(source, FileSystemSource)
        assert source.root == tmp_path

    def test_http_when_base_url_set(self):
        """Test that a base URL yields an HTTP source."""
        source = make_source(AdhkarSettings(corpus_base_url="https://example.org/db/by_book/"))
        assert isinstance(source, HttpSource)
        assert source.base_url == "https://example.org/db/by_book"
