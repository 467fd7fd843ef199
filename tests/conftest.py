"""
Shared fixtures and test configuration for Adhkar tests.
"""

import asyncio
import copy
import json

import pytest

from adhkar.config import AdhkarSettings
from adhkar.core import CorpusIndex
from adhkar.data.loader import CorpusLoader
from adhkar.exceptions import SourceUnavailableError
from adhkar.favorites import MemoryBackend
from adhkar.service import AdhkarService


class DictSource:
    """In-memory document source that records every fetch."""

    def __init__(self, documents=None, delays=None, error=None):
        self.documents = dict(documents or {})
        self.delays = dict(delays or {})
        self.error = error
        self.calls = []

    async def fetch(self, path):
        self.calls.append(path)
        delay = self.delays.get(path, 0.0)
        if delay:
            await asyncio.sleep(delay)
        if self.error is not None:
            raise self.error
        if path not in self.documents:
            raise SourceUnavailableError(path, "Not found")
        return self.documents[path]

    def fetches_for(self, book_code):
        return [p for p in self.calls if p.endswith(f"/{book_code}.json")]


BUKHARI_DOCUMENT = {
    "id": 1,
    "metadata": {
        "id": 1,
        "length": 6,
        "arabic": {"title": "صحيح البخاري", "author": "الإمام محمد بن إسماعيل البخاري"},
        "english": {"title": "Sahih al-Bukhari", "author": "Imam Muhammad ibn Ismail al-Bukhari"},
    },
    "chapters": [
        {"id": 1, "bookId": 1, "arabic": "كتاب الدعوات", "english": "Invocations"},
        {"id": 2, "bookId": 1, "arabic": "كتاب البيوع", "english": "Sales"},
    ],
    "hadiths": [
        {
            "id": 10, "idInBook": 6306, "chapterId": 1, "bookId": 1,
            "arabic": "اللهم اغفر لي",
            "english": {"narrator": "Narrated Shaddad bin Aus:", "text": "O Allah, forgive me"},
        },
        {
            "id": 11, "idInBook": 6400, "chapterId": 1, "bookId": 1,
            "arabic": "سُبْحَانَ اللَّهِ",
            "english": {"narrator": "Narrated Abu Huraira:", "text": "Say Subhan Allah 33 times"},
        },
        {
            "id": 12, "idInBook": 6407, "chapterId": 1, "bookId": 1,
            "arabic": "سُبْحَانَ اللَّهِ وَبِحَمْدِهِ",
            "english": {
                "narrator": "Narrated Abu Huraira:",
                "text": (
                    "Whoever says this in the morning will be protected until evening. "
                    "Subhan Allah."
                ),
            },
        },
        {
            "id": 13, "idInBook": 2100, "chapterId": 2, "bookId": 1,
            "arabic": "باع جملا",
            "english": {"narrator": "Narrated Jabir:", "text": "He sold a camel at the market"},
            "grades": [{"grade": "Sahih", "graded_by": "Al-Albani"}],
        },
        {
            "id": 14, "idInBook": 6500, "chapterId": 1, "bookId": 1,
            "arabic": "",
            "english": {"text": "O Allah, guide me"},
        },
        {
            "id": 15, "idInBook": 7000, "chapterId": 99, "bookId": 1,
            "arabic": "رب ارحمني",
            "english": {"text": "My Lord, have mercy on me"},
        },
    ],
}

NAWAWI_DOCUMENT = {
    "hadiths": [
        {
            "id": 1, "idInBook": 1, "chapterId": 1, "bookId": 10,
            "arabic": "ذكر الله",
            "english": {"text": "Remember Allah often, repeat it three times"},
        },
    ],
}

SAMPLE_DOCUMENTS = {
    "the_9_books/bukhari.json": BUKHARI_DOCUMENT,
    "forties/nawawi40.json": NAWAWI_DOCUMENT,
}


@pytest.fixture
def settings():
    """Settings with sequential loads so fetch order is deterministic."""
    return AdhkarSettings(concurrent_loads=False)


@pytest.fixture
def bukhari_document():
    return copy.deepcopy(BUKHARI_DOCUMENT)


@pytest.fixture
def source_factory():
    """Build a DictSource from documents keyed by relative path."""
    return DictSource


@pytest.fixture
def sample_source():
    return DictSource(SAMPLE_DOCUMENTS)


@pytest.fixture
def loader(sample_source, settings):
    return CorpusLoader(sample_source, settings)


@pytest.fixture
def index(loader, settings):
    return CorpusIndex(loader, settings)


@pytest.fixture
def service(index, settings):
    return AdhkarService(settings, index=index, favorites_backend=MemoryBackend())


@pytest.fixture
def corpus_dir(tmp_path):
    """The sample corpus written to disk in its collection layout."""
    root = tmp_path / "by_book"
    for relative_path, document in SAMPLE_DOCUMENTS.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
    return root
