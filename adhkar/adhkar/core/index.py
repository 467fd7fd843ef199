"""
Corpus index.

Scans every book of the corpus once, classifies each hadith, converts the
matches into supplications and remembrances, and derives the category
taxonomy. All results are cached on an explicit CorpusState owned by one
CorpusIndex, so the expensive scan runs at most once per index.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from adhkar.config import AdhkarSettings, get_settings
from adhkar.core.classifier import classify
from adhkar.core.converter import to_remembrance, to_supplication
from adhkar.core.taxonomy import build_categories, categories_of_type, general_category
from adhkar.data import BOOK_CODES
from adhkar.data.fallback import (
    FALLBACK_REMEMBRANCES,
    FALLBACK_SUPPLICATIONS,
    PLACEHOLDER_REMEMBRANCE,
    PLACEHOLDER_SUPPLICATION,
)
from adhkar.data.loader import CorpusLoader
from adhkar.models import Category, EntityType, RawBook, Remembrance, Supplication

logger = logging.getLogger(__name__)


class CorpusSource(str, Enum):
    """Where a served entity collection came from."""

    CORPUS = "corpus"  # genuine scan result
    FALLBACK = "fallback"  # scan found nothing of this type
    PLACEHOLDER = "placeholder"  # scan failed unexpectedly


@dataclass
class ScanStats:
    """Counters collected during a corpus scan."""

    books_loaded: list[str] = field(default_factory=list)
    books_missing: list[str] = field(default_factory=list)
    hadiths_seen: int = 0
    hadiths_without_arabic: int = 0
    dual_classified: int = 0

    def summary(self) -> str:
        return (
            f"{len(self.books_loaded)} books loaded, {len(self.books_missing)} missing, "
            f"{self.hadiths_seen} hadiths seen ({self.hadiths_without_arabic} without Arabic, "
            f"{self.dual_classified} classified as both)"
        )


@dataclass
class CorpusState:
    """
    Cached results of a corpus scan.

    Every field is written once per scan and then only read.
    """

    supplications: list[Supplication] | None = None
    remembrances: list[Remembrance] | None = None
    categories: list[Category] | None = None
    supplication_source: CorpusSource | None = None
    remembrance_source: CorpusSource | None = None
    stats: ScanStats = field(default_factory=ScanStats)

    @property
    def is_scanned(self) -> bool:
        return self.supplications is not None and self.remembrances is not None

    def clear(self) -> None:
        self.supplications = None
        self.remembrances = None
        self.categories = None
        self.supplication_source = None
        self.remembrance_source = None
        self.stats = ScanStats()


class CorpusIndex:
    """
    In-memory index of supplications, remembrances and their categories.

    Example:
        index = CorpusIndex(CorpusLoader())
        duas = await index.get_supplications()
        categories = await index.get_categories(EntityType.DUAS)
    """

    def __init__(
        self,
        loader: CorpusLoader,
        settings: AdhkarSettings | None = None,
        book_codes: Sequence[str] | None = None,
        state: CorpusState | None = None,
    ):
        self._loader = loader
        self._settings = settings or get_settings()
        self._book_codes = tuple(book_codes) if book_codes is not None else BOOK_CODES
        self._state = state if state is not None else CorpusState()
        self._scan_task: asyncio.Task | None = None

    @property
    def loader(self) -> CorpusLoader:
        return self._loader

    @property
    def state(self) -> CorpusState:
        return self._state

    @property
    def book_codes(self) -> tuple[str, ...]:
        return self._book_codes

    def source_of(self, entity_type: EntityType | str) -> CorpusSource | None:
        """Which tier the served collection of a type came from (None before the scan)."""
        if EntityType(entity_type) is EntityType.DUAS:
            return self._state.supplication_source
        return self._state.remembrance_source

    # ============ Public API ============

    async def get_supplications(self) -> list[Supplication]:
        """All supplications of the corpus (or a fallback set), scanning on first use."""
        await self._ensure_scanned()
        return self._state.supplications

    async def get_remembrances(self) -> list[Remembrance]:
        """All remembrances of the corpus (or a fallback set), scanning on first use."""
        await self._ensure_scanned()
        return self._state.remembrances

    async def get_categories(self, entity_type: EntityType | str = EntityType.DUAS) -> list[Category]:
        """
        Categories of one entity type.

        The taxonomy of both types is derived and cached together; callers
        get the subset in the requested type's id namespace.

        Args:
            entity_type: EntityType or its value ("duas" / "azkar")

        Returns:
            Categories in first-seen order
        """
        entity_type = EntityType(entity_type)
        if self._state.categories is None:
            try:
                duas = await self.get_supplications()
                azkar = await self.get_remembrances()
                self._state.categories = (
                    build_categories(duas, EntityType.DUAS)
                    + build_categories(azkar, EntityType.AZKAR)
                )
            except Exception as e:
                logger.error("Category derivation failed: %s", e, exc_info=True)
                return [general_category(entity_type)]

            logger.debug("Derived %d categories", len(self._state.categories))

        return categories_of_type(self._state.categories, entity_type)

    def reset(self) -> None:
        """Drop every cached result so the next call rescans the corpus."""
        if self._scan_task is not None and not self._scan_task.done():
            self._scan_task.cancel()
        self._state.clear()
        self._scan_task = None

    # ============ Scan ============

    async def _ensure_scanned(self) -> None:
        while not self._state.is_scanned:
            if self._scan_task is None or self._scan_task.done():
                self._scan_task = asyncio.ensure_future(self._scan())
            task = self._scan_task
            try:
                await asyncio.shield(task)
            except asyncio.CancelledError:
                # A reset() cancelled the scan: start over. Otherwise the
                # caller itself was cancelled.
                if not task.cancelled():
                    raise

    async def _scan(self) -> None:
        state = self._state
        state.stats = ScanStats()
        try:
            duas, azkar = await self._scan_books()
        except Exception as e:
            logger.error("Corpus scan failed, serving placeholder entities: %s", e, exc_info=True)
            state.supplications = [PLACEHOLDER_SUPPLICATION]
            state.remembrances = [PLACEHOLDER_REMEMBRANCE]
            state.supplication_source = CorpusSource.PLACEHOLDER
            state.remembrance_source = CorpusSource.PLACEHOLDER
            return

        logger.debug("Corpus scan finished: %s", state.stats.summary())

        if duas:
            logger.info("Loaded %d supplications from the corpus", len(duas))
            state.supplications = duas
            state.supplication_source = CorpusSource.CORPUS
        else:
            logger.warning("No supplications found in the corpus, serving the fallback set")
            state.supplications = list(FALLBACK_SUPPLICATIONS)
            state.supplication_source = CorpusSource.FALLBACK

        if azkar:
            logger.info("Loaded %d remembrances from the corpus", len(azkar))
            state.remembrances = azkar
            state.remembrance_source = CorpusSource.CORPUS
        else:
            logger.warning("No remembrances found in the corpus, serving the fallback set")
            state.remembrances = list(FALLBACK_REMEMBRANCES)
            state.remembrance_source = CorpusSource.FALLBACK

    async def _scan_books(self) -> tuple[list[Supplication], list[Remembrance]]:
        duas: list[Supplication] = []
        azkar: list[Remembrance] = []

        if not self._settings.concurrent_loads:
            for code in self._book_codes:
                book = await self._loader.load_book(code)
                self._collect(code, book, duas, azkar)
            return duas, azkar

        semaphore = asyncio.Semaphore(self._settings.max_concurrent_loads)

        async def load(code: str) -> RawBook | None:
            async with semaphore:
                return await self._loader.load_book(code)

        tasks = [asyncio.ensure_future(load(code)) for code in self._book_codes]
        try:
            # Consume in book order so book N's entities precede book N+1's
            for code, task in zip(self._book_codes, tasks):
                book = await task
                self._collect(code, book, duas, azkar)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
                elif not task.cancelled():
                    # Mark failures of abandoned loads as retrieved
                    task.exception()
        return duas, azkar

    def _collect(
        self,
        code: str,
        book: RawBook | None,
        duas: list[Supplication],
        azkar: list[Remembrance],
    ) -> None:
        stats = self._state.stats
        if book is None:
            logger.warning("Book %s is unavailable, skipping it", code)
            stats.books_missing.append(code)
            return

        stats.books_loaded.append(code)
        book_title = book.english_title
        title_length = self._settings.title_max_length
        found_duas = found_azkar = 0

        for hadith in book.hadiths:
            stats.hadiths_seen += 1
            if not hadith.has_arabic:
                stats.hadiths_without_arabic += 1
                continue

            result = classify(hadith)
            if not result:
                continue

            chapter_title = book.chapter_title(hadith.chapter_id)
            # A hadith matching both classifiers deliberately yields two entities
            if result.supplication:
                duas.append(to_supplication(hadith, code, book_title, chapter_title, title_length))
                found_duas += 1
            if result.remembrance:
                azkar.append(to_remembrance(hadith, code, book_title, chapter_title))
                found_azkar += 1
            if result.is_dual:
                stats.dual_classified += 1

        logger.debug(
            "Book %s (%s): %d hadiths, %d supplications, %d remembrances",
            code, book_title, len(book.hadiths), found_duas, found_azkar,
        )
