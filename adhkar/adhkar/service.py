"""
Public facade of the Adhkar library.

AdhkarService wires a CorpusLoader, a CorpusIndex, a HadithBrowser and the
favorites stores together and exposes the operations a reader application
needs.

Example:
    async with AdhkarService() as service:
        duas = await service.get_duas()
        morning = service.search_duas("morning", duas)
        categories = await service.get_categories("duas")
"""

import logging
from typing import Optional, Sequence

from adhkar.config import AdhkarSettings, get_settings
from adhkar.core.browser import HadithBrowser
from adhkar.core.index import CorpusIndex, CorpusSource
from adhkar.core.query import (
    filter_remembrances,
    filter_supplications,
    search_remembrances,
    search_supplications,
)
from adhkar.data.loader import CorpusLoader
from adhkar.favorites import (
    AZKAR_FAVORITES_KEY,
    DUA_FAVORITES_KEY,
    FavoritesBackend,
    FavoritesStore,
    JsonFileBackend,
)
from adhkar.models import (
    BookInfo,
    Category,
    EntityType,
    HadithPage,
    HadithRecord,
    RawChapter,
    Remembrance,
    Supplication,
)

logger = logging.getLogger(__name__)


def _mark_favorites(entities, store: FavoritesStore) -> list:
    # Cached entities are never mutated; favorites get flagged copies
    favorites = set(store.get_favorites())
    return [
        entity.model_copy(update={"favorite": True}) if entity.id in favorites else entity
        for entity in entities
    ]


class AdhkarService:
    """
    Supplications, remembrances, categories, favorites and book browsing.

    Args:
        settings: Library settings (default: get_settings())
        loader: Corpus loader; built from the settings if omitted
        index: Corpus index; built on the loader if omitted
        favorites_backend: Storage for favorites (default: JSON file)
    """

    def __init__(
        self,
        settings: AdhkarSettings | None = None,
        loader: CorpusLoader | None = None,
        index: CorpusIndex | None = None,
        favorites_backend: FavoritesBackend | None = None,
    ):
        self.settings = settings or get_settings()
        if loader is None:
            loader = index.loader if index is not None else CorpusLoader(settings=self.settings)
        self.loader = loader
        self.index = index if index is not None else CorpusIndex(loader, self.settings)
        self.browser = HadithBrowser(loader, self.index.book_codes)

        backend = favorites_backend
        if backend is None:
            backend = JsonFileBackend(self.settings.favorites_path)
        self.dua_favorites = FavoritesStore(DUA_FAVORITES_KEY, backend)
        self.azkar_favorites = FavoritesStore(AZKAR_FAVORITES_KEY, backend)

    # ============ Entities ============

    async def get_duas(self, language: str = "en") -> list[Supplication]:
        """
        All supplications, with favorites flagged.

        Args:
            language: Accepted for interface compatibility; the corpus has no
                per-language variants, so it does not change the result.
        """
        logger.debug("get_duas called with language hint %r (no localized corpus)", language)
        duas = await self.index.get_supplications()
        return _mark_favorites(duas, self.dua_favorites)

    async def get_azkar(self, language: str = "en") -> list[Remembrance]:
        """All remembrances, with favorites flagged. `language` has no effect."""
        logger.debug("get_azkar called with language hint %r (no localized corpus)", language)
        azkar = await self.index.get_remembrances()
        return _mark_favorites(azkar, self.azkar_favorites)

    async def get_categories(self, entity_type: EntityType | str = EntityType.DUAS) -> list[Category]:
        return await self.index.get_categories(entity_type)

    def corpus_source(self, entity_type: EntityType | str) -> CorpusSource | None:
        """Whether a collection came from the corpus, the fallback set or the placeholder."""
        return self.index.source_of(entity_type)

    # ============ Query ============

    @staticmethod
    def search_duas(query: Optional[str], duas: Sequence[Supplication]) -> Sequence[Supplication]:
        return search_supplications(query, duas)

    @staticmethod
    def search_azkar(query: Optional[str], azkar: Sequence[Remembrance]) -> Sequence[Remembrance]:
        return search_remembrances(query, azkar)

    @staticmethod
    def filter_duas(duas: Sequence[Supplication], category_id: Optional[str]) -> Sequence[Supplication]:
        return filter_supplications(duas, category_id)

    @staticmethod
    def filter_azkar(azkar: Sequence[Remembrance], category_id: Optional[str]) -> Sequence[Remembrance]:
        return filter_remembrances(azkar, category_id)

    # ============ Favorites ============

    def is_favorite_dua(self, dua_id: str) -> bool:
        return self.dua_favorites.is_favorite(dua_id)

    def is_favorite_zikr(self, zikr_id: str) -> bool:
        return self.azkar_favorites.is_favorite(zikr_id)

    def toggle_favorite_dua(self, dua_id: str) -> bool:
        return self.dua_favorites.toggle_favorite(dua_id)

    def toggle_favorite_zikr(self, zikr_id: str) -> bool:
        return self.azkar_favorites.toggle_favorite(zikr_id)

    def get_favorite_duas(self) -> list[str]:
        return self.dua_favorites.get_favorites()

    def get_favorite_azkar(self) -> list[str]:
        return self.azkar_favorites.get_favorites()

    def _store_for(self, entity_id: str) -> FavoritesStore:
        if entity_id.startswith("dua-"):
            return self.dua_favorites
        if entity_id.startswith("zikr-"):
            return self.azkar_favorites
        raise ValueError(f"Cannot tell the entity type of id {entity_id!r}")

    def is_favorite(self, entity_id: str) -> bool:
        """
        Raises:
            ValueError: If the id is neither a "dua-" nor a "zikr-" id
        """
        return self._store_for(entity_id).is_favorite(entity_id)

    def toggle_favorite(self, entity_id: str) -> bool:
        """
        Toggle a favorite, picking the store from the id prefix.

        Raises:
            ValueError: If the id is neither a "dua-" nor a "zikr-" id
        """
        return self._store_for(entity_id).toggle_favorite(entity_id)

    # ============ Browsing ============

    async def get_available_books(self) -> list[BookInfo]:
        return await self.browser.get_available_books()

    async def get_book_info(self, book_code: str) -> BookInfo | None:
        return await self.browser.get_book_info(book_code)

    async def get_chapters(self, book_code: str) -> list[RawChapter]:
        return await self.browser.get_chapters(book_code)

    async def get_hadith(self, full_id: str) -> HadithRecord | None:
        return await self.browser.get_hadith(full_id)

    async def get_hadiths_by_book(
        self,
        book_code: str,
        limit: int = 20,
        offset: int = 0,
        chapter_id: Optional[str] = None,
    ) -> HadithPage:
        return await self.browser.get_hadiths_by_book(book_code, limit, offset, chapter_id)

    async def search_hadiths(
        self,
        query: str,
        book_codes: Sequence[str] | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> HadithPage:
        return await self.browser.search_hadiths(query, book_codes, limit, offset)

    # ============ Lifecycle ============

    async def close(self) -> None:
        await self.loader.close()

    async def __aenter__(self) -> "AdhkarService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
