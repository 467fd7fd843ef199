"""
Adhkar - supplications and remembrances extracted from the hadith corpus.

Classifies the hadiths of seventeen collections into supplications (dua) and
remembrance formulas (zikr), normalizes them into uniform entities, derives a
category taxonomy and serves search and filter queries over the result.

Example:
    import asyncio
    from adhkar import AdhkarService

    async def main():
        async with AdhkarService() as service:
            duas = await service.get_duas()
            for dua in service.search_duas("forgive", duas)[:5]:
                print(dua.reference, dua.title)

    asyncio.run(main())
"""

__version__ = "0.1.0"

from adhkar.config import AdhkarSettings, configure, get_settings
from adhkar.core import CorpusIndex, CorpusSource, HadithBrowser
from adhkar.data.loader import CorpusLoader, FileSystemSource, HttpSource
from adhkar.favorites import FavoritesStore, JsonFileBackend, MemoryBackend
from adhkar.models import Category, EntityType, Remembrance, Supplication
from adhkar.service import AdhkarService

__all__ = [
    "__version__",
    "AdhkarSettings",
    "configure",
    "get_settings",
    "AdhkarService",
    "CorpusIndex",
    "CorpusSource",
    "CorpusLoader",
    "FileSystemSource",
    "HttpSource",
    "HadithBrowser",
    "FavoritesStore",
    "JsonFileBackend",
    "MemoryBackend",
    "Category",
    "EntityType",
    "Remembrance",
    "Supplication",
]
