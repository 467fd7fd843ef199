"""
Favorites persistence.

A FavoritesStore records which entity ids a user marked as favorite, under a
fixed namespace per entity type. Storage failures never reach the caller:
reads fall back to "not favorite" and writes become no-ops.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

import platformdirs

from adhkar.exceptions import FavoritesStoreError
from adhkar.models import EntityType

logger = logging.getLogger(__name__)

APP_NAME = "Adhkar"
APP_AUTHOR = "Adhkar"

DUA_FAVORITES_KEY = "dua_favorites"
AZKAR_FAVORITES_KEY = "azkar_favorites"

FAVORITES_KEYS: dict[EntityType, str] = {
    EntityType.DUAS: DUA_FAVORITES_KEY,
    EntityType.AZKAR: AZKAR_FAVORITES_KEY,
}


class FavoritesBackend(Protocol):
    """Key-value storage of id lists."""

    def read(self, namespace: str) -> list[str]:
        """Raises FavoritesStoreError if the storage cannot be read."""
        ...

    def write(self, namespace: str, ids: list[str]) -> None:
        """Raises FavoritesStoreError if the storage cannot be written."""
        ...


class MemoryBackend:
    """Keeps favorites in memory for the lifetime of the process."""

    def __init__(self, data: dict[str, list[str]] | None = None):
        self._data: dict[str, list[str]] = {k: list(v) for k, v in (data or {}).items()}

    def read(self, namespace: str) -> list[str]:
        return list(self._data.get(namespace, []))

    def write(self, namespace: str, ids: list[str]) -> None:
        self._data[namespace] = list(ids)


def default_favorites_path() -> Path:
    """favorites.json in the user data directory."""
    return Path(platformdirs.user_data_dir(APP_NAME, APP_AUTHOR)) / "favorites.json"


class JsonFileBackend:
    """
    Stores every namespace in one JSON object on disk.

    Example file:
        {"dua_favorites": ["dua-bukhari-6306"], "azkar_favorites": []}
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else default_favorites_path()

    def _load(self) -> dict:
        try:
            if not self.path.exists():
                return {}
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        # ValueError covers both JSONDecodeError and UnicodeDecodeError
        except (ValueError, OSError) as e:
            raise FavoritesStoreError(f"Could not read {self.path}: {e}")
        if not isinstance(data, dict):
            raise FavoritesStoreError(f"Unexpected favorites format in {self.path}")
        return data

    def read(self, namespace: str) -> list[str]:
        ids = self._load().get(namespace, [])
        if not isinstance(ids, list):
            raise FavoritesStoreError(f"Namespace {namespace!r} is not a list", namespace)
        return [str(i) for i in ids]

    def write(self, namespace: str, ids: list[str]) -> None:
        data = self._load()
        data[namespace] = list(ids)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise FavoritesStoreError(f"Could not write {self.path}: {e}", namespace)


class FavoritesStore:
    """
    Favorite ids of one entity type.

    Example:
        store = FavoritesStore(DUA_FAVORITES_KEY, JsonFileBackend())
        store.toggle_favorite("dua-bukhari-6306")  # True, now a favorite
        store.is_favorite("dua-bukhari-6306")      # True
    """

    def __init__(self, namespace: str, backend: FavoritesBackend | None = None):
        self.namespace = namespace
        self._backend = backend if backend is not None else MemoryBackend()

    @classmethod
    def for_type(cls, entity_type: EntityType | str, backend: FavoritesBackend | None = None) -> "FavoritesStore":
        return cls(FAVORITES_KEYS[EntityType(entity_type)], backend)

    def get_favorites(self) -> list[str]:
        """Favorite ids in the order they were added; empty if storage fails."""
        try:
            return self._backend.read(self.namespace)
        except FavoritesStoreError as e:
            logger.error("Could not read favorites (%s): %s", self.namespace, e, exc_info=True)
            return []

    def is_favorite(self, entity_id: str) -> bool:
        return entity_id in self.get_favorites()

    def toggle_favorite(self, entity_id: str) -> bool:
        """
        Flip the favorite state of an id.

        Returns:
            The new state: True if the id is now a favorite. False when the
            storage fails, in which case nothing changes.
        """
        try:
            favorites = self._backend.read(self.namespace)
            if entity_id in favorites:
                favorites.remove(entity_id)
                added = False
            else:
                favorites.append(entity_id)
                added = True
            self._backend.write(self.namespace, favorites)
        except FavoritesStoreError as e:
            logger.error(
                "Could not toggle favorite %s (%s): %s", entity_id, self.namespace, e, exc_info=True
            )
            return False
        return added
