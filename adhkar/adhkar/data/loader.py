"""
Corpus loader.

Fetches per-book JSON documents from one of three collection directories,
parses them into RawBook models and caches them for the loader's lifetime.
A book that cannot be found anywhere is reported as absent (None), never as
an exception, so a corpus scan can carry on with the remaining books.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import aiofiles
import aiohttp
from pydantic import ValidationError

from adhkar.config import AdhkarSettings, get_settings
from adhkar.data import candidate_paths
from adhkar.exceptions import CorpusFormatError, SourceUnavailableError
from adhkar.models import RawBook

logger = logging.getLogger(__name__)


@runtime_checkable
class DocumentSource(Protocol):
    """Where book documents come from."""

    async def fetch(self, path: str) -> Any:
        """
        Fetch and decode the JSON document at a relative path.

        Raises:
            SourceUnavailableError: If the document is missing or undecodable
        """
        ...


class FileSystemSource:
    """Reads book documents from a local corpus directory."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    async def fetch(self, path: str) -> Any:
        file_path = self.root / path
        try:
            async with aiofiles.open(file_path, mode="r", encoding="utf-8") as f:
                content = await f.read()
        except FileNotFoundError:
            raise SourceUnavailableError(str(file_path), "File not found")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(str(file_path), str(e))

        # Large books take a while to decode; keep the event loop free
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, json.loads, content)
        except json.JSONDecodeError as e:
            raise SourceUnavailableError(str(file_path), f"Invalid JSON: {e}")

    def __repr__(self) -> str:
        return f"FileSystemSource({str(self.root)!r})"


class HttpSource:
    """Fetches book documents over HTTP from a static file server."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        session: aiohttp.ClientSession | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def fetch(self, path: str) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        session = await self._get_session()
        try:
            async with session.get(url) as response:
                if response.status != 200:
                    raise SourceUnavailableError(url, f"HTTP {response.status}")
                return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise SourceUnavailableError(url, str(e) or type(e).__name__)
        except ValueError as e:
            raise SourceUnavailableError(url, f"Invalid JSON: {e}")

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    def __repr__(self) -> str:
        return f"HttpSource({self.base_url!r})"


def make_source(settings: AdhkarSettings) -> DocumentSource:
    """Build the document source described by the settings."""
    if settings.corpus_base_url:
        return HttpSource(settings.corpus_base_url, timeout=settings.request_timeout)
    return FileSystemSource(settings.corpus_root)


def is_book_document(document: Any) -> bool:
    """A document is usable only if it is an object carrying a hadith list."""
    return isinstance(document, dict) and isinstance(document.get("hadiths"), list)


class CorpusLoader:
    """
    Loads and caches books by code.

    At most one fetch runs per book code: concurrent callers for the same
    code await the same in-flight task. Successful loads are cached for the
    loader's lifetime; absences are not, so a later call retries.

    Example:
        loader = CorpusLoader(FileSystemSource("db/by_book"))
        book = await loader.load_book("bukhari")
        if book is None:
            ...  # unavailable, carry on without it
    """

    def __init__(
        self,
        source: DocumentSource | None = None,
        settings: AdhkarSettings | None = None,
    ):
        self._settings = settings or get_settings()
        self._source = source if source is not None else make_source(self._settings)
        self._books: dict[str, RawBook] = {}
        self._in_flight: dict[str, asyncio.Task] = {}

    @property
    def source(self) -> DocumentSource:
        return self._source

    @property
    def cached_codes(self) -> list[str]:
        """Codes of the books loaded so far."""
        return list(self._books)

    def get_cached(self, book_code: str) -> RawBook | None:
        return self._books.get(book_code)

    async def load_book(self, book_code: str) -> RawBook | None:
        """
        Load a book by its code.

        Args:
            book_code: Short book code (e.g. "bukhari")

        Returns:
            The parsed book, or None if no candidate location holds a valid document

        Raises:
            CorpusFormatError: If a structurally valid document fails to parse
        """
        book = self._books.get(book_code)
        if book is not None:
            return book

        task = self._in_flight.get(book_code)
        if task is None:
            task = asyncio.ensure_future(self._fetch_book(book_code))
            self._in_flight[book_code] = task
            task.add_done_callback(lambda _t, code=book_code: self._in_flight.pop(code, None))
        # One cancelled waiter must not cancel the fetch for everyone else
        return await asyncio.shield(task)

    async def _fetch_book(self, book_code: str) -> RawBook | None:
        try:
            paths = candidate_paths(book_code)
        except ValueError:
            logger.warning("Refusing to load invalid book code %r", book_code)
            return None

        for path in paths:
            try:
                document = await self._source.fetch(path)
            except SourceUnavailableError as e:
                logger.debug("Book %s not at %s: %s", book_code, path, e.reason)
                continue

            if not is_book_document(document):
                logger.debug("Book %s at %s has no hadith list, skipping", book_code, path)
                continue

            book = self._parse(book_code, document)
            self._books[book_code] = book
            logger.debug(
                "Loaded book %s from %s (%d hadiths, %d chapters)",
                book_code, path, len(book.hadiths), len(book.chapters),
            )
            return book

        logger.debug("Book %s not found in any collection", book_code)
        return None

    @staticmethod
    def _parse(book_code: str, document: dict) -> RawBook:
        try:
            return RawBook.model_validate({**document, "code": book_code})
        except ValidationError as e:
            raise CorpusFormatError(book_code, f"{e.error_count()} validation errors") from e

    def clear(self) -> None:
        """Forget every cached book."""
        self._books.clear()

    async def close(self) -> None:
        """Release network resources held by the source."""
        close = getattr(self._source, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "CorpusLoader":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
