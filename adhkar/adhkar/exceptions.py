"""
Exception hierarchy for Adhkar library.
"""


class AdhkarError(Exception):
    """Base class for all Adhkar errors."""


class CorpusError(AdhkarError):
    """Raised for problems reading the hadith corpus."""


class SourceUnavailableError(CorpusError):
    """A candidate location did not yield a usable document."""

    def __init__(self, location: str, reason: str = "Not found"):
        self.location = location
        self.reason = reason
        super().__init__(f"{location}: {reason}")


class CorpusFormatError(CorpusError):
    """A book document passed the structural check but could not be parsed."""

    def __init__(self, book_code: str, reason: str):
        self.book_code = book_code
        self.reason = reason
        super().__init__(f"Malformed book '{book_code}': {reason}")


class FavoritesStoreError(AdhkarError):
    """The favorites backend could not be read or written."""

    def __init__(self, message: str, namespace: str | None = None):
        self.namespace = namespace
        super().__init__(message)
