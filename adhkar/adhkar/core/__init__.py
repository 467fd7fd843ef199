"""
Core modules for Adhkar library.

This package contains the core business logic for:
- Classification of hadiths into supplications and remembrances
- Conversion of hadiths into normalized entities
- Indexing the corpus and deriving its category taxonomy
- Searching and filtering loaded collections

Primary API:
    from adhkar.core import CorpusIndex, search_supplications

    index = CorpusIndex(CorpusLoader())
    duas = await index.get_supplications()
    morning = search_supplications("morning", duas)
"""

# Primary API - what most users need
from adhkar.core.index import CorpusIndex, CorpusSource, CorpusState
from adhkar.core.browser import HadithBrowser
from adhkar.core.query import (
    filter_by_category,
    filter_remembrances,
    filter_supplications,
    search_remembrances,
    search_supplications,
)

# Building blocks - for custom pipelines
from adhkar.core.classifier import Classification, classify, is_remembrance, is_supplication
from adhkar.core.converter import first_available, to_remembrance, to_supplication
from adhkar.core.taxonomy import build_categories, slugify, unslugify

__all__ = [
    # Primary API
    "CorpusIndex",
    "CorpusSource",
    "CorpusState",
    "HadithBrowser",
    "search_supplications",
    "search_remembrances",
    "filter_by_category",
    "filter_supplications",
    "filter_remembrances",
    # Building blocks
    "Classification",
    "classify",
    "is_supplication",
    "is_remembrance",
    "first_available",
    "to_supplication",
    "to_remembrance",
    "build_categories",
    "slugify",
    "unslugify",
]
