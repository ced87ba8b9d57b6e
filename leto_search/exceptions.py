"""Exception hierarchy for leto_search.

Corpus errors abort an index build; no partial index is returned.
"""

from __future__ import annotations


class LetoSearchError(Exception):
    """Base class for all leto_search exceptions."""


class CorpusIOError(LetoSearchError, OSError):
    """Raised when the corpus file cannot be opened or statted."""


class CorpusReadError(LetoSearchError):
    """Raised when the corpus file is read short of its reported size."""


class CorpusParseError(LetoSearchError, ValueError):
    """Raised when the corpus file is not a valid JSON document mapping."""


class QueryError(LetoSearchError, ValueError):
    """Raised for invalid search parameters."""


class IndexSealedError(LetoSearchError):
    """Raised when a sealed index is written to."""
