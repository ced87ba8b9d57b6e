"""
Query evaluation and ranking over a built inverted index.

Documents are scored by summing the term frequencies of every matched
query token, then ranked by score (descending) with ties broken by
document ID (ascending). Query tokens are lowercased but, unlike document
tokens, not stopword-filtered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from . import config
from .exceptions import QueryError
from .posting import InvertedIndex
from .telemetry import configure_logging, log_event
from .tokenizer import split_terms


@dataclass
class ScoredDocument:
    doc_id: str
    score: int
    wiki: str
    description: str


@dataclass(frozen=True)
class Result:
    term: str
    wiki: str

    def __str__(self) -> str:
        return f"Term {self.term}, Wiki: {self.wiki}"


def evaluate_query(query: str, index: InvertedIndex) -> Dict[str, ScoredDocument]:
    """
    Accumulate per-document scores for every query token found in the index.
    Repeated query tokens count once per repetition; unknown tokens are skipped.
    """
    scores: Dict[str, ScoredDocument] = {}
    for token in split_terms(query):
        for p in index.get_postings(token):
            entry = scores.get(p.doc_id)
            if entry is None:
                entry = ScoredDocument(doc_id=p.doc_id, score=0, wiki=p.wiki, description=p.description)
                scores[p.doc_id] = entry
            entry.score += p.tf
            entry.wiki = p.wiki
            entry.description = p.description
    return scores


def rank(scored: Iterable[ScoredDocument], limit: int) -> List[Result]:
    """
    Sort by score descending, then doc_id ascending, and keep the first limit.
    """
    ranked = sorted(scored, key=lambda d: (-d.score, d.doc_id))
    return [Result(term=d.doc_id, wiki=d.wiki) for d in ranked[:limit]]


def search(
    query: str,
    index: InvertedIndex,
    limit: int = config.DEFAULT_RESULT_LIMIT,
) -> List[Result]:
    """
    Return at most limit results for query, best first.
    Raises QueryError if limit is not a non-negative integer.
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise QueryError(f"limit must be an integer, got {type(limit).__name__}")
    if limit < 0:
        raise QueryError(f"limit must be non-negative, got {limit}")

    scored = evaluate_query(query, index)
    results = rank(scored.values(), limit)
    log_event(
        configure_logging(),
        "search",
        query=query,
        limit=limit,
        matched=len(scored),
        returned=len(results),
    )
    return results
