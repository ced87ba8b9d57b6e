"""
Posting and inverted index data structures.

A posting represents a token's occurrence in a document: its in-document
frequency plus the document's reference link and normalized description.
"""

from dataclasses import dataclass
from typing import Iterator

from .exceptions import IndexSealedError


@dataclass(frozen=True)
class Posting:
    """
    Represents a token's occurrence in a document.
    - token: normalized, lowercased term
    - tf: term frequency within the document
    - doc_id: document identifier
    - wiki: reference link of the document
    - description: normalized description, shared by all postings of the document
    """

    token: str
    tf: int
    doc_id: str
    wiki: str
    description: str

    def __repr__(self) -> str:
        return f"Posting(token={self.token!r}, doc_id={self.doc_id!r}, tf={self.tf})"


class InvertedIndex:
    """
    Inverted index: map from token -> postings.

    Built once by a single writer, then sealed. Once sealed the postings are
    stored as tuples and any further add_posting raises IndexSealedError, so
    a sealed index can be shared by concurrent readers.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Posting] | tuple[Posting, ...]] = {}
        self._doc_ids: set[str] = set()
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def add_posting(self, posting: Posting) -> None:
        """Append a posting for its token (no duplicate check)."""
        if self._sealed:
            raise IndexSealedError(f"cannot add posting for {posting.token!r}: index is sealed")
        if posting.token not in self._index:
            self._index[posting.token] = []
        self._index[posting.token].append(posting)
        self._doc_ids.add(posting.doc_id)

    def seal(self) -> None:
        """Freeze the index. Sealing an already sealed index is a no-op."""
        if self._sealed:
            return
        self._index = {token: tuple(postings) for token, postings in self._index.items()}
        self._doc_ids = frozenset(self._doc_ids)
        self._sealed = True

    def get_postings(self, token: str) -> tuple[Posting, ...]:
        """Return the postings for a token, or an empty tuple."""
        return tuple(self._index.get(token, ()))

    def tokens(self) -> Iterator[str]:
        """Iterate over all tokens in the index."""
        return iter(self._index)

    def doc_ids(self) -> frozenset[str]:
        """IDs of every document with at least one posting."""
        return frozenset(self._doc_ids)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, token: str) -> bool:
        return token in self._index
