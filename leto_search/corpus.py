"""
Corpus reader: loads the document collection from a JSON file.

File format (one JSON object):
    {"<doc_id>": {"description": str, "wiki": str}, ...}
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import CorpusIOError, CorpusParseError, CorpusReadError
from .telemetry import configure_logging, log_event


@dataclass(frozen=True)
class Document:
    doc_id: str
    description: str
    wiki: str


def _read_all_bytes(path: Path) -> bytes:
    """
    Read the whole file in a single read call.
    A read shorter than the size reported by fstat is an error, not retried.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise CorpusIOError(f"Could not open corpus file {path}: {e}") from e
    with f:
        try:
            size = os.fstat(f.fileno()).st_size
        except OSError as e:
            raise CorpusIOError(f"Could not stat corpus file {path}: {e}") from e
        buffer = f.read(size)
    if len(buffer) < size:
        raise CorpusReadError(
            f"Could not read all bytes of corpus file {path}: got {len(buffer)} of {size}"
        )
    return buffer


def _field(doc_id: str, body: dict, name: str) -> str:
    value = body.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise CorpusParseError(
            f"Document {doc_id!r} field {name!r} must be a string, got {type(value).__name__}"
        )
    return value


def parse_corpus(raw: bytes | str) -> dict[str, Document]:
    """
    Parse corpus JSON into Documents keyed by ID.
    JSON null behaves like an absent value: a null corpus is empty, a null
    document has no fields, and a missing or null field is the empty string.
    """
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CorpusParseError(f"Malformed corpus JSON: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CorpusParseError(
            f"Corpus must be a JSON object of documents, got {type(data).__name__}"
        )

    documents: dict[str, Document] = {}
    for doc_id, body in data.items():
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise CorpusParseError(
                f"Document {doc_id!r} must be a JSON object, got {type(body).__name__}"
            )
        documents[doc_id] = Document(
            doc_id=doc_id,
            description=_field(doc_id, body, "description"),
            wiki=_field(doc_id, body, "wiki"),
        )
    return documents


def read_corpus(path: Path) -> dict[str, Document]:
    """Load every document from the corpus file at path."""
    path = Path(path)
    documents = parse_corpus(_read_all_bytes(path))
    log_event(configure_logging(), "corpus_loaded", path=str(path), documents=len(documents))
    return documents
