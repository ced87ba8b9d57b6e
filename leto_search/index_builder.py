"""
Index builder: constructs the inverted index from a corpus of documents.

Each document is tokenized by a task on a bounded thread pool. Tasks put
their postings on a shared queue; the calling thread is the only consumer
and the only writer of the index. A closer thread waits for this build's
tasks and then ends the posting stream.
"""

import queue
import threading
from collections.abc import Mapping
from concurrent.futures import Future, ThreadPoolExecutor, wait
from pathlib import Path

from . import config
from .corpus import Document, read_corpus
from .posting import InvertedIndex, Posting
from .telemetry import BuildTimer, configure_logging
from .tokenizer import count_terms, normalize

# Marks the end of the posting stream.
_END_OF_STREAM = object()


def document_postings(document: Document) -> list[Posting]:
    """
    Tokenize one document and return one posting per distinct surviving token.
    Every posting carries the same normalized description string.
    """
    description = normalize(document.description)
    return [
        Posting(
            token=token,
            tf=tf,
            doc_id=document.doc_id,
            wiki=document.wiki,
            description=description,
        )
        for token, tf in count_terms(description).items()
    ]


def index_document(document: Document, postings: queue.Queue) -> int:
    """Worker task: emit the document's postings onto the queue. Returns the count emitted."""
    emitted = 0
    for posting in document_postings(document):
        postings.put(posting)
        emitted += 1
    return emitted


def _close_when_done(futures: list[Future], postings: queue.Queue) -> None:
    wait(futures)
    postings.put(_END_OF_STREAM)


def _merge_postings(postings: queue.Queue, index: InvertedIndex) -> int:
    """Drain the posting stream into the index until it is closed."""
    merged = 0
    while True:
        item = postings.get()
        if item is _END_OF_STREAM:
            return merged
        index.add_posting(item)
        merged += 1


def build_index(
    documents: Mapping[str, Document],
    *,
    max_workers: int | None = None,
) -> InvertedIndex:
    """
    Build a sealed inverted index over documents (doc_id -> Document).

    Returns only after every document is indexed. If any tokenizer task
    fails its exception is re-raised and no index is returned.
    """
    if max_workers is None:
        max_workers = config.MAX_WORKERS
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    timer = BuildTimer(configure_logging(), documents=len(documents), max_workers=max_workers)

    postings: queue.Queue = queue.Queue()
    index = InvertedIndex()

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="leto-tokenize") as executor:
        futures = [executor.submit(index_document, doc, postings) for doc in documents.values()]
        closer = threading.Thread(
            target=_close_when_done,
            args=(futures, postings),
            name="leto-merge-closer",
            daemon=True,
        )
        closer.start()
        merged = _merge_postings(postings, index)
        closer.join()

    for future in futures:
        future.result()

    index.seal()
    timer.finish(tokens=len(index), postings=merged)
    return index


def build_index_from_file(
    path: Path | None = None,
    *,
    max_workers: int | None = None,
) -> InvertedIndex:
    """
    Read the corpus file (default: config.CORPUS_PATH) and build its index.
    Raises CorpusIOError, CorpusReadError or CorpusParseError on a bad corpus.
    """
    documents = read_corpus(Path(path) if path is not None else config.CORPUS_PATH)
    return build_index(documents, max_workers=max_workers)
