"""
Command-line search over a corpus file.

The index is built in memory from the corpus on every run, then either a
single query is answered or queries are read interactively.

Usage (from repo root):
    python -m leto_search.search_cli Sandtrout --corpus data.json --top 10
    python -m leto_search.search_cli --corpus data.json
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable

from . import config
from .exceptions import LetoSearchError
from .corpus import read_corpus
from .index_builder import build_index
from .posting import InvertedIndex
from .search import search


def print_results(query: str, index: InvertedIndex, top_k: int) -> None:
    results = search(query, index, top_k)
    if not results:
        print("No documents matched the query.")
        return
    for result in results:
        print(result)


def run_search_loop(index: InvertedIndex, num_docs: int, top_k: int) -> None:
    """
    Interactive command-line search loop.
    num_docs counts every corpus document, including those with no indexed terms.
    """
    print(f"Indexed {num_docs} documents, {len(index)} unique tokens.")
    print("Enter queries. Empty line or Ctrl+C to exit.")
    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break
        print_results(raw_query, index, top_k)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Term-frequency search over a JSON corpus.")
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Query to run once. Omit to start an interactive loop.",
    )
    parser.add_argument(
        "--corpus",
        type=Path,
        default=config.CORPUS_PATH,
        help="Path to the corpus JSON file.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=config.DEFAULT_RESULT_LIMIT,
        help="Number of top results to show.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=config.MAX_WORKERS,
        help="Number of tokenizer threads used to build the index.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.top < 0:
        parser.error("--top must be non-negative")
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    try:
        documents = read_corpus(args.corpus)
        index = build_index(documents, max_workers=args.workers)
    except LetoSearchError as e:
        print(f"Could not build index: {e}")
        return 1

    if args.query is not None:
        print_results(args.query, index, args.top)
    else:
        run_search_loop(index, len(documents), args.top)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
