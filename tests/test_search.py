from concurrent.futures import ThreadPoolExecutor

import pytest

from leto_search.corpus import Document
from leto_search.exceptions import QueryError
from leto_search.index_builder import build_index
from leto_search.search import Result, ScoredDocument, evaluate_query, rank, search


def _index(entries: dict[str, tuple[str, str]], max_workers: int = 4):
    documents = {
        doc_id: Document(doc_id=doc_id, description=description, wiki=wiki)
        for doc_id, (description, wiki) in entries.items()
    }
    return build_index(documents, max_workers=max_workers)


def test_single_document_scenario() -> None:
    index = _index({"doc1": ("Sandtrout are Sandtrout", "w1")})

    assert search("Sandtrout", index, 10) == [Result(term="doc1", wiki="w1")]
    scored = evaluate_query("Sandtrout", index)
    assert scored["doc1"].score == 2


def test_higher_frequency_ranks_first() -> None:
    index = _index(
        {
            "doc1": ("worm worm worm", "w1"),
            "doc2": ("worm worm worm worm worm", "w2"),
        }
    )
    results = search("worm", index, 10)
    assert [r.term for r in results] == ["doc2", "doc1"]

    scored = evaluate_query("worm", index)
    assert {doc_id: d.score for doc_id, d in scored.items()} == {"doc1": 3, "doc2": 5}


def test_zero_limit_returns_nothing(dune_corpus) -> None:
    index = build_index(dune_corpus)
    assert search("worm spice arrakis", index, 0) == []


def test_stopword_only_in_documents_matches_nothing() -> None:
    index = _index({"doc1": ("The worm of the desert", "w1")})
    assert search("the", index, 10) == []
    assert search("THE OF", index, 10) == []


def test_absent_tokens_are_skipped(dune_corpus) -> None:
    index = build_index(dune_corpus)
    assert search("harkonnen", index, 10) == []
    assert [r.term for r in search("harkonnen melange", index, 10)] == ["spice"]


def test_empty_query(dune_corpus) -> None:
    index = build_index(dune_corpus)
    assert search("", index, 10) == []
    assert search("   ", index, 10) == []


def test_query_side_is_not_stopword_filtered() -> None:
    index = _index({"doc1": ("worm", "w1")})
    assert search("the worm", index, 10) == [Result(term="doc1", wiki="w1")]


def test_query_is_case_insensitive(dune_corpus) -> None:
    index = build_index(dune_corpus)
    assert search("SPICE", index, 10) == search("spice", index, 10)


def test_repeated_query_tokens_add_up() -> None:
    index = _index({"doc1": ("worm worm", "w1")})
    assert evaluate_query("worm worm Worm", index)["doc1"].score == 6


def test_scores_sum_across_tokens(dune_corpus) -> None:
    index = build_index(dune_corpus)
    scored = evaluate_query("worm spice", index)
    assert {doc_id: d.score for doc_id, d in scored.items()} == {
        "arrakis": 2,
        "sandworm": 3,
        "spice": 3,
    }
    assert [r.term for r in search("worm spice", index, 10)] == ["sandworm", "spice", "arrakis"]


def test_ties_break_by_doc_id() -> None:
    index = _index(
        {
            "zeta": ("spice", "wz"),
            "alpha": ("spice", "wa"),
            "Mid": ("spice", "wm"),
            "beta": ("spice spice", "wb"),
        }
    )
    assert [r.term for r in search("spice", index, 10)] == ["beta", "Mid", "alpha", "zeta"]


def test_limit_bounds_result_size(dune_corpus) -> None:
    index = build_index(dune_corpus)
    query = "worm spice arrakis water melange"
    full = search(query, index, 100)
    assert len(full) == 5
    for limit in range(0, 7):
        results = search(query, index, limit)
        assert len(results) <= limit
        assert results == full[:limit]


def test_results_independent_of_worker_count(dune_corpus) -> None:
    query = "worm spice arrakis water"
    expected = search(query, build_index(dune_corpus, max_workers=1), 10)
    for workers in (2, 3, 8, 16):
        for _ in range(5):
            assert search(query, build_index(dune_corpus, max_workers=workers), 10) == expected


def test_concurrent_queries_share_index(dune_corpus) -> None:
    index = build_index(dune_corpus)
    expected = search("worm spice", index, 10)
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: search("worm spice", index, 10), range(50)))
    assert all(r == expected for r in results)


def test_evaluate_query_records_document_details() -> None:
    index = _index({"doc1": ("Worm, spice.", "w1")})
    scored = evaluate_query("worm", index)
    assert scored["doc1"] == ScoredDocument(doc_id="doc1", score=1, wiki="w1", description="Worm spice")


def test_rank_orders_and_truncates() -> None:
    scored = [
        ScoredDocument(doc_id="b", score=1, wiki="wb", description=""),
        ScoredDocument(doc_id="a", score=1, wiki="wa", description=""),
        ScoredDocument(doc_id="c", score=4, wiki="wc", description=""),
    ]
    assert rank(scored, 2) == [Result(term="c", wiki="wc"), Result(term="a", wiki="wa")]
    assert rank([], 5) == []


@pytest.mark.parametrize("limit", [-1, -10])
def test_negative_limit_raises(dune_corpus, limit: int) -> None:
    index = build_index(dune_corpus)
    with pytest.raises(QueryError):
        search("worm", index, limit)


@pytest.mark.parametrize("limit", [1.5, "10", None, True])
def test_non_integer_limit_raises(dune_corpus, limit) -> None:
    index = build_index(dune_corpus)
    with pytest.raises(QueryError):
        search("worm", index, limit)


def test_failed_query_leaves_index_usable(dune_corpus) -> None:
    index = build_index(dune_corpus)
    before = search("worm", index, 10)
    with pytest.raises(QueryError):
        search("worm", index, -1)
    assert search("worm", index, 10) == before


def test_result_string_form() -> None:
    result = Result(term="doc1", wiki="https://dune.fandom.com/wiki/Sandtrout")
    assert str(result) == "Term doc1, Wiki: https://dune.fandom.com/wiki/Sandtrout"


def test_package_keeps_search_submodule() -> None:
    import types

    import leto_search
    import leto_search.search as search_module

    assert isinstance(search_module, types.ModuleType)
    assert leto_search.search is search_module
    assert leto_search.Result is Result
