from __future__ import annotations

import json
from pathlib import Path

import pytest

from leto_search.corpus import Document


def _make_corpus(entries: dict[str, tuple[str, str]]) -> dict[str, Document]:
    return {
        doc_id: Document(doc_id=doc_id, description=description, wiki=wiki)
        for doc_id, (description, wiki) in entries.items()
    }


@pytest.fixture
def dune_corpus() -> dict[str, Document]:
    return _make_corpus(
        {
            "arrakis": ("Arrakis is the desert planet, home of the worm and the spice.", "w-arrakis"),
            "caladan": ("Caladan: an ocean world. The Atreides left it for Arrakis.", "w-caladan"),
            "sandworm": ("The worm -- Shai-Hulud -- guards the spice; worm sign!", "w-sandworm"),
            "spice": ("Spice, spice, SPICE: the melange extends life and expands consciousness.", "w-spice"),
            "stillsuit": ("A stillsuit recycles water on Arrakis (and is worn by the Fremen).", "w-stillsuit"),
        }
    )


@pytest.fixture
def corpus_file(tmp_path: Path):
    def _write(payload) -> Path:
        path = tmp_path / "data.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
