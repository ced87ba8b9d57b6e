"""In-memory term-frequency search package."""

from .posting import Posting, InvertedIndex
from .corpus import Document, read_corpus
from .index_builder import build_index, build_index_from_file
from .search import Result, ScoredDocument
from .tokenizer import normalize, is_stopword
