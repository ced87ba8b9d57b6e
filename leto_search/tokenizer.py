"""
Text normalizer and tokenizer for the search index.
Strips a fixed punctuation class, splits on whitespace, lowercases and
drops stopwords before counting term frequencies.
"""

import re
from collections import Counter

from nltk.tokenize import WhitespaceTokenizer

# Punctuation and control whitespace removed before splitting.
_STRIP_RE = re.compile(r"[,'.;:?!—\-()\[\]{}\"/\\%&*+=<>\n\t\r]")

_SPLITTER = WhitespaceTokenizer()

STOPWORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "but", "by", "for",
        "from", "in", "is", "it", "of", "on", "or", "that", "the", "this",
        "to", "was", "were", "will", "with",
        "i", "you", "he", "she", "we", "they", "me", "him", "her", "us",
        "them", "my", "your", "his", "its", "our", "their",
        "am", "been", "being", "have", "has", "had", "do", "does", "did",
        "shall", "should", "would", "could",
        "about", "against", "between", "into", "through", "during",
        "before", "after", "above", "below", "up", "down", "out", "off",
        "over", "under", "again", "further", "then", "once", "here",
        "there", "when", "where", "why", "how",
        "all", "any", "both", "each", "few", "more", "most", "other",
        "some", "such", "no", "nor", "not", "only", "own", "same", "so",
        "than", "too", "very", "can", "just", "don", "now",
    }
)


def normalize(text: str) -> str:
    """
    Remove punctuation, newlines and tabs, then replace each pair of
    spaces with a single space.

    The space replacement is one non-overlapping pass: three spaces become
    two, four become two. Case is left untouched.
    """
    cleaned = _STRIP_RE.sub("", text)
    return cleaned.replace("  ", " ")


def is_stopword(token: str) -> bool:
    """Return True if token is a stopword (case-insensitive)."""
    return token.lower() in STOPWORDS


def split_terms(text: str) -> list[str]:
    """Split text on whitespace and lowercase every token."""
    if not text:
        return []
    return [token.lower() for token in _SPLITTER.tokenize(text)]


def count_terms(text: str) -> Counter:
    """
    Count term frequencies in already-normalized text.
    Stopwords are dropped; every other token counts once per occurrence.
    """
    return Counter(token for token in split_terms(text) if not is_stopword(token))
