"""Tokenization and term counting shared by the index and query parsing."""

import re

from .term_vector import HashMapVector

STOPWORDS: frozenset[str] = frozenset([
    "a", "an", "and", "are", "as", "at", "be", "been", "but", "by", "can",
    "do", "for", "from", "had", "has", "have", "he", "her", "him", "his",
    "how", "i", "if", "in", "into", "is", "it", "its", "me", "my", "no",
    "not", "of", "on", "or", "our", "she", "so", "such", "than", "that",
    "the", "their", "them", "then", "there", "these", "they", "this", "to",
    "too", "us", "was", "we", "were", "what", "when", "where", "which", "who",
    "will", "with", "would", "you", "your",
])

_TOKEN_PATTERN = re.compile(r"[a-z0-9]+")

_DERIVATIONAL_SUFFIXES = [
    ("ational", "ate"), ("tional", "tion"), ("ization", "ize"),
    ("ation", "ate"), ("ator", "ate"), ("iveness", "ive"),
    ("fulness", "ful"), ("ousness", "ous"), ("icate", "ic"),
    ("ative", ""), ("alize", "al"), ("ical", "ic"), ("ful", ""), ("ness", ""),
]


def stem(word: str) -> str:
    """Simplified Porter stemmer for common English suffixes."""
    if len(word) < 3:
        return word

    # Step 1a: plurals
    if word.endswith("sses"):
        word = word[:-2]
    elif word.endswith("ies"):
        word = word[:-2]
    elif word.endswith("ss"):
        pass
    elif word.endswith("s"):
        word = word[:-1]

    # Step 1b: -ed, -ing
    if word.endswith("eed"):
        if len(word) > 4:
            word = word[:-1]
    elif word.endswith("ed"):
        base = word[:-2]
        if any(c in "aeiou" for c in base):
            word = base
    elif word.endswith("ing"):
        base = word[:-3]
        if any(c in "aeiou" for c in base):
            word = base

    for suffix, replacement in _DERIVATIONAL_SUFFIXES:
        if word.endswith(suffix) and len(word) > len(suffix) + 2:
            word = word[: -len(suffix)] + replacement
            break

    return word


def tokenize(text: str, use_stemming: bool = False) -> list[str]:
    """Split text into lower-cased alphanumeric tokens.

    Stopwords and single-character tokens are dropped. When
    ``use_stemming`` is set each token is reduced with :func:`stem`.
    """
    tokens = [t for t in _TOKEN_PATTERN.findall(text.lower()) if t not in STOPWORDS and len(t) > 1]
    if use_stemming:
        tokens = [stem(t) for t in tokens]
    return [t for t in tokens if t]


def term_counts(text: str, use_stemming: bool = False) -> HashMapVector:
    """Build a raw term-frequency vector for ``text``."""
    vector = HashMapVector()
    for token in tokenize(text, use_stemming):
        vector.increment(token)
    return vector
