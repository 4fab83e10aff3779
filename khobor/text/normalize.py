"""Script-aware cleaning and tokenisation shared by every text component."""

from __future__ import annotations

import unicodedata
from datetime import datetime

from khobor.text.lexicon import PREFIXES, STOPWORDS, SUFFIXES


def normalize_unicode(text: str | None) -> str:
    """NFC-normalise and lower-case; ``None`` becomes an empty string."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text).lower()


def _is_word_char(ch: str) -> bool:
    # Letters, combining marks and digits of any script.
    return unicodedata.category(ch)[0] in "LMN"


def _scrub(text: str | None, replacement: str) -> str:
    text = normalize_unicode(text)
    out = [
        ch if _is_word_char(ch) or ch.isspace() else replacement
        for ch in text
    ]
    return " ".join("".join(out).split())


def clean(text: str | None) -> str:
    """Lower-case, drop everything but letters/marks/digits/whitespace, collapse spaces."""
    return _scrub(text, "")


def word_tokens(text: str | None, min_length: int = 3) -> list[str]:
    """Split on runs of non-word characters, keeping tokens of ``min_length``+ chars."""
    return [t for t in _scrub(text, " ").split() if len(t) >= min_length]


def _strip_suffix(word: str) -> str:
    for suffix in SUFFIXES:
        min_rest = 4 if len(suffix) == 1 else 3
        if word.endswith(suffix) and len(word) - len(suffix) >= min_rest:
            return word[: -len(suffix)]
    return word


def _strip_prefix(word: str) -> str:
    for prefix in PREFIXES:
        min_rest = 5 if len(prefix) == 1 else 3
        if word.startswith(prefix) and len(word) - len(prefix) >= min_rest:
            return word[len(prefix):]
    return word


def tokenize(text: str | None) -> list[str]:
    """Clean, drop short tokens and stopwords, then strip one suffix and one prefix.

    >>> tokenize("ছেলেদের")
    ['ছেলে']
    """
    tokens = []
    for word in clean(text).split():
        if len(word) <= 2 or word in STOPWORDS:
            continue
        word = _strip_prefix(_strip_suffix(word))
        if len(word) > 1:
            tokens.append(word)
    return tokens


def generate_base_key(text: str | None, length: int = 100) -> str:
    """Grouping key from the first ``length`` characters of cleaned text."""
    return clean(text)[:length]


def generate_group_key(base_key: str, category: str | None, date: datetime) -> str:
    """Combine base key, category and calendar day into a cluster key."""
    return f"{base_key}_{category or 'uncategorized'}_{date.strftime('%Y-%m-%d')}"
