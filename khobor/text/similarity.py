"""Text similarity measures for short Bangla posts.

Five measures, all returning a float in [0, 1]:

- :func:`dice_similarity` - character-bigram Dice coefficient
- :func:`word_jaccard` - set Jaccard over plain word tokens
- :func:`tfidf_cosine` - TF-IDF cosine over stemmed tokens of the two texts
- :func:`advanced_similarity` - 0.5 TF-IDF + 0.3 trigram overlap + 0.2 token Jaccard
- :func:`context_aware_similarity` - advanced plus a boost per shared full name
"""

from __future__ import annotations

import math
import re
from collections import Counter
from datetime import datetime, timedelta, timezone

import numpy as np

from khobor.models import Post, as_utc
from khobor.text.lexicon import BN_LETTER, SIMILARITY_SURNAMES
from khobor.text.normalize import clean, normalize_unicode, tokenize, word_tokens

_SCRIPT_CHAR = re.compile(f"[{BN_LETTER}]")
_FULL_NAME = re.compile(
    f"(?<![{BN_LETTER}])[{BN_LETTER}]{{2,15}}\\s+"
    f"(?:{'|'.join(re.escape(s) for s in SIMILARITY_SURNAMES)})(?![{BN_LETTER}])"
)


def _ngrams(text: str, n: int) -> Counter:
    return Counter(text[i:i + n] for i in range(len(text) - n + 1))


def dice_similarity(first: str | None, second: str | None) -> float:
    """Dice coefficient over character-bigram multisets of the cleaned texts."""
    a, b = clean(first), clean(second)
    if len(a) < 2 or len(b) < 2:
        return 0.0
    if a == b:
        return 1.0
    bigrams_a, bigrams_b = _ngrams(a, 2), _ngrams(b, 2)
    intersection = sum((bigrams_a & bigrams_b).values())
    total = sum(bigrams_a.values()) + sum(bigrams_b.values())
    return 2.0 * intersection / total


def word_jaccard(first: str | None, second: str | None) -> float:
    """Classic set Jaccard over word tokens longer than two characters."""
    a, b = set(word_tokens(first)), set(word_tokens(second))
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Cosine similarity between two vectors, 0 when either is all zeros."""
    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(a, b) / (norm_a * norm_b))


def _tfidf_vectors(token_lists: list[list[str]]) -> np.ndarray:
    vocab = sorted({t for tokens in token_lists for t in tokens})
    index = {term: i for i, term in enumerate(vocab)}
    n_docs = len(token_lists)

    doc_freq = Counter(t for tokens in token_lists for t in set(tokens))
    # Smoothed IDF: ln((N + 1) / (df + 1)) + 1
    idf = {t: math.log((n_docs + 1) / (df + 1)) + 1 for t, df in doc_freq.items()}

    vectors = np.zeros((n_docs, len(vocab)))
    for row, tokens in enumerate(token_lists):
        for term, tf in Counter(tokens).items():
            vectors[row, index[term]] = (tf / len(tokens)) * idf[term]
    return vectors


def tfidf_cosine(first: str | None, second: str | None) -> float:
    """TF-IDF cosine with document frequency taken over just the two texts."""
    tokens = [tokenize(first), tokenize(second)]
    if not tokens[0] or not tokens[1]:
        return 0.0
    vectors = _tfidf_vectors(tokens)
    return min(1.0, cosine_similarity(vectors[0], vectors[1]))


def _script_trigrams(text: str | None) -> Counter:
    collapsed = " ".join(normalize_unicode(text).split())
    return Counter({
        gram: count for gram, count in _ngrams(collapsed, 3).items()
        if _SCRIPT_CHAR.search(gram)
    })


def trigram_overlap(first: str | None, second: str | None) -> float:
    """Multiset overlap sum(min) / sum(max) of script-character trigrams."""
    a, b = _script_trigrams(first), _script_trigrams(second)
    union = sum((a | b).values())
    if union == 0:
        return 0.0
    return sum((a & b).values()) / union


def token_jaccard(first: str | None, second: str | None) -> float:
    a, b = set(tokenize(first)), set(tokenize(second))
    union = a | b
    return len(a & b) / len(union) if union else 0.0


def advanced_similarity(first: str | None, second: str | None) -> float:
    """Weighted blend: 0.5 TF-IDF cosine + 0.3 trigram overlap + 0.2 token Jaccard."""
    if not first or not second:
        return 0.0
    return (
        0.5 * tfidf_cosine(first, second)
        + 0.3 * trigram_overlap(first, second)
        + 0.2 * token_jaccard(first, second)
    )


def extract_name_mentions(text: str | None) -> list[str]:
    """Distinct ``<given name> <surname>`` phrases, in order of appearance."""
    return list(dict.fromkeys(_FULL_NAME.findall(normalize_unicode(text))))


def context_aware_similarity(
    first: str | None, second: str | None, boost: float = 0.1,
) -> float:
    """Advanced similarity plus ``boost`` per shared full-name mention, capped at 1."""
    base = advanced_similarity(first, second)
    names = set(extract_name_mentions(second))
    shared = sum(1 for name in extract_name_mentions(first) if name in names)
    return min(1.0, base + boost * shared)


def batch_semantic_similarity(
    primary: str, candidates: list[str],
) -> list[tuple[str, float]]:
    """Advanced similarity of each candidate to ``primary``, best first."""
    scored = [(text, advanced_similarity(primary, text)) for text in candidates]
    return sorted(scored, key=lambda pair: -pair[1])


def find_similar_posts(
    target_text: str,
    posts: list[Post],
    threshold: float = 0.3,
    window_days: int = 3,
    now: datetime | None = None,
) -> list[tuple[Post, float]]:
    """Posts within ``window_days`` of ``now`` whose Dice similarity clears ``threshold``."""
    now = as_utc(now) if now else datetime.now(timezone.utc)
    window = timedelta(days=window_days)
    matches = []
    for post in posts:
        if abs(now - post.timestamp) > window:
            continue
        score = dice_similarity(target_text, post.text)
        if score >= threshold:
            matches.append((post, score))
    return sorted(matches, key=lambda pair: -pair[1])
