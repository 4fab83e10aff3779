"""Keyword-weighted incident context classification.

Each category in :data:`~khobor.text.lexicon.INCIDENT_CATEGORIES` scores a
text by substring matches per keyword class:

    raw = 3 * phrases + 2 * core words + 1 * weak words

A category only fires on a strong signal (a core phrase or a core word).
Strong signals get a 1.2 boost and are never penalised by exclusion words;
the soft (0.8 ** n) and hard (0.2 ** n) exclusion penalties only apply to
categories without one. Confidence is the raw score over the square root of
the category's keyword mass, times its weight, capped at 0.95.
"""

from __future__ import annotations

import math

from khobor.models import ContextClassification, ContextOverlap
from khobor.text.lexicon import EVENT_CHAIN, INCIDENT_CATEGORIES, IncidentCategory
from khobor.text.normalize import clean, normalize_unicode

MAX_CONFIDENCE = 0.95
STRONG_BOOST = 1.2
SOFT_PENALTY = 0.8
HARD_PENALTY = 0.2
RELATED_CONTEXT_CREDIT = 0.5


def _matches(words: tuple[str, ...], text: str) -> list[str]:
    return [w for w in words if w in text]


def _score_category(category: IncidentCategory, text: str) -> ContextClassification | None:
    phrases = _matches(category.core_phrases, text)
    core = _matches(category.core_words, text)
    if not phrases and not core:
        return None
    weak = _matches(category.weak_words, text)

    raw = 3 * len(phrases) + 2 * len(core) + len(weak)
    strong = len(phrases) > 0 or len(core) >= 1
    if strong:
        raw *= STRONG_BOOST
    else:
        raw *= SOFT_PENALTY ** len(_matches(category.soft_exclusions, text))
        raw *= HARD_PENALTY ** len(_matches(category.hard_exclusions, text))

    confidence = min(
        MAX_CONFIDENCE, raw / math.sqrt(category.normaliser) * category.weight,
    )
    return ContextClassification(
        context=category.name,
        confidence=confidence,
        matched_keywords=tuple(phrases + core + weak),
    )


def classify(text: str | None) -> list[ContextClassification]:
    """Classify ``text`` into incident contexts, highest confidence first."""
    norm = normalize_unicode(text)
    if len(clean(norm)) < 2:
        return []
    results = []
    for category in INCIDENT_CATEGORIES.values():
        result = _score_category(category, norm)
        if result is not None:
            results.append(result)
    return sorted(results, key=lambda r: -r.confidence)


def get_related_contexts(context: str) -> tuple[str, ...]:
    return EVENT_CHAIN.get(context, ())


def are_contexts_related(first: str, second: str) -> bool:
    """Identical, or adjacent in the event chain in either direction."""
    if first == second:
        return True
    return second in get_related_contexts(first) or first in get_related_contexts(second)


def calculate_context_overlap(first: str | None, second: str | None) -> ContextOverlap:
    """Shared-context credit between two texts.

    Categories present in both add the smaller confidence. Categories of
    ``second`` that are chain-successors of any category of ``first`` add half
    of their confidence. The total is clamped to [0, 1].
    """
    first_conf = {c.context: c.confidence for c in classify(first)}
    second_conf = {c.context: c.confidence for c in classify(second)}

    shared: list[str] = []
    total = 0.0
    for context, confidence in first_conf.items():
        if context in second_conf:
            shared.append(context)
            total += min(confidence, second_conf[context])

    chained = {rc for c in first_conf for rc in get_related_contexts(c)}
    for context, confidence in second_conf.items():
        if context in chained and context not in shared:
            shared.append(context)
            total += confidence * RELATED_CONTEXT_CREDIT

    return ContextOverlap(overlap=max(0.0, min(1.0, total)), shared_contexts=tuple(shared))


def has_sufficient_context_overlap(
    first: str | None, second: str | None, threshold: float = 0.3,
) -> bool:
    return calculate_context_overlap(first, second).overlap >= threshold
