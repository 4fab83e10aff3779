"""Tests for incident context classification and overlap."""

from __future__ import annotations

import math

import pytest

from khobor.text.context import (
    are_contexts_related,
    calculate_context_overlap,
    classify,
    get_related_contexts,
    has_sufficient_context_overlap,
)
from khobor.text.lexicon import INCIDENT_CATEGORIES

MEDICAL_TEXT = "আইসিইউতে ভর্তি রোগী হাসপাতালে চিকিৎসাধীন"


def _contexts(text):
    return {c.context: c for c in classify(text)}


def test_classify_empty():
    assert classify("") == []
    assert classify(None) == []


def test_weak_words_alone_never_trigger():
    assert classify("মৃত্যু নিহত") == []


def test_every_result_has_a_strong_match(accident_text, murder_text):
    for text in (murder_text, accident_text, MEDICAL_TEXT):
        for result in classify(text):
            category = INCIDENT_CATEGORIES[result.context]
            matched = set(result.matched_keywords)
            assert matched & (set(category.core_phrases) | set(category.core_words))


def test_murder_confidence_formula(murder_text):
    murder = _contexts(murder_text)["murder"]
    category = INCIDENT_CATEGORIES["murder"]
    # one core phrase and two core words, boosted
    expected = (3 * 1 + 2 * 2) * 1.2 / math.sqrt(category.normaliser) * category.weight
    assert murder.confidence == pytest.approx(expected)


def test_results_sorted_by_confidence(murder_text):
    confidences = [c.confidence for c in classify(murder_text)]
    assert confidences == sorted(confidences, reverse=True)
    assert all(0.0 <= c <= 0.95 for c in confidences)


def test_strong_signal_ignores_exclusions():
    """A hard exclusion word must not suppress a category with a core match."""
    plain = _contexts("লাশ উদ্ধার")["murder"].confidence
    excluded = _contexts("লাশ উদ্ধার সিনেমা নাটক")["murder"].confidence
    assert excluded >= plain


def test_scenario_texts_classify_to_single_context(accident_text):
    assert set(_contexts(accident_text)) == {"accident"}
    assert set(_contexts(MEDICAL_TEXT)) == {"medical"}


def test_event_chain():
    assert get_related_contexts("shooting_attack") == ("medical", "investigation")
    assert get_related_contexts("unknown") == ()
    assert are_contexts_related("accident", "accident")
    assert are_contexts_related("accident", "medical")
    assert are_contexts_related("medical", "accident")
    assert not are_contexts_related("war", "sexual_crime")


def test_chain_overlap_is_partial_credit(accident_text):
    chained = calculate_context_overlap(accident_text, MEDICAL_TEXT)
    exact = calculate_context_overlap(MEDICAL_TEXT, MEDICAL_TEXT)
    assert chained.shared_contexts == ("medical",)
    assert 0.0 < chained.overlap < exact.overlap
    medical = _contexts(MEDICAL_TEXT)["medical"].confidence
    assert chained.overlap == pytest.approx(0.5 * medical)


def test_overlap_direct_match_adds_min_confidence(murder_text):
    overlap = calculate_context_overlap(murder_text, murder_text)
    expected = sum(c.confidence for c in classify(murder_text))
    assert overlap.overlap == pytest.approx(min(1.0, expected))
    assert "murder" in overlap.shared_contexts


def test_overlap_unrelated_is_zero(murder_text):
    result = calculate_context_overlap(murder_text, "")
    assert result.overlap == 0.0
    assert result.shared_contexts == ()


def test_has_sufficient_context_overlap(accident_text, murder_text):
    assert has_sufficient_context_overlap(murder_text, murder_text)
    assert not has_sufficient_context_overlap(accident_text, MEDICAL_TEXT, threshold=0.9)
