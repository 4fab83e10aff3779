"""Tests for script-aware cleaning and tokenisation."""

from __future__ import annotations

import unicodedata
from datetime import datetime

from khobor.text.normalize import (
    clean,
    generate_base_key,
    generate_group_key,
    normalize_unicode,
    tokenize,
    word_tokens,
)


def _nfc(text):
    return unicodedata.normalize("NFC", text)


def test_clean_strips_punctuation_and_collapses_space():
    assert clean("  Hello,   World!! ") == "hello world"


def test_clean_handles_none_and_empty():
    assert clean(None) == ""
    assert clean("") == ""
    assert normalize_unicode(None) == ""


def test_clean_keeps_bangla_vowel_signs():
    """Combining marks are part of the word, not punctuation."""
    assert clean("করিম! উদ্দিন।") == _nfc("করিম উদ্দিন")


def test_clean_keeps_digits():
    assert clean("ফ্লাইট ৪৩৭, BG-437") == _nfc("ফ্লাইট ৪৩৭ bg437")


def test_word_tokens_splits_on_punctuation():
    assert word_tokens("alpha,beta-gamma an") == ["alpha", "beta", "gamma"]


def test_tokenize_drops_stopwords_and_short_tokens():
    assert tokenize("এবং আমি ঢাকা ও") == [_nfc("ঢাকা")]


def test_tokenize_strips_longest_suffix():
    assert tokenize("মানুষগুলো") == [_nfc("মানুষ")]
    assert tokenize("ছেলেদের") == [_nfc("ছেলে")]


def test_tokenize_suffix_guard_keeps_short_stems():
    """A suffix is only stripped when enough of the word remains."""
    assert tokenize("কথাটি") == [_nfc("কথা")]
    assert tokenize("বইটি") == [_nfc("বইটি")]


def test_tokenize_prefix_guard():
    assert tokenize("অতিরিক্ত") == [_nfc("রিক্ত")]
    assert tokenize("অতিথি") == [_nfc("অতিথি")]


def test_tokenize_is_deterministic():
    text = "ঢাকায় সড়ক দুর্ঘটনায় তিনজন নিহত"
    assert tokenize(text) == tokenize(text)


def test_tokenize_empty():
    assert tokenize(None) == []
    assert tokenize("!!!") == []


def test_base_key_truncates_and_drops_punctuation():
    key = generate_base_key("Breaking: fire, in the city!", length=12)
    assert key == "breaking fir"


def test_base_key_drops_punctuation_without_spacing():
    assert generate_base_key("fire,flood. now", length=100) == "fireflood now"


def test_group_key_format():
    date = datetime(2024, 5, 1, 18, 30)
    assert generate_group_key("abc", "Crime", date) == "abc_Crime_2024-05-01"
    assert generate_group_key("abc", None, date) == "abc_uncategorized_2024-05-01"
