"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from khobor.config import load_config
from khobor.models import Post

NOW = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)

MURDER_TEXT = "করিম উদ্দিন হত্যা মামলায় তদন্ত শুরু, লাশ উদ্ধার"
ACCIDENT_TEXT = "সড়ক দুর্ঘটনায় ট্রাক উল্টে চালক আহত"
ELECTION_TEXT = "নির্বাচনে ভোটগ্রহণ শেষে ফলাফল ঘোষণা"
FLOOD_TEXT = "বন্যায় ফসলের ক্ষতি"


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def murder_text():
    return MURDER_TEXT


@pytest.fixture
def accident_text():
    return ACCIDENT_TEXT


@pytest.fixture
def election_text():
    return ELECTION_TEXT


@pytest.fixture
def flood_text():
    return FLOOD_TEXT


@pytest.fixture
def sample_config(tmp_path):
    """Config with the production thresholds and no log file."""
    config_text = """
cluster:
  jaccard_threshold: 0.45
  length_ratio: 0.5
  base_key_length: 100
  trending_average: mean

related:
  window_days: 3
  max_candidates: 100
  max_results: 5
  context_threshold: 0.3
  semantic_threshold: 0.65
  context_boost: 0.05
  confidence_threshold: 0.72
  entityless_anchor: reject

scoring:
  default_followers: 1000

logging:
  level: INFO
  file: null
"""
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(config_text, encoding="utf-8")
    return load_config(str(cfg_path))


@pytest.fixture
def make_post():
    """Factory for posts dated relative to the fixed test clock."""
    def _make(post_id, text, hours_ago=0, category="Crime", **kwargs):
        kwargs.setdefault("platform", "F")
        kwargs.setdefault("source", "Prothom Alo")
        return Post(
            id=post_id,
            text=text,
            timestamp=NOW - timedelta(hours=hours_ago),
            category=category,
            **kwargs,
        )
    return _make


@pytest.fixture
def sample_posts(make_post, murder_text, accident_text, election_text, flood_text):
    """Two reports of one murder case, a re-filed copy, and unrelated news."""
    return [
        make_post("p1", murder_text, hours_ago=2, reactions=120, shares=30, comments=15),
        make_post(
            "p2", murder_text, hours_ago=5, source="Jugantor", platform="T",
            reactions=40, shares=5, comments=2, sentiment="negative",
        ),
        make_post(
            "p3", murder_text, hours_ago=8, category="National", source="Samakal",
            reactions=60, shares=10, comments=4,
        ),
        make_post("p4", accident_text, hours_ago=24, category="Accident", reactions=300),
        make_post("p5", election_text, hours_ago=48, category="Politics", reactions=80, shares=8),
        make_post("p6", flood_text, hours_ago=240, category=None, reactions=5),
    ]
