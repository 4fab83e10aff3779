"""Tests for the trending and virality arithmetic."""

from __future__ import annotations

import logging
import math
from datetime import timedelta

import pytest

from khobor.scoring import (
    category_weight,
    days_difference,
    final_trending_score,
    news_flow_weight,
    post_trending_score,
    posts_per_day,
    source_weight,
    virality_score,
)


def test_source_weight():
    assert source_weight(1000, 1000, 1) == pytest.approx(540.0)


def test_source_weight_floors_posting_frequency():
    assert source_weight(1000, 1000, 0) == pytest.approx(5400.0)


def test_news_flow_weight_decays_with_age():
    total, by_category = news_flow_weight(10, 0, 0, 2, "Crime")
    assert total == pytest.approx(250.0)
    assert by_category == pytest.approx(2500.0)


def test_news_flow_weight_same_day_counts_as_one_day():
    total, _ = news_flow_weight(1, 1, 1, 0, None)
    assert total == pytest.approx(50 + 70 + 90)


def test_category_weight_lookup():
    assert category_weight("Crime") == 10
    assert category_weight("Entertainment") == 4.0
    assert category_weight("Sports") == 1
    assert category_weight(None) == 1


@pytest.mark.parametrize(
    "summary,expected",
    [
        ("Source: a, b, c, d\nPost date: 2024-01-01, 2024-01-02", 3),
        ("Source: a\nPost date: 2024-01-01", 1),
        ("", 1),
        ("no markers at all", 1),
        ("Source: " + ", ".join(f"s{i}" for i in range(10)), 7),
        ("source: a, b, c, d, e, f", 4),
    ],
)
def test_virality_score(summary, expected):
    assert virality_score(summary) == expected


def test_virality_score_parse_failure_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="khobor.scoring"):
        assert virality_score(None) == 1
    assert "virality" in caplog.text


def test_virality_score_always_in_range():
    for n in range(0, 20):
        summary = "Source: " + ", ".join(["x"] * n) + "\nPost date: " + ", ".join(["d"] * n)
        score = virality_score(summary)
        assert isinstance(score, int)
        assert 1 <= score <= 7


def test_final_trending_score():
    assert final_trending_score(50, 50, 2, 100) == pytest.approx(20.0)


def test_final_trending_score_zero_max():
    assert final_trending_score(50, 50, 7, 0) == 0.0
    assert final_trending_score(50, 50, 7, -1) == 0.0


def test_final_trending_score_monotone_in_virality():
    scores = [final_trending_score(10, 20, v, 100) for v in range(1, 8)]
    assert scores == sorted(scores)


def test_unlisted_category_ranks_below_crime():
    _, other = news_flow_weight(100, 10, 5, 1, "Weather")
    _, crime = news_flow_weight(100, 10, 5, 1, "Crime")
    sw = source_weight(100, 1000, 1)
    max_trending = max(other + sw, crime + sw)
    assert final_trending_score(sw, other, 3, max_trending) <= final_trending_score(
        sw, crime, 3, max_trending,
    )


def test_days_difference_rounds_up(now):
    assert days_difference(now - timedelta(hours=36), now=now) == 2
    assert days_difference(now - timedelta(days=3), now=now) == 3
    assert days_difference(now, now=now) == 0


def test_days_difference_is_absolute(now):
    assert days_difference(now + timedelta(hours=1), now=now) == 1


def test_days_difference_accepts_naive_dates(now):
    naive = (now - timedelta(days=1)).replace(tzinfo=None)
    assert days_difference(naive, now=now) == 1


def test_posts_per_day(now):
    assert posts_per_day(6, now - timedelta(days=3), now=now) == pytest.approx(2.0)
    assert posts_per_day(5, now, now=now) == 1.0


def test_post_trending_score_decays(make_post, now):
    fresh = make_post("a", "x", hours_ago=0, reactions=10, shares=1, comments=1)
    day_old = make_post("b", "x", hours_ago=24, reactions=10, shares=1, comments=1)
    assert post_trending_score(fresh, now=now) == pytest.approx(15.0)
    assert post_trending_score(day_old, now=now) == pytest.approx(15.0 * math.exp(-1))


def test_post_trending_score_future_post_counts_as_new(make_post, now):
    post = make_post("f", "x", hours_ago=-24 * 365 * 80, reactions=10, shares=1, comments=1)
    assert post_trending_score(post, now=now) == pytest.approx(15.0)
