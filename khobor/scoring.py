"""Trending and virality scores computed from pre-aggregated counters."""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timezone
from types import MappingProxyType

from khobor.models import Post, as_utc

logger = logging.getLogger(__name__)

CATEGORY_WEIGHTS = MappingProxyType({
    "Politics": 9.5,
    "Accident": 9,
    "Crime": 10,
    "Corruption": 10,
    "Cyber Crime": 10,
    "International": 7.5,
    "National": 8,
    "Business": 7,
    "Technology": 6.5,
    "Entertainment": 4.0,
    "Other": 1,
    "Uncategorized": 1,
})

_SOURCE_LIST = re.compile(r"Source:[ \t]*([^,\s][^,\n]*(?:,[^,\n]+)*)", re.IGNORECASE)
_DATE_LIST = re.compile(r"Post date:[ \t]*([^,\s][^,\n]*(?:,[^,\n]+)*)", re.IGNORECASE)

SECONDS_PER_DAY = 24 * 60 * 60


def _now(now: datetime | None) -> datetime:
    return as_utc(now) if now else datetime.now(timezone.utc)


def category_weight(category: str | None) -> float:
    """Fixed weight for a category; unknown or missing categories weigh 1."""
    return CATEGORY_WEIGHTS.get(category or "", 1)


def source_weight(likes: float, followers: float, posts_per_day: float) -> float:
    """(like weight + follower weight) scaled by inverse posting frequency."""
    like_weight = 100 * (likes / 1000)
    follower_weight = 80 * (followers / 1000)
    frequency_weight = 3 / max(posts_per_day, 0.1)
    return (like_weight + follower_weight) * frequency_weight


def news_flow_weight(
    reactions: float,
    shares: float,
    comments: float,
    days_since_post: float,
    category: str | None,
) -> tuple[float, float]:
    """Engagement weight decayed by age; returns (plain, by-category)."""
    engagement = 50 * reactions + 70 * shares + 90 * comments
    total = engagement * (1 / max(days_since_post, 1))
    return total, total * category_weight(category)


def virality_score(summary: str) -> int:
    """Integer 1..7 from the source and post-date lists of a coverage summary."""
    try:
        sources = _SOURCE_LIST.search(summary)
        dates = _DATE_LIST.search(summary)
        source_count = len(sources.group(1).split(",")) if sources else 0
        date_count = len(dates.group(1).split(",")) if dates else 0
    except (TypeError, AttributeError) as exc:
        logger.warning("Could not parse virality summary: %s", exc)
        return 1
    raw = 0.75 * source_count + 0.125 * date_count
    return max(1, min(7, math.floor(raw)))


def final_trending_score(
    source_weight: float,
    news_flow_weight_by_category: float,
    virality: int,
    max_trending_score: float,
) -> float:
    """Dataset-scaled trending (0..10) multiplied by virality."""
    if max_trending_score <= 0:
        return 0.0
    trending = news_flow_weight_by_category + source_weight
    return 10 * (trending / max_trending_score) * virality


def days_difference(date: datetime, now: datetime | None = None) -> int:
    """Whole days between ``date`` and ``now``, rounded up."""
    delta = abs(_now(now) - as_utc(date))
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def posts_per_day(total_posts: int, first_post_date: datetime, now: datetime | None = None) -> float:
    days = days_difference(first_post_date, now)
    return total_posts / days if days > 0 else 1.0


def post_trending_score(post: Post, now: datetime | None = None) -> float:
    """Per-post engagement score with a 24h exponential time decay.

    Posts dated in the future count as brand new.
    """
    engagement = post.reactions + 2 * post.shares + 3 * post.comments
    hours_old = max(0.0, (_now(now) - as_utc(post.timestamp)).total_seconds() / 3600)
    return engagement * math.exp(-hours_old / 24)
