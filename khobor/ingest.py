"""Turn external post records into :class:`Post` objects."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from khobor.models import Post, as_utc

logger = logging.getLogger(__name__)

PLATFORM_MAPPING = {
    "F": "facebook.com",
    "T": "twitter.com",
    "I": "instagram.com",
    "Y": "youtube.com",
    "L": "linkedin.com",
    "TT": "tiktok.com",
    "R": "reddit.com",
}


def platform_domain(code: str) -> str:
    return PLATFORM_MAPPING.get(code, code)


def _parse_date(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.warning("Unparseable post date %r", value)
            return None
    else:
        return None
    return as_utc(parsed)


def _count(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def transform_external_post(record: dict, now: datetime | None = None) -> Post:
    """Map one external API record onto a :class:`Post`.

    The feed is loose about field names: reactions may be a number or an
    object with a ``Total``, counters and dates come under two spellings, and
    the category is the first entry of ``topic`` when present.
    """
    reactions = record.get("reactions")
    if isinstance(reactions, dict):
        reactions = reactions.get("Total", 0)

    shares = record["total_shares"] if "total_shares" in record else record.get("shares")
    comments = record["total_comments"] if "total_comments" in record else record.get("comments")

    topic = record.get("topic")
    if isinstance(topic, list) and topic:
        category = topic[0]
    else:
        category = record.get("category") or None

    timestamp = (
        _parse_date(record.get("posted_at"))
        or _parse_date(record.get("post_date"))
        or now
        or datetime.now(timezone.utc)
    )

    sentiment = record.get("sentiment")
    return Post(
        id=str(record.get("post_id") or record.get("id") or ""),
        text=record.get("post_text") or record.get("text") or "",
        timestamp=timestamp,
        platform=record.get("platform") or "F",
        source=record.get("source") or "Unknown",
        category=category,
        reactions=_count(reactions),
        shares=_count(shares),
        comments=_count(comments),
        sentiment=sentiment.lower() if isinstance(sentiment, str) and sentiment else "neutral",
        link=record.get("post_url") or record.get("post_link") or None,
    )


def load_posts(path: str | Path, now: datetime | None = None) -> list[Post]:
    """Load posts from a JSON file.

    The payload is either a list of records or an API page with the records
    under ``result``. Records without an id or text are skipped.
    """
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    if isinstance(payload, dict) and isinstance(payload.get("result"), list):
        payload = payload["result"]
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of posts in {path}, got {type(payload).__name__}")

    posts = []
    for record in payload:
        if not isinstance(record, dict):
            logger.warning("Skipping non-object record: %r", record)
            continue
        post = transform_external_post(record, now)
        if not post.id or not post.text:
            logger.warning("Skipping post with missing id or text: %r", post.id or record)
            continue
        posts.append(post)

    logger.info("Loaded %d posts from %s (%d skipped)", len(posts), path, len(payload) - len(posts))
    return posts
