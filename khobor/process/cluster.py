"""First-fit batch clustering of posts by word overlap."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime

from khobor.config import get_cluster_config
from khobor.models import Cluster, Post, PostAnalysis
from khobor.process import register_processor
from khobor.process.base import BaseProcessor
from khobor.scoring import post_trending_score
from khobor.text.normalize import generate_base_key, generate_group_key
from khobor.text.similarity import word_jaccard

logger = logging.getLogger(__name__)

SAMPLE_TEXTS = 3


def length_ratio(first: str, second: str) -> float:
    """Shorter length over longer length, 0 when either text is empty."""
    longest = max(len(first), len(second))
    if longest == 0:
        return 0.0
    return min(len(first), len(second)) / longest


@register_processor("cluster")
class ClusterProcessor(BaseProcessor):
    """Group posts into news items, newest post first.

    Each post joins the first open cluster whose representative has the same
    category, a word Jaccard of at least ``jaccard_threshold`` and a length
    ratio of at least ``length_ratio``. Grouping is first-fit, so the result
    depends on post order.
    """

    @property
    def name(self) -> str:
        return "cluster"

    def process(self, posts: list[Post], now: datetime | None = None) -> list[Cluster]:
        cfg = get_cluster_config(self.config)
        threshold = cfg["jaccard_threshold"]
        min_ratio = cfg["length_ratio"]

        clusters: list[Cluster] = []
        by_key: dict[str, Cluster] = {}
        for post in sorted(posts, key=lambda p: p.timestamp, reverse=True):
            target = None
            for cluster in clusters:
                representative = cluster.representative
                if representative.category != post.category:
                    continue
                if length_ratio(representative.text, post.text) < min_ratio:
                    continue
                if word_jaccard(representative.text, post.text) >= threshold:
                    target = cluster
                    break

            if target is None:
                base_key = generate_base_key(post.text, cfg["base_key_length"])
                group_key = generate_group_key(base_key, post.category, post.timestamp)
                # Same key means the same stored news item, so fold into it.
                target = by_key.get(group_key)
                if target is None:
                    target = Cluster(
                        group_key=group_key,
                        base_key=base_key,
                        category=post.category,
                        first_post_date=post.timestamp,
                        last_post_date=post.timestamp,
                        primary_source=post.source,
                        primary_platform=post.platform,
                    )
                    clusters.append(target)
                    by_key[group_key] = target

            self.add_post(target, post, post_trending_score(post, now), cfg["trending_average"])

        logger.info(
            "Clustered %d posts into %d clusters (jaccard=%.2f, ratio=%.2f)",
            len(posts), len(clusters), threshold, min_ratio,
        )
        return clusters

    @staticmethod
    def add_post(cluster: Cluster, post: Post, score: float, average: str = "mean") -> None:
        """Fold one post into the cluster's aggregates."""
        cluster.posts.append(post)
        cluster.sources.add(post.source)
        cluster.platforms.add(post.platform)
        cluster.total_reactions += post.reactions
        cluster.total_shares += post.shares
        cluster.total_comments += post.comments
        cluster.first_post_date = min(cluster.first_post_date, post.timestamp)
        cluster.last_post_date = max(cluster.last_post_date, post.timestamp)

        if cluster.post_count == 1:
            cluster.avg_trending_score = score
        elif average == "legacy":
            cluster.avg_trending_score = (cluster.avg_trending_score + score) / 2
        else:
            old = cluster.avg_trending_score
            cluster.avg_trending_score = old + (score - old) / cluster.post_count


def build_post_analysis(cluster: Cluster) -> PostAnalysis:
    """Summarise a cluster's coverage across sources and platforms."""
    posts = cluster.posts
    sentiments = Counter((p.sentiment or "neutral") for p in posts)
    return PostAnalysis(
        sources=list(dict.fromkeys(p.source for p in posts)),
        platforms=list(dict.fromkeys(p.platform for p in posts)),
        post_dates=list(dict.fromkeys(p.timestamp.strftime("%Y-%m-%d") for p in posts)),
        sample_texts=[p.text for p in posts[:SAMPLE_TEXTS]],
        post_links=[p.link for p in posts if p.link],
        total_engagement=cluster.total_engagement,
        sentiment_breakdown=dict(sentiments),
    )
