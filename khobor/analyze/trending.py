"""Trending analyzer: ranks clusters with the scoring service."""

from __future__ import annotations

import logging
from datetime import datetime

from khobor.analyze import register_analyzer
from khobor.analyze.base import BaseAnalyzer
from khobor.config import get_scoring_config
from khobor.models import Cluster, Post, TrendingScore
from khobor.process.cluster import build_post_analysis
from khobor.scoring import (
    days_difference,
    final_trending_score,
    news_flow_weight,
    posts_per_day,
    source_weight,
    virality_score,
)
from khobor.synthesize.report import format_post_analysis

logger = logging.getLogger(__name__)


@register_analyzer("trending")
class TrendingAnalyzer(BaseAnalyzer):
    """Score every cluster, scaled against the busiest cluster in the set."""

    def __init__(self, config: dict, now: datetime | None = None):
        super().__init__(config)
        self.now = now

    @property
    def name(self) -> str:
        return "trending"

    def analyze(self, clusters: list[Cluster], anchor: Post | None = None) -> list[TrendingScore]:
        followers = get_scoring_config(self.config)["default_followers"]

        scores = [self.score_cluster(cluster, followers) for cluster in clusters]
        max_trending = max(
            (s.news_flow_weight_by_category + s.source_weight for s in scores),
            default=0.0,
        )
        for score in scores:
            score.final_trending_score = final_trending_score(
                score.source_weight,
                score.news_flow_weight_by_category,
                score.virality_score,
                max_trending,
            )

        scores.sort(key=lambda s: -s.final_trending_score)
        logger.info("Scored %d clusters (max trending %.1f)", len(scores), max_trending)
        return scores

    def score_cluster(self, cluster: Cluster, followers: float) -> TrendingScore:
        """Everything but the dataset-scaled final score."""
        days = days_difference(cluster.first_post_date, self.now)
        frequency = posts_per_day(len(cluster.sources) or 1, cluster.first_post_date, self.now)
        flow, flow_by_category = news_flow_weight(
            cluster.total_reactions,
            cluster.total_shares,
            cluster.total_comments,
            days,
            cluster.category,
        )
        summary = format_post_analysis(build_post_analysis(cluster))
        return TrendingScore(
            cluster_id=cluster.id,
            source_weight=source_weight(cluster.total_reactions, followers, frequency),
            news_flow_weight=flow,
            news_flow_weight_by_category=flow_by_category,
            virality_score=virality_score(summary),
        )
