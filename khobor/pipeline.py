"""Pipeline orchestrator: posts -> clusters -> trending scores, plus related queries."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from khobor.analyze import ANALYZERS
from khobor.models import Cluster, PipelineResult, Post, RelatedCluster
from khobor.process import PROCESSORS

logger = logging.getLogger(__name__)


def run_pipeline(
    config: dict, posts: list[Post], now: datetime | None = None,
) -> PipelineResult:
    """Cluster one ingestion pass of posts and rank the resulting news items."""
    result = PipelineResult(clusters=[], scores=[])
    logger.info("Pipeline started with %d posts", len(posts))

    if not posts:
        logger.warning("No posts to process")
        result.finished_at = datetime.now(timezone.utc)
        return result

    clusterer = PROCESSORS["cluster"](config)
    result.clusters = clusterer.process(posts, now=now)

    trending = ANALYZERS["trending"](config, now=now)
    result.scores = trending.analyze(result.clusters)

    result.finished_at = datetime.now(timezone.utc)
    elapsed = (result.finished_at - result.started_at).total_seconds()
    logger.info(
        "Pipeline finished: %d posts, %d clusters in %.2fs",
        len(posts), len(result.clusters), elapsed,
    )
    return result


def find_post(post_id: str, clusters: list[Cluster]) -> Post:
    """Look up a clustered post by id; raises ``KeyError`` if absent."""
    for cluster in clusters:
        for post in cluster.posts:
            if post.id == post_id:
                return post
    raise KeyError(post_id)


def find_related(
    config: dict, anchor_id: str, clusters: list[Cluster],
) -> list[RelatedCluster]:
    """Related news items for one clustered post. Clusters are not modified."""
    anchor = find_post(anchor_id, clusters)
    analyzer = ANALYZERS["related"](config)
    return analyzer.analyze(clusters, anchor=anchor)
