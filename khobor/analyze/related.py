"""Query-time relatedness: find other news items covering the anchor's story.

Candidates pass through three gates in order, cheapest first:

1. entity - the candidate must mention the anchor's people (by name or
   alias) or, for anchors without people, its top-priority entity;
2. context - incident-context overlap of at least ``context_threshold``;
3. semantic - context-aware similarity of at least ``semantic_threshold``.

Survivors are scored with a weighted blend of semantic similarity, entity
overlap and lexical Dice, filtered by ``confidence_threshold`` and folded
into at most ``max_results`` distinct clusters.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import timedelta

from khobor.analyze import register_analyzer
from khobor.analyze.base import BaseAnalyzer
from khobor.config import get_related_config
from khobor.models import (
    Cluster,
    Entity,
    Post,
    RelatedCandidate,
    RelatedCluster,
    RelatedReasoning,
)
from khobor.text.context import calculate_context_overlap
from khobor.text.entities import (
    calculate_entity_overlap,
    entities_match,
    extract_all_entities,
    find_shared_entities,
    resolve_name_alias,
)
from khobor.text.similarity import (
    advanced_similarity,
    context_aware_similarity,
    dice_similarity,
)

logger = logging.getLogger(__name__)


def find_cluster_of(post_id: str, clusters: list[Cluster]) -> Cluster | None:
    for cluster in clusters:
        if post_id in cluster.post_ids:
            return cluster
    return None


def select_candidates(
    anchor: Post,
    clusters: list[Cluster],
    window_days: int = 3,
    max_candidates: int = 100,
) -> list[RelatedCandidate]:
    """Posts from other clusters within the time window, most engaged first."""
    own = find_cluster_of(anchor.id, clusters)
    window = timedelta(days=window_days)
    candidates = [
        RelatedCandidate(post=post, cluster_id=cluster.id)
        for cluster in clusters
        if own is None or cluster.id != own.id
        for post in cluster.posts
        if post.id != anchor.id and abs(post.timestamp - anchor.timestamp) <= window
    ]
    candidates.sort(key=lambda c: -c.post.engagement)
    return candidates[:max_candidates]


def passes_entity_gate(
    anchor_entities: list[Entity],
    candidate_entities: list[Entity],
    entityless_anchor: str = "reject",
) -> bool:
    """Gate 1: shared person, else a match on the anchor's top entity type."""
    anchor_persons = [e.value for e in anchor_entities if e.type == "person"]
    if anchor_persons:
        candidate_persons = [e.value for e in candidate_entities if e.type == "person"]
        return any(
            resolve_name_alias(name, candidate_persons) is not None
            for name in anchor_persons
        )

    if not anchor_entities:
        return entityless_anchor == "pass"

    top_type = anchor_entities[0].type
    return any(
        entities_match(a, c)
        for a in anchor_entities
        if a.type == top_type
        for c in candidate_entities
    )


@register_analyzer("related")
class RelatedAnalyzer(BaseAnalyzer):
    """Rank other clusters by how likely they cover the anchor's occurrence."""

    @property
    def name(self) -> str:
        return "related"

    def analyze(self, clusters: list[Cluster], anchor: Post | None = None) -> list[RelatedCluster]:
        if anchor is None:
            return []
        cfg = get_related_config(self.config)
        candidates = select_candidates(
            anchor, clusters, cfg["window_days"], cfg["max_candidates"],
        )
        return self.rank(anchor, candidates)

    def rank(self, anchor: Post, candidates: list[RelatedCandidate]) -> list[RelatedCluster]:
        """Run the gate funnel over pre-filtered, engagement-ordered candidates."""
        cfg = get_related_config(self.config)
        weights = cfg["weights"]
        anchor_entities = extract_all_entities(anchor.text)

        rejected: Counter = Counter()
        scored: list[tuple[float, int, RelatedCluster]] = []
        for index, candidate in enumerate(candidates):
            post = candidate.post
            if post.id == anchor.id:
                continue

            candidate_entities = extract_all_entities(post.text)
            if not passes_entity_gate(
                anchor_entities, candidate_entities, cfg["entityless_anchor"],
            ):
                rejected["entity"] += 1
                continue

            context = calculate_context_overlap(anchor.text, post.text)
            if context.overlap < cfg["context_threshold"]:
                rejected["context"] += 1
                continue

            semantic = context_aware_similarity(anchor.text, post.text, cfg["context_boost"])
            if semantic < cfg["semantic_threshold"]:
                rejected["semantic"] += 1
                continue

            advanced = advanced_similarity(anchor.text, post.text)
            overlap = calculate_entity_overlap(anchor_entities, candidate_entities)
            confidence = min(1.0, (
                weights["semantic"] * advanced
                + weights["entity"] * overlap
                + weights["lexical"] * dice_similarity(anchor.text, post.text)
            ))
            if confidence < cfg["confidence_threshold"]:
                rejected["confidence"] += 1
                continue

            reasoning = RelatedReasoning(
                shared_entities=tuple(find_shared_entities(anchor_entities, candidate_entities)),
                entity_overlap=overlap,
                semantic_similarity=advanced,
                context_overlap=context.overlap,
                shared_contexts=context.shared_contexts,
            )
            scored.append((confidence, index, RelatedCluster(
                cluster_id=candidate.cluster_id,
                post_id=post.id,
                confidence=confidence,
                reasoning=reasoning,
            )))

        logger.debug(
            "Related funnel for %s: %d candidates, rejected entity=%d context=%d "
            "semantic=%d confidence=%d",
            anchor.id, len(candidates), rejected["entity"], rejected["context"],
            rejected["semantic"], rejected["confidence"],
        )

        # Ties keep the engagement order of the candidate list.
        scored.sort(key=lambda item: (-item[0], item[1]))
        results: list[RelatedCluster] = []
        seen: set[str] = set()
        for _, _, related in scored:
            if related.cluster_id in seen:
                continue
            seen.add(related.cluster_id)
            results.append(related)
            if len(results) >= cfg["max_results"]:
                break

        logger.info(
            "Found %d related clusters for post %s (%d passed all gates)",
            len(results), anchor.id, len(scored),
        )
        return results
