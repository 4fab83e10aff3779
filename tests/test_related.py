"""Tests for the three-gate relatedness funnel."""

from __future__ import annotations

import pytest

from khobor.analyze import ANALYZERS
from khobor.analyze.related import (
    RelatedAnalyzer,
    find_cluster_of,
    passes_entity_gate,
    select_candidates,
)
from khobor.models import Cluster, Entity, RelatedCandidate
from khobor.process.cluster import ClusterProcessor
from khobor.text.entities import extract_all_entities


def _cluster(key, posts):
    cluster = Cluster(
        group_key=key,
        base_key=key,
        category=posts[0].category,
        first_post_date=min(p.timestamp for p in posts),
        last_post_date=max(p.timestamp for p in posts),
        primary_source=posts[0].source,
        primary_platform=posts[0].platform,
    )
    for post in posts:
        ClusterProcessor.add_post(cluster, post, 0.0)
    return cluster


@pytest.fixture
def analyzer(sample_config):
    return RelatedAnalyzer(sample_config)


def test_related_registered():
    assert ANALYZERS["related"] is RelatedAnalyzer


# --- Gate 1 ---


def test_alias_lets_entity_gate_pass(murder_text):
    """Anchor names the full person; candidate uses the same given name with another surname."""
    anchor = extract_all_entities(murder_text)
    candidate = extract_all_entities("করিম হোসেন হত্যা মামলায় তদন্ত শুরু")
    assert passes_entity_gate(anchor, candidate)


def test_different_person_fails_entity_gate(murder_text):
    anchor = extract_all_entities(murder_text)
    candidate = extract_all_entities("রহিম হোসেন হত্যা মামলায় তদন্ত শুরু, লাশ উদ্ধার")
    assert not passes_entity_gate(anchor, candidate)


def test_person_anchor_rejects_candidate_without_people(murder_text):
    anchor = extract_all_entities(murder_text)
    assert not passes_entity_gate(anchor, [Entity("location", "ঢাকা", 0.9)])


def test_top_type_gate_without_people():
    anchor = [Entity("location", "ঢাকা", 0.9), Entity("object", "ধারা ৩০২", 0.8)]
    assert passes_entity_gate(anchor, [Entity("location", "ঢাকা", 0.9)])
    assert not passes_entity_gate(anchor, [Entity("location", "খুলনা", 0.9)])
    # Only the top-priority type counts.
    assert not passes_entity_gate(anchor, [Entity("object", "ধারা ৩০২", 0.8)])


def test_entityless_anchor():
    candidate = [Entity("object", "bg 437", 0.8)]
    assert not passes_entity_gate([], candidate, "reject")
    assert passes_entity_gate([], candidate, "pass")


# --- Candidate selection ---


def test_select_candidates_window_and_own_cluster(make_post, murder_text):
    anchor = make_post("anchor", murder_text, hours_ago=0)
    own = _cluster("own", [anchor, make_post("sibling", murder_text, hours_ago=1)])
    near = _cluster("near", [make_post("near", murder_text, hours_ago=30, reactions=5)])
    far = _cluster("far", [make_post("far", murder_text, hours_ago=24 * 4)])
    busy = _cluster("busy", [make_post("busy", murder_text, hours_ago=2, reactions=50)])

    candidates = select_candidates(anchor, [own, near, far, busy], window_days=3)

    assert [c.post.id for c in candidates] == ["busy", "near"]
    assert candidates[0].cluster_id == busy.id


def test_select_candidates_cap(make_post, murder_text):
    anchor = make_post("anchor", murder_text)
    clusters = [
        _cluster(f"c{i}", [make_post(f"p{i}", murder_text, reactions=i)]) for i in range(10)
    ]
    candidates = select_candidates(anchor, clusters, max_candidates=3)
    assert [c.post.id for c in candidates] == ["p9", "p8", "p7"]


def test_find_cluster_of(make_post, murder_text):
    post = make_post("x", murder_text)
    cluster = _cluster("k", [post])
    assert find_cluster_of("x", [cluster]) is cluster
    assert find_cluster_of("missing", [cluster]) is None


# --- Full funnel ---


def test_identical_report_in_other_cluster_is_related(analyzer, make_post, murder_text):
    anchor = make_post("anchor", murder_text)
    other = make_post("other", murder_text, hours_ago=6, category="National")
    results = analyzer.rank(anchor, [RelatedCandidate(other, "cluster-b")])

    assert len(results) == 1
    result = results[0]
    assert result.cluster_id == "cluster-b"
    assert result.post_id == "other"
    assert 0.72 <= result.confidence <= 1.0
    assert result.reasoning.entity_overlap == pytest.approx(1.0)
    assert result.reasoning.semantic_similarity == pytest.approx(1.0)
    assert result.reasoning.context_overlap >= 0.3
    assert "person:করিম উদ্দিন" in result.reasoning.shared_entities
    assert "murder" in result.reasoning.shared_contexts


def test_unrelated_candidates_are_rejected(analyzer, accident_text, make_post, murder_text):
    anchor = make_post("anchor", murder_text)
    candidates = [
        RelatedCandidate(make_post("accident", accident_text), "a"),
        RelatedCandidate(make_post("other-person", "রহিম হোসেন হত্যা মামলায় তদন্ত শুরু, লাশ উদ্ধার"), "b"),
        RelatedCandidate(make_post("election", "করিম উদ্দিন নির্বাচনে ভোট দিলেন"), "c"),
    ]
    assert analyzer.rank(anchor, candidates) == []


def test_anchor_itself_is_skipped(analyzer, make_post, murder_text):
    anchor = make_post("anchor", murder_text)
    assert analyzer.rank(anchor, [RelatedCandidate(anchor, "own")]) == []


def test_results_folded_per_cluster_and_capped(analyzer, make_post, murder_text):
    anchor = make_post("anchor", murder_text)
    candidates = [
        RelatedCandidate(make_post(f"p{i}", murder_text), f"cluster-{i // 2}")
        for i in range(14)
    ]
    results = analyzer.rank(anchor, candidates)

    assert len(results) == 5
    assert [r.cluster_id for r in results] == [f"cluster-{i}" for i in range(5)]
    # First-seen candidate wins within a cluster.
    assert [r.post_id for r in results] == ["p0", "p2", "p4", "p6", "p8"]


def test_max_results_from_config(sample_config, make_post, murder_text):
    sample_config["related"]["max_results"] = 2
    anchor = make_post("anchor", murder_text)
    candidates = [RelatedCandidate(make_post(f"p{i}", murder_text), f"c{i}") for i in range(4)]
    assert len(RelatedAnalyzer(sample_config).rank(anchor, candidates)) == 2


def test_confidence_threshold_from_config(sample_config, make_post, murder_text):
    sample_config["related"]["confidence_threshold"] = 1.01
    anchor = make_post("anchor", murder_text)
    candidates = [RelatedCandidate(make_post("p", murder_text), "c")]
    assert RelatedAnalyzer(sample_config).rank(anchor, candidates) == []


def test_analyze_without_anchor(analyzer):
    assert analyzer.analyze([]) == []


def test_analyze_does_not_modify_clusters(analyzer, sample_posts, now):
    clusters = ClusterProcessor({}).process(sample_posts, now=now)
    before = [(c.id, list(c.post_ids), c.total_reactions) for c in clusters]
    anchor = sample_posts[0]

    results = analyzer.analyze(clusters, anchor=anchor)

    assert [(c.id, list(c.post_ids), c.total_reactions) for c in clusters] == before
    own = find_cluster_of(anchor.id, clusters)
    assert own.id not in {r.cluster_id for r in results}
    national = find_cluster_of("p3", clusters)
    assert [r.cluster_id for r in results] == [national.id]


def test_location_anchor_not_forced_into_person_branch():
    anchor = extract_all_entities("ঢাকায় ট্রাক চাপায় নিহত, পুলিশ জানায়")
    candidate = extract_all_entities("ঢাকায় ট্রাক চাপায় দুইজন নিহত")
    assert not any(e.type == "person" for e in anchor)
    assert passes_entity_gate(anchor, candidate)
