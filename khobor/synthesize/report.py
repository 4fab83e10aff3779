"""Format scores, coverage summaries and the ranked digest as plain text."""

from __future__ import annotations

from datetime import datetime, timezone

from khobor.models import Cluster, PostAnalysis, TrendingScore
from khobor.scoring import category_weight

VIRALITY_LABELS = {
    1: "Low",
    2: "Low-Medium",
    3: "Medium",
    4: "Medium-High",
    5: "High",
    6: "Very High",
    7: "Viral",
}

PREVIEW_CHARS = 120


def format_score(value: float, precision: int = 1) -> str:
    """Large numbers as K/M, e.g. ``13.7K``."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.{precision}f}M"
    if value >= 1000:
        return f"{value / 1000:.{precision}f}K"
    return f"{value:.{precision}f}"


def format_score_smart(value: float) -> str:
    """Like :func:`format_score` but with precision chosen by magnitude."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 10_000:
        return f"{value / 1000:.0f}K"
    if value >= 1000:
        return f"{value / 1000:.1f}K"
    if value >= 100:
        return f"{value:.0f}"
    if value >= 10:
        return f"{value:.1f}"
    return f"{value:.2f}"


def format_virality_score(score: int) -> str:
    return f"{score} ({VIRALITY_LABELS.get(score, 'Unknown')})"


def format_category_weight(weight: float) -> str:
    if weight >= 9:
        label = "Critical"
    elif weight >= 7:
        label = "High"
    elif weight >= 5:
        label = "Medium"
    else:
        label = "Low"
    return f"{weight:g} ({label})"


def format_post_analysis(analysis: PostAnalysis) -> str:
    """Serialise a coverage summary; the virality score parses this text."""
    lines = [
        f"Source: {', '.join(analysis.sources)}",
        f"Platform: {', '.join(analysis.platforms)}",
        f"Post date: {', '.join(analysis.post_dates)}",
        f"Total engagement: {analysis.total_engagement}",
    ]
    if analysis.sentiment_breakdown:
        breakdown = ", ".join(
            f"{label} {count}" for label, count in sorted(analysis.sentiment_breakdown.items())
        )
        lines.append(f"Sentiment: {breakdown}")
    for link in analysis.post_links:
        lines.append(f"Link: {link}")
    return "\n".join(lines)


def _preview(text: str) -> str:
    text = " ".join(text.split())
    if len(text) <= PREVIEW_CHARS:
        return text
    return text[:PREVIEW_CHARS].rstrip() + "..."


def format_digest(
    clusters: list[Cluster],
    scores: list[TrendingScore],
    limit: int = 10,
    now: datetime | None = None,
) -> str:
    """Ranked plain-text digest of the top ``limit`` clusters by final score."""
    now = now or datetime.now(timezone.utc)
    cluster_map = {c.id: c for c in clusters}

    lines = [
        f"TRENDING NEWS - {now.strftime('%b %d, %Y %H:%M')}",
        "─" * 28,
        "",
    ]

    ranked = sorted(scores, key=lambda s: -s.final_trending_score)[:limit]
    for rank, score in enumerate(ranked, 1):
        cluster = cluster_map.get(score.cluster_id)
        if cluster is None:
            continue
        category = cluster.category or "Uncategorized"
        lines.append(f"{rank}. [{category}] {_preview(cluster.representative.text)}")
        lines.append(
            f"   trending {format_score_smart(score.final_trending_score)}"
            f" | virality {format_virality_score(score.virality_score)}"
            f" | weight {format_category_weight(category_weight(cluster.category))}"
        )
        lines.append(
            f"   {cluster.post_count} posts from {', '.join(sorted(cluster.sources))}"
            f" | engagement {format_score(cluster.total_engagement)}"
        )
        lines.append("")

    total_posts = sum(c.post_count for c in clusters)
    lines.append("─" * 28)
    lines.append(f"{total_posts} posts | {len(clusters)} clusters")
    return "\n".join(lines)
