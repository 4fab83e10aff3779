"""Core data models for the correlation pipeline."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from datetime import datetime, timezone


def as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class Post:
    """A single social-media post. Never mutated once created."""

    id: str
    text: str
    timestamp: datetime
    platform: str
    source: str
    category: str | None = None
    reactions: int = 0
    shares: int = 0
    comments: int = 0
    sentiment: str | None = None
    link: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "timestamp", as_utc(self.timestamp))

    @property
    def engagement(self) -> int:
        return self.reactions + self.shares + self.comments


@dataclass(frozen=True)
class Entity:
    """A typed mention extracted from post text."""

    type: str  # person, location, organization, object
    value: str
    confidence: float
    category: str | None = None  # objects only: flight, vehicle, ship, ...

    @property
    def tag(self) -> str:
        return f"{self.type}:{self.value}"


@dataclass(frozen=True)
class ContextClassification:
    """One incident context a text was classified into."""

    context: str
    confidence: float
    matched_keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class ContextOverlap:
    """Overlap score between two texts' incident contexts."""

    overlap: float
    shared_contexts: tuple[str, ...] = ()


@dataclass
class Cluster:
    """A news item: posts judged to report the same occurrence."""

    group_key: str
    base_key: str
    category: str | None
    first_post_date: datetime
    last_post_date: datetime
    primary_source: str
    primary_platform: str
    posts: list[Post] = field(default_factory=list)
    sources: set[str] = field(default_factory=set)
    platforms: set[str] = field(default_factory=set)
    total_reactions: int = 0
    total_shares: int = 0
    total_comments: int = 0
    avg_trending_score: float = 0.0
    id: str = ""

    def __post_init__(self):
        if not self.id:
            self.id = hashlib.sha256(self.group_key.encode()).hexdigest()[:16]

    @property
    def representative(self) -> Post | None:
        return self.posts[0] if self.posts else None

    @property
    def post_ids(self) -> list[str]:
        return [p.id for p in self.posts]

    @property
    def post_count(self) -> int:
        return len(self.posts)

    @property
    def total_engagement(self) -> int:
        return self.total_reactions + self.total_shares + self.total_comments


@dataclass
class PostAnalysis:
    """Aggregate description of a cluster's coverage."""

    sources: list[str]
    platforms: list[str]
    post_dates: list[str]
    sample_texts: list[str]
    post_links: list[str]
    total_engagement: int
    sentiment_breakdown: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class RelatedCandidate:
    """A post offered to a relatedness query, tagged with its cluster."""

    post: Post
    cluster_id: str


@dataclass(frozen=True)
class RelatedReasoning:
    """Why a candidate cluster was judged related to the anchor."""

    shared_entities: tuple[str, ...]
    entity_overlap: float
    semantic_similarity: float
    context_overlap: float
    shared_contexts: tuple[str, ...] = ()


@dataclass(frozen=True)
class RelatedCluster:
    """A ranked relatedness result for one upstream cluster."""

    cluster_id: str
    post_id: str
    confidence: float
    reasoning: RelatedReasoning


@dataclass
class TrendingScore:
    """The four ranking scores for one cluster."""

    cluster_id: str
    source_weight: float
    news_flow_weight: float
    news_flow_weight_by_category: float
    virality_score: int
    final_trending_score: float = 0.0


@dataclass
class PipelineResult:
    """Output of one ingestion pass."""

    clusters: list[Cluster]
    scores: list[TrendingScore]
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: datetime | None = None
