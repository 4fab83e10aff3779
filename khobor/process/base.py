"""Abstract base class for processors."""

from __future__ import annotations

from abc import ABC, abstractmethod

from khobor.models import Cluster, Post


class BaseProcessor(ABC):
    """Base class for batch steps that turn posts into clusters."""

    def __init__(self, config: dict):
        self.config = config

    @abstractmethod
    def process(self, posts: list[Post]) -> list[Cluster]:
        """Process one ingestion pass of posts."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Processor name."""
        ...
