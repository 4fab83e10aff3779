"""Abstract base class for analyzers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from khobor.models import Cluster, Post


class BaseAnalyzer(ABC):
    """Base class for read-only analysis over clusters."""

    def __init__(self, config: dict):
        self.config = config

    @abstractmethod
    def analyze(self, clusters: list[Cluster], anchor: Post | None = None) -> list[Any]:
        """Run analysis and return results. Clusters are never modified."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Analyzer name."""
        ...
