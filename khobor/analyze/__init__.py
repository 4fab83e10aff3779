"""Analyzer registry for relatedness queries and trending scores."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from khobor.analyze.base import BaseAnalyzer

ANALYZERS: dict[str, type[BaseAnalyzer]] = {}


def register_analyzer(name: str):
    """Decorator to register an analyzer."""

    def decorator(cls):
        ANALYZERS[name] = cls
        return cls

    return decorator


from khobor.analyze.related import RelatedAnalyzer  # noqa: E402, F401
from khobor.analyze.trending import TrendingAnalyzer  # noqa: E402, F401
