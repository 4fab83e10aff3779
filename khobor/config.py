"""Load configuration from YAML with env var substitution and built-in defaults."""

from __future__ import annotations

import copy
import os
import re
from pathlib import Path
from typing import Any

import yaml

DEFAULTS: dict[str, Any] = {
    "cluster": {
        "jaccard_threshold": 0.45,
        "length_ratio": 0.5,
        "base_key_length": 100,
        "trending_average": "mean",  # mean | legacy
    },
    "related": {
        "window_days": 3,
        "max_candidates": 100,
        "max_results": 5,
        "context_threshold": 0.3,
        "semantic_threshold": 0.65,
        "context_boost": 0.05,
        "confidence_threshold": 0.72,
        "entityless_anchor": "reject",  # reject | pass
        "weights": {"semantic": 0.55, "entity": 0.30, "lexical": 0.15},
    },
    "scoring": {
        "default_followers": 1000,
    },
    "logging": {
        "level": "INFO",
        "file": None,
    },
}

_ENV_REF = re.compile(r"\$\{([^}]+)\}")


def _load_dotenv(path: str | Path = ".env") -> None:
    """Export KEY=VALUE lines from a .env file, never overriding the environment."""
    env_path = Path(path)
    if not env_path.is_file():
        return
    for line in env_path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        if key:
            os.environ.setdefault(key, value.strip().strip("'\""))


def _resolve_env_vars(value: Any) -> Any:
    """Replace ${VAR} references anywhere in a nested config structure."""
    if isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve_env_vars(v) for v in value]
    if not isinstance(value, str):
        return value
    whole = _ENV_REF.fullmatch(value)
    if whole:
        return os.environ.get(whole.group(1), "")
    return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), value)


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | Path | None = "config.yaml") -> dict[str, Any]:
    """Load config from YAML over the defaults.

    ``path=None`` returns the defaults alone. A named file that does not exist
    raises ``FileNotFoundError``.
    """
    _load_dotenv()
    if path is None:
        return copy.deepcopy(DEFAULTS)

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge(DEFAULTS, _resolve_env_vars(raw))


def _section(config: dict, name: str) -> dict:
    return _merge(DEFAULTS[name], config.get(name) or {})


def get_cluster_config(config: dict) -> dict:
    """Batch clustering thresholds."""
    return _section(config, "cluster")


def get_related_config(config: dict) -> dict:
    """Relatedness gate thresholds and confidence weights."""
    return _section(config, "related")


def get_scoring_config(config: dict) -> dict:
    return _section(config, "scoring")


def get_logging_config(config: dict) -> dict:
    return _section(config, "logging")
