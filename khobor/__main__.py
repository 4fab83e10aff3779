"""CLI entrypoint: python -m khobor {cluster|related|classify|entities}."""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path

from khobor.config import get_logging_config, load_config


def setup_logging(config: dict) -> None:
    """Configure logging with console and optional rotating file output."""
    cfg = get_logging_config(config)
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(cfg["level"]).upper(), logging.INFO))

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    root.addHandler(console)

    # File handler (rotate at 5MB, keep 3 backups)
    if cfg["file"]:
        log_file = Path(cfg["file"])
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3,
        )
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)


def _usage(line: str) -> None:
    print(f"Usage: python -m khobor {line}")
    sys.exit(1)


def cmd_cluster(config: dict, args: list[str]) -> None:
    """Cluster a JSON file of posts and print the trending digest."""
    from khobor.ingest import load_posts
    from khobor.pipeline import run_pipeline
    from khobor.synthesize.report import format_digest

    if len(args) != 1:
        _usage("cluster <posts.json>")

    result = run_pipeline(config, load_posts(args[0]))
    print(format_digest(result.clusters, result.scores))


def cmd_related(config: dict, args: list[str]) -> None:
    """Print news items related to one post."""
    from khobor.ingest import load_posts
    from khobor.pipeline import find_related
    from khobor.process import PROCESSORS

    if len(args) != 2:
        _usage("related <posts.json> <post_id>")

    clusters = PROCESSORS["cluster"](config).process(load_posts(args[0]))
    try:
        related = find_related(config, args[1], clusters)
    except KeyError:
        print(f"Error: post '{args[1]}' not found")
        sys.exit(1)

    if not related:
        print("No related news items found.")
        return

    for item in related:
        reasoning = item.reasoning
        print(f"{item.cluster_id}  post {item.post_id}  confidence {item.confidence:.2f}")
        print(
            f"    semantic {reasoning.semantic_similarity:.2f}"
            f" | entity {reasoning.entity_overlap:.2f}"
            f" | context {reasoning.context_overlap:.2f}"
        )
        if reasoning.shared_entities:
            print(f"    shared: {', '.join(reasoning.shared_entities)}")


def cmd_classify(config: dict, args: list[str]) -> None:
    """Print incident contexts for a piece of text."""
    from khobor.text.context import classify

    if not args:
        _usage("classify <text>")

    results = classify(" ".join(args))
    if not results:
        print("No incident context detected.")
    for result in results:
        print(f"{result.context:<24} {result.confidence:.2f}  {', '.join(result.matched_keywords)}")


def cmd_entities(config: dict, args: list[str]) -> None:
    """Print entities extracted from a piece of text."""
    from khobor.text.entities import extract_all_entities

    if not args:
        _usage("entities <text>")

    for entity in extract_all_entities(" ".join(args)):
        suffix = f" ({entity.category})" if entity.category else ""
        print(f"{entity.type:<13} {entity.confidence:.2f}  {entity.value}{suffix}")


COMMANDS = {
    "cluster": cmd_cluster,
    "related": cmd_related,
    "classify": cmd_classify,
    "entities": cmd_entities,
}


def main() -> None:
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        available = ", ".join(COMMANDS)
        _usage(f"{{{available}}}")

    command = sys.argv[1]
    config = load_config(os.environ.get("CONFIG_PATH", "config.yaml"))
    setup_logging(config)
    COMMANDS[command](config, sys.argv[2:])


if __name__ == "__main__":
    main()
