#!/usr/bin/env python3
"""
graphlane - print the lane layout of a repository's history as JSON
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any

from graphlane.config.settings import Settings
from graphlane.git_backend.repository import GraphRepository


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="graphlane",
        description="Lay out a git history as a lane graph and print it as JSON",
    )
    parser.add_argument(
        "repo",
        nargs="?",
        default=None,
        help="Repository path (default: the repository containing the current directory)",
    )
    parser.add_argument(
        "--max-count",
        type=int,
        default=None,
        help="Only lay out the newest N commits",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: ~/.config/graphlane/settings.json)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent the JSON output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser.parse_args(argv)


def _json_default(value: Any) -> Any:
    # Commit payloads are dataclasses (CommitInfo)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = Settings(args.config).get_layout_config()
        repo = GraphRepository(args.repo)
        graph = repo.build_graph(config, max_count=args.max_count)
    except ValueError as e:
        print(f"graphlane: {e}", file=sys.stderr)
        return 1

    json.dump(graph.to_dict(), sys.stdout, indent=args.indent, default=_json_default)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
