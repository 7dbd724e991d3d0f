"""Helpers for putting commit lists into a shape the layout expects.

The layout draws commits in the order it is given. These are for callers whose
history may contain repeated commits or parents listed above their children.
"""

import heapq
import logging
from collections.abc import Iterable, Sequence

from graphlane.graph.types import Commit, P

logger = logging.getLogger(__name__)


def dedupe_commits(commits: Iterable[Commit[P]]) -> list[Commit[P]]:
    """Drop repeated shas, keeping the first occurrence."""
    seen: set[str] = set()
    result: list[Commit[P]] = []
    for commit in commits:
        if commit.sha in seen:
            logger.debug("Skipping duplicate commit %s", commit.sha[:7])
            continue
        seen.add(commit.sha)
        result.append(commit)
    return result


def build_children_map(commits: Sequence[Commit[P]]) -> dict[str, list[str]]:
    """Map each sha to the shas of its children within the list."""
    children_of: dict[str, list[str]] = {commit.sha: [] for commit in commits}
    for commit in commits:
        for parent_sha in commit.parents:
            if parent_sha in children_of and commit.sha not in children_of[parent_sha]:
                children_of[parent_sha].append(commit.sha)
    return children_of


def topological_order(commits: Sequence[Commit[P]]) -> list[Commit[P]]:
    """Order commits so every child comes before its parents.

    Kahn's algorithm with the input position as the tie breaker: a commit
    is emitted once all of its children have been, and among the ready
    commits the one given earliest goes first. Input that is already ordered
    comes back unchanged. Duplicates are dropped; parents outside the list
    are ignored. Commits caught in a cycle keep their relative order and go
    last.
    """
    unique = dedupe_commits(commits)
    index_of = {commit.sha: index for index, commit in enumerate(unique)}
    children_of = build_children_map(unique)

    in_degree: dict[str, int] = {sha: len(children) for sha, children in children_of.items()}

    ready: list[int] = [index for index, commit in enumerate(unique) if in_degree[commit.sha] == 0]
    heapq.heapify(ready)

    ordered: list[Commit[P]] = []
    emitted: set[str] = set()

    while ready:
        index = heapq.heappop(ready)
        commit = unique[index]
        if commit.sha in emitted:
            continue
        emitted.add(commit.sha)
        ordered.append(commit)

        for parent_sha in dict.fromkeys(commit.parents):
            if parent_sha not in in_degree:
                continue
            in_degree[parent_sha] -= 1
            if in_degree[parent_sha] == 0:
                heapq.heappush(ready, index_of[parent_sha])

    if len(ordered) < len(unique):
        leftover = [commit for commit in unique if commit.sha not in emitted]
        logger.warning("Commit graph has a cycle; %d commits left in input order", len(leftover))
        ordered.extend(leftover)

    return ordered
