"""Commit graph layout - turns an ordered commit list into nodes, paths and decorations."""

import logging
from collections.abc import Sequence

from graphlane.graph.colors import color_for, lane_color_key
from graphlane.graph.decorations import extract_decorations
from graphlane.graph.edges import make_connector
from graphlane.graph.lanes import LaneAllocator
from graphlane.graph.types import (
    Branch,
    Commit,
    GraphNode,
    LayoutConfig,
    P,
    ProcessedGraph,
    Tag,
)

logger = logging.getLogger(__name__)


def process_commits_for_graph(
    commits: Sequence[Commit[P]],
    branches: Sequence[Branch] = (),
    tags: Sequence[Tag] = (),
    config: LayoutConfig | None = None,
) -> ProcessedGraph[P]:
    """
    Lay out a commit history as a lane graph.

    The input order is the display order: row i is commits[i]. Commits are
    expected newest first, with parents below their children; a parent above
    its child still gets a connector but the result is not guaranteed to be
    tidy (see graphlane.graph.ordering.topological_order).

    Never raises for malformed history: parents missing from the input are
    skipped and reported in ProcessedGraph.dangling.

    Args:
        commits: Commits in display order
        branches: Branch tips to decorate
        tags: Tags to decorate
        config: Scale and palette (defaults when None)

    Returns:
        ProcessedGraph with one node per commit, one path per resolvable
        parent edge and one decoration per branch and tag
    """
    if config is None:
        config = LayoutConfig()

    graph: ProcessedGraph[P] = ProcessedGraph(decorations=extract_decorations(branches, tags))
    if not commits:
        return graph

    # First occurrence wins for duplicate shas
    row_of: dict[str, int] = {}
    commit_of: dict[str, Commit[P]] = {}
    for row, commit in enumerate(commits):
        if commit.sha not in row_of:
            row_of[commit.sha] = row
            commit_of[commit.sha] = commit

    allocator = LaneAllocator(row_of, release_lanes=config.release_lanes)

    def lane_color(sha: str, lane: int) -> str:
        commit = commit_of[sha]
        return color_for(lane_color_key(commit.branch, lane), config.palette)

    for row, commit in enumerate(commits):
        lane = allocator.place(commit.sha)
        color = color_for(lane_color_key(commit.branch, lane), config.palette)
        graph.nodes.append(GraphNode(commit=commit, x=lane, y=row, color=color))

        parent_lanes = allocator.reserve_parents(commit.sha, lane, commit.parents)
        for index, (parent_sha, parent_lane) in enumerate(zip(commit.parents, parent_lanes)):
            if parent_lane is None:
                logger.debug(
                    "Dropping edge %s -> %s: parent not in history", commit.sha[:7], parent_sha[:7]
                )
                graph.dangling.append((commit.sha, parent_sha))
                continue

            # First parent edges stay in the child's color, merge edges take the merge lane's
            edge_color = color if index == 0 else lane_color(parent_sha, parent_lane)
            graph.paths.append(
                make_connector(
                    commit.sha,
                    parent_sha,
                    lane,
                    row,
                    parent_lane,
                    row_of[parent_sha],
                    edge_color,
                    config,
                )
            )

        allocator.finish(commit.sha, lane, commit.parents)

    graph.lane_count = allocator.lane_count
    if graph.dangling:
        logger.debug("Dropped %d dangling parent edges", len(graph.dangling))
    return graph

