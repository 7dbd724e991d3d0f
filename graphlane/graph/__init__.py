"""Commit graph layout engine."""

from graphlane.graph.colors import color_for
from graphlane.graph.decorations import extract_decorations
from graphlane.graph.layout import process_commits_for_graph
from graphlane.graph.ordering import dedupe_commits, topological_order
from graphlane.graph.types import (
    Branch,
    Commit,
    GraphDecoration,
    GraphNode,
    GraphPath,
    LayoutConfig,
    ProcessedGraph,
    Tag,
)

__all__ = [
    "Branch",
    "Commit",
    "GraphDecoration",
    "GraphNode",
    "GraphPath",
    "LayoutConfig",
    "ProcessedGraph",
    "Tag",
    "color_for",
    "dedupe_commits",
    "extract_decorations",
    "process_commits_for_graph",
    "topological_order",
]
