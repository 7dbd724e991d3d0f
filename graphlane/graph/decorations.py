"""Branch and tag labels."""

from collections.abc import Iterable

from graphlane.constants import DECORATION_BRANCH, DECORATION_TAG
from graphlane.graph.types import Branch, GraphDecoration, Tag


def extract_decorations(branches: Iterable[Branch], tags: Iterable[Tag]) -> list[GraphDecoration]:
    """Flatten branches then tags into decorations, keeping input order.

    Shas are not checked against the commit list; a decoration whose commit
    is not displayed simply has nothing to attach to.
    """
    decorations = [GraphDecoration(b.name, b.sha, DECORATION_BRANCH) for b in branches]
    decorations.extend(GraphDecoration(t.name, t.sha, DECORATION_TAG) for t in tags)
    return decorations

