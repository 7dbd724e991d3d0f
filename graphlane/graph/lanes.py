"""Lane allocation for the commit graph.

Commits are visited top to bottom (row = position in the input). Each commit
takes the lane its child reserved for it, or the leftmost free lane. While a
commit is being placed it reserves lanes for its parents:

- the first parent continues straight down the commit's own lane
- every further parent (merge source) gets the leftmost free lane

A lane is released once its chain has nothing left to draw below, so the
graph is only as wide as the number of branches alive at any one row.
"""

import logging
from collections.abc import Container, Sequence

logger = logging.getLogger(__name__)


class LanePool:
    """Ordered lane slots, each free (None) or owned by a commit sha.

    The owner of a slot is the commit currently extending that lane: either a
    commit that has been drawn and whose chain is still open, or a parent that
    has been reserved but not reached yet.
    """

    def __init__(self) -> None:
        self.slots: list[str | None] = []
        self.lane_of: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self.slots)

    def first_free(self) -> int:
        """Index of the leftmost free slot, or a new slot at the end."""
        for lane, owner in enumerate(self.slots):
            if owner is None:
                return lane
        return len(self.slots)

    def claim(self, sha: str) -> int:
        """Give sha the leftmost free lane."""
        lane = self.first_free()
        self.assign(sha, lane)
        return lane

    def occupy(self, sha: str) -> int:
        """Take the leftmost free lane without recording it as sha's lane."""
        lane = self.first_free()
        if lane == len(self.slots):
            self.slots.append(None)
        self.slots[lane] = sha
        return lane

    def assign(self, sha: str, lane: int) -> None:
        """Make sha the owner of lane."""
        if lane == len(self.slots):
            self.slots.append(None)
        self.slots[lane] = sha
        self.lane_of[sha] = lane

    def release(self, lane: int) -> None:
        self.slots[lane] = None

    def owner(self, lane: int) -> str | None:
        if lane >= len(self.slots):
            return None
        return self.slots[lane]


class LaneAllocator:
    """Assigns lanes to commits visited in display order.

    `known` is the set of shas present in the input; parents outside it are
    dangling and never get a lane.
    """

    def __init__(self, known: Container[str], release_lanes: bool = True) -> None:
        self.known = known
        self.release_lanes = release_lanes
        self.pool = LanePool()
        self.visited: set[str] = set()

    @property
    def lane_count(self) -> int:
        return len(self.pool)

    def lane_for(self, sha: str) -> int | None:
        return self.pool.lane_of.get(sha)

    def place(self, sha: str) -> int:
        """Pick the lane for the commit at the current row."""
        if sha in self.visited:
            # Repeated sha: lay the extra row out on its own lane and leave
            # the first occurrence's lane alone
            logger.warning("Duplicate commit %s in input, placing it on a new lane", sha[:7])
            return self.pool.occupy(sha)

        lane = self.pool.lane_of.get(sha)
        if lane is None:
            lane = self.pool.claim(sha)
        else:
            self.pool.assign(sha, lane)
        self.visited.add(sha)
        return lane

    def reserve_parents(self, sha: str, lane: int, parents: Sequence[str]) -> list[int | None]:
        """Reserve lanes for a commit's parents.

        Returns one entry per parent: its lane, or None when the parent is not
        part of the input.
        """
        parent_lanes: list[int | None] = []
        for index, parent in enumerate(parents):
            if parent not in self.known or parent == sha:
                parent_lanes.append(None)
                continue

            parent_lane = self.pool.lane_of.get(parent)
            if parent_lane is None:
                if index == 0:
                    parent_lane = lane
                    self.pool.assign(parent, lane)
                else:
                    parent_lane = self.pool.claim(parent)
            parent_lanes.append(parent_lane)
        return parent_lanes

    def finish(self, sha: str, lane: int, parents: Sequence[str]) -> None:
        """Release the commit's lane unless its first parent carries it on."""
        if not self.release_lanes:
            return

        if parents:
            first = parents[0]
            continues = (
                first in self.known
                and first not in self.visited
                and self.pool.lane_of.get(first) == lane
            )
            if continues:
                return

        if self.pool.owner(lane) == sha:
            self.pool.release(lane)
