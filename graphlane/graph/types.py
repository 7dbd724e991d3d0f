"""Types for commit graph layout."""

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

from graphlane.constants import DEFAULT_PALETTE, LANE_WIDTH, ROW_HEIGHT

P = TypeVar("P")

DecorationType = Literal["branch", "tag"]


@dataclass(frozen=True)
class Commit(Generic[P]):
    """A commit as delivered by the backend.

    The payload (message, author, files, ...) is carried through to the
    output untouched; the layout never looks at it.
    """

    sha: str
    parents: list[str] = field(default_factory=list)
    branch: str = ""
    payload: P | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "sha": self.sha,
            "parents": list(self.parents),
            "branch": self.branch,
            "payload": self.payload,
        }


@dataclass(frozen=True)
class Branch:
    """A branch ref and the commit it points at."""

    name: str
    sha: str
    is_remote: bool = False


@dataclass(frozen=True)
class Tag:
    """A tag and the commit it annotates."""

    name: str
    sha: str


@dataclass(frozen=True)
class GraphNode(Generic[P]):
    """A commit with its layout position."""

    commit: Commit[P]
    x: int  # lane
    y: int  # row
    color: str

    def to_dict(self) -> dict[str, Any]:
        return {"commit": self.commit.to_dict(), "x": self.x, "y": self.y, "color": self.color}


@dataclass(frozen=True)
class GraphPath:
    """A connector from a child commit down to one of its parents."""

    child_sha: str
    parent_sha: str
    from_lane: int
    from_row: int
    to_lane: int
    to_row: int
    d: str
    color: str

    @property
    def is_straight(self) -> bool:
        return self.from_lane == self.to_lane

    def to_dict(self) -> dict[str, Any]:
        return {"d": self.d, "color": self.color}


@dataclass(frozen=True)
class GraphDecoration:
    """A branch or tag label bound to a commit."""

    name: str
    sha: str
    type: DecorationType

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "sha": self.sha, "type": self.type}


@dataclass
class ProcessedGraph(Generic[P]):
    """Everything a renderer needs to paint the graph."""

    nodes: list[GraphNode[P]] = field(default_factory=list)
    paths: list[GraphPath] = field(default_factory=list)
    decorations: list[GraphDecoration] = field(default_factory=list)
    lane_count: int = 0
    # (child_sha, parent_sha) edges whose parent is not in the input
    dangling: list[tuple[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "paths": [path.to_dict() for path in self.paths],
            "decorations": [decoration.to_dict() for decoration in self.decorations],
        }


@dataclass(frozen=True)
class LayoutConfig:
    """Scale and palette used to turn lanes/rows into drawing coordinates."""

    row_height: float = ROW_HEIGHT
    lane_width: float = LANE_WIDTH
    palette: tuple[str, ...] = tuple(DEFAULT_PALETTE)
    release_lanes: bool = True

    def __post_init__(self) -> None:
        if self.row_height <= 0:
            raise ValueError(f"row_height must be positive, got {self.row_height}")
        if self.lane_width <= 0:
            raise ValueError(f"lane_width must be positive, got {self.lane_width}")
        if not self.palette:
            raise ValueError("palette must contain at least one color")

    def lane_x(self, lane: int) -> float:
        """Horizontal center of a lane."""
        return lane * self.lane_width + self.lane_width / 2

    def row_y(self, row: int) -> float:
        """Vertical center of a row."""
        return row * self.row_height + self.row_height / 2
