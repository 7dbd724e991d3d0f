"""Connector paths between commits.

COORDINATE SYSTEM NOTE:
Newer commits (children) sit at the TOP (lower y), older commits (parents)
at the BOTTOM (higher y), so a connector is drawn DOWN from child to parent.

Paths are SVG-style strings so any vector renderer can consume them:
- same lane: a straight segment, "M x1 y1 L x2 y2"
- different lanes: a cubic bezier whose control points sit half a row below
  the child and half a row above the parent, so the curve leaves and enters
  vertically
"""

from graphlane.graph.types import GraphPath, LayoutConfig


def format_coord(value: float) -> str:
    """Render a coordinate without a trailing .0 for whole numbers."""
    value = round(float(value), 3)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _point(x: float, y: float) -> str:
    return f"{format_coord(x)} {format_coord(y)}"


def build_path_d(
    from_lane: int, from_row: int, to_lane: int, to_row: int, config: LayoutConfig
) -> str:
    """Path description for a connector from (from_lane, from_row) to (to_lane, to_row)."""
    x1 = config.lane_x(from_lane)
    y1 = config.row_y(from_row)
    x2 = config.lane_x(to_lane)
    y2 = config.row_y(to_row)

    if from_lane == to_lane:
        return f"M {_point(x1, y1)} L {_point(x2, y2)}"

    bend = config.row_height / 2
    return (
        f"M {_point(x1, y1)} "
        f"C {_point(x1, y1 + bend)}, {_point(x2, y2 - bend)}, {_point(x2, y2)}"
    )


def make_connector(
    child_sha: str,
    parent_sha: str,
    from_lane: int,
    from_row: int,
    to_lane: int,
    to_row: int,
    color: str,
    config: LayoutConfig,
) -> GraphPath:
    """Build the connector from a child commit to one of its parents."""
    return GraphPath(
        child_sha=child_sha,
        parent_sha=parent_sha,
        from_lane=from_lane,
        from_row=from_row,
        to_lane=to_lane,
        to_row=to_row,
        d=build_path_d(from_lane, from_row, to_lane, to_row, config),
        color=color,
    )
