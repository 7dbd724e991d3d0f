"""Lane colors."""

from collections.abc import Sequence

from PySide6.QtGui import QColor

from graphlane.constants import DEFAULT_PALETTE


def string_hash(key: str) -> int:
    """Classic rolling string hash (hash * 31 + ch), wrapped to a signed 32-bit int."""
    value = 0
    for ch in key:
        value = ord(ch) + ((value << 5) - value)
        value = (value + 2**31) % 2**32 - 2**31
    return value


def color_for(key: str, palette: Sequence[str] = DEFAULT_PALETTE) -> str:
    """Get the color for a branch name or lane key.

    Same key, same color. Different keys may collide once there are more
    lanes than palette entries.
    """
    return palette[abs(string_hash(key)) % len(palette)]


def lane_color_key(branch: str, lane: int) -> str:
    """Branch hint when there is one, otherwise the lane number."""
    return branch or str(lane)


def normalize_palette(colors: Sequence[str]) -> tuple[str, ...]:
    """Validate palette entries and convert them to #rrggbb.

    Accepts anything QColor understands (hex, SVG color names).
    """
    if not colors:
        raise ValueError("palette must contain at least one color")

    normalized = []
    for name in colors:
        color = QColor(str(name))
        if not color.isValid():
            raise ValueError(f"Invalid palette color: {name!r}")
        normalized.append(color.name())
    return tuple(normalized)
