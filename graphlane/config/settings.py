"""
Settings management for graphlane
"""

import copy
import json
from pathlib import Path
from typing import Any

from graphlane.constants import DEFAULT_PALETTE, LANE_WIDTH, ROW_HEIGHT, SETTINGS_FILE
from graphlane.graph.colors import normalize_palette
from graphlane.graph.types import LayoutConfig


class Settings:
    """Manages layout settings"""

    DEFAULT_SETTINGS = {
        "layout": {
            "row_height": ROW_HEIGHT,
            "lane_width": LANE_WIDTH,
            "release_lanes": True,  # Free a lane once its branch has nothing left to draw
        },
        "colors": {
            "palette": list(DEFAULT_PALETTE),
        },
    }

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize settings"""
        if config_path is None:
            config_path = Path.home() / SETTINGS_FILE

        self.config_path = config_path
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        """Load settings from file"""
        if self.config_path.exists():
            with open(self.config_path) as f:
                try:
                    loaded = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Invalid settings file {self.config_path}: {e}") from e
            if not isinstance(loaded, dict):
                raise ValueError(f"Invalid settings file {self.config_path}: expected an object")
            # Merge with defaults to handle new settings
            self._merge_settings(self.settings, loaded)

    def _merge_settings(self, base: dict[str, Any], updates: dict[str, Any]) -> None:
        """Recursively merge settings dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                base_dict: dict[str, Any] = base[key]
                value_dict: dict[str, Any] = value
                self._merge_settings(base_dict, value_dict)
            else:
                base[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get a setting by dot-separated path (e.g., 'layout.row_height')"""
        parts = path.split(".")
        value: Any = self.settings

        for part in parts:
            if isinstance(value, dict):
                value_dict: dict[str, Any] = value
                if part in value_dict:
                    value = value_dict[part]
                else:
                    return default
            else:
                return default

        return value

    def get_palette(self) -> tuple[str, ...]:
        """Get the lane palette as #rrggbb strings.

        Raises ValueError if the palette is empty or holds an unknown color.
        """
        palette = self.get("colors.palette", DEFAULT_PALETTE)
        if isinstance(palette, str) or not isinstance(palette, list):
            raise ValueError(f"colors.palette must be a list of colors, got {palette!r}")
        return normalize_palette(palette)

    def get_layout_config(self) -> LayoutConfig:
        """Build the layout configuration from the current settings."""
        try:
            row_height = float(self.get("layout.row_height", ROW_HEIGHT))
            lane_width = float(self.get("layout.lane_width", LANE_WIDTH))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Layout sizes must be numbers: {e}") from e

        release_lanes = self.get("layout.release_lanes", True)
        if not isinstance(release_lanes, bool):
            raise ValueError(f"layout.release_lanes must be true or false, got {release_lanes!r}")

        return LayoutConfig(
            row_height=row_height,
            lane_width=lane_width,
            palette=self.get_palette(),
            release_lanes=release_lanes,
        )
