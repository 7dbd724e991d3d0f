"""
Centralized constants for graphlane.

Layout metrics and the default palette are used by the settings defaults
and by the layout engine when no configuration is passed.
"""

# Layout metrics (pixels)
ROW_HEIGHT = 40
LANE_WIDTH = 20

# Colors for different lanes (branches)
DEFAULT_PALETTE = [
    "#6366f1",  # Indigo
    "#ec4899",  # Pink
    "#10b981",  # Emerald
    "#f59e0b",  # Amber
    "#3b82f6",  # Blue
    "#8b5cf6",  # Violet
    "#ef4444",  # Red
    "#22c55e",  # Green
]

# Settings file location, relative to the user's home directory
SETTINGS_FILE = ".config/graphlane/settings.json"

# Decoration kinds
DECORATION_BRANCH = "branch"
DECORATION_TAG = "tag"
