"""graphlane - lane-based commit graph layout"""

__version__ = "0.1.0"
