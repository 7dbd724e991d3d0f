"""Settings for graphlane"""

from graphlane.config.settings import Settings

__all__ = ["Settings"]
