"""Git backend for reading repository history"""

from graphlane.git_backend.repository import CommitInfo, GraphRepository

__all__ = ["CommitInfo", "GraphRepository"]
