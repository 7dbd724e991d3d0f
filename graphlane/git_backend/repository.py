"""
Commit history loading using pygit2
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import pygit2

from graphlane.graph.layout import process_commits_for_graph
from graphlane.graph.types import Branch, Commit, LayoutConfig, ProcessedGraph, Tag

logger = logging.getLogger(__name__)

TAG_PREFIX = "refs/tags/"


@dataclass(frozen=True)
class CommitInfo:
    """Commit details carried alongside the layout, for display only."""

    short_id: str
    summary: str
    message: str
    author_name: str
    author_email: str
    timestamp: int


class GraphRepository:
    """Reads commits, branches and tags from a git repository"""

    def __init__(self, repo_path: str | None = None) -> None:
        """Open the repository at repo_path, or the one containing the working directory"""
        if repo_path is None:
            repo_path = self._find_repo()

        try:
            self.repo = pygit2.Repository(repo_path)
        except (pygit2.GitError, KeyError) as e:
            # libgit2 reports a missing repository as not-found (KeyError) or a GitError
            raise ValueError(f"Not a git repository: {repo_path}") from e

    def _find_repo(self) -> str:
        """Find git repository in current directory or parents"""
        found = pygit2.discover_repository(str(Path.cwd()))
        if found is None:
            raise ValueError("Not in a git repository")
        return found

    def _current_branch(self) -> str | None:
        """Name of the checked out branch, None when detached or unborn"""
        if self.repo.head_is_unborn or self.repo.head_is_detached:
            return None
        return self.repo.head.shorthand

    def load_branches(self) -> list[Branch]:
        """Get local branches, then remote branches, with the commits they point at."""
        branches: list[Branch] = []

        for branch_name in self.repo.branches.local:
            commit = self.repo.branches.local[branch_name].peel(pygit2.Commit)
            branches.append(Branch(name=branch_name, sha=str(commit.id), is_remote=False))

        for branch_name in self.repo.branches.remote:
            # origin/HEAD is a symbolic alias of another remote branch
            if branch_name.endswith("/HEAD"):
                continue
            commit = self.repo.branches.remote[branch_name].peel(pygit2.Commit)
            branches.append(Branch(name=branch_name, sha=str(commit.id), is_remote=True))

        return branches

    def load_tags(self) -> list[Tag]:
        """Get tags, with annotated tags resolved to the commit they tag."""
        tags: list[Tag] = []
        for ref_name in self.repo.references:
            if not ref_name.startswith(TAG_PREFIX):
                continue
            try:
                commit = self.repo.references[ref_name].peel(pygit2.Commit)
            except (pygit2.GitError, ValueError):
                # Tags on trees or blobs have no place in the commit graph
                logger.debug("Skipping tag %s: does not point at a commit", ref_name)
                continue
            tags.append(Tag(name=ref_name[len(TAG_PREFIX) :], sha=str(commit.id)))
        return tags

    def _branch_hints(self, branches: list[Branch]) -> dict[str, str]:
        """Map commit oid -> branch name by following each tip's first-parent chain.

        The checked out branch claims its commits first, then local branches,
        then remote ones; a commit keeps the first name that reaches it.
        """
        current = self._current_branch()
        ordered = sorted(branches, key=lambda b: (b.name != current, b.is_remote))

        hints: dict[str, str] = {}
        for branch in ordered:
            oid: str | None = branch.sha
            while oid is not None and oid not in hints:
                hints[oid] = branch.name
                commit = self.repo.get(oid)
                if not isinstance(commit, pygit2.Commit) or not commit.parent_ids:
                    break
                oid = str(commit.parent_ids[0])
        return hints

    def load_commits(
        self, branches: list[Branch] | None = None, max_count: int | None = None
    ) -> list[Commit[CommitInfo]]:
        """Load commits reachable from HEAD or any branch, newest first, children before parents."""
        if branches is None:
            branches = self.load_branches()

        tips = [branch.sha for branch in branches]
        if not self.repo.head_is_unborn:
            # A detached HEAD can sit on commits no branch reaches
            tips.append(str(self.repo.head.target))
        tips = list(dict.fromkeys(tips))
        if not tips:
            return []

        hints = self._branch_hints(branches)

        sort_mode = pygit2.enums.SortMode.TOPOLOGICAL | pygit2.enums.SortMode.TIME
        walker = self.repo.walk(tips[0], sort_mode)
        for tip in tips[1:]:
            walker.push(tip)

        commits: list[Commit[CommitInfo]] = []
        for c in walker:
            if max_count is not None and len(commits) >= max_count:
                break

            oid = str(c.id)
            full_message = c.message.strip()
            info = CommitInfo(
                short_id=oid[:7],
                summary=full_message.split("\n")[0],
                message=full_message,
                author_name=c.author.name,
                author_email=c.author.email,
                timestamp=c.commit_time,
            )
            commits.append(
                Commit(
                    sha=oid,
                    parents=[str(p) for p in c.parent_ids],
                    branch=hints.get(oid, ""),
                    payload=info,
                )
            )

        logger.info("Loaded %d commits from %d tips", len(commits), len(tips))
        return commits

    def build_graph(
        self, config: LayoutConfig | None = None, max_count: int | None = None
    ) -> ProcessedGraph[CommitInfo]:
        """Load the history and lay it out."""
        branches = self.load_branches()
        tags = self.load_tags()
        commits = self.load_commits(branches, max_count=max_count)
        return process_commits_for_graph(commits, branches, tags, config)
