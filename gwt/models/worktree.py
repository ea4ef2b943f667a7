"""Worktree data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WorktreeRecord:
    """A branch-bearing worktree from `git worktree list --porcelain`."""

    path: str
    branch: str  # Without the refs/heads/ prefix

    def __str__(self) -> str:
        return f"{self.branch} @ {self.path}"


@dataclass(frozen=True)
class RepoContext:
    """Repository values computed once per invocation and passed to every operation."""

    principal_path: str  # Directory of the original (non-linked) worktree
    repo_name: str  # Base name of principal_path
