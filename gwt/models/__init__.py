"""Data models for gwt."""

from .worktree import RepoContext, WorktreeRecord

__all__ = ["RepoContext", "WorktreeRecord"]
