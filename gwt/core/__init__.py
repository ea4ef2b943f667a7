"""Core functionality for gwt"""

from .worktree_manager import WorktreeManager

__all__ = ["WorktreeManager"]
