"""Worktree operations service for gwt."""

import os
import shutil
from typing import Optional

import git

from gwt.constants import HEADS_PREFIX
from gwt.exceptions import GitOperationError, describe_git_error
from gwt.models.worktree import WorktreeRecord
from gwt.utils.logging import get_logger

logger = get_logger(__name__)


def _split_lines(output: str) -> list[str]:
    return output.replace("\r\n", "\n").split("\n")


def parse_porcelain(output: str) -> list[WorktreeRecord]:
    """Parse `git worktree list --porcelain` output.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name
        (blank line between worktrees)

    Worktrees without a branch line (detached HEAD, bare) produce no record.
    Lines that are not understood are ignored.

    Returns:
        WorktreeRecords in listing order
    """
    records: list[WorktreeRecord] = []
    current_path: Optional[str] = None
    current_branch: Optional[str] = None

    for line in _split_lines(output):
        line = line.strip()

        if not line:
            # Empty line marks end of worktree entry
            if current_path and current_branch:
                records.append(WorktreeRecord(path=current_path, branch=current_branch))
            current_path = None
            current_branch = None
            continue

        if line.startswith("worktree "):
            current_path = line[len("worktree "):].strip()
        elif line.startswith("branch "):
            branch_ref = line[len("branch "):].strip()
            if branch_ref.startswith(HEADS_PREFIX):
                current_branch = branch_ref[len(HEADS_PREFIX):]

    # Handle last entry if no trailing blank line
    if current_path and current_branch:
        records.append(WorktreeRecord(path=current_path, branch=current_branch))

    return records


def principal_path(output: str) -> Optional[str]:
    """Return the path of the first worktree in the listing, branch or not."""
    for line in _split_lines(output):
        line = line.strip()
        if line.startswith("worktree "):
            return line[len("worktree "):].strip()
    return None


class WorktreeService:
    """Service for managing git worktrees."""

    def __init__(self, repo_path: str):
        """Initialize the worktree service.

        Args:
            repo_path: Path to the git repository
        """
        self.repo_path = repo_path

    def _get_repo(self):
        return git.Repo(self.repo_path)

    def get_listing(self) -> str:
        """Return raw `git worktree list --porcelain` output."""
        try:
            return self._get_repo().git.worktree("list", "--porcelain")
        except git.exc.GitCommandError as e:
            raise GitOperationError(
                "worktree list", message=describe_git_error("git worktree list", e)
            )

    def get_worktrees(self) -> list[WorktreeRecord]:
        """Get every branch-bearing worktree, principal first."""
        records = parse_porcelain(self.get_listing())
        logger.debug(f"Found {len(records)} worktrees with branches")
        for record in records:
            logger.debug(f"  {record}")
        return records

    def get_principal_path(self) -> Optional[str]:
        return principal_path(self.get_listing())

    def get_active_branches(self) -> set[str]:
        """Get set of branch names that are checked out in worktrees."""
        return {record.branch for record in self.get_worktrees()}

    def add_worktree(self, path: str, branch: str, base: Optional[str] = None) -> None:
        """Create a worktree at path.

        Args:
            path: Directory for the new worktree
            branch: Branch to check out
            base: When given, (re)create branch at base with -B; otherwise
                check out the existing branch
        """
        if base is None:
            args = ["add", path, branch]
        else:
            args = ["add", "-B", branch, path, base]

        try:
            self._get_repo().git.worktree(*args)
        except git.exc.GitCommandError as e:
            raise GitOperationError(
                "worktree add", path, describe_git_error("git worktree add", e)
            )
        logger.info(f"Added worktree at {path} on {branch}")

    def remove_worktree(self, path: str, force: bool = False) -> tuple[bool, Optional[str]]:
        """Remove a worktree at the specified path.

        Args:
            path: Path to the worktree directory
            force: Force removal even if working tree is dirty or locked

        Returns:
            Tuple of (success, error_message). error_message is None on success.
        """
        try:
            args = ["remove"]
            if force:
                args.append("--force")
            args.append(path)

            self._get_repo().git.worktree(*args)
            logger.info(f"Removed worktree at {path}")
            return True, None
        except git.exc.GitCommandError as e:
            error_msg = describe_git_error("git worktree remove", e)
            logger.warning(f"Failed to remove worktree at {path}: {error_msg}")
            return False, error_msg

    def delete_worktree_directory(self, path: str) -> None:
        """Delete a worktree directory from disk regardless of git's records."""
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise GitOperationError("remove directory", path, str(e))
        logger.info(f"Deleted directory {path}")

    def prune_worktrees(self) -> tuple[bool, Optional[str]]:
        """Prune stale worktree metadata.

        Returns:
            Tuple of (success, error_message). error_message is None on success.
        """
        try:
            self._get_repo().git.worktree("prune")
            logger.info("Pruned stale worktree metadata")
            return True, None
        except git.exc.GitCommandError as e:
            return False, describe_git_error("git worktree prune", e)

    @staticmethod
    def exists(path: str) -> bool:
        return os.path.exists(path)
