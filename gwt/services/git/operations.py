"""Git operations service"""

import os
from typing import Optional, Union, TYPE_CHECKING

import git

from gwt.constants import HEADS_PREFIX
from gwt.exceptions import GitOperationError, NotInRepositoryError, describe_git_error
from gwt.utils.logging import get_logger

if TYPE_CHECKING:
    from gwt.config import Config

logger = get_logger(__name__)


def find_toplevel(path: Optional[str] = None) -> str:
    """Return `git rev-parse --show-toplevel` for path (default: cwd)."""
    try:
        return git.Git(path or os.getcwd()).rev_parse("--show-toplevel")
    except git.exc.GitCommandError as e:
        raise NotInRepositoryError((e.stderr or "").strip() or None)
    except (git.exc.GitCommandNotFound, OSError) as e:
        raise NotInRepositoryError(str(e))


class GitOperations:
    """Service for Git operations."""

    def __init__(self, repo_path: str, config: Union["Config", dict]):
        """Initialize the service.

        Args:
            repo_path: Path to the git repository (string path, not repo object)
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.remote_name = config.get("remote", "origin")
        self.branch_prefix = config.get("branch_prefix", "wt/")

    def _get_repo(self):
        """Get a git.Repo instance for repo_path.

        GitPython repos are lightweight - they don't clone, just open the existing repo.
        """
        return git.Repo(self.repo_path)

    def verify_ref(self, ref: str) -> bool:
        """Check whether ref resolves to an object."""
        try:
            self._get_repo().git.rev_parse("--verify", "--quiet", ref)
            return True
        except git.exc.GitCommandError:
            return False

    def branch_exists(self, branch_name: str) -> bool:
        return self.verify_ref(f"{HEADS_PREFIX}{branch_name}")

    def get_default_remote_ref(self) -> Optional[str]:
        """Resolve the remote's symbolic HEAD, e.g. origin/HEAD -> origin/main."""
        symbolic = f"{self.remote_name}/HEAD"
        try:
            resolved = self._get_repo().git.rev_parse("--abbrev-ref", symbolic).strip()
        except git.exc.GitCommandError as e:
            logger.debug(f"Could not resolve {symbolic}: {(e.stderr or '').strip()}")
            return None
        if not resolved or resolved == symbolic:
            return None
        return resolved

    def detect_base_ref(self) -> str:
        """Pick the ref a new worktree branch should start from.

        Prefers the remote's default branch, then conventional main/master
        names on the remote and locally, then whatever is checked out.
        Never fails: HEAD is returned when nothing else verifies.
        """
        candidates = []
        default_ref = self.get_default_remote_ref()
        if default_ref:
            candidates.append(default_ref)
        candidates.extend(self.config.get("fallback_refs") or ["HEAD"])

        for candidate in candidates:
            if self.verify_ref(candidate):
                logger.debug(f"Using base ref {candidate}")
                return candidate
            logger.debug(f"Base ref candidate {candidate} does not resolve")

        return "HEAD"

    def fetch(self) -> tuple[bool, Optional[str]]:
        """Refresh remote refs.

        Returns:
            Tuple of (success, error_message). error_message is None on success.
        """
        try:
            self._get_repo().git.fetch(self.remote_name)
            return True, None
        except git.exc.GitCommandError as e:
            return False, describe_git_error(f"git fetch {self.remote_name}", e)

    def list_managed_branches(self) -> list[str]:
        """List local branches under the managed namespace, in git's order."""
        pattern = f"{self.branch_prefix}*"
        try:
            output = self._get_repo().git.branch("--list", pattern)
        except git.exc.GitCommandError as e:
            raise GitOperationError(
                "branch --list", pattern, describe_git_error("git branch --list", e)
            )

        branches = []
        for line in output.split("\n"):
            line = line.strip()
            # "* " marks the current branch, "+ " a branch checked out in another worktree
            for marker in ("* ", "+ "):
                if line.startswith(marker):
                    line = line[len(marker):]
            line = line.strip()
            if line:
                branches.append(line)
        return branches

    def delete_branch(self, branch_name: str) -> tuple[bool, Optional[str]]:
        """Force-delete a local branch.

        Returns:
            Tuple of (success, error_message). error_message is None on success.
        """
        try:
            self._get_repo().git.branch("-D", branch_name)
            logger.info(f"Deleted branch {branch_name}")
            return True, None
        except git.exc.GitCommandError as e:
            return False, describe_git_error("git branch -D", e)
