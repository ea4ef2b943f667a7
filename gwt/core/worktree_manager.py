"""Core worktree commands for gwt"""

import os
from typing import Optional, Union

from gwt.config import Config
from gwt.constants import CLEANUP_PROMPT, PRINCIPAL_BRANCH_NAMES
from gwt.exceptions import GwtError, WorktreeExistsError, WorktreeNotFoundError
from gwt.models.worktree import RepoContext
from gwt.services import naming
from gwt.services.display_service import DisplayService
from gwt.services.git import GitOperations, WorktreeService
from gwt.services.git.operations import find_toplevel
from gwt.services.tools_service import ToolsService
from gwt.ui.prompt import Confirmer
from gwt.utils.logging import get_logger

logger = get_logger(__name__)


class WorktreeManager:
    """Creates, lists, switches to, removes and cleans up named worktrees."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict],
        display: Optional[DisplayService] = None,
        confirmer: Optional[Confirmer] = None,
        git_service: Optional[GitOperations] = None,
        worktree_service: Optional[WorktreeService] = None,
        tools: Optional[ToolsService] = None,
    ):
        """Initialize WorktreeManager.

        Args:
            repo_path: Top-level directory of the repository (any worktree)
            config: Configuration dict or Config object
            display: Output sink, defaults to the rich consoles
            confirmer: Source of the cleanup confirmation answer
            git_service, worktree_service, tools: Collaborators, built from
                repo_path and config when omitted
        """
        self.repo_path = repo_path
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.prefix = self.config.branch_prefix

        self.display = display or DisplayService()
        self.confirmer = confirmer or Confirmer()
        self.git_service = git_service or GitOperations(repo_path, self.config)
        self.worktree_service = worktree_service or WorktreeService(repo_path)
        self.tools = tools or ToolsService(self.config)

    @classmethod
    def from_cwd(cls, config: Union[Config, dict], **kwargs) -> "WorktreeManager":
        """Build a manager for the repository containing the current directory.

        Raises:
            NotInRepositoryError: if the current directory is not in a git repository
        """
        return cls(find_toplevel(), config, **kwargs)

    def resolve_context(self) -> RepoContext:
        """Locate the principal worktree; every command starts from this."""
        principal = self.worktree_service.get_principal_path() or self.repo_path
        context = RepoContext(principal_path=principal, repo_name=naming.repo_name(principal))
        logger.debug(f"Repository {context.repo_name} at {context.principal_path}")
        return context

    def _register_path(self, path: str) -> None:
        ok, error = self.tools.register_path(path)
        if not ok:
            logger.warning(f"Could not register {path} with {self.tools.frecency_tool}: {error}")

    def _hand_off(self, path: str) -> None:
        self._register_path(path)
        self.tools.connect(path)

    def add(self, context: RepoContext, name: str) -> str:
        """Create worktree `name` on branch <prefix><name> and connect to it.

        Returns:
            Path of the new worktree
        """
        naming.validate_name(name)
        path = naming.resolve_path(context.principal_path, context.repo_name, name)
        branch = naming.resolve_branch(name, self.prefix)

        if self.worktree_service.exists(path):
            raise WorktreeExistsError(path)

        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
        except OSError as e:
            raise GwtError(f"creating parent directory for {path}: {e}")

        ok, error = self.git_service.fetch()
        if not ok:
            logger.warning(f"Could not refresh remote refs: {error}")

        if self.git_service.branch_exists(branch):
            logger.info(f"Branch {branch} exists, checking it out")
            self.worktree_service.add_worktree(path, branch)
        else:
            base = self.git_service.detect_base_ref()
            logger.info(f"Creating {branch} from {base}")
            self.worktree_service.add_worktree(path, branch, base)

        self._hand_off(path)
        return path

    def list_worktrees(self, context: RepoContext) -> list[tuple[str, str]]:
        """Print managed worktrees as (name, branch) rows, principal excluded."""
        principal = os.path.normpath(context.principal_path)
        rows = []
        for record in self.worktree_service.get_worktrees():
            if os.path.normpath(record.path) == principal:
                continue
            name = naming.extract_short_name(os.path.basename(record.path), context.repo_name)
            rows.append((name, record.branch))

        self.display.show_worktrees(rows)
        return rows

    def find_worktree_by_branch(self, branch: str) -> Optional[str]:
        for record in self.worktree_service.get_worktrees():
            if record.branch == branch:
                return record.path
        return None

    def resolve_switch_target(self, context: RepoContext, name: str) -> str:
        """Work out which directory `switch name` should connect to."""
        if not name or name == context.repo_name:
            return context.principal_path

        if name in PRINCIPAL_BRANCH_NAMES:
            path = self.find_worktree_by_branch(name)
            if path is None:
                raise WorktreeNotFoundError(name, "worktree with branch not found")
            return path

        naming.validate_name(name)
        path = naming.resolve_path(context.principal_path, context.repo_name, name)
        if not self.worktree_service.exists(path):
            raise WorktreeNotFoundError(path)
        return path

    def switch(self, context: RepoContext, name: str = "") -> str:
        path = self.resolve_switch_target(context, name)
        self._hand_off(path)
        return path

    def remove(self, context: RepoContext, name: str) -> str:
        """Remove worktree `name`, its multiplexer session and, if needed, its directory.

        The branch is left in place; `cleanup` deletes branches whose
        worktree is gone.

        Returns:
            Path of the removed worktree
        """
        naming.validate_name(name)
        dir_name = naming.resolve_dir_name(context.repo_name, name)
        path = naming.resolve_path(context.principal_path, context.repo_name, name)
        if not self.worktree_service.exists(path):
            raise WorktreeNotFoundError(path, "worktree path does not exist")

        self.display.show_progress(f"Checking for {self.tools.multiplexer} session: {dir_name}")
        if self.tools.has_session(dir_name):
            self.display.show_progress(f"Killing {self.tools.multiplexer} session: {dir_name}")
            ok, error = self.tools.kill_session(dir_name)
            if not ok:
                logger.warning(f"Failed to kill session {dir_name}: {error}")

        self.display.show_progress(f"Removing worktree at {path}")
        ok, error = self.worktree_service.remove_worktree(path, force=True)
        if not ok:
            self.display.show_progress("Git worktree remove failed, forcibly removing directory")
            self.worktree_service.delete_worktree_directory(path)
            pruned, prune_error = self.worktree_service.prune_worktrees()
            if not pruned:
                logger.warning(f"Could not prune worktree records: {prune_error}")

        return path

    def find_dangling_branches(self) -> tuple[list[str], list[str]]:
        """Return (managed branches, managed branches with no live worktree)."""
        managed = self.git_service.list_managed_branches()
        if not managed:
            return managed, []
        active = self.worktree_service.get_active_branches()
        return managed, [branch for branch in managed if branch not in active]

    def cleanup(self) -> list[str]:
        """Delete managed branches that no worktree has checked out, after confirmation.

        Returns:
            Branches that were deleted
        """
        managed, dangling = self.find_dangling_branches()
        if not managed:
            self.display.show_message(f"No {self.prefix}* branches found.")
            return []
        if not dangling:
            self.display.show_message(f"No dangling {self.prefix}* branches found.")
            return []

        self.display.show_dangling_branches(self.prefix, dangling)
        if not self.confirmer.confirm(CLEANUP_PROMPT):
            self.display.show_message("Cleanup cancelled.")
            return []

        deleted = []
        for branch in dangling:
            self.display.show_message(f"Deleting {branch}...")
            ok, error = self.git_service.delete_branch(branch)
            if ok:
                deleted.append(branch)
            else:
                logger.warning(f"Failed to delete {branch}: {error}")

        self.display.show_message(f"\nDeleted {len(deleted)} dangling {self.prefix}* branches.")
        return deleted
