"""Pytest fixtures for gwt tests"""
import io
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest
from rich.console import Console

from gwt.config import Config
from gwt.models.worktree import RepoContext
from gwt.services.display_service import DisplayService
from gwt.services.git import GitOperations, WorktreeService
from gwt.services.tools_service import ToolsService
from gwt.ui.prompt import Confirmer


SAMPLE_LISTING = """worktree /home/u/proj
HEAD abc123
branch refs/heads/main

worktree /home/u/proj-feature
HEAD def456
branch refs/heads/wt/feature

"""


@pytest.fixture
def sample_listing():
    return SAMPLE_LISTING


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def display():
    """DisplayService writing to in-memory consoles; read with .out.file.getvalue()."""
    return DisplayService(
        out=Console(file=io.StringIO(), width=200),
        err=Console(file=io.StringIO(), width=200),
    )


@pytest.fixture
def context():
    return RepoContext(principal_path="/home/u/proj", repo_name="proj")


@pytest.fixture
def mock_git_service():
    """Create a mock GitOperations."""
    service = Mock(spec=GitOperations)
    service.fetch = Mock(return_value=(True, None))
    service.branch_exists = Mock(return_value=False)
    service.detect_base_ref = Mock(return_value="origin/main")
    service.list_managed_branches = Mock(return_value=[])
    service.delete_branch = Mock(return_value=(True, None))
    return service


@pytest.fixture
def mock_worktree_service():
    """Create a mock WorktreeService backed by SAMPLE_LISTING."""
    from gwt.services.git.worktrees import parse_porcelain

    service = Mock(spec=WorktreeService)
    service.get_listing = Mock(return_value=SAMPLE_LISTING)
    service.get_worktrees = Mock(return_value=parse_porcelain(SAMPLE_LISTING))
    service.get_principal_path = Mock(return_value="/home/u/proj")
    service.get_active_branches = Mock(return_value={"main", "wt/feature"})
    service.exists = Mock(return_value=False)
    service.remove_worktree = Mock(return_value=(True, None))
    service.prune_worktrees = Mock(return_value=(True, None))
    return service


@pytest.fixture
def mock_tools():
    """Create a mock ToolsService; sesh, zoxide and tmux are never run."""
    tools = Mock(spec=ToolsService)
    tools.frecency_tool = "zoxide"
    tools.multiplexer = "tmux"
    tools.register_path = Mock(return_value=(True, None))
    tools.has_session = Mock(return_value=False)
    tools.kill_session = Mock(return_value=(True, None))
    return tools


@pytest.fixture
def make_manager(config, display, mock_git_service, mock_worktree_service, mock_tools):
    """Build a WorktreeManager over mocked collaborators with scripted answers."""
    from gwt.core import WorktreeManager

    def _make(answer: str = "n"):
        return WorktreeManager(
            "/home/u/proj",
            config,
            display=display,
            confirmer=Confirmer(input_func=lambda prompt: answer),
            git_service=mock_git_service,
            worktree_service=mock_worktree_service,
            tools=mock_tools,
        )

    return _make


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository named 'proj' for testing."""
    repo_path = temp_dir / "proj"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()
