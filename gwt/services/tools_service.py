"""Session manager, frecency tool and terminal multiplexer integration."""

import subprocess
from typing import Optional, Sequence, Union, TYPE_CHECKING

from gwt.exceptions import ExternalToolError
from gwt.utils.logging import get_logger

if TYPE_CHECKING:
    from gwt.config import Config

logger = get_logger(__name__)


class ToolsService:
    """Runs the non-git helper tools gwt hands off to."""

    def __init__(self, config: Union["Config", dict]):
        self.session_manager = config.get("session_manager", "sesh")
        self.frecency_tool = config.get("frecency_tool", "zoxide")
        self.multiplexer = config.get("multiplexer", "tmux")

    def _run_quiet(self, command: Sequence[str]) -> tuple[bool, Optional[str]]:
        """Run a command with captured output.

        Returns:
            Tuple of (success, error_message). error_message is None on success.
        """
        logger.debug(f"Running {' '.join(command)}")
        try:
            completed = subprocess.run(
                list(command), check=False, capture_output=True, text=True
            )
        except OSError as e:
            return False, f"{command[0]} could not be run: {e}"

        if completed.returncode != 0:
            err = completed.stderr.strip() or completed.stdout.strip()
            msg = f"{' '.join(command)} exited with {completed.returncode}"
            return False, f"{msg}: {err}" if err else msg
        return True, None

    def register_path(self, path: str) -> tuple[bool, Optional[str]]:
        """Tell the frecency tool about a directory."""
        return self._run_quiet([self.frecency_tool, "add", path])

    def has_session(self, name: str) -> bool:
        ok, error = self._run_quiet([self.multiplexer, "has-session", "-t", name])
        if not ok:
            logger.debug(f"No session {name}: {error}")
        return ok

    def kill_session(self, name: str) -> tuple[bool, Optional[str]]:
        return self._run_quiet([self.multiplexer, "kill-session", "-t", name])

    def connect(self, target: str) -> None:
        """Hand the terminal over to the session manager.

        The session manager shares our stdin/stdout/stderr so it can attach
        or switch the client interactively.

        Raises:
            ExternalToolError: if it cannot be started or exits non-zero
        """
        command = [self.session_manager, "connect", target]
        logger.debug(f"Running {' '.join(command)}")
        try:
            completed = subprocess.run(command, check=False)
        except OSError as e:
            raise ExternalToolError(self.session_manager, f"could not be run: {e}")
        if completed.returncode != 0:
            raise ExternalToolError(
                self.session_manager, f"connect {target} exited with {completed.returncode}"
            )
