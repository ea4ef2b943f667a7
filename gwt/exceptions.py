"""Custom exceptions for gwt"""

from typing import Optional


class GwtError(Exception):
    """Base exception for all gwt errors."""
    pass


class UsageError(GwtError):
    """Exception raised for missing arguments or unknown subcommands."""
    pass


class InvalidNameError(UsageError):
    """Exception raised when a worktree name cannot be used."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid worktree name '{name}': {reason}")


class NotInRepositoryError(GwtError):
    """Exception raised when gwt is run outside a git repository."""

    def __init__(self, message: Optional[str] = None):
        self.message = message
        error_msg = "must be run inside a git repository"
        if message:
            error_msg += f" ({message})"
        super().__init__(error_msg)


class WorktreeNotFoundError(GwtError):
    """Exception raised when a worktree to switch to or remove does not exist."""

    def __init__(self, target: str, message: str = "worktree does not exist"):
        self.target = target
        super().__init__(f"{message}: {target}")


class WorktreeExistsError(GwtError):
    """Exception raised when the target worktree path is already occupied."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"worktree path already exists: {path}")


class GitOperationError(GwtError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, target: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.target = target
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if target:
            error_msg += f" for '{target}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ExternalToolError(GwtError):
    """Exception raised when the session manager or another helper tool fails."""

    def __init__(self, tool: str, message: Optional[str] = None):
        self.tool = tool
        self.message = message

        error_msg = f"'{tool}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


def describe_git_error(command: str, e: Exception) -> str:
    """Build a one-line message from a GitCommandError's status and stderr."""
    stderr = (getattr(e, "stderr", None) or str(e)).strip()
    status = getattr(e, "status", "unknown")

    if stderr:
        return f"{command} failed (exit {status}): {stderr}"
    return f"{command} failed with exit code {status}"
