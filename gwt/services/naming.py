"""Mapping between short worktree names, branch names and directories.

A managed worktree called ``feature`` in a repository checked out at
``~/src/proj`` lives on branch ``wt/feature`` in the sibling directory
``~/src/proj-feature``. Everything here is pure: no git, no filesystem.
"""

import os

from gwt.constants import BRANCH_PREFIX, INVALID_NAME_CHARS, RESERVED_NAMES
from gwt.exceptions import InvalidNameError


def validate_name(name: str) -> None:
    """Raise InvalidNameError if name cannot be used as a worktree name."""
    if not name:
        raise InvalidNameError(name, "name cannot be empty")
    if name in RESERVED_NAMES:
        raise InvalidNameError(name, "name cannot be '.' or '..'")
    for char in INVALID_NAME_CHARS:
        if char in name:
            raise InvalidNameError(name, f"name cannot contain {char!r}")


def repo_name(root: str) -> str:
    """Return the repository name for a worktree root directory.

    Trailing separators are ignored. The filesystem root itself has no base
    name, so it maps to the separator ("/") rather than an empty string.
    """
    name = os.path.basename(os.path.normpath(root))
    return name or os.sep


def resolve_dir_name(repo: str, short_name: str) -> str:
    return f"{repo}-{short_name}"


def resolve_path(principal_dir: str, repo: str, short_name: str) -> str:
    """Return the directory of a managed worktree: a sibling of the principal one."""
    return os.path.normpath(
        os.path.join(principal_dir, os.pardir, resolve_dir_name(repo, short_name))
    )


def resolve_branch(short_name: str, prefix: str = BRANCH_PREFIX) -> str:
    return f"{prefix}{short_name}"


def branch_short_name(branch: str, prefix: str = BRANCH_PREFIX) -> str:
    """Strip the managed namespace from a branch name, if present."""
    if branch.startswith(prefix):
        return branch[len(prefix):]
    return branch


def extract_short_name(dir_base_name: str, repo: str) -> str:
    """Recover the short name from a worktree directory name.

    The principal worktree's directory is returned as is, and so is any
    directory that does not follow the ``<repo>-<name>`` convention.
    """
    if dir_base_name == repo:
        return dir_base_name
    prefix = f"{repo}-"
    if dir_base_name.startswith(prefix):
        return dir_base_name[len(prefix):]
    return dir_base_name
