"""Shared constants for gwt."""

# Namespace every managed branch lives under
BRANCH_PREFIX = "wt/"

# Ref prefix used by `git worktree list --porcelain` branch lines
HEADS_PREFIX = "refs/heads/"

# Characters a worktree name may not contain
INVALID_NAME_CHARS = ("/", "\\", " ", "\t", "\r", "\n")

# Names that would collide with filesystem navigation
RESERVED_NAMES = (".", "..")

# Branch names `switch` looks up in the listing instead of by directory
PRINCIPAL_BRANCH_NAMES = ("main", "master")

# Answers accepted by the cleanup confirmation prompt (compared lowercased)
CONFIRM_ANSWERS = ("y", "yes")

CLEANUP_PROMPT = "\nAre you sure you want to delete these branches? (y/N): "
