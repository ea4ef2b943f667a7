"""Configuration handling for gwt"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Config:
    """Configuration for gwt with validation."""

    # Naming
    branch_prefix: str = "wt/"

    # Base ref detection
    remote: str = "origin"
    fallback_refs: Optional[List[str]] = None  # None = derived from remote

    # Helper tools
    session_manager: str = "sesh"
    frecency_tool: str = "zoxide"
    multiplexer: str = "tmux"

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_branch_prefix()
        self._validate_remote()
        self._validate_fallback_refs()
        self._validate_tools()

    def _validate_branch_prefix(self):
        """Validate branch_prefix is a non-empty namespace ending in '/'."""
        if not self.branch_prefix or not self.branch_prefix.endswith("/"):
            raise ValueError(f"branch_prefix must end with '/', got '{self.branch_prefix}'")
        if self.branch_prefix.strip("/") == "":
            raise ValueError("branch_prefix cannot be only '/'")

    def _validate_remote(self):
        if not self.remote or not self.remote.strip():
            raise ValueError("remote cannot be empty")
        self.remote = self.remote.strip()

    def _validate_fallback_refs(self):
        """Validate fallback_refs list and make sure HEAD closes it."""
        if self.fallback_refs is None:
            self.fallback_refs = [
                f"{self.remote}/main",
                f"{self.remote}/master",
                "main",
                "master",
                "HEAD",
            ]
        if not isinstance(self.fallback_refs, list):
            raise ValueError("fallback_refs must be a list")
        self.fallback_refs = list(self.fallback_refs)
        if "HEAD" not in self.fallback_refs:
            self.fallback_refs.append("HEAD")

    def _validate_tools(self):
        for key in ("session_manager", "frecency_tool", "multiplexer"):
            value = getattr(self, key)
            if not value or not value.strip():
                raise ValueError(f"{key} cannot be empty")

    def to_dict(self) -> dict:
        return {
            "branch_prefix": self.branch_prefix,
            "remote": self.remote,
            "fallback_refs": self.fallback_refs,
            "session_manager": self.session_manager,
            "frecency_tool": self.frecency_tool,
            "multiplexer": self.multiplexer,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "branch_prefix",
            "remote",
            "fallback_refs",
            "session_manager",
            "frecency_tool",
            "multiplexer",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
