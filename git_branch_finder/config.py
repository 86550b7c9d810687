"""Configuration handling for git-branch-finder"""

from dataclasses import dataclass

# Branch that can never be marked for deletion
DEFAULT_PROTECTED_BRANCH = "master"
DEFAULT_LOG_LIMIT = 50
MAX_LOG_LIMIT = 10000


@dataclass
class Config:
    """Configuration for git-branch-finder with validation."""

    repo_path: str = "."
    protected_branch: str = DEFAULT_PROTECTED_BRANCH

    # Number of commits shown in log mode
    log_limit: int = DEFAULT_LOG_LIMIT

    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repo_path()
        self._validate_protected_branch()
        self._validate_log_limit()

    def _validate_repo_path(self):
        """Validate repo_path is not empty."""
        if not self.repo_path or not str(self.repo_path).strip():
            raise ValueError("repo_path cannot be empty")

    def _validate_protected_branch(self):
        """Validate protected_branch is not empty."""
        if not self.protected_branch or not self.protected_branch.strip():
            raise ValueError("protected_branch cannot be empty")
        self.protected_branch = self.protected_branch.strip()

    def _validate_log_limit(self):
        """Validate log_limit is within range."""
        if not 1 <= self.log_limit <= MAX_LOG_LIMIT:
            raise ValueError(
                f"log_limit must be between 1 and {MAX_LOG_LIMIT}, got {self.log_limit}"
            )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "repo_path": self.repo_path,
            "protected_branch": self.protected_branch,
            "log_limit": self.log_limit,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {"repo_path", "protected_branch", "log_limit", "verbose", "debug"}

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
