"""Git-related services for git-branch-finder."""

from .repository import RepositoryGateway

__all__ = [
    "RepositoryGateway",
]
