"""Custom exceptions for git-branch-finder"""

from typing import Optional


class GitBranchFinderError(Exception):
    """Base exception for all git-branch-finder errors."""
    pass


class GitOperationError(GitBranchFinderError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class RepositoryAccessError(GitOperationError):
    """Exception raised when the repository cannot be opened or read."""

    def __init__(
        self, path: str, message: Optional[str] = None, operation: str = "open_repository"
    ):
        self.path = path
        super().__init__(operation, message=f"{path}: {message}" if message else path)


class BranchEnumerationError(RepositoryAccessError):
    """Exception raised when local branches cannot be listed."""

    def __init__(self, path: str, message: Optional[str] = None):
        super().__init__(path, message, operation="list_branches")


class CheckoutError(GitOperationError):
    """Exception raised when a branch cannot be checked out."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("checkout", branch, message)


class DeleteBranchError(GitOperationError):
    """Exception raised when a local branch cannot be deleted."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("delete_branch", branch, message)


class LogTraversalError(GitOperationError):
    """Exception raised when the commit log of a branch cannot be walked."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("commit_log", branch, message)
