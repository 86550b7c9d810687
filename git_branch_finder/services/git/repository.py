"""Git repository gateway"""

from datetime import datetime
from typing import Iterator, List, Optional

import git

from git_branch_finder.exceptions import (
    BranchEnumerationError,
    CheckoutError,
    DeleteBranchError,
    LogTraversalError,
    RepositoryAccessError,
)
from git_branch_finder.logging_config import get_logger
from git_branch_finder.models.commit import CommitLogEntry

logger = get_logger(__name__)

SHORT_HASH_LENGTH = 7


def _git_error_text(error: git.exc.GitCommandError) -> str:
    """Extract the most useful line of a git command failure."""
    stderr = error.stderr if isinstance(error.stderr, str) else ""
    stderr = stderr.strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    return stderr or str(error)


class RepositoryGateway:
    """Single point of access to the local repository.

    The repository is opened once when the gateway is created and released by
    close() (or by leaving the ``with`` block).
    """

    def __init__(self, repo_path: str):
        """Open the repository.

        Args:
            repo_path: Path to the repository or to any directory inside it

        Raises:
            RepositoryAccessError: If the path is missing or not inside a git repository
        """
        self.repo_path = repo_path
        try:
            self.repo = git.Repo(repo_path, search_parent_directories=True)
        except git.exc.NoSuchPathError as e:
            raise RepositoryAccessError(repo_path, f"No such path: {e}") from e
        except git.exc.InvalidGitRepositoryError as e:
            raise RepositoryAccessError(repo_path, "Not a git repository") from e

        logger.info(f"Opened repository at {self.repo.working_dir}")

    def __enter__(self) -> "RepositoryGateway":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the repository handle."""
        self.repo.close()
        logger.debug("Repository closed")

    def _find_head(self, branch_name: str) -> Optional[git.Head]:
        """Look up a local branch by name."""
        try:
            return self.repo.heads[branch_name]
        except IndexError:
            return None

    def list_local_branches(self) -> List[str]:
        """List local branch names in the order git reports them.

        Raises:
            BranchEnumerationError: If the branch references cannot be read
        """
        try:
            branches = [head.name for head in self.repo.heads]
        except (git.exc.GitCommandError, OSError, ValueError) as e:
            raise BranchEnumerationError(self.repo_path, str(e)) from e

        logger.debug(f"Found {len(branches)} local branches")
        return branches

    def current_branch(self) -> Optional[str]:
        """Name of the checked out branch, or None for a detached HEAD."""
        try:
            return self.repo.active_branch.name
        except TypeError:
            logger.debug("HEAD is detached")
            return None

    def checkout(self, branch_name: str) -> None:
        """Move HEAD and the working tree to the tip of a local branch.

        Conflicts with local changes are left to git, which refuses the checkout.

        Raises:
            CheckoutError: If the branch is missing or git refuses to switch
        """
        head = self._find_head(branch_name)
        if head is None:
            raise CheckoutError(branch_name, "Branch not found")

        logger.debug(f"Checking out {branch_name}")
        try:
            head.checkout()
        except git.exc.GitCommandError as e:
            raise CheckoutError(branch_name, _git_error_text(e)) from e

        logger.info(f"Checked out {branch_name}")

    def delete_branch(self, branch_name: str) -> None:
        """Delete a local branch reference, merged or not.

        Raises:
            DeleteBranchError: If the branch is missing, checked out, or git refuses
        """
        if self._find_head(branch_name) is None:
            raise DeleteBranchError(branch_name, "Branch not found")
        if branch_name == self.current_branch():
            raise DeleteBranchError(branch_name, "Branch is currently checked out")

        logger.debug(f"Deleting local branch {branch_name}")
        try:
            self.repo.delete_head(branch_name, force=True)
        except git.exc.GitCommandError as e:
            raise DeleteBranchError(branch_name, _git_error_text(e)) from e

        logger.info(f"Deleted local branch {branch_name}")

    def commit_log(self, branch_name: str, limit: int) -> Iterator[CommitLogEntry]:
        """Walk the ancestry of a branch tip.

        Commits come in graph order (children before parents). The returned
        iterator is lazy and can only be consumed once.

        Args:
            branch_name: Local branch to start from
            limit: Maximum number of entries

        Raises:
            LogTraversalError: If the branch is missing (immediately) or the walk
                fails (while iterating)
        """
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")

        head = self._find_head(branch_name)
        if head is None:
            raise LogTraversalError(branch_name, "Branch not found")

        return self._walk_commits(head, limit)

    def _walk_commits(self, head: git.Head, limit: int) -> Iterator[CommitLogEntry]:
        if limit == 0:
            return

        logger.debug(f"Walking up to {limit} commits from {head.name}")
        try:
            for commit in self.repo.iter_commits(head, max_count=limit, topo_order=True):
                yield CommitLogEntry(
                    id=commit.hexsha[:SHORT_HASH_LENGTH],
                    author_name=commit.author.name or "",
                    author_email=commit.author.email or "",
                    message=CommitLogEntry.decode_message(commit.message),
                    timestamp=datetime.fromtimestamp(commit.committed_date),
                )
        except (git.exc.GitCommandError, ValueError) as e:
            raise LogTraversalError(head.name, str(e)) from e
