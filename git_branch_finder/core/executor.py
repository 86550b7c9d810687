"""Runs confirmed commands against the repository"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING

from git_branch_finder.core.selection_list import FilterableSelectionList
from git_branch_finder.core.selection_set import SelectionSet
from git_branch_finder.exceptions import CheckoutError, DeleteBranchError, LogTraversalError
from git_branch_finder.logging_config import get_logger
from git_branch_finder.models.commit import CommitLogEntry

if TYPE_CHECKING:
    from git_branch_finder.services.git import RepositoryGateway

logger = get_logger(__name__)


@dataclass
class CommandOutcome:
    """Result of a single-branch command."""
    branch: str
    succeeded: bool
    error: Optional[str] = None


@dataclass
class DeletionReport:
    """Aggregate result of a batch deletion."""
    deleted: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)  # (branch, error)

    @property
    def succeeded(self) -> bool:
        return not self.failed

    @property
    def failed_branches(self) -> List[str]:
        return [name for name, _ in self.failed]


@dataclass
class LogOutcome:
    """Realized commit log; on failure the entries are empty and error is set."""
    branch: str
    entries: List[CommitLogEntry] = field(default_factory=list)
    error: Optional[str] = None


class CommandExecutor:
    """Catches every in-loop repository error and turns it into an outcome."""

    def __init__(self, gateway: "RepositoryGateway"):
        self.gateway = gateway

    def execute_checkout(self, branch: str) -> CommandOutcome:
        try:
            self.gateway.checkout(branch)
        except CheckoutError as e:
            logger.warning(f"Checkout failed: {e}")
            return CommandOutcome(branch, succeeded=False, error=str(e))

        return CommandOutcome(branch, succeeded=True)

    def execute_delete_branches(
        self, selection: SelectionSet, branches: FilterableSelectionList
    ) -> DeletionReport:
        """Delete every selected branch, continuing past failures.

        Deleted names leave both the selection and the branch list. Names that
        failed stay selected. Nothing is rolled back.
        """
        report = DeletionReport()

        for name in selection:
            try:
                self.gateway.delete_branch(name)
            except DeleteBranchError as e:
                logger.warning(f"Could not delete {name}: {e}")
                report.failed.append((name, e.message or str(e)))
            else:
                report.deleted.append(name)

        selection.remove_all(report.deleted)
        branches.remove(report.deleted)

        logger.info(
            f"Deleted {len(report.deleted)} branches, {len(report.failed)} failed"
        )
        return report

    def execute_log(self, branch: str, limit: int) -> LogOutcome:
        """Walk the branch log into a list. Re-walked on every call."""
        try:
            entries = list(self.gateway.commit_log(branch, limit))
        except LogTraversalError as e:
            logger.warning(f"Could not read log: {e}")
            return LogOutcome(branch, error=str(e))

        logger.debug(f"Loaded {len(entries)} log entries for {branch}")
        return LogOutcome(branch, entries=entries)
