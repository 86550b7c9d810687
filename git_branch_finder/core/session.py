"""Session state owned by the event loop"""

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from git_branch_finder.config import Config
from git_branch_finder.core.selection_list import FilterableSelectionList
from git_branch_finder.core.selection_set import SelectionSet
from git_branch_finder.logging_config import get_logger
from git_branch_finder.models.commit import CommitLogEntry
from git_branch_finder.models.mode import InputMode
from git_branch_finder.models.session import SessionSnapshot

if TYPE_CHECKING:
    from git_branch_finder.core.state_machine import InputModeStateMachine
    from git_branch_finder.services.git import RepositoryGateway

logger = get_logger(__name__)


@dataclass
class SessionState:
    """Everything that outlives a single keystroke, plus per-event feedback."""
    branches: FilterableSelectionList = field(default_factory=FilterableSelectionList)
    selection: SelectionSet = field(default_factory=SelectionSet)
    mode: InputMode = InputMode.SEARCH
    current_branch: Optional[str] = None
    log_branch: Optional[str] = None
    log_entries: List[CommitLogEntry] = field(default_factory=list)
    message: Optional[str] = None
    message_severity: str = "information"
    finished: bool = False
    exit_code: int = 0

    def notify(self, message: str, severity: str = "information") -> None:
        self.message = message
        self.message_severity = severity

    def clear_message(self) -> None:
        self.message = None
        self.message_severity = "information"

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            mode=self.mode,
            filter_text=self.branches.filter_text,
            filtered_branches=self.branches.items,
            cursor_index=self.branches.cursor,
            selected=self.selection.names(),
            current_branch=self.current_branch,
            log_entries=tuple(self.log_entries),
            log_branch=self.log_branch,
            message=self.message,
            message_severity=self.message_severity,
            finished=self.finished,
        )


def create_session(gateway: "RepositoryGateway", config: Config) -> "InputModeStateMachine":
    """Load the branch snapshot and build a state machine in Search mode.

    Raises:
        BranchEnumerationError: If the local branches cannot be listed
    """
    from git_branch_finder.core.executor import CommandExecutor
    from git_branch_finder.core.state_machine import InputModeStateMachine

    state = SessionState()
    state.branches.load(gateway.list_local_branches())
    state.current_branch = gateway.current_branch()
    logger.info(
        f"Session started with {len(state.branches.all_items)} branches "
        f"(current: {state.current_branch or 'detached'})"
    )

    return InputModeStateMachine(state, CommandExecutor(gateway), config)
