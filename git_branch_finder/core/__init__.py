"""Interactive session engine for git-branch-finder.

- selection_list: Filterable branch list with a circular cursor
- selection_set: Branches marked for deletion
- executor: Runs confirmed commands against the repository
- state_machine: Modal key handling
- session: Session state and bootstrap
"""

from .selection_list import FilterableSelectionList
from .selection_set import SelectionSet
from .executor import CommandExecutor, CommandOutcome, DeletionReport, LogOutcome
from .session import SessionState, create_session
from .state_machine import InputModeStateMachine

__all__ = [
    "FilterableSelectionList",
    "SelectionSet",
    "CommandExecutor",
    "CommandOutcome",
    "DeletionReport",
    "LogOutcome",
    "SessionState",
    "create_session",
    "InputModeStateMachine",
]
