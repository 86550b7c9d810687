"""Modal input handling for an interactive session.

Every key press ends up here. In Search mode keys edit the filter, move the
cursor and mark branches; the remaining keys request a mode change. Each
transition out of Search is guarded, and a transition whose guard fails is
ignored rather than reported.
"""

from typing import Callable, Dict, Optional

from git_branch_finder.config import Config
from git_branch_finder.constants import (
    COMMAND_KEYS,
    READ_ONLY_KEYS,
    SEARCH_KEYS,
    CommandAction,
    SearchAction,
)
from git_branch_finder.core.executor import CommandExecutor, DeletionReport
from git_branch_finder.core.session import SessionState
from git_branch_finder.logging_config import get_logger
from git_branch_finder.models.mode import Command, InputMode
from git_branch_finder.models.session import SessionSnapshot

logger = get_logger(__name__)


class InputModeStateMachine:
    """Owns the current mode and resolves every key into an action."""

    def __init__(self, state: SessionState, executor: CommandExecutor, config: Config):
        self.state = state
        self.executor = executor
        self.config = config

        self._mode_handlers: Dict[InputMode, Callable[[str, Optional[str]], None]] = {
            InputMode.SEARCH: self._handle_search_key,
            InputMode.CHECKOUT: self._handle_command_key,
            InputMode.DELETE_BRANCH: self._handle_command_key,
            InputMode.HELP: self._handle_read_only_key,
            InputMode.SHOW_LOG: self._handle_read_only_key,
        }
        self._search_actions: Dict[str, Callable[[], object]] = {
            SearchAction.NEXT: self.state.branches.next,
            SearchAction.PREVIOUS: self.state.branches.previous,
            SearchAction.CONFIRM: self.confirm_current,
            SearchAction.DELETE_CHAR: self.state.branches.pop_char,
            SearchAction.CHECKOUT: self.enter_checkout,
            SearchAction.LOG: self.enter_log,
            SearchAction.DELETE_BRANCH: self.enter_delete,
            SearchAction.HELP: self.enter_help,
            SearchAction.QUIT: self.quit,
        }

    @property
    def mode(self) -> InputMode:
        return self.state.mode

    @property
    def finished(self) -> bool:
        return self.state.finished

    @property
    def exit_code(self) -> int:
        return self.state.exit_code

    def snapshot(self) -> SessionSnapshot:
        return self.state.snapshot()

    def handle_key(self, key: str, character: Optional[str] = None) -> None:
        """Handle one key event.

        Args:
            key: Textual key name (e.g. "ctrl+o", "enter", "a")
            character: Printable character for the key, if any
        """
        if self.state.finished:
            return
        self.state.clear_message()
        self._mode_handlers[self.state.mode](key, character)

    def _handle_search_key(self, key: str, character: Optional[str]) -> None:
        action = SEARCH_KEYS.get(key)
        if action is not None:
            self._search_actions[action]()
        elif character and character.isprintable():
            self.state.branches.push_char(character)

    def _handle_command_key(self, key: str, character: Optional[str]) -> None:
        action = COMMAND_KEYS.get(key)
        if action == CommandAction.AFFIRM:
            self.confirm()
        elif action == CommandAction.BACK:
            self.cancel()

    def _handle_read_only_key(self, key: str, character: Optional[str]) -> None:
        if READ_ONLY_KEYS.get(key) == CommandAction.BACK:
            self.cancel()

    def _set_mode(self, mode: InputMode) -> None:
        logger.debug(f"Mode {self.state.mode.value} -> {mode.value}")
        self.state.mode = mode

    def confirm_current(self) -> None:
        """Mark the branch under the cursor for deletion and move down.

        The protected branch is never marked, and then the cursor stays put.
        """
        branch = self.state.branches.selected()
        if branch is None or branch == self.config.protected_branch:
            return
        self.state.selection.add(branch)
        self.state.branches.next()

    def enter_checkout(self) -> bool:
        if self.state.mode is not InputMode.SEARCH or self.state.branches.selected() is None:
            return False
        self._set_mode(InputMode.CHECKOUT)
        return True

    def enter_delete(self) -> bool:
        if self.state.mode is not InputMode.SEARCH or not self.state.selection:
            return False
        self._set_mode(InputMode.DELETE_BRANCH)
        return True

    def enter_log(self) -> bool:
        """Show the log of the branch under the cursor, walking it afresh."""
        branch = self.state.branches.selected()
        if self.state.mode is not InputMode.SEARCH or branch is None:
            return False

        outcome = self.executor.execute_log(branch, self.config.log_limit)
        self.state.log_branch = branch
        self.state.log_entries = outcome.entries
        if outcome.error:
            self.state.notify(outcome.error, severity="error")
        self._set_mode(InputMode.SHOW_LOG)
        return True

    def enter_help(self) -> bool:
        if self.state.mode is not InputMode.SEARCH:
            return False
        self._set_mode(InputMode.HELP)
        return True

    def cancel(self) -> None:
        """Leave any popup or confirmation without side effects."""
        if self.state.mode is InputMode.SEARCH:
            return
        if self.state.mode is InputMode.SHOW_LOG:
            self.state.log_branch = None
            self.state.log_entries = []
        self._set_mode(InputMode.SEARCH)

    def quit(self) -> None:
        """End the session from Search mode."""
        if self.state.mode is not InputMode.SEARCH:
            return
        logger.info("Session ended by user")
        self._finish()

    def confirm(self) -> None:
        """Run the command being confirmed.

        Success ends the session. Failure is reported and the session
        continues in Search mode.
        """
        command = self.state.mode.command
        if command is None:
            return

        if command is Command.CHECKOUT:
            succeeded = self._run_checkout()
        else:
            succeeded = self._run_delete_branches()

        if succeeded:
            self._finish()
        else:
            self._set_mode(InputMode.SEARCH)

    def _run_checkout(self) -> bool:
        branch = self.state.branches.selected()
        if branch is None:
            return False

        outcome = self.executor.execute_checkout(branch)
        if not outcome.succeeded:
            self.state.notify(outcome.error or f"Could not checkout {branch}", severity="error")
            return False

        self.state.current_branch = self.executor.gateway.current_branch()
        self.state.notify(f"Switched to branch '{branch}'")
        return True

    def _run_delete_branches(self) -> bool:
        report = self.executor.execute_delete_branches(self.state.selection, self.state.branches)
        if report.succeeded:
            self.state.notify(_describe_deleted(report))
            return True

        self.state.notify(_describe_failures(report), severity="error")
        return False

    def _finish(self) -> None:
        self.state.finished = True
        self.state.exit_code = 0


def _describe_deleted(report: DeletionReport) -> str:
    count = len(report.deleted)
    return f"Deleted {count} branch{'es' if count != 1 else ''}: {', '.join(report.deleted)}"


def _describe_failures(report: DeletionReport) -> str:
    count = len(report.failed)
    lines = [f"Failed to delete {count} branch{'es' if count != 1 else ''}:"]
    lines.extend(f"  • {name}: {error}" for name, error in report.failed)
    if report.deleted:
        lines.append(_describe_deleted(report))
    return "\n".join(lines)
