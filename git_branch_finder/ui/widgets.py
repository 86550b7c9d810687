"""Custom widgets for git-branch-finder TUI.

Each widget renders one part of a SessionSnapshot and never touches the session.
"""

from textual.widgets import Static

from git_branch_finder.formatters import (
    format_branch_list,
    format_checkout_confirmation,
    format_delete_confirmation,
    format_help,
    format_hint,
    format_log,
    format_query,
    format_selected_list,
)
from git_branch_finder.models.mode import InputMode
from git_branch_finder.models.session import SessionSnapshot


class SearchInput(Static):
    """The filter query."""

    DEFAULT_CSS = """
    SearchInput {
        height: 3;
        border: round $accent;
        padding: 0 1;
    }
    """

    def on_mount(self) -> None:
        self.border_title = "Input"

    def show(self, snapshot: SessionSnapshot) -> None:
        self.update(format_query(snapshot.filter_text))


class BranchList(Static):
    """Filtered branches with cursor, marks and current branch."""

    def show(self, snapshot: SessionSnapshot) -> None:
        self.update(
            format_branch_list(
                snapshot.filtered_branches,
                snapshot.cursor_index,
                snapshot.selected,
                snapshot.current_branch,
            )
        )


class SelectedList(Static):
    """Branches marked for deletion."""

    DEFAULT_CSS = """
    SelectedList {
        width: 1fr;
        height: 1fr;
        border: round $secondary;
        padding: 0 1;
    }
    """

    def on_mount(self) -> None:
        self.border_title = "Selected"

    def show(self, snapshot: SessionSnapshot) -> None:
        self.update(format_selected_list(snapshot.selected))


class PopupView(Static):
    """Confirmation, help or log, depending on the mode."""

    DEFAULT_CSS = """
    PopupView {
        width: 100%;
        height: auto;
        border: double $accent;
        padding: 1 2;
    }
    """

    def show(self, snapshot: SessionSnapshot) -> None:
        mode = snapshot.mode
        if mode is InputMode.CHECKOUT:
            self.border_title = "Checkout Branch"
            self.update(format_checkout_confirmation(snapshot.selected_branch or ""))
        elif mode is InputMode.DELETE_BRANCH:
            self.border_title = "Delete Branch"
            self.update(format_delete_confirmation(snapshot.selected))
        elif mode is InputMode.HELP:
            self.border_title = "Help"
            self.update(format_help())
        elif mode is InputMode.SHOW_LOG:
            self.border_title = f"Log: {snapshot.log_branch}"
            self.update(format_log(snapshot.log_entries))
        else:
            self.update("")


class HintBar(Static):
    """Key hint for the active mode."""

    DEFAULT_CSS = """
    HintBar {
        dock: bottom;
        height: 1;
        padding: 0 1;
    }
    """

    def show(self, snapshot: SessionSnapshot) -> None:
        self.update(format_hint(snapshot.mode))
