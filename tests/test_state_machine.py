"""Tests for InputModeStateMachine"""
import pytest

from git_branch_finder.config import Config
from git_branch_finder.core import create_session
from git_branch_finder.exceptions import CheckoutError, DeleteBranchError, LogTraversalError
from git_branch_finder.models.mode import Command, InputMode


class TestSearchMode:
    """Test key handling while searching."""

    def test_starts_in_search(self, machine):
        """Test that a new session shows every branch with the first under the cursor."""
        assert machine.mode is InputMode.SEARCH
        assert machine.finished is False
        snapshot = machine.snapshot()
        assert snapshot.filtered_branches == ("main", "master", "alpha", "beta", "gamma")
        assert snapshot.cursor_index == 0
        assert snapshot.current_branch == "main"

    def test_typing_filters(self, machine, type_text):
        """Test that typed characters narrow the branch list."""
        type_text(machine, "eta")
        snapshot = machine.snapshot()
        assert snapshot.filter_text == "eta"
        assert snapshot.filtered_branches == ("beta",)
        assert snapshot.selected_branch == "beta"

    def test_unbound_letters_are_typed(self, machine, type_text):
        """Test that command letters are plain text while searching."""
        type_text(machine, "yqn")
        assert machine.snapshot().filter_text == "yqn"
        assert machine.mode is InputMode.SEARCH

    def test_backspace_removes_last_char(self, machine, type_text):
        """Test removing the last filter character."""
        type_text(machine, "gam")
        machine.handle_key("backspace")
        assert machine.snapshot().filter_text == "ga"

    def test_non_printable_unbound_key_is_ignored(self, machine):
        """Test that unbound control keys leave the filter alone."""
        machine.handle_key("ctrl+x")
        machine.handle_key("tab", "\t")
        assert machine.snapshot().filter_text == ""

    def test_navigation_keys_wrap(self, machine):
        """Test cursor movement with arrows and ctrl+n/ctrl+p."""
        machine.handle_key("up")
        assert machine.snapshot().selected_branch == "gamma"
        machine.handle_key("down")
        assert machine.snapshot().selected_branch == "main"
        machine.handle_key("ctrl+p")
        machine.handle_key("ctrl+p")
        assert machine.snapshot().selected_branch == "beta"
        machine.handle_key("ctrl+n")
        assert machine.snapshot().selected_branch == "gamma"

    def test_confirm_marks_and_advances(self, machine):
        """Test that enter marks the branch and moves to the next one."""
        machine.handle_key("down")
        machine.handle_key("down")  # alpha
        machine.handle_key("enter")
        snapshot = machine.snapshot()
        assert snapshot.selected == ("alpha",)
        assert snapshot.selected_branch == "beta"

    def test_confirm_single_match_wraps(self, machine, type_text):
        """Test that marking the only visible branch keeps the cursor on it."""
        type_text(machine, "eta")
        machine.handle_key("enter")
        snapshot = machine.snapshot()
        assert snapshot.selected == ("beta",)
        assert snapshot.cursor_index == 0
        assert snapshot.selected_branch == "beta"

    def test_confirm_twice_is_idempotent(self, machine, type_text):
        """Test that marking a branch twice records it once."""
        type_text(machine, "eta")
        machine.handle_key("enter")
        machine.handle_key("enter")
        assert machine.snapshot().selected == ("beta",)

    def test_protected_branch_is_never_marked(self, machine, type_text):
        """Test that master cannot be marked for deletion."""
        type_text(machine, "master")
        machine.handle_key("enter")
        snapshot = machine.snapshot()
        assert snapshot.selected == ()
        assert snapshot.selected_branch == "master"

    def test_protected_branch_follows_config(self, mock_gateway):
        """Test protecting a branch named in the configuration."""
        machine = create_session(mock_gateway, Config(protected_branch="main"))
        machine.handle_key("enter")  # main
        assert machine.snapshot().selected == ()

    def test_confirm_on_empty_view_is_noop(self, machine, type_text):
        """Test enter with nothing visible."""
        type_text(machine, "nothing")
        machine.handle_key("enter")
        assert machine.snapshot().selected == ()

    def test_selection_survives_filter_changes(self, machine, type_text):
        """Test that marks persist while the filter changes."""
        type_text(machine, "alpha")
        machine.handle_key("enter")
        for _ in range(5):
            machine.handle_key("backspace")
        type_text(machine, "gamma")
        machine.handle_key("enter")
        assert machine.snapshot().selected == ("alpha", "gamma")

    def test_escape_ends_session(self, machine):
        """Test quitting from search."""
        machine.handle_key("escape")
        assert machine.finished is True
        assert machine.exit_code == 0

    def test_keys_ignored_after_finish(self, machine, type_text):
        """Test that a finished session ignores further keys."""
        machine.handle_key("ctrl+c")
        type_text(machine, "abc")
        machine.handle_key("f1")
        assert machine.snapshot().filter_text == ""
        assert machine.mode is InputMode.SEARCH


class TestModeGuards:
    """Test guarded transitions out of Search."""

    def test_checkout_requires_selected_branch(self, machine, type_text):
        """Test that checkout needs a branch under the cursor."""
        type_text(machine, "nothing")
        machine.handle_key("ctrl+o")
        assert machine.mode is InputMode.SEARCH
        assert machine.enter_checkout() is False

    def test_checkout_with_selected_branch(self, machine):
        """Test entering the checkout confirmation."""
        assert machine.enter_checkout() is True
        assert machine.mode is InputMode.CHECKOUT
        assert machine.mode.command is Command.CHECKOUT

    def test_delete_requires_selection(self, machine):
        """Test that deletion needs at least one marked branch."""
        machine.handle_key("ctrl+d")
        assert machine.mode is InputMode.SEARCH
        assert machine.enter_delete() is False

    def test_delete_with_selection(self, machine, type_text):
        """Test entering the deletion confirmation."""
        type_text(machine, "alpha")
        machine.handle_key("enter")
        machine.handle_key("ctrl+d")
        assert machine.mode is InputMode.DELETE_BRANCH

    def test_delete_allowed_when_marked_branch_is_filtered_out(self, machine, type_text):
        """Test that marked branches count even when hidden by the filter."""
        type_text(machine, "alpha")
        machine.handle_key("enter")
        type_text(machine, "zzz")
        machine.handle_key("ctrl+d")
        assert machine.mode is InputMode.DELETE_BRANCH

    def test_log_requires_selected_branch(self, machine, mock_gateway, type_text):
        """Test that the log needs a branch under the cursor."""
        type_text(machine, "nothing")
        machine.handle_key("ctrl+l")
        assert machine.mode is InputMode.SEARCH
        mock_gateway.commit_log.assert_not_called()

    def test_help_is_unconditional(self, machine, type_text):
        """Test opening help with an empty view."""
        type_text(machine, "nothing")
        machine.handle_key("f1")
        assert machine.mode is InputMode.HELP

    def test_transitions_only_from_search(self, machine):
        """Test that other modes cannot jump straight to a command."""
        machine.handle_key("f1")
        assert machine.enter_checkout() is False
        assert machine.enter_log() is False
        assert machine.mode is InputMode.HELP


class TestCheckoutCommand:
    """Test the checkout confirmation."""

    @pytest.mark.parametrize("key", ["n", "q", "escape", "ctrl+c"])
    def test_deny_returns_to_search(self, machine, mock_gateway, key):
        """Test backing out of checkout without touching the repository."""
        machine.handle_key("ctrl+o")
        machine.handle_key(key, key if len(key) == 1 else None)
        assert machine.mode is InputMode.SEARCH
        assert machine.finished is False
        mock_gateway.checkout.assert_not_called()

    def test_other_keys_are_ignored(self, machine, mock_gateway, type_text):
        """Test that typing during confirmation changes nothing."""
        machine.handle_key("ctrl+o")
        type_text(machine, "abc")
        machine.handle_key("enter")
        assert machine.mode is InputMode.CHECKOUT
        assert machine.snapshot().filter_text == ""
        mock_gateway.checkout.assert_not_called()

    def test_affirm_checks_out_and_finishes(self, machine, mock_gateway, type_text):
        """Test a successful checkout ends the session."""
        type_text(machine, "eta")
        machine.handle_key("ctrl+o")
        mock_gateway.current_branch.return_value = "beta"
        machine.handle_key("y", "y")

        mock_gateway.checkout.assert_called_once_with("beta")
        snapshot = machine.snapshot()
        assert snapshot.finished is True
        assert snapshot.current_branch == "beta"
        assert "beta" in snapshot.message
        assert machine.exit_code == 0

    def test_failed_checkout_returns_to_search(self, machine, mock_gateway):
        """Test that a checkout error is reported and the session continues."""
        mock_gateway.checkout.side_effect = CheckoutError("main", "conflict")
        machine.handle_key("ctrl+o")
        machine.handle_key("y", "y")

        snapshot = machine.snapshot()
        assert snapshot.finished is False
        assert snapshot.mode is InputMode.SEARCH
        assert snapshot.message_severity == "error"
        assert "conflict" in snapshot.message

    def test_message_is_cleared_by_next_key(self, machine, mock_gateway):
        """Test that a message lasts until the next key press."""
        mock_gateway.checkout.side_effect = CheckoutError("main", "conflict")
        machine.handle_key("ctrl+o")
        machine.handle_key("y", "y")
        machine.handle_key("down")
        assert machine.snapshot().message is None


class TestDeleteCommand:
    """Test the batch deletion confirmation."""

    @pytest.fixture
    def mark(self, machine, type_text):
        def mark_branches(*names):
            for name in names:
                type_text(machine, name)
                machine.handle_key("enter")
                for _ in name:
                    machine.handle_key("backspace")
        return mark_branches

    def test_affirm_deletes_and_finishes(self, machine, mock_gateway, mark):
        """Test deleting every marked branch in marking order."""
        mark("alpha", "gamma")
        machine.handle_key("ctrl+d")
        machine.handle_key("y", "y")

        assert [c.args[0] for c in mock_gateway.delete_branch.call_args_list] == ["alpha", "gamma"]
        snapshot = machine.snapshot()
        assert snapshot.finished is True
        assert snapshot.selected == ()
        assert "alpha" not in snapshot.filtered_branches

    def test_partial_failure_keeps_failed_selected(self, machine, mock_gateway, mark):
        """Test that a failed deletion stays marked and is reported."""
        def delete(name):
            if name == "gamma":
                raise DeleteBranchError(name, "Branch not found")

        mock_gateway.delete_branch.side_effect = delete
        mark("alpha", "gamma")
        machine.handle_key("ctrl+d")
        machine.handle_key("y", "y")

        snapshot = machine.snapshot()
        assert snapshot.finished is False
        assert snapshot.mode is InputMode.SEARCH
        assert snapshot.selected == ("gamma",)
        assert snapshot.filtered_branches == ("main", "master", "beta", "gamma")
        assert snapshot.message_severity == "error"
        assert "gamma: Branch not found" in snapshot.message

    def test_cancel_keeps_selection(self, machine, mock_gateway, mark):
        """Test backing out of deletion keeps the marks."""
        mark("alpha")
        machine.handle_key("ctrl+d")
        machine.handle_key("escape")
        assert machine.mode is InputMode.SEARCH
        assert machine.snapshot().selected == ("alpha",)
        mock_gateway.delete_branch.assert_not_called()


class TestReadOnlyModes:
    """Test help and log popups."""

    @pytest.mark.parametrize("key", ["y", "n", "q", "enter", "escape", "ctrl+c"])
    def test_help_dismissed_by_neutral_keys(self, machine, key):
        """Test that help closes back to search without quitting."""
        machine.handle_key("f1")
        machine.handle_key(key, key if len(key) == 1 else None)
        assert machine.mode is InputMode.SEARCH
        assert machine.finished is False

    def test_help_ignores_typing(self, machine, type_text):
        """Test that typing in help does not reach the filter."""
        machine.handle_key("f1")
        type_text(machine, "abc")
        assert machine.mode is InputMode.HELP
        assert machine.snapshot().filter_text == ""

    def test_log_shows_entries_for_selected_branch(self, machine, mock_gateway, type_text):
        """Test opening the log of the branch under the cursor."""
        type_text(machine, "eta")
        machine.handle_key("ctrl+l")

        mock_gateway.commit_log.assert_called_once_with("beta", 50)
        snapshot = machine.snapshot()
        assert snapshot.mode is InputMode.SHOW_LOG
        assert snapshot.log_branch == "beta"
        assert len(snapshot.log_entries) == 3

    def test_log_uses_configured_limit(self, mock_gateway):
        """Test that the log length follows the configuration."""
        machine = create_session(mock_gateway, Config(log_limit=2))
        machine.handle_key("ctrl+l")
        mock_gateway.commit_log.assert_called_once_with("main", 2)
        assert len(machine.snapshot().log_entries) == 2

    def test_leaving_log_drops_entries(self, machine):
        """Test that closing the log discards its entries."""
        machine.handle_key("ctrl+l")
        machine.handle_key("q", "q")
        snapshot = machine.snapshot()
        assert snapshot.mode is InputMode.SEARCH
        assert snapshot.log_entries == ()
        assert snapshot.log_branch is None

    def test_log_is_walked_each_time(self, machine, mock_gateway):
        """Test that reopening the log walks the history again."""
        machine.handle_key("ctrl+l")
        machine.handle_key("escape")
        machine.handle_key("ctrl+l")
        assert mock_gateway.commit_log.call_count == 2

    def test_log_failure_shows_empty_log(self, machine, mock_gateway):
        """Test that a log error shows an empty log and a message."""
        mock_gateway.commit_log.side_effect = LogTraversalError("main", "Branch not found")
        machine.handle_key("ctrl+l")
        snapshot = machine.snapshot()
        assert snapshot.mode is InputMode.SHOW_LOG
        assert snapshot.log_entries == ()
        assert snapshot.message_severity == "error"
