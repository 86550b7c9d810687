"""Tests for SelectionSet"""
from git_branch_finder.core import SelectionSet


class TestSelectionSet:
    """Test marking branches for deletion."""

    def test_add_is_idempotent(self):
        """Test that adding a branch twice records it once."""
        selection = SelectionSet()
        assert selection.add("beta") is True
        assert selection.add("beta") is False
        assert len(selection) == 1

    def test_keeps_insertion_order(self):
        """Test that branches come back in the order they were marked."""
        selection = SelectionSet()
        for name in ["gamma", "alpha", "beta"]:
            selection.add(name)
        assert selection.names() == ("gamma", "alpha", "beta")
        assert list(selection) == ["gamma", "alpha", "beta"]

    def test_membership_and_truthiness(self):
        """Test membership checks and emptiness."""
        selection = SelectionSet()
        assert not selection
        selection.add("alpha")
        assert selection
        assert "alpha" in selection
        assert "beta" not in selection

    def test_remove_all_and_discard(self):
        """Test removing branches, including ones never marked."""
        selection = SelectionSet()
        for name in ["alpha", "beta", "gamma"]:
            selection.add(name)
        selection.remove_all(["alpha", "gamma", "missing"])
        assert selection.names() == ("beta",)
        selection.discard("beta")
        selection.discard("beta")
        assert len(selection) == 0

    def test_iteration_survives_removal(self):
        """Test discarding while iterating."""
        selection = SelectionSet()
        for name in ["alpha", "beta"]:
            selection.add(name)
        for name in selection:
            selection.discard(name)
        assert len(selection) == 0

    def test_clear(self):
        """Test clearing every mark."""
        selection = SelectionSet()
        selection.add("alpha")
        selection.clear()
        assert selection.names() == ()
