"""Textual widgets for git-branch-finder."""
