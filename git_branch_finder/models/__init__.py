"""Data models for git-branch-finder."""
