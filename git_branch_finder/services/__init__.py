"""Services for git-branch-finder."""
