"""Formatting utilities for git-branch-finder.

Pure functions that turn session state into Rich renderables:
- date: Timestamp formatting
- branch: Search input, branch list and selected list
- popup: Hint line, confirmations, help and log
"""

from .date import format_timestamp

from .branch import (
    format_branch_name,
    format_query,
    format_branch_list,
    format_selected_list,
)

from .popup import (
    format_hint,
    format_checkout_confirmation,
    format_delete_confirmation,
    format_help,
    format_log,
)

__all__ = [
    # Date
    "format_timestamp",
    # Branch
    "format_branch_name",
    "format_query",
    "format_branch_list",
    "format_selected_list",
    # Popup
    "format_hint",
    "format_checkout_confirmation",
    "format_delete_confirmation",
    "format_help",
    "format_log",
]
