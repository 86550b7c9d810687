"""Popup and hint formatting utilities."""

from typing import Sequence

from rich.text import Text

from git_branch_finder.constants import (
    COLOR_AFFIRM,
    COLOR_COMMIT_ID,
    COLOR_DENY,
    COLOR_HINT,
    HELP_ENTRIES,
    HINT_COMMAND,
    HINT_OTHER,
    HINT_SEARCH,
    SYMBOL_LIST_ITEM,
)
from git_branch_finder.formatters.date import format_timestamp
from git_branch_finder.models.commit import CommitLogEntry
from git_branch_finder.models.mode import InputMode


def format_hint(mode: InputMode) -> Text:
    """Key hint for the active mode."""
    if mode is InputMode.SEARCH:
        message = HINT_SEARCH
    elif mode.is_command:
        message = HINT_COMMAND
    else:
        message = HINT_OTHER
    return Text(message, style=COLOR_HINT)


def _append_choice(text: Text) -> None:
    text.append("Enter: ")
    text.append("y", style=COLOR_AFFIRM)
    text.append(" or ")
    text.append("n", style=COLOR_DENY)


def format_checkout_confirmation(branch: str) -> Text:
    text = Text("Would you like to checkout ")
    text.append(branch, style=COLOR_AFFIRM)
    text.append(" ?\n\n")
    _append_choice(text)
    return text


def format_delete_confirmation(selected: Sequence[str]) -> Text:
    """
    Confirmation for a batch deletion.

    Args:
        selected: Names that will be deleted

    Returns:
        Prompt followed by one line per branch
    """
    text = Text("Would you like to ")
    text.append("delete branches", style=COLOR_AFFIRM)
    text.append(" ?\n")
    _append_choice(text)
    text.append("\n\n")
    text.append("selected branches:\n", style="yellow")
    for name in selected:
        text.append(f"{SYMBOL_LIST_ITEM} ")
        text.append(name, style="cyan")
        text.append("\n")
    return text


def format_help() -> Text:
    width = max(len(entry.label) for entry in HELP_ENTRIES)
    text = Text()
    for entry in HELP_ENTRIES:
        text.append(entry.label.ljust(width), style=COLOR_AFFIRM)
        text.append(f": {entry.keys}\n")
    return text


def format_log(entries: Sequence[CommitLogEntry]) -> Text:
    """Render commits as '<id> <summary>' with author and date below."""
    if not entries:
        return Text("No commits to show", style="dim")

    text = Text()
    for entry in entries:
        text.append(entry.id, style=COLOR_COMMIT_ID)
        text.append(f" {entry.summary}\n")
        text.append(
            f"    {entry.author_name} <{entry.author_email}>  {format_timestamp(entry.timestamp)}\n",
            style="dim",
        )
    return text
