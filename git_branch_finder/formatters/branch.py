"""Branch list formatting utilities."""

from typing import Optional, Sequence

from rich.text import Text

from git_branch_finder.constants import (
    COLOR_BRANCH,
    COLOR_CURRENT_BRANCH,
    COLOR_CURSOR,
    COLOR_QUERY,
    SYMBOL_CURRENT_BRANCH,
    SYMBOL_CURSOR,
    SYMBOL_SELECTED,
    SYMBOL_UNSELECTED,
)


def format_branch_name(name: str, is_current: bool = False) -> str:
    """
    Format branch name with the current branch marker.

    Args:
        name: Branch name
        is_current: Whether this is the checked out branch

    Returns:
        Formatted branch name
    """
    return f"{SYMBOL_CURRENT_BRANCH} {name}" if is_current else name


def format_query(filter_text: str) -> Text:
    """Render the search input."""
    return Text(filter_text, style=COLOR_QUERY)


def format_branch_list(
    branches: Sequence[str],
    cursor_index: Optional[int],
    selected: Sequence[str],
    current_branch: Optional[str] = None,
) -> Text:
    """
    Render the filtered branch list.

    Args:
        branches: Filtered view in display order
        cursor_index: Index of the highlighted row, None for no highlight
        selected: Names marked for deletion
        current_branch: Checked out branch, marked with an anchor

    Returns:
        One line per branch
    """
    marked = set(selected)
    text = Text()
    for index, name in enumerate(branches):
        if index:
            text.append("\n")
        is_cursor = index == cursor_index
        text.append(f"{SYMBOL_CURSOR} " if is_cursor else "  ", style=COLOR_CURSOR)
        text.append(f"{SYMBOL_SELECTED if name in marked else SYMBOL_UNSELECTED} ")

        is_current = name == current_branch
        if is_cursor:
            style = f"bold {COLOR_CURSOR}"
        elif is_current:
            style = COLOR_CURRENT_BRANCH
        else:
            style = COLOR_BRANCH
        text.append(format_branch_name(name, is_current), style=style)
    return text


def format_selected_list(selected: Sequence[str]) -> Text:
    """Render the branches marked for deletion as a numbered list."""
    return Text("\n".join(f"{i}: {name}" for i, name in enumerate(selected)))
