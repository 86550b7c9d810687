"""Shared constants for git-branch-finder."""

from dataclasses import dataclass
from typing import Dict, List


# Symbol constants
SYMBOL_CURRENT_BRANCH = "⚓"
SYMBOL_CURSOR = "➢"
SYMBOL_SELECTED = "✓"
SYMBOL_UNSELECTED = " "
SYMBOL_LIST_ITEM = "-->"


class SearchAction:
    """Intents available while typing in Search mode."""

    NEXT = "next"
    PREVIOUS = "previous"
    CONFIRM = "confirm"
    DELETE_CHAR = "delete_char"
    CHECKOUT = "checkout"
    LOG = "log"
    DELETE_BRANCH = "delete_branch"
    HELP = "help"
    QUIT = "quit"


class CommandAction:
    """Intents available in command confirmation and read-only modes."""

    AFFIRM = "affirm"
    BACK = "back"


# Keys use Textual key names. Printable characters that are not bound here
# are appended to the search query.
SEARCH_KEYS: Dict[str, str] = {
    "down": SearchAction.NEXT,
    "ctrl+n": SearchAction.NEXT,
    "up": SearchAction.PREVIOUS,
    "ctrl+p": SearchAction.PREVIOUS,
    "enter": SearchAction.CONFIRM,
    "backspace": SearchAction.DELETE_CHAR,
    "delete": SearchAction.DELETE_CHAR,
    "ctrl+o": SearchAction.CHECKOUT,
    "ctrl+l": SearchAction.LOG,
    "ctrl+d": SearchAction.DELETE_BRANCH,
    "f1": SearchAction.HELP,
    "alt+h": SearchAction.HELP,
    "escape": SearchAction.QUIT,
    "ctrl+c": SearchAction.QUIT,
}

COMMAND_KEYS: Dict[str, str] = {
    "y": CommandAction.AFFIRM,
    "n": CommandAction.BACK,
    "q": CommandAction.BACK,
    "escape": CommandAction.BACK,
    "ctrl+c": CommandAction.BACK,
}

# Help and log popups are dismissed by any of these
READ_ONLY_KEYS: Dict[str, str] = {
    "y": CommandAction.BACK,
    "n": CommandAction.BACK,
    "q": CommandAction.BACK,
    "enter": CommandAction.BACK,
    "escape": CommandAction.BACK,
    "ctrl+c": CommandAction.BACK,
}


@dataclass
class HelpEntry:
    """One line of the help popup."""

    label: str
    keys: str


HELP_ENTRIES: List[HelpEntry] = [
    HelpEntry("Show Help", "Alt+h / F1"),
    HelpEntry("Checkout Branch", "Ctrl+o"),
    HelpEntry("Delete Branches", "Ctrl+d"),
    HelpEntry("Show log", "Ctrl+l"),
]


# Hint line shown under the branch list
HINT_SEARCH = "Press Esc or Ctrl+c to exit, Enter to record the message. (Help: Alt+h)"
HINT_COMMAND = "Press y to run the command, n or q or Esc to go back."
HINT_OTHER = "Press Esc or q or Ctrl+c or Enter back to Search"


# TUI colors (Rich color names)
COLOR_QUERY = "yellow"
COLOR_BRANCH = "yellow"
COLOR_CURRENT_BRANCH = "bright_cyan"
COLOR_CURSOR = "bright_green"
COLOR_HINT = "cyan"
COLOR_AFFIRM = "green"
COLOR_DENY = "bright_magenta"
COLOR_COMMIT_ID = "yellow"
