"""Input modes of an interactive session"""
from enum import Enum
from typing import Optional


class Command(Enum):
    """Repository commands that need a confirmation before they run."""
    CHECKOUT = "checkout"
    DELETE_BRANCH = "delete_branch"


class InputMode(Enum):
    """Mode of the session. Exactly one is active at any time."""
    SEARCH = "search"
    CHECKOUT = "command:checkout"
    DELETE_BRANCH = "command:delete_branch"
    HELP = "help"
    SHOW_LOG = "show_log"

    @property
    def command(self) -> Optional[Command]:
        """The command this mode is confirming, or None for non-command modes."""
        return _MODE_COMMANDS.get(self)

    @property
    def is_command(self) -> bool:
        return self.command is not None


_MODE_COMMANDS = {
    InputMode.CHECKOUT: Command.CHECKOUT,
    InputMode.DELETE_BRANCH: Command.DELETE_BRANCH,
}
