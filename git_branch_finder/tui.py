"""Interactive TUI for git-branch-finder using Textual."""

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import ContentSwitcher, Header

from .__version__ import __version__
from .core import InputModeStateMachine
from .logging_config import get_logger
from .models.mode import InputMode
from .ui.widgets import BranchList, HintBar, PopupView, SearchInput, SelectedList

logger = get_logger(__name__)

# Rows kept visible above the cursor when scrolling the branch list
SCROLL_MARGIN = 3


class BranchFinderApp(App[int]):
    """Textual frontend: forwards every key to the state machine and redraws."""

    ENABLE_COMMAND_PALETTE = False
    TITLE = "Git Branch Finder"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        background: $surface;
    }

    #body {
        height: 1fr;
    }

    #branch-scroll {
        width: 2fr;
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #popup-scroll {
        height: 1fr;
        padding: 1 4;
    }
    """

    # Textual binds ctrl+c itself; take it over so it reaches the state machine
    BINDINGS = [
        Binding("ctrl+c", "forward_ctrl_c", "Cancel", show=False, priority=True),
    ]

    def __init__(self, machine: InputModeStateMachine):
        super().__init__()
        self.machine = machine

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header(show_clock=False, icon="")
        yield SearchInput(id="search-input")
        with ContentSwitcher(initial="lists", id="body"):
            with Horizontal(id="lists"):
                with VerticalScroll(id="branch-scroll"):
                    yield BranchList(id="branch-list")
                yield SelectedList(id="selected-list")
            with VerticalScroll(id="popup-scroll"):
                yield PopupView(id="popup")
        yield HintBar(id="hint-bar")

    def on_mount(self) -> None:
        self.query_one("#branch-scroll").border_title = "Branches"
        self._render_snapshot()

    def on_key(self, event: events.Key) -> None:
        """Hand the key to the session and redraw."""
        event.stop()
        event.prevent_default()
        if event.key == "ctrl+c":  # Delivered through the binding
            return
        self._dispatch(event.key, event.character if event.is_printable else None)

    def action_forward_ctrl_c(self) -> None:
        self._dispatch("ctrl+c")

    def _dispatch(self, key: str, character=None) -> None:
        logger.debug(f"Key {key!r} in {self.machine.mode.value} mode")
        self.machine.handle_key(key, character)
        self._render_snapshot()

    def _render_snapshot(self) -> None:
        snapshot = self.machine.snapshot()

        if snapshot.finished:
            self.exit(self.machine.exit_code)
            return

        self.query_one(SearchInput).show(snapshot)
        self.query_one(BranchList).show(snapshot)
        self.query_one(SelectedList).show(snapshot)
        self.query_one(PopupView).show(snapshot)
        self.query_one(HintBar).show(snapshot)

        switcher = self.query_one(ContentSwitcher)
        switcher.current = "lists" if snapshot.mode is InputMode.SEARCH else "popup-scroll"

        if snapshot.cursor_index is not None:
            self.query_one("#branch-scroll", VerticalScroll).scroll_to(
                y=max(0, snapshot.cursor_index - SCROLL_MARGIN), animate=False
            )

        if snapshot.message:
            self.notify(snapshot.message, severity=snapshot.message_severity)
