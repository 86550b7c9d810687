"""Read-only view of the session handed to the renderer"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from git_branch_finder.models.commit import CommitLogEntry
from git_branch_finder.models.mode import InputMode


@dataclass(frozen=True)
class SessionSnapshot:
    """State of the session after one handled event."""
    mode: InputMode
    filter_text: str
    filtered_branches: Tuple[str, ...]
    cursor_index: Optional[int]
    selected: Tuple[str, ...]  # Insertion order
    current_branch: Optional[str]  # None = detached HEAD
    log_entries: Tuple[CommitLogEntry, ...] = field(default_factory=tuple)
    log_branch: Optional[str] = None
    message: Optional[str] = None
    message_severity: str = "information"  # Textual notify severity
    finished: bool = False

    @property
    def selected_branch(self) -> Optional[str]:
        if self.cursor_index is None:
            return None
        return self.filtered_branches[self.cursor_index]
