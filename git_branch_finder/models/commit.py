"""Commit log model"""
from dataclasses import dataclass
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class CommitLogEntry:
    """One commit reached while walking a branch's ancestry."""
    id: str  # Short hash
    author_name: str
    author_email: str
    message: str
    timestamp: datetime  # Local time, naive

    @property
    def summary(self) -> str:
        """First line of the commit message."""
        lines = self.message.strip().splitlines()
        return lines[0] if lines else ""

    @staticmethod
    def decode_message(message: Union[str, bytes]) -> str:
        """Decode a raw commit message, replacing malformed byte sequences."""
        if isinstance(message, bytes):
            return message.decode("utf-8", errors="replace")
        return message
