"""Date and time formatting utilities."""

from datetime import datetime


def format_timestamp(timestamp: datetime) -> str:
    """
    Format a commit timestamp for the log popup.

    Args:
        timestamp: Local commit time

    Returns:
        Timestamp as YYYY-MM-DD HH:MM
    """
    return timestamp.strftime("%Y-%m-%d %H:%M")
