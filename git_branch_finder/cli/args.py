"""Command-line argument parsing for git-branch-finder."""

import argparse
import os

from git_branch_finder.__version__ import __version__
from git_branch_finder.config import DEFAULT_LOG_LIMIT


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Interactively filter, checkout and delete local Git branches",
        epilog="Type to filter, Enter to mark a branch, Ctrl+o to checkout, "
        "Ctrl+d to delete marked branches, Ctrl+l for the log, F1 for help.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-branch-finder {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--repo",
        default=os.getcwd(),
        metavar="PATH",
        help="Path to the repository (default: current directory)",
    )
    parser.add_argument(
        "--log-limit",
        type=int,
        default=DEFAULT_LOG_LIMIT,
        metavar="N",
        help=f"Number of commits shown in log mode (default: {DEFAULT_LOG_LIMIT})",
    )

    return parser.parse_args(argv)
