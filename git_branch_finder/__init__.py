"""
git-branch-finder - An interactive finder for local Git branches
"""

from .__version__ import __version__
from .core import InputModeStateMachine, create_session
from .cli.main import main

__all__ = ["InputModeStateMachine", "create_session", "main", "__version__"]
