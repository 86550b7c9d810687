"""Pytest fixtures for git-branch-finder tests"""
import tempfile
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock

import git
import pytest

from git_branch_finder.config import Config
from git_branch_finder.core import create_session
from git_branch_finder.models.commit import CommitLogEntry
from git_branch_finder.services.git import RepositoryGateway

BETA_COMMITS = 5


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config():
    """Default configuration."""
    return Config()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with branches alpha, beta and gamma; HEAD stays on main.

    beta carries BETA_COMMITS commits of its own, each changing README.md.
    """
    repo = git_repo
    repo_path = Path(repo.working_dir)

    repo.git.branch('alpha')
    repo.git.branch('gamma')

    repo.git.checkout('-b', 'beta')
    for i in range(1, BETA_COMMITS + 1):
        (repo_path / "README.md").write_text(f"# Beta revision {i}\n")
        repo.index.add(["README.md"])
        repo.index.commit(f"Beta commit {i}")

    repo.git.checkout('main')

    yield repo


@pytest.fixture
def gateway(git_repo_with_branches):
    """RepositoryGateway over the test repository."""
    with RepositoryGateway(git_repo_with_branches.working_dir) as gw:
        yield gw


def _log_entry(index: int) -> CommitLogEntry:
    return CommitLogEntry(
        id=f"{index:07x}",
        author_name="Test User",
        author_email="test@example.com",
        message=f"Commit {index}\n\nBody",
        timestamp=datetime(2024, 1, 1, 12, index),
    )


@pytest.fixture
def mock_gateway():
    """Mock RepositoryGateway with five branches, on main."""
    gw = Mock(spec=RepositoryGateway)
    gw.list_local_branches.return_value = ["main", "master", "alpha", "beta", "gamma"]
    gw.current_branch.return_value = "main"
    gw.commit_log.side_effect = lambda branch, limit: iter(
        [_log_entry(i) for i in range(limit)][:3]
    )
    return gw


@pytest.fixture
def machine(mock_gateway, config):
    """State machine over the mock gateway."""
    return create_session(mock_gateway, config)


@pytest.fixture
def beta_commits():
    """Number of commits made on beta by git_repo_with_branches."""
    return BETA_COMMITS


@pytest.fixture
def log_entry():
    """Factory for CommitLogEntry values with predictable fields."""
    return _log_entry


@pytest.fixture
def type_text():
    """Send each character of a string to a state machine as a key press."""
    def type_into(machine, text: str) -> None:
        for char in text:
            machine.handle_key(char, char)
    return type_into
