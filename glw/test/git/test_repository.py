"""Tests for git/repository.py."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from glw.core.result import Err, Ok
from glw.git.repository import GitError, Repository


def make_completed_process(
    stdout: str = "",
    stderr: str = "",
    returncode: int = 0,
) -> subprocess.CompletedProcess[str]:
    """Create a mock CompletedProcess."""
    return subprocess.CompletedProcess(
        args=["git"],
        returncode=returncode,
        stdout=stdout,
        stderr=stderr,
    )


# =============================================================================
# Repository Tests - Mocked subprocess
# =============================================================================


class TestResolveRef:
    """Tests for Repository.resolve_ref()."""

    @patch("subprocess.run")
    def test_found(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(stdout="abc123\n")

        result = Repository(tmp_path).resolve_ref("origin/main")

        assert result == Ok("abc123")

    @patch("subprocess.run")
    def test_command_line(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(stdout="abc123\n")

        Repository(tmp_path).resolve_ref("origin/main")

        cmd = mock_run.call_args.args[0]
        assert cmd[:3] == ["git", "-C", str(tmp_path)]
        assert cmd[3:5] == ["rev-parse", "--verify"]
        assert cmd[-1] == "origin/main^{commit}"

    @patch("subprocess.run")
    def test_not_found(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(returncode=1)

        result = Repository(tmp_path).resolve_ref("origin/nope")

        assert isinstance(result, Err)
        error = result.error
        assert error.returncode == 1
        assert "origin/nope" in error.message

    @patch("subprocess.run")
    def test_git_stderr_is_kept(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(
            returncode=128, stderr="fatal: not a git repository\n"
        )

        result = Repository(tmp_path).resolve_ref("HEAD")

        assert isinstance(result, Err)
        assert result.error.message == "fatal: not a git repository"

    @patch("subprocess.run", side_effect=FileNotFoundError("git"))
    def test_git_missing(self, _mock_run: MagicMock, tmp_path: Path) -> None:
        result = Repository(tmp_path).resolve_ref("HEAD")

        assert isinstance(result, Err)
        assert result.error.returncode == -1


class TestRoot:
    """Tests for Repository.root()."""

    @patch("subprocess.run")
    def test_found(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(stdout="/work/repo\n")

        result = Repository(tmp_path).root()

        assert result == Ok(Path("/work/repo"))
        assert mock_run.call_args.args[0][3:] == ["rev-parse", "--show-toplevel"]

    @patch("subprocess.run")
    def test_not_a_work_tree(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(returncode=128)

        result = Repository(tmp_path).root()

        assert isinstance(result, Err)
        assert result.error.message == "not a git work tree"


class TestMergeBase:
    """Tests for Repository.merge_base()."""

    @patch("subprocess.run")
    def test_found(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(stdout="def456\n")

        result = Repository(tmp_path).merge_base("HEAD", "origin/main")

        assert result == Ok("def456")
        assert mock_run.call_args.args[0][3:] == ["merge-base", "HEAD", "origin/main"]

    @patch("subprocess.run")
    def test_unrelated_histories(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(returncode=1)

        result = Repository(tmp_path).merge_base("HEAD", "origin/main")

        assert result == Err(
            GitError(
                command="merge-base HEAD origin/main",
                message="no merge-base for HEAD and origin/main",
                returncode=1,
            )
        )

    @patch("subprocess.run")
    def test_empty_output(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(stdout="\n")

        result = Repository(tmp_path).merge_base("HEAD", "origin/main")

        assert isinstance(result, Err)


# =============================================================================
# Repository Tests - Real git
# =============================================================================


def _git(cwd: Path, *args: str) -> str:
    proc = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return proc.stdout.strip()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    if shutil.which("git") is None:
        pytest.skip("git not installed")

    _git(tmp_path, "init", "-q")
    _git(tmp_path, "config", "user.email", "dev@example.com")
    _git(tmp_path, "config", "user.name", "Dev")
    _git(tmp_path, "config", "commit.gpgsign", "false")
    _git(tmp_path, "commit", "-q", "--allow-empty", "-m", "base")
    _git(tmp_path, "update-ref", "refs/remotes/origin/main", "HEAD")
    _git(tmp_path, "commit", "-q", "--allow-empty", "-m", "feature")
    return tmp_path


class TestRepositoryIntegration:
    """Repository against a throwaway repository."""

    def test_resolve_existing_remote_ref(self, git_repo: Path) -> None:
        expected = _git(git_repo, "rev-parse", "origin/main")

        assert Repository(git_repo).resolve_ref("origin/main") == Ok(expected)

    def test_resolve_missing_ref(self, git_repo: Path) -> None:
        assert isinstance(Repository(git_repo).resolve_ref("origin/master"), Err)

    def test_merge_base_is_branch_point(self, git_repo: Path) -> None:
        expected = _git(git_repo, "rev-parse", "origin/main")

        assert Repository(git_repo).merge_base("HEAD", "origin/main") == Ok(expected)

    def test_outside_repository(self, tmp_path: Path) -> None:
        if shutil.which("git") is None:
            pytest.skip("git not installed")
        outside = tmp_path / "plain"
        outside.mkdir()

        assert isinstance(Repository(outside).resolve_ref("HEAD"), Err)

    def test_root_from_subdirectory(self, git_repo: Path) -> None:
        subdir = git_repo / "pkg" / "inner"
        subdir.mkdir(parents=True)

        result = Repository(subdir).root()

        assert isinstance(result, Ok)
        assert result.value.resolve() == git_repo.resolve()

    def test_root_outside_repository(self, tmp_path: Path) -> None:
        if shutil.which("git") is None:
            pytest.skip("git not installed")
        outside = tmp_path / "plain"
        outside.mkdir()

        assert isinstance(Repository(outside).root(), Err)
