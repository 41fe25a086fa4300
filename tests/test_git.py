"""Tests for listing commits through git."""

import subprocess
from datetime import datetime
from unittest.mock import Mock, patch

import pytest

from jobclock.errors import VcsUnavailable
from jobclock.vcs import GitCommitSource, get_commit_source

from conftest import at


def _completed(stdout):
    return Mock(stdout=stdout, returncode=0)


class TestGitCommitSource:

    def test_parses_and_orders_oldest_first(self):
        since, until = at(20), at(21)
        newer = int(at(20, 40).timestamp())
        older = int(at(20, 5).timestamp())
        output = f"{newer}\tAdd feature\n{older}\tFix: handle\ttabs\n"

        with patch("jobclock.vcs.git.subprocess.run", return_value=_completed(output)) as run:
            commits = GitCommitSource(cwd="/repo").list_commits(since, until)

        assert [c.subject for c in commits] == ["Fix: handle\ttabs", "Add feature"]
        assert [c.timestamp for c in commits] == [at(20, 5), at(20, 40)]
        assert all(c.timestamp.tzinfo is not None for c in commits)

        args, kwargs = run.call_args
        cmd = args[0]
        assert cmd[:2] == ["git", "log"]
        assert f"--since={since.isoformat()}" in cmd
        assert f"--until={until.isoformat()}" in cmd
        assert kwargs["cwd"] == "/repo"
        assert kwargs["check"] is True

    def test_no_commits(self):
        with patch("jobclock.vcs.git.subprocess.run", return_value=_completed("")):
            assert GitCommitSource().list_commits(at(20), at(21)) == []

    def test_author_filter(self):
        with patch("jobclock.vcs.git.subprocess.run", return_value=_completed("")) as run:
            GitCommitSource(author="me@example.com").list_commits(at(20), at(21))
        assert "--author=me@example.com" in run.call_args[0][0]

    def test_git_missing(self):
        with patch("jobclock.vcs.git.subprocess.run", side_effect=FileNotFoundError("git")):
            with pytest.raises(VcsUnavailable, match="git not found"):
                GitCommitSource().list_commits(at(20), at(21))

    def test_not_a_repository(self):
        error = subprocess.CalledProcessError(
            128, ["git", "log"],
            stderr="fatal: not a git repository (or any of the parent directories): .git\n",
        )
        with patch("jobclock.vcs.git.subprocess.run", side_effect=error):
            with pytest.raises(VcsUnavailable, match="not a git repository"):
                GitCommitSource().list_commits(at(20), at(21))

    def test_unexpected_output(self):
        with patch("jobclock.vcs.git.subprocess.run", return_value=_completed("garbage line\n")):
            with pytest.raises(VcsUnavailable):
                GitCommitSource().list_commits(at(20), at(21))

    def test_real_git_outside_repository(self, tmp_path, monkeypatch):
        if not _git_available():
            pytest.skip("git not installed")
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
        with pytest.raises(VcsUnavailable):
            GitCommitSource(cwd=tmp_path).list_commits(datetime(2024, 1, 1).astimezone(), at(21))

    def test_repository_without_commits(self):
        log_error = subprocess.CalledProcessError(
            128, ["git", "log"],
            stderr="fatal: your current branch 'main' does not have any commits yet\n",
        )
        responses = [log_error, Mock(returncode=0, stdout=".git\n"), Mock(returncode=1, stdout="")]
        with patch("jobclock.vcs.git.subprocess.run", side_effect=responses):
            assert GitCommitSource().list_commits(at(20), at(21)) == []

    def test_real_git_repository_without_commits(self, tmp_path, monkeypatch):
        if not _git_available():
            pytest.skip("git not installed")
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
        subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
        assert GitCommitSource(cwd=tmp_path).list_commits(datetime(2024, 1, 1).astimezone(), at(21)) == []


class TestFactory:

    def test_default_is_git(self):
        source = get_commit_source({})
        assert isinstance(source, GitCommitSource)
        assert source.author is None

    def test_author_from_config(self):
        assert get_commit_source({"git_author": "me"}).author == "me"

    def test_author_must_be_a_string(self):
        with pytest.raises(ValueError, match="git_author"):
            get_commit_source({"git_author": 42})

    def test_unknown_vcs(self):
        with pytest.raises(ValueError, match="Unknown vcs"):
            get_commit_source({"vcs": "hg"})


def _git_available():
    try:
        subprocess.run(["git", "--version"], capture_output=True, check=True)
    except (FileNotFoundError, subprocess.CalledProcessError):
        return False
    return True
