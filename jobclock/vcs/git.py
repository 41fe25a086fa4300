import subprocess
from datetime import datetime

from jobclock.errors import VcsUnavailable
from jobclock.vcs.base import Commit, CommitSource

# Committer time as unix seconds, a tab, then the subject line.
_LOG_FORMAT = "%ct%x09%s"


class GitCommitSource(CommitSource):

    def __init__(self, cwd=None, author=None):
        self.cwd = cwd
        self.author = author

    def _command(self, since, until):
        cmd = [
            "git", "log",
            f"--since={since.isoformat()}",
            f"--until={until.isoformat()}",
            f"--format={_LOG_FORMAT}",
        ]
        if self.author:
            cmd.append(f"--author={self.author}")
        return cmd

    def list_commits(self, since, until):
        try:
            result = subprocess.run(
                self._command(since, until),
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError:
            raise VcsUnavailable("git not found. Install git and try again.")
        except subprocess.CalledProcessError as e:
            if self._is_unborn():
                return []
            detail = (e.stderr or "").strip().splitlines()
            message = detail[0] if detail else f"git log exited with status {e.returncode}"
            raise VcsUnavailable(f"Cannot read commits: {message}")

        commits = [_parse_line(line) for line in result.stdout.splitlines() if line.strip()]
        # git log lists newest first
        commits.sort(key=lambda c: c.timestamp)
        return commits

    def _is_unborn(self):
        """True inside a repository whose current branch has no commits yet."""
        try:
            in_repo = subprocess.run(
                ["git", "rev-parse", "--git-dir"], cwd=self.cwd, capture_output=True, text=True,
            )
            if in_repo.returncode != 0:
                return False
            head = subprocess.run(
                ["git", "rev-parse", "--verify", "-q", "HEAD"], cwd=self.cwd, capture_output=True, text=True,
            )
        except (OSError, subprocess.CalledProcessError):
            return False
        return head.returncode != 0


def _parse_line(line):
    epoch, _, subject = line.partition("\t")
    try:
        timestamp = datetime.fromtimestamp(int(epoch)).astimezone()
    except ValueError:
        raise VcsUnavailable(f"Unexpected git log output: {line!r}")
    return Commit(timestamp, subject)
