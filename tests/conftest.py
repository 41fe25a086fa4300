from datetime import datetime, timedelta, timezone

import pytest

from jobclock.state.local import LocalStateStore
from jobclock.vcs.base import CommitSource

CET = timezone(timedelta(hours=1))


def at(hour, minute=0, second=0):
    return datetime(2024, 3, 13, hour, minute, second, tzinfo=CET)


class SteppingClock:
    """Returns the queued times in order, then keeps returning the last one."""

    def __init__(self, *times):
        self.times = list(times)

    def __call__(self):
        if len(self.times) > 1:
            return self.times.pop(0)
        return self.times[0]


class FakeCommitSource(CommitSource):

    def __init__(self, commits=None, error=None):
        self.commits = commits or []
        self.error = error
        self.calls = []

    def list_commits(self, since, until):
        self.calls.append((since, until))
        if self.error:
            raise self.error
        return list(self.commits)


@pytest.fixture
def jobclock_home(tmp_path, monkeypatch):
    home = tmp_path / "jobclock-home"
    monkeypatch.setenv("JOBCLOCK_HOME", str(home))
    return home


@pytest.fixture
def store(tmp_path):
    return LocalStateStore(tmp_path / "session.json")
