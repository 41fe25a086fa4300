"""Session log manager.

Each operation loads the persisted SessionState, applies at most one
mutation and writes it back. Errors are raised before anything is saved,
so a failed command leaves the previous state untouched.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List

from jobclock import timefmt
from jobclock.errors import EmptyTaskName, NoActiveSession, SessionAlreadyActive
from jobclock.models import Event, SessionState


@dataclass
class SessionSummary:
    """What end() reports once the session is closed."""

    events: List[Event]
    started_at: datetime
    ended_at: datetime
    tasks: List[str]
    elapsed_seconds: int

    @property
    def hours(self):
        return timefmt.decimal_hours(self.elapsed_seconds)


@dataclass
class SessionStatus:
    events: List[Event]
    started_at: datetime
    now: datetime
    tasks: List[str]

    @property
    def elapsed_seconds(self):
        return timefmt.elapsed_seconds(self.started_at, self.now)


class SessionLog:
    """Start, tag, collect commits into and end the single work session.

    Usage:
        log = SessionLog(create_state_store(config), get_commit_source(config))
        log.start()
        log.task("review PR")
        summary = log.end()
    """

    def __init__(self, store, commit_source=None, clock=None):
        self.store = store
        self.commit_source = commit_source
        self.clock = clock or timefmt.now

    def _active_state(self):
        state = self.store.load()
        if not state.active:
            raise NoActiveSession()
        return state

    def start(self):
        state = self.store.load()
        if state.active:
            raise SessionAlreadyActive(state.started_at)
        state = SessionState.started(self.clock())
        self.store.save(state)
        return state.events[0]

    def task(self, name):
        name = (name or "").strip()
        state = self._active_state()
        if not name:
            raise EmptyTaskName()
        event = Event.job(self.clock(), name)
        state.events.append(event)
        self.store.save(state)
        return event

    def collect_commits(self):
        """Append a Commit event per commit made since the session began.

        Returns the appended events; an empty list means nothing was written.
        """
        state = self._active_state()
        if self.commit_source is None:
            raise ValueError("SessionLog was created without a commit source")

        commits = self.commit_source.list_commits(state.started_at, self.clock())
        events = [
            Event.commit(c.timestamp.replace(microsecond=0), c.subject)
            for c in sorted(commits, key=lambda c: c.timestamp)
        ]
        if events:
            state.events.extend(events)
            self.store.save(state)
        return events

    def end(self):
        state = self._active_state()
        ended = Event.end(self.clock())
        state.events.append(ended)
        # Everything the summary needs is computed before the state is cleared
        summary = SessionSummary(
            events=list(state.events),
            started_at=state.started_at,
            ended_at=ended.timestamp,
            tasks=state.tasks,
            elapsed_seconds=timefmt.elapsed_seconds(state.started_at, ended.timestamp),
        )
        self.store.clear()
        return summary

    def status(self):
        state = self._active_state()
        return SessionStatus(
            events=list(state.events),
            started_at=state.started_at,
            now=self.clock(),
            tasks=state.tasks,
        )
