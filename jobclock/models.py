"""Session timeline data model.

A SessionState is the whole persisted state of the tool: whether a session
is open and the ordered list of events recorded in it. It is serialised as

    {"active": true,
     "events": [{"timestamp": "2024-03-13T20:00:00+01:00", "label": "Begin session"}]}
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

BEGIN_LABEL = "Begin session"
END_LABEL = "End session"
JOB_PREFIX = "Job: "
COMMIT_PREFIX = "Commit: "


@dataclass(frozen=True)
class Event:
    timestamp: datetime
    label: str

    @classmethod
    def begin(cls, timestamp):
        return cls(timestamp, BEGIN_LABEL)

    @classmethod
    def end(cls, timestamp):
        return cls(timestamp, END_LABEL)

    @classmethod
    def job(cls, timestamp, name):
        return cls(timestamp, JOB_PREFIX + name)

    @classmethod
    def commit(cls, timestamp, subject):
        return cls(timestamp, COMMIT_PREFIX + subject)

    def to_dict(self):
        return {
            "timestamp": self.timestamp.isoformat(timespec="seconds"),
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, data):
        """Raises ValueError/KeyError/TypeError on malformed input."""
        label = data["label"]
        if not isinstance(label, str):
            raise TypeError(f"event label must be a string, got {type(label).__name__}")
        timestamp = datetime.fromisoformat(data["timestamp"])
        if timestamp.tzinfo is None:
            raise ValueError(f"timestamp {data['timestamp']!r} has no UTC offset")
        return cls(timestamp.replace(microsecond=0), label)


@dataclass
class SessionState:
    active: bool = False
    events: List[Event] = field(default_factory=list)

    @classmethod
    def inactive(cls):
        return cls(active=False, events=[])

    @classmethod
    def started(cls, timestamp):
        return cls(active=True, events=[Event.begin(timestamp)])

    @property
    def started_at(self) -> Optional[datetime]:
        for event in self.events:
            if event.label == BEGIN_LABEL:
                return event.timestamp
        return None

    @property
    def tasks(self) -> List[str]:
        return [e.label[len(JOB_PREFIX):] for e in self.events if e.label.startswith(JOB_PREFIX)]

    def is_well_formed(self):
        """An active session must open with a Begin session event."""
        if not self.active:
            return True
        return bool(self.events) and self.events[0].label == BEGIN_LABEL

    def to_dict(self):
        return {
            "active": self.active,
            "events": [e.to_dict() for e in self.events],
        }

    @classmethod
    def from_dict(cls, data):
        """Raises ValueError/KeyError/TypeError on malformed input."""
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        active = data["active"]
        if not isinstance(active, bool):
            raise TypeError("'active' must be true or false")
        raw_events = data["events"]
        if not isinstance(raw_events, list):
            raise TypeError("'events' must be a list")
        return cls(active=active, events=[Event.from_dict(e) for e in raw_events])
