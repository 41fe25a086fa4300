import json
from pathlib import Path

from jobclock.errors import PersistenceIOError
from jobclock.models import SessionState
from jobclock.state.base import StateStore


class LocalStateStore(StateStore):
    """Session state kept in a single JSON file.

    Writes go to a sibling .tmp file that is then renamed over the target,
    so a failed write leaves the previous state in place.
    """

    def __init__(self, path):
        self.path = Path(path)

    def load(self):
        if not self.path.exists():
            return SessionState.inactive()

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceIOError(self.path, e.strerror or str(e))
        except UnicodeDecodeError:
            raise PersistenceIOError(self.path, "not UTF-8 text")

        try:
            state = SessionState.from_dict(json.loads(text))
        except json.JSONDecodeError as e:
            raise PersistenceIOError(self.path, f"invalid JSON ({e})")
        except KeyError as e:
            raise PersistenceIOError(self.path, f"missing key {e}")
        except (TypeError, ValueError) as e:
            raise PersistenceIOError(self.path, str(e))

        if not state.is_well_formed():
            raise PersistenceIOError(self.path, "active session does not begin with 'Begin session'")
        return state

    def save(self, state):
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        data = json.dumps(state.to_dict(), indent=2) + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(data, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError:
                pass
            raise PersistenceIOError(self.path, e.strerror or str(e))
