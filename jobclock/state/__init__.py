from pathlib import Path

from jobclock.config import data_dir
from jobclock.state.local import LocalStateStore

STATE_FILENAME = "session.json"


def create_state_store(config=None):
    """Create a state store from config.

    Config keys:
        state_backend: "local" (default)
        state_file: overrides <data dir>/session.json
    """
    config = config or {}
    backend = config.get("state_backend", "local")

    if backend == "local":
        state_file = config.get("state_file")
        if state_file is not None and not isinstance(state_file, str):
            raise ValueError(f"state_file must be a path string, got {state_file!r}")
        path = Path(state_file).expanduser() if state_file else data_dir() / STATE_FILENAME
        return LocalStateStore(path)

    raise ValueError(f"Unknown state backend: {backend!r}. Use 'local'.")
