"""Command audit logging.

Appends structured JSON entries to <data dir>/logs.jsonl.
Each entry records one command (start, task, git, end) with timestamp,
working directory and the command's result. The session timeline itself
is not archived here.
"""

import json
from datetime import datetime

from jobclock.config import data_dir
from jobclock.errors import PersistenceIOError

LOGS_FILENAME = "logs.jsonl"


def logs_file():
    return data_dir() / LOGS_FILENAME


def write_log(entry):
    """Append a command log entry."""
    path = logs_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    entry["timestamp"] = datetime.now().isoformat(timespec="seconds")
    with open(path, "a") as f:
        f.write(json.dumps(entry) + "\n")


def read_logs(limit=None):
    """Return parsed log entries, oldest first. Malformed lines are skipped."""
    path = logs_file()
    if not path.exists():
        return []

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PersistenceIOError(path, e.strerror or str(e))
    except UnicodeDecodeError:
        raise PersistenceIOError(path, "not UTF-8 text")

    entries = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            entry = json.loads(line)
        except json.JSONDecodeError:
            continue
        if isinstance(entry, dict):
            entries.append(entry)

    if limit is not None:
        return entries[-limit:] if limit > 0 else []
    return entries
