import json
import os
from pathlib import Path

HOME_ENV = "JOBCLOCK_HOME"
CONFIG_FILENAME = "config.json"

DEFAULT_CONFIG = {
    "state_backend": "local",
    "vcs": "git",
    # Optional: "state_file": "/path/to/session.json", "git_author": "me@example.com"
}

# Keys whose values are always saved as plain strings
STRING_KEYS = {"state_backend", "vcs", "state_file", "git_author"}


def data_dir():
    """Return the jobclock data dir. Honors JOBCLOCK_HOME, defaults to ~/.jobclock/."""
    env = os.environ.get(HOME_ENV)
    if env:
        return Path(env)
    return Path.home() / ".jobclock"


def global_config_file():
    return data_dir() / CONFIG_FILENAME


def load_global_config():
    """Load <data dir>/config.json. Missing file means no overrides."""
    config_path = global_config_file()
    if not config_path.exists():
        return {}
    try:
        raw = json.loads(config_path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {config_path}: {e}")
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {config_path}: expected a JSON object")
    return raw


def save_global_config(updates):
    """Merge updates into <data dir>/config.json."""
    existing = load_global_config()
    existing.update(updates)
    config_path = global_config_file()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(existing, indent=2) + "\n")
    return config_path


def load_config():
    # Merge order: defaults → global config
    return {**DEFAULT_CONFIG, **load_global_config()}
