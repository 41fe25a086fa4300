class JobclockError(Exception):
    """Base for every error the CLI reports as a one-line message."""


class SessionAlreadyActive(JobclockError):
    def __init__(self, started_at=None):
        self.started_at = started_at
        super().__init__("Job session already started")


class NoActiveSession(JobclockError):
    def __init__(self):
        super().__init__("No job session started")


class EmptyTaskName(JobclockError):
    def __init__(self):
        super().__init__("Task name is required")


class VcsUnavailable(JobclockError):
    """The commit source could not be queried (not a repository, tool missing)."""


class PersistenceIOError(JobclockError):
    """The state file could not be read, parsed or written."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path} is unusable: {reason}")
