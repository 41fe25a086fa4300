from abc import ABC, abstractmethod

from jobclock.models import SessionState


class StateStore(ABC):
    """Base interface for session state backends.

    Implementations: LocalStateStore (JSON file).
    """

    @abstractmethod
    def load(self):
        """Return the persisted SessionState. A store with nothing saved yields an inactive state."""
        pass

    @abstractmethod
    def save(self, state):
        """Persist the given SessionState, replacing what was there."""
        pass

    def clear(self):
        """Reset to the inactive, empty form."""
        self.save(SessionState.inactive())
