from abc import ABC, abstractmethod
from collections import namedtuple

Commit = namedtuple("Commit", ["timestamp", "subject"])


class CommitSource(ABC):
    """Base interface for version-control commit listing.

    Implementations raise VcsUnavailable when the repository can't be queried.
    """

    @abstractmethod
    def list_commits(self, since, until):
        """Return Commits made in [since, until], oldest first."""
        pass
