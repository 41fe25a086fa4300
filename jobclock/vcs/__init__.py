from jobclock.vcs.base import Commit, CommitSource
from jobclock.vcs.git import GitCommitSource

SOURCES = {
    "git": GitCommitSource,
}


def get_commit_source(config=None, cwd=None):
    """Create a commit source from config.

    Config keys:
        vcs: "git" (default)
        git_author: only list commits whose author matches this pattern
    """
    config = config or {}
    name = config.get("vcs", "git")
    if name not in SOURCES:
        raise ValueError(f"Unknown vcs: {name}. Available: {list(SOURCES.keys())}")
    author = config.get("git_author")
    if author is not None and not isinstance(author, str):
        raise ValueError(f"git_author must be a string, got {author!r}")
    return SOURCES[name](cwd=cwd, author=author)


__all__ = ["Commit", "CommitSource", "GitCommitSource", "get_commit_source"]
