"""Version-control repository interface."""

from typing import Protocol


class Repository(Protocol):
    """Interface for the journal's version-controlled working tree."""

    def init(self) -> None:
        """Create a new empty repository."""
        ...

    def add_remote(self, name: str, url: str) -> None:
        """Register a named remote."""
        ...

    def remote_url(self, name: str) -> str:
        """Return the URL configured for a named remote."""
        ...

    def stage_all(self) -> None:
        """Stage every change in the working tree."""
        ...

    def commit(self, message: str) -> None:
        """Commit staged changes."""
        ...

    def rename_branch(self, name: str) -> None:
        """Rename the current branch, replacing any branch with that name."""
        ...

    def push(self, remote: str, branch: str) -> None:
        """Push a branch to a remote."""
        ...

    def pull(self, remote: str, branch: str) -> None:
        """Pull a branch from a remote into the current branch."""
        ...
