"""Remote URL source interface."""

from typing import Protocol


class RemoteURLSource(Protocol):
    """Something that can supply the remote URL during first-run setup."""

    def remote_url(self) -> str:
        """Return the URL of the repository the journal is pushed to."""
        ...
