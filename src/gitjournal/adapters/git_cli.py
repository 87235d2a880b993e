"""git adapter - subprocess wrapper for the journal repository."""

import logging
from pathlib import Path

from gitjournal.adapters.process import run_program

logger = logging.getLogger(__name__)


class GitRepository:
    """
    git subprocess adapter.

    Implements Repository protocol. Every command runs with the journal
    directory as its working directory; the caller's own working directory
    is never changed.
    """

    def __init__(self, path: Path | str, git: str = "git"):
        self.path = Path(path)
        self.git = git

    def _run(self, *args: str, capture: bool = False) -> str:
        return run_program(self.git, list(args), cwd=self.path, capture=capture)

    def init(self) -> None:
        self._run("init")

    def add_remote(self, name: str, url: str) -> None:
        self._run("remote", "add", name, url)

    def remote_url(self, name: str) -> str:
        """Read the remote URL back from the repository's own config."""
        return self._run("remote", "get-url", name, capture=True).strip()

    def stage_all(self) -> None:
        self._run("add", ".")

    def commit(self, message: str) -> None:
        self._run("commit", "-m", message)

    def rename_branch(self, name: str) -> None:
        self._run("branch", "-M", name)

    def push(self, remote: str, branch: str) -> None:
        logger.info(f"Pushing {branch} to {remote}")
        self._run("push", remote, branch)

    def pull(self, remote: str, branch: str) -> None:
        logger.info(f"Pulling {branch} from {remote}")
        self._run("pull", remote, branch)
