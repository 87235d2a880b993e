"""Journal storage - the git working tree that holds every entry.

Guarantees that a remote-linked repository exists at a fixed location before
any command runs. The first run creates and links it; every later run only
reads the remote URL back.
"""

import logging
import os
import shutil
from pathlib import Path

import click

from .adapters.git_cli import GitRepository
from .config import JOURNAL_DATA_PATH, home_dir
from .errors import ConfigError, StorageError
from .ports import RemoteURLSource, Repository

logger = logging.getLogger(__name__)

REMOTE_NAME = "origin"


def journal_dir(environ: dict | None = None) -> Path:
    """Resolve the journal directory: $JOURNAL_DIR or ~/.local/share/journal."""
    env = os.environ if environ is None else environ
    if env.get("JOURNAL_DIR"):
        return Path(env["JOURNAL_DIR"]).expanduser()
    return home_dir(env) / JOURNAL_DATA_PATH


def ensure_initialized(
    path: Path,
    remote_source: RemoteURLSource,
    repository: Repository | None = None,
) -> tuple[Path, str]:
    """
    Make sure a remote-linked repository exists at ``path``.

    Args:
        path: Journal directory.
        remote_source: Asked for the remote URL on first run only.
        repository: Repository to operate on; defaults to git at ``path``.

    Returns:
        ``(path, remote_url)`` where the URL is read back from the repository.
    """
    repo = repository if repository is not None else GitRepository(path)

    if not path.exists():
        click.echo(f"Initializing a directory for storing journals in {path}...")
        logger.info(f"Creating journal directory {path}")
        try:
            path.mkdir(parents=True)
        except OSError as e:
            raise StorageError(f"could not create {path}: {e}")

        try:
            repo.init()

            url = remote_source.remote_url().strip()
            if not url:
                raise ConfigError("a git remote URL is required to initialize the journal")
            repo.add_remote(REMOTE_NAME, url)
        except BaseException:
            # A half-initialized directory would be taken for a finished one next run
            logger.warning(f"Initialization failed, removing {path}")
            shutil.rmtree(path, ignore_errors=True)
            raise
        logger.info(f"Linked {path} to {url}")

        click.echo("Journal directory has been initialized.")
    elif not path.is_dir():
        raise StorageError(f"{path} exists but is not a directory")

    return path, repo.remote_url(REMOTE_NAME)
