"""Workflow layer between the CLI and the journal repository.

``resolve_config`` runs before every command; ``write_entry``,
``save_journal`` and ``sync_journal`` are the three commands.
"""

import logging
import os
import shlex
from datetime import date, datetime

from .adapters.console_prompt import ConsolePrompt
from .adapters.git_cli import GitRepository
from .adapters.process import run_program
from .config import RuntimeConfig, Settings, load_settings
from .core.entries import date_key
from .errors import ConfigError, EditorLaunchError, LaunchError
from .ports import RemoteURLSource, Repository
from .storage import REMOTE_NAME, ensure_initialized, journal_dir

logger = logging.getLogger(__name__)

MAIN_BRANCH = "main"
COMMIT_MESSAGE = "journal saved on {date_key}"


def today(settings: Settings) -> date:
    """Current date in the configured timezone."""
    return datetime.now(settings.zone()).date()


def resolve_config(
    settings: Settings | None = None,
    remote_source: RemoteURLSource | None = None,
    day: date | None = None,
) -> RuntimeConfig:
    """Bootstrap the journal directory if needed and build the runtime config."""
    settings = settings if settings is not None else load_settings()
    remote_source = remote_source if remote_source is not None else ConsolePrompt()

    path, remote_url = ensure_initialized(journal_dir(), remote_source)
    day = day if day is not None else today(settings)

    return RuntimeConfig(
        storage_path=path,
        remote_url=remote_url,
        date_key=date_key(day),
    )


def resolve_editor(editor: str | None, settings: Settings) -> str:
    """Pick the editor: argument, then EDITOR setting, then $VISUAL/$EDITOR."""
    for candidate in (
        editor,
        settings.editor,
        os.environ.get("VISUAL"),
        os.environ.get("EDITOR"),
    ):
        if candidate:
            return candidate
    raise ConfigError(
        "no text editor given; pass one as the second command argument "
        "or set EDITOR in journal.conf"
    )


def write_entry(config: RuntimeConfig, editor: str) -> None:
    """Open today's entry in the editor and wait for it to exit."""
    path = config.entry_path
    logger.info(f"Opening {path} with {editor}")
    try:
        # Editor settings may carry flags, e.g. "code --wait"
        program, *extra = shlex.split(editor)
    except ValueError:
        raise EditorLaunchError(editor)
    try:
        run_program(program, [*extra, str(path)])
    except LaunchError:
        raise EditorLaunchError(editor)


def _repository(config: RuntimeConfig, repository: Repository | None) -> Repository:
    return repository if repository is not None else GitRepository(config.storage_path)


def save_journal(config: RuntimeConfig, repository: Repository | None = None) -> None:
    """Stage, commit, rename the branch to main and push it to origin."""
    repo = _repository(config, repository)
    repo.stage_all()
    repo.commit(COMMIT_MESSAGE.format(date_key=config.date_key))
    repo.rename_branch(MAIN_BRANCH)
    repo.push(REMOTE_NAME, MAIN_BRANCH)


def sync_journal(config: RuntimeConfig, repository: Repository | None = None) -> None:
    """Pull main from origin."""
    repo = _repository(config, repository)
    repo.pull(REMOTE_NAME, MAIN_BRANCH)
