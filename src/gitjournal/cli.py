"""git-journal CLI - a personal daily journal via git."""

import logging
import sys

import click

from . import __version__
from .config import load_settings
from .errors import JournalError
from .workflows import (
    resolve_config,
    resolve_editor,
    save_journal,
    sync_journal,
    write_entry,
)

HELP_MESSAGE = """journal - a tool for having a personal daily journal via git
subcommands:
  save - commit and push changes to the journal repository
  sync - pulls changes from the journal repository
  write <text editor> - opens a file for today's journal with the text editor provided

when running for the first time, journal automatically initializes a data directory at `~/.local/share/journal/`."""


def _fail(e: JournalError) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


# Trailing tokens after a subcommand are ignored
LENIENT = {"ignore_unknown_options": True, "allow_extra_args": True}


@click.command("ignore", hidden=True, context_settings=LENIENT)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def _ignore(args):
    """Unknown subcommands do nothing."""
    pass


class JournalGroup(click.Group):
    """Command group that silently accepts unknown subcommands and options."""

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name)
        return command if command is not None else _ignore


@click.group(
    cls=JournalGroup,
    invoke_without_command=True,
    context_settings={"ignore_unknown_options": True},
)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Journal - a personal daily journal via git."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    try:
        settings = load_settings()
        config = resolve_config(settings)
    except JournalError as e:
        _fail(e)

    ctx.obj = {"settings": settings, "config": config}

    if ctx.invoked_subcommand is None:
        click.echo(HELP_MESSAGE)


@main.command(context_settings=LENIENT)
@click.argument("editor", required=False)
@click.pass_obj
def write(obj, editor: str | None):
    """Open today's journal entry in a text editor."""
    try:
        editor = resolve_editor(editor, obj["settings"])
        write_entry(obj["config"], editor)
    except JournalError as e:
        _fail(e)


@main.command(context_settings=LENIENT)
@click.pass_obj
def save(obj):
    """Commit and push changes to the journal repository."""
    try:
        save_journal(obj["config"])
    except JournalError as e:
        _fail(e)
    click.echo("Done.")


@main.command(context_settings=LENIENT)
@click.pass_obj
def sync(obj):
    """Pull changes from the journal repository."""
    try:
        sync_journal(obj["config"])
    except JournalError as e:
        _fail(e)
    click.echo("Done.")


if __name__ == "__main__":
    main()
