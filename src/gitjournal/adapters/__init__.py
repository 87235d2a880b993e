"""Adapters - I/O implementations of ports."""

from .process import run_program
from .git_cli import GitRepository
from .console_prompt import ConsolePrompt, StaticRemoteSource

__all__ = [
    "run_program",
    "GitRepository",
    "ConsolePrompt",
    "StaticRemoteSource",
]
