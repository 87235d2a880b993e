"""Remote URL sources - interactive console prompt and fixed value."""

import click

REMOTE_PROMPT = "Enter a git remote URL for the repository to store your journals in"


class ConsolePrompt:
    """
    Interactive remote URL source.

    Implements RemoteURLSource protocol. Blocks on standard input until the
    user enters a URL.
    """

    def __init__(self, message: str = REMOTE_PROMPT):
        self.message = message

    def remote_url(self) -> str:
        return click.prompt(self.message, type=str).strip()


class StaticRemoteSource:
    """Remote URL source returning a value known up front."""

    def __init__(self, url: str):
        self.url = url

    def remote_url(self) -> str:
        return self.url
