"""Errors raised by git-journal."""


class JournalError(Exception):
    """Base class for all journal failures reported to the user."""


class ConfigError(JournalError):
    """Configuration could not be resolved (home directory, editor, remote URL)."""


class StorageError(JournalError):
    """The journal directory could not be created or accessed."""


class LaunchError(JournalError):
    """An external program could not be started."""

    def __init__(self, program: str, reason: str = ""):
        self.program = program
        self.reason = reason
        message = f"could not run '{program}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DecodeError(JournalError):
    """An external program produced output that is not valid UTF-8."""

    def __init__(self, program: str):
        self.program = program
        super().__init__(f"output of '{program}' is not valid UTF-8")


class CommandFailedError(JournalError):
    """An external program exited with a non-zero status."""

    def __init__(self, program: str, args: list[str], returncode: int):
        self.program = program
        self.args_list = list(args)
        self.returncode = returncode
        command = " ".join([program, *args])
        super().__init__(f"'{command}' exited with status {returncode}")


class EditorLaunchError(JournalError):
    """The text editor for ``write`` could not be started."""

    def __init__(self, editor: str):
        self.editor = editor
        super().__init__(
            f'Failed running text editor "{editor}". '
            "Pass a valid text editor as the second command argument."
        )
