"""Process runner - blocking subprocess wrapper for git and the text editor."""

import logging
import subprocess
from pathlib import Path

from gitjournal.errors import CommandFailedError, DecodeError, LaunchError

logger = logging.getLogger(__name__)


def run_program(
    program: str,
    args: list[str],
    cwd: Path | str | None = None,
    capture: bool = False,
) -> str:
    """
    Run an external program and wait for it to exit.

    Standard input and standard error are inherited so interactive editors and
    git credential prompts work. Standard output is inherited too unless
    ``capture`` is set, in which case it is returned as UTF-8 text.

    Args:
        program: Executable name or path.
        args: Arguments passed to the program, in order.
        cwd: Working directory for the child. ``None`` keeps the caller's.
        capture: Capture and decode standard output instead of inheriting it.

    Returns:
        Captured standard output, or an empty string when not capturing.

    Raises:
        LaunchError: The program could not be found or started.
        DecodeError: Captured output is not valid UTF-8.
        CommandFailedError: The program exited with a non-zero status.
    """
    cmd = [program, *args]
    logger.debug(f"Running {cmd} in {cwd or '.'}")
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            stdout=subprocess.PIPE if capture else None,
        )
    except FileNotFoundError:
        raise LaunchError(program, "not found")
    except PermissionError:
        raise LaunchError(program, "permission denied")
    except OSError as e:
        raise LaunchError(program, str(e))

    if proc.returncode != 0:
        logger.error(f"{program} exited with status {proc.returncode}")
        raise CommandFailedError(program, args, proc.returncode)

    if not capture:
        return ""
    try:
        return proc.stdout.decode("utf-8")
    except UnicodeDecodeError:
        raise DecodeError(program)
