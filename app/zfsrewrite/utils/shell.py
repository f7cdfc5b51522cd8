"""Shell execution utilities.

Provides subprocess execution with proper error handling.
"""

import os
import shutil
import subprocess


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name (or path) to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def run_interactive(
    args: list[str],
    *,
    timeout: float | None = None,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Execute a command, inheriting the terminal.

    Does NOT capture stdout/stderr, so the command's own output
    (e.g. ``zfs rewrite -v``) reaches the user directly. No shell is involved.
    Arguments are passed as-is.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait. None waits forever.
        cwd: Working directory for the command.
        env: Additional environment variables (merged with current env).

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        subprocess.TimeoutExpired: If command exceeds timeout.
        OSError: If command cannot be executed.
    """
    full_env = {**os.environ, **(env or {})}
    result = subprocess.run(
        args,
        check=False,
        timeout=timeout,
        cwd=cwd,
        env=full_env,
    )
    return result.returncode
