"""ZFS rewrite action implementation.

Runs ``zfs rewrite`` on a single file. Recursion and mount-point handling
belong to the traversal, so ``-r`` and ``-x`` are never passed on.
"""

import logging
import subprocess

from zfsrewrite.actions.base import FileAction
from zfsrewrite.models.action import ActionResult, RewriteOptions
from zfsrewrite.utils.shell import command_exists, run_interactive

logger = logging.getLogger(__name__)


class ZfsRewriteAction(FileAction):
    """Action running ``zfs rewrite [options] -- <path>``.

    The command inherits the terminal, so ``-v`` output from zfs goes
    straight to the user.

    Args:
        options: Options forwarded to zfs rewrite.
        command: zfs executable to run.
        timeout: Per-file timeout in seconds. None (the default) waits
            as long as the command takes.
    """

    def __init__(
        self,
        options: RewriteOptions | None = None,
        *,
        command: str = "zfs",
        timeout: float | None = None,
    ) -> None:
        self._options = options or RewriteOptions()
        self._command = command
        self._timeout = timeout

    @property
    def name(self) -> str:
        """Return the command name."""
        return f"{self._command} rewrite"

    @property
    def options(self) -> RewriteOptions:
        """Options forwarded to zfs rewrite."""
        return self._options

    def is_available(self) -> bool:
        """Check if the zfs command is available."""
        return command_exists(self._command)

    def build_args(self, path: str) -> list[str]:
        """Build the argument list for one file.

        Args:
            path: File to rewrite.

        Returns:
            Full command line as a list.
        """
        return [self._command, "rewrite", *self._options.to_args(), "--", path]

    def perform(self, path: str) -> ActionResult:
        """Rewrite a single file.

        Args:
            path: File to rewrite.

        Returns:
            ActionResult with the command's exit code.
        """
        args = self.build_args(path)
        logger.debug("Executing: %s", " ".join(args))

        try:
            returncode = run_interactive(args, timeout=self._timeout)
        except subprocess.TimeoutExpired:
            return ActionResult(
                path=path,
                success=False,
                error=f"Timed out after {self._timeout} seconds",
            )
        except OSError as e:
            return ActionResult(path=path, success=False, error=str(e))

        if returncode != 0:
            return ActionResult(
                path=path,
                success=False,
                returncode=returncode,
                error=f"Exit code: {returncode}",
            )
        return ActionResult(path=path, success=True, returncode=returncode)
