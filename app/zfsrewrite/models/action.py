"""Action models for per-file operations.

This module defines the pass-through options handed to the external
rewrite command and the result of running it on a single file.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RewriteOptions:
    """Options forwarded verbatim to ``zfs rewrite``.

    The traversal never interprets these; they only shape the command line
    of the external action.

    Attributes:
        length: Rewrite at most this number of bytes (``-l``).
        offset: Start at this offset in bytes (``-o``).
        verbose: Print names of rewritten files (``-v``).
    """

    length: int | None = None
    offset: int | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate option values after initialization."""
        if self.length is not None and self.length < 0:
            msg = f"Length must be non-negative, got {self.length}"
            raise ValueError(msg)
        if self.offset is not None and self.offset < 0:
            msg = f"Offset must be non-negative, got {self.offset}"
            raise ValueError(msg)

    def to_args(self) -> list[str]:
        """Render the options as command-line arguments.

        Returns:
            Argument list, e.g. ``["-l", "4096", "-v"]``.
        """
        args: list[str] = []
        if self.length is not None:
            args.extend(["-l", str(self.length)])
        if self.offset is not None:
            args.extend(["-o", str(self.offset)])
        if self.verbose:
            args.append("-v")
        return args


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of running the external action on one file.

    Attributes:
        path: File the action was run on.
        success: Whether the action completed successfully.
        returncode: Exit code of the command, None if it never ran.
        error: Error message if the action failed.
    """

    path: str
    success: bool
    returncode: int | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the action failed."""
        return not self.success
