"""Error taxonomy for the traversal.

StatError, ListError and ActionError are recovered locally and never
abort a walk. ResumeNotFoundError is terminal and only raised once a
complete walk has finished without seeing the resume path.
"""

from zfsrewrite.models.action import ActionResult


class WalkerError(Exception):
    """Base exception for traversal errors."""


class StatError(WalkerError):
    """Raised when a path cannot be examined (lstat failed).

    Attributes:
        path: Path that could not be examined.
        cause: Underlying OS error.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to lstat {path}: {cause.strerror or cause}")


class ListError(WalkerError):
    """Raised when a directory cannot be listed.

    Attributes:
        path: Directory that could not be read.
        cause: Underlying OS error.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to open directory {path}: {cause.strerror or cause}")


class ActionError(WalkerError):
    """Raised when the external action fails on a file.

    Attributes:
        result: The failed action result.
    """

    def __init__(self, result: ActionResult) -> None:
        self.result = result
        self.path = result.path
        detail = result.error or f"exit code {result.returncode}"
        super().__init__(f"Command failed for: {result.path} ({detail})")


class ResumeNotFoundError(WalkerError):
    """Raised when a finished walk never visited the resume path.

    Attributes:
        resume_path: The resume path that was never matched.
        dry_run: Whether the walk was a dry run.
    """

    def __init__(self, resume_path: str, *, dry_run: bool = False) -> None:
        self.resume_path = resume_path
        self.dry_run = dry_run
        if dry_run:
            msg = f"Dry run finished but resume file '{resume_path}' was not found."
        else:
            msg = (
                f"Real run finished but resume file '{resume_path}' was not found. "
                "No files were processed."
            )
        super().__init__(msg)
