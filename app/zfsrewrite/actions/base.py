"""Abstract base class for per-file actions.

This module defines the FileAction interface the traversal session calls
for every file that passes the resume gate.
"""

from abc import ABC, abstractmethod

from zfsrewrite.models.action import ActionResult


class FileAction(ABC):
    """Abstract base class for all per-file actions.

    An action receives one file path at a time and reports success or
    failure. The session never inspects anything beyond the result.

    Example:
        >>> action = ZfsRewriteAction(RewriteOptions(verbose=True))
        >>> if action.is_available():
        ...     result = action.perform("/tank/data/file.bin")
        ...     print(result.success)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a short name for messages and logs."""

    @abstractmethod
    def perform(self, path: str) -> ActionResult:
        """Run the action on a single file.

        Implementations report failures through the returned result
        instead of raising.

        Args:
            path: Path of the regular file to operate on.

        Returns:
            ActionResult describing the outcome.
        """

    def is_available(self) -> bool:
        """Check if the action can run on this system.

        Returns:
            True by default.
        """
        return True
