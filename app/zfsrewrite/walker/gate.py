"""Resume gate.

Decides, for every file the engine emits, whether the external action
runs. A real run with a resume path starts in SKIPPING and switches to
ACTIVE exactly once, on the first file whose path is textually equal to
the resume path; that file is processed too. A dry run never forwards
anything and asks the walk to halt at the resume path.

The comparison is plain string equality against the path as the engine
produced it. A resume path must be given in exactly that form (same
root spelling, no normalization).
"""

import logging

from zfsrewrite.models.walk import GateDecision, GateMode

logger = logging.getLogger(__name__)


class ResumeGate:
    """Two-state gate over SKIPPING and ACTIVE.

    Args:
        resume_path: File to resume processing from. None processes
            every file.
        dry_run: If True, the gate never forwards files.
    """

    def __init__(self, resume_path: str | None = None, *, dry_run: bool = False) -> None:
        self._resume_path = resume_path
        self._dry_run = dry_run
        self._resume_found = False

        if resume_path is None or dry_run:
            self._mode = GateMode.ACTIVE
        else:
            self._mode = GateMode.SKIPPING

    @property
    def mode(self) -> GateMode:
        """Current gate mode."""
        return self._mode

    @property
    def dry_run(self) -> bool:
        """Check if the gate is in dry-run mode."""
        return self._dry_run

    @property
    def resume_path(self) -> str | None:
        """Configured resume path."""
        return self._resume_path

    @property
    def resume_found(self) -> bool:
        """Check if the resume path has been seen."""
        return self._resume_found

    @property
    def satisfied(self) -> bool:
        """Check if the resume condition holds.

        True when no resume path was configured or when it was seen.
        """
        return self._resume_path is None or self._resume_found

    def evaluate(self, path: str) -> GateDecision:
        """Decide what to do with one emitted file.

        Args:
            path: File path as emitted by the traversal engine.

        Returns:
            GateDecision for the file.
        """
        if self._dry_run:
            if self._resume_path is not None and path == self._resume_path:
                self._resume_found = True
                return GateDecision.HALT
            return GateDecision.PREVIEW

        if self._mode == GateMode.SKIPPING:
            if path != self._resume_path:
                return GateDecision.SKIP
            logger.info("Found resume point, resuming from %s", path)
            self._mode = GateMode.ACTIVE
            self._resume_found = True

        return GateDecision.FORWARD
