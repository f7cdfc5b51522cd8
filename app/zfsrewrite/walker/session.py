"""Traversal session.

A RewriteSession owns everything one run needs: the traversal engine,
the resume gate, the per-file action and the running summary. Nothing is
kept at module level, so independent sessions can coexist in one process.
"""

import logging

from zfsrewrite.actions.base import FileAction
from zfsrewrite.models.walk import (
    GateDecision,
    IssueKind,
    WalkConfig,
    WalkIssue,
    WalkSummary,
)
from zfsrewrite.walker.engine import TraversalEngine
from zfsrewrite.walker.errors import ActionError, ListError, StatError, WalkerError
from zfsrewrite.walker.gate import ResumeGate

logger = logging.getLogger(__name__)


class WalkReporter:
    """Receives progress notifications from a session.

    Every hook is a no-op; subclasses override what they need.
    """

    def entry_failed(self, error: WalkerError) -> None:
        """Called when a path could not be examined or listed."""

    def file_previewed(self, path: str) -> None:
        """Called for each file visited by a verbose dry run."""

    def resume_point_found(self, path: str, *, dry_run: bool) -> None:
        """Called when the resume path is reached."""

    def action_failed(self, error: ActionError) -> None:
        """Called when the action fails on a file."""


class RewriteSession:
    """One traversal run over the configured roots.

    Args:
        config: Run configuration.
        action: Action invoked for every file the gate forwards.
        reporter: Receives progress notifications. Defaults to a silent
            reporter.
        engine: Traversal engine to use. Built from the config if omitted.
    """

    def __init__(
        self,
        config: WalkConfig,
        action: FileAction,
        *,
        reporter: WalkReporter | None = None,
        engine: TraversalEngine | None = None,
    ) -> None:
        self._config = config
        self._action = action
        self._reporter = reporter or WalkReporter()
        self._engine = engine or TraversalEngine(
            config.one_file_system,
            sort_entries=config.sort_entries,
            on_error=self._record_entry_error,
        )
        self._gate = ResumeGate(config.resume_path, dry_run=config.dry_run)
        self._summary = WalkSummary(dry_run=config.dry_run, resume_path=config.resume_path)

    @property
    def config(self) -> WalkConfig:
        """Run configuration."""
        return self._config

    @property
    def gate(self) -> ResumeGate:
        """Resume gate of this session."""
        return self._gate

    @property
    def summary(self) -> WalkSummary:
        """Running summary, also valid after an interrupted run."""
        return self._summary

    def run(self) -> WalkSummary:
        """Walk all roots, gating and acting on every regular file.

        Per-entry and per-file errors are recorded and reported; they
        never abort the walk. A dry run stops as soon as it reaches the
        resume path.

        Returns:
            WalkSummary for the run. Call raise_for_status() on it to
            turn a missed resume path into ResumeNotFoundError.
        """
        logger.info(
            "Starting walk of %d root(s) (dry_run=%s, resume=%s, one_file_system=%s)",
            len(self._config.roots),
            self._config.dry_run,
            self._config.resume_path,
            self._config.one_file_system,
        )

        walk = self._engine.walk(self._config.roots)
        try:
            for path in walk:
                if self._handle_file(path) == GateDecision.HALT:
                    self._summary.halted = True
                    break
        finally:
            walk.close()

        self._summary.resume_found = self._gate.resume_found
        logger.info(
            "Walk finished: %d seen, %d skipped, %d processed, %d failed",
            self._summary.files_seen,
            self._summary.files_skipped,
            self._summary.files_processed,
            self._summary.files_failed,
        )
        return self._summary

    def _handle_file(self, path: str) -> GateDecision:
        """Pass one emitted file through the gate and act on the decision."""
        self._summary.files_seen += 1
        was_found = self._gate.resume_found
        decision = self._gate.evaluate(path)

        if self._gate.resume_found and not was_found:
            self._summary.resume_found = True
            self._reporter.resume_point_found(path, dry_run=self._config.dry_run)

        if decision == GateDecision.SKIP:
            logger.debug("Skipping before resume point: %s", path)
            self._summary.files_skipped += 1
        elif decision == GateDecision.FORWARD:
            self._forward(path)
        elif self._config.verbose:
            # PREVIEW or HALT
            self._reporter.file_previewed(path)

        return decision

    def _forward(self, path: str) -> None:
        """Hand one file to the action and record the outcome."""
        self._summary.files_processed += 1
        self._summary.last_path = path

        result = self._action.perform(path)
        if result.success:
            return

        error = ActionError(result)
        logger.warning("%s", error)
        self._summary.files_failed += 1
        self._summary.issues.append(
            WalkIssue(kind=IssueKind.ACTION, path=path, message=str(error))
        )
        self._reporter.action_failed(error)

    def _record_entry_error(self, error: WalkerError) -> None:
        """Record a StatError or ListError raised during the walk."""
        kind = IssueKind.LIST if isinstance(error, ListError) else IssueKind.STAT
        path = error.path if isinstance(error, (StatError, ListError)) else ""
        self._summary.issues.append(WalkIssue(kind=kind, path=path, message=str(error)))
        self._reporter.entry_failed(error)
