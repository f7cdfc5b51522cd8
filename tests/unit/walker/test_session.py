"""Unit tests for RewriteSession.

Covers the resume, dry-run and missing-resume properties end to end
with a recording action in place of zfs rewrite.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from zfsrewrite.models.walk import IssueKind, WalkConfig
from zfsrewrite.walker.engine import TraversalEngine
from zfsrewrite.walker.errors import ActionError, ResumeNotFoundError, WalkerError
from zfsrewrite.walker.session import RewriteSession, WalkReporter


class CollectingReporter(WalkReporter):
    """Reporter that keeps every notification."""

    def __init__(self) -> None:
        self.entry_errors: list[WalkerError] = []
        self.previewed: list[str] = []
        self.found: list[tuple[str, bool]] = []
        self.action_errors: list[ActionError] = []

    def entry_failed(self, error: WalkerError) -> None:
        self.entry_errors.append(error)

    def file_previewed(self, path: str) -> None:
        self.previewed.append(path)

    def resume_point_found(self, path: str, *, dry_run: bool) -> None:
        self.found.append((path, dry_run))

    def action_failed(self, error: ActionError) -> None:
        self.action_errors.append(error)


def _visit_order(root: Path) -> list[str]:
    """Traversal order the session will see for root."""
    return list(TraversalEngine().walk([str(root)]))


class TestFullRun:
    """Tests for runs without a resume path."""

    def test_every_file_forwarded_once(self, sample_tree: Path, recording_action) -> None:
        """Each regular file reaches the action exactly once, in walk order."""
        config = WalkConfig(roots=[str(sample_tree)])

        summary = RewriteSession(config, recording_action).run()

        assert recording_action.calls == _visit_order(sample_tree)
        assert summary.files_seen == 5
        assert summary.files_processed == 5
        assert summary.files_skipped == 0
        assert summary.success is True
        assert summary.last_path == recording_action.calls[-1]

    def test_independent_sessions(self, sample_tree: Path, action_factory: Callable) -> None:
        """Two sessions in one process do not share state."""
        first_action = action_factory()
        second_action = action_factory()
        order = _visit_order(sample_tree)

        RewriteSession(
            WalkConfig(roots=[str(sample_tree)], resume_path=order[3]), first_action
        ).run()
        RewriteSession(WalkConfig(roots=[str(sample_tree)]), second_action).run()

        assert first_action.calls == order[3:]
        assert second_action.calls == order


class TestResume:
    """Tests for resuming from a file."""

    @pytest.mark.parametrize("index", [0, 2, 4])
    def test_forwards_from_resume_index(
        self, sample_tree: Path, recording_action, index: int
    ) -> None:
        """Resuming at file k forwards exactly files k..N-1."""
        order = _visit_order(sample_tree)
        config = WalkConfig(roots=[str(sample_tree)], resume_path=order[index])

        summary = RewriteSession(config, recording_action).run()

        assert recording_action.calls == order[index:]
        assert summary.files_skipped == index
        assert summary.resume_found is True
        assert summary.success is True
        summary.raise_for_status()

    def test_resume_reported(self, sample_tree: Path, recording_action) -> None:
        """The reporter hears about the resume point once."""
        order = _visit_order(sample_tree)
        reporter = CollectingReporter()
        config = WalkConfig(roots=[str(sample_tree)], resume_path=order[1])

        RewriteSession(config, recording_action, reporter=reporter).run()

        assert reporter.found == [(order[1], False)]

    def test_missing_resume_path_processes_nothing(
        self, sample_tree: Path, recording_action
    ) -> None:
        """A resume path never visited means zero actions and a failed run."""
        config = WalkConfig(
            roots=[str(sample_tree)], resume_path=f"{sample_tree}/not-there"
        )

        summary = RewriteSession(config, recording_action).run()

        assert recording_action.calls == []
        assert summary.files_seen == 5
        assert summary.files_skipped == 5
        assert summary.success is False
        with pytest.raises(ResumeNotFoundError) as exc_info:
            summary.raise_for_status()
        assert exc_info.value.dry_run is False
        assert "No files were processed" in str(exc_info.value)

    def test_resume_path_must_match_textually(
        self, sample_tree: Path, recording_action
    ) -> None:
        """A differently spelled path to the same file is not a match."""
        config = WalkConfig(
            roots=[str(sample_tree)], resume_path=f"{sample_tree}/./a.txt"
        )

        summary = RewriteSession(config, recording_action).run()

        assert summary.success is False
        assert recording_action.calls == []


class TestDryRun:
    """Tests for dry runs."""

    def test_never_forwards(self, sample_tree: Path, recording_action) -> None:
        """A dry run without resume path visits everything and acts on nothing."""
        config = WalkConfig(roots=[str(sample_tree)], dry_run=True)

        summary = RewriteSession(config, recording_action).run()

        assert recording_action.calls == []
        assert summary.files_seen == 5
        assert summary.halted is False
        assert summary.success is True

    def test_halts_at_resume_path(self, sample_tree: Path, recording_action) -> None:
        """A dry run stops at the resume path, leaving later files unvisited."""
        order = _visit_order(sample_tree)
        reporter = CollectingReporter()
        config = WalkConfig(
            roots=[str(sample_tree)], resume_path=order[2], dry_run=True, verbose=True
        )

        summary = RewriteSession(config, recording_action, reporter=reporter).run()

        assert recording_action.calls == []
        assert reporter.previewed == order[:3]
        assert reporter.found == [(order[2], True)]
        assert summary.files_seen == 3
        assert summary.halted is True
        assert summary.success is True

    def test_quiet_dry_run_reports_no_paths(self, sample_tree: Path, recording_action) -> None:
        """Paths are only reported in verbose mode."""
        reporter = CollectingReporter()
        config = WalkConfig(roots=[str(sample_tree)], dry_run=True)

        RewriteSession(config, recording_action, reporter=reporter).run()

        assert reporter.previewed == []

    def test_missing_resume_path_fails(self, sample_tree: Path, recording_action) -> None:
        """A dry run that never sees the resume path fails after the full walk."""
        config = WalkConfig(
            roots=[str(sample_tree)], resume_path=f"{sample_tree}/nope", dry_run=True
        )

        summary = RewriteSession(config, recording_action).run()

        assert summary.files_seen == 5
        assert summary.halted is False
        assert recording_action.calls == []
        with pytest.raises(ResumeNotFoundError) as exc_info:
            summary.raise_for_status()
        assert exc_info.value.dry_run is True


class TestErrors:
    """Tests for locally recovered errors."""

    def test_action_failure_does_not_stop_walk(
        self, sample_tree: Path, action_factory: Callable
    ) -> None:
        """A failing file is reported and the next file is still processed."""
        order = _visit_order(sample_tree)
        action = action_factory(failing={order[1]})
        reporter = CollectingReporter()

        summary = RewriteSession(
            WalkConfig(roots=[str(sample_tree)]), action, reporter=reporter
        ).run()

        assert action.calls == order
        assert summary.files_failed == 1
        assert summary.files_succeeded == 4
        assert summary.success is True
        assert [e.path for e in reporter.action_errors] == [order[1]]
        assert summary.issues[0].kind == IssueKind.ACTION

    def test_entry_errors_recorded(self, tmp_path: Path, recording_action) -> None:
        """Roots that cannot be examined become issues, not failures."""
        good = tmp_path / "good"
        good.write_text("g")
        missing = str(tmp_path / "missing")
        reporter = CollectingReporter()

        summary = RewriteSession(
            WalkConfig(roots=[missing, str(good)]), recording_action, reporter=reporter
        ).run()

        assert recording_action.calls == [str(good)]
        assert len(summary.issues) == 1
        assert summary.issues[0].kind == IssueKind.STAT
        assert summary.issues[0].path == missing
        assert len(reporter.entry_errors) == 1

    def test_summary_available_after_interrupt(self, sample_tree: Path, recording_action) -> None:
        """An interrupted run leaves the last processed path in the summary."""
        order = _visit_order(sample_tree)
        record = recording_action.perform

        def interrupting(path: str):
            result = record(path)
            if path == order[2]:
                raise KeyboardInterrupt
            return result

        recording_action.perform = interrupting
        session = RewriteSession(WalkConfig(roots=[str(sample_tree)]), recording_action)

        with pytest.raises(KeyboardInterrupt):
            session.run()

        assert session.summary.last_path == order[2]
        assert session.summary.files_processed == 3
