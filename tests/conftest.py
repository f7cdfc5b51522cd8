"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from zfsrewrite.actions.base import FileAction
from zfsrewrite.models.action import ActionResult


class RecordingAction(FileAction):
    """Action that records every path it is asked to process.

    Paths listed in ``failing`` produce a failed result with exit code 1.
    """

    def __init__(self, failing: set[str] | None = None) -> None:
        self.calls: list[str] = []
        self._failing = failing or set()

    @property
    def name(self) -> str:
        return "record"

    def perform(self, path: str) -> ActionResult:
        self.calls.append(path)
        if path in self._failing:
            return ActionResult(path=path, success=False, returncode=1, error="Exit code: 1")
        return ActionResult(path=path, success=True, returncode=0)


@pytest.fixture
def recording_action() -> RecordingAction:
    """Action fake that records invocations."""
    return RecordingAction()


@pytest.fixture
def action_factory() -> Callable[..., RecordingAction]:
    """Factory for recording actions with configurable failures."""
    return RecordingAction


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Three-level tree used by traversal tests.

    Layout::

        root/
            a.txt
            b.txt
            one/
                c.txt
                deep/
                    e.txt
            two/
                d.txt
    """
    root = tmp_path / "root"
    (root / "one" / "deep").mkdir(parents=True)
    (root / "two").mkdir()
    (root / "a.txt").write_text("a")
    (root / "b.txt").write_text("b")
    (root / "one" / "c.txt").write_text("c")
    (root / "one" / "deep" / "e.txt").write_text("e")
    (root / "two" / "d.txt").write_text("d")
    return root
