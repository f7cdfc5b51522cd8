"""Traversal models.

This module defines the data structures shared by the path classifier,
the traversal engine, the resume gate and the session that ties them
together.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntryKind(str, Enum):
    """Kind of a filesystem entry as seen by the classifier.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Directory.
        OTHER: Anything else (symlink, socket, FIFO, device node).
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Visit:
    """A classified filesystem entry.

    Attributes:
        path: Path exactly as it was classified.
        kind: Entry kind (symlinks are never followed).
        volume_id: Identifier of the volume the entry lives on (st_dev).
    """

    path: str
    kind: EntryKind
    volume_id: int

    @property
    def is_file(self) -> bool:
        """Check if the entry is a regular file."""
        return self.kind == EntryKind.FILE

    @property
    def is_directory(self) -> bool:
        """Check if the entry is a directory."""
        return self.kind == EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class QueuedDirectory:
    """A directory waiting in the traversal queue.

    Attributes:
        path: Directory path.
        volume_id: Mount-boundary reference for the directory's entries.
    """

    path: str
    volume_id: int


class GateMode(str, Enum):
    """Mode of the resume gate."""

    SKIPPING = "skipping"
    ACTIVE = "active"


class GateDecision(str, Enum):
    """What to do with one emitted file.

    Attributes:
        SKIP: File precedes the resume point; do nothing.
        FORWARD: Hand the file to the external action.
        PREVIEW: Dry run; the file is visited but nothing is done.
        HALT: Dry run reached the resume point; stop the walk.
    """

    SKIP = "skip"
    FORWARD = "forward"
    PREVIEW = "preview"
    HALT = "halt"


class IssueKind(str, Enum):
    """Kind of a locally recovered error."""

    STAT = "stat"
    LIST = "list"
    ACTION = "action"


@dataclass(frozen=True, slots=True)
class WalkIssue:
    """An error that was reported and recovered from during a walk.

    Attributes:
        kind: Which stage failed.
        path: Path the error refers to.
        message: Human-readable error text.
    """

    kind: IssueKind
    path: str
    message: str


class WalkConfig(BaseModel):
    """Immutable configuration of one traversal run.

    Attributes:
        roots: Files or directories to walk, in the order given.
        resume_path: File to resume processing from (exact textual match).
        one_file_system: Do not descend into entries on another volume.
        dry_run: Walk without invoking the action.
        verbose: Report every visited file in dry-run mode.
        sort_entries: Sort directory entries by name instead of using
            the raw listing order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    roots: Annotated[list[str], Field(min_length=1)]
    resume_path: str | None = None
    one_file_system: bool = False
    dry_run: bool = False
    verbose: bool = False
    sort_entries: bool = False

    @field_validator("roots")
    @classmethod
    def validate_roots(cls, v: list[str]) -> list[str]:
        """Reject empty root paths."""
        for root in v:
            if not root:
                msg = "Root paths cannot be empty"
                raise ValueError(msg)
        return v

    @field_validator("resume_path")
    @classmethod
    def validate_resume_path(cls, v: str | None) -> str | None:
        """Reject an empty resume path (it could never match)."""
        if v is not None and not v:
            msg = "Resume path cannot be empty"
            raise ValueError(msg)
        return v


@dataclass(slots=True)
class WalkSummary:
    """Running totals and final outcome of a traversal session.

    Attributes:
        dry_run: Whether the run was a dry run.
        resume_path: Configured resume path, if any.
        files_seen: Regular files emitted by the engine.
        files_skipped: Files gated out before the resume point.
        files_processed: Files handed to the action.
        files_failed: Files for which the action failed.
        resume_found: Whether the resume path was encountered.
        halted: Whether a dry run stopped early at the resume path.
        last_path: Last file handed to the action, the place to resume
            from after an interruption.
        issues: Every recovered error, in the order it happened.
    """

    dry_run: bool = False
    resume_path: str | None = None
    files_seen: int = 0
    files_skipped: int = 0
    files_processed: int = 0
    files_failed: int = 0
    resume_found: bool = False
    halted: bool = False
    last_path: str | None = None
    issues: list[WalkIssue] = field(default_factory=list)

    @property
    def files_succeeded(self) -> int:
        """Number of files the action completed successfully."""
        return self.files_processed - self.files_failed

    @property
    def success(self) -> bool:
        """Check if the run met its resume condition."""
        return self.resume_path is None or self.resume_found

    def raise_for_status(self) -> None:
        """Raise if the resume path was never reached.

        Raises:
            ResumeNotFoundError: If a resume path was configured and the
                complete walk never visited it.
        """
        # Deferred, the walker package imports this module
        from zfsrewrite.walker.errors import ResumeNotFoundError

        if not self.success and self.resume_path is not None:
            raise ResumeNotFoundError(self.resume_path, dry_run=self.dry_run)
