"""Data models for zfsrewrite.

This module exports the traversal and action models.
"""

from zfsrewrite.models.action import ActionResult, RewriteOptions
from zfsrewrite.models.walk import (
    EntryKind,
    GateDecision,
    GateMode,
    IssueKind,
    QueuedDirectory,
    Visit,
    WalkConfig,
    WalkIssue,
    WalkSummary,
)

__all__ = [
    "ActionResult",
    "EntryKind",
    "GateDecision",
    "GateMode",
    "IssueKind",
    "QueuedDirectory",
    "RewriteOptions",
    "Visit",
    "WalkConfig",
    "WalkIssue",
    "WalkSummary",
]
