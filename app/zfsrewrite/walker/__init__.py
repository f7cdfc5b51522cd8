"""Restart-safe breadth-first traversal.

This module provides the path classifier, the traversal engine, the
resume gate and the session that drives them.
"""

from zfsrewrite.walker.classifier import classify
from zfsrewrite.walker.engine import TraversalEngine
from zfsrewrite.walker.errors import (
    ActionError,
    ListError,
    ResumeNotFoundError,
    StatError,
    WalkerError,
)
from zfsrewrite.walker.gate import ResumeGate
from zfsrewrite.walker.session import RewriteSession, WalkReporter

__all__ = [
    "ActionError",
    "ListError",
    "ResumeGate",
    "ResumeNotFoundError",
    "RewriteSession",
    "StatError",
    "TraversalEngine",
    "WalkReporter",
    "WalkerError",
    "classify",
]
