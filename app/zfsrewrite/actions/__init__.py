"""Per-file actions for zfsrewrite.

This module exports the action interface and the zfs rewrite action.
"""

from zfsrewrite.actions.base import FileAction
from zfsrewrite.actions.rewrite import ZfsRewriteAction

__all__ = ["FileAction", "ZfsRewriteAction"]
