"""Path classification.

Determines whether a path is a regular file, a directory or something
else, and which volume it lives on. Symbolic links are never followed.
"""

import os
import stat

from zfsrewrite.models.walk import EntryKind, Visit
from zfsrewrite.walker.errors import StatError


def classify(path: str) -> Visit:
    """Classify a filesystem path without following symlinks.

    Args:
        path: Path to examine.

    Returns:
        Visit with the entry kind and the volume id (st_dev).

    Raises:
        StatError: If the path cannot be examined (vanished, permission
            denied, I/O error).
    """
    try:
        st = os.lstat(path)
    except OSError as e:
        raise StatError(path, e) from e

    if stat.S_ISREG(st.st_mode):
        kind = EntryKind.FILE
    elif stat.S_ISDIR(st.st_mode):
        kind = EntryKind.DIRECTORY
    else:
        kind = EntryKind.OTHER

    return Visit(path=path, kind=kind, volume_id=st.st_dev)
