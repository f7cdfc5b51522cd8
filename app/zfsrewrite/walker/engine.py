"""Breadth-first traversal engine.

Walks root paths in a deterministic breadth-first order: every regular
file of a directory is emitted as soon as it is read, while subdirectories
are appended to a FIFO queue that is drained after all roots have been
handled. This reproduces the traversal order of a recursive ``zfs
rewrite``, so a path recorded during one run identifies the same position
in a later run over an unmodified tree.

Directory entries are taken in the order the directory listing returns
them. That order is filesystem-dependent and not contractually stable; it
is stable for an unmodified directory on ZFS, which is what resume relies
on. ``sort_entries`` switches to a canonical lexicographic order, at the
cost of no longer matching positions recorded in listing order.
"""

import logging
import os
from collections import deque
from collections.abc import Callable, Iterable, Iterator

from zfsrewrite.models.walk import QueuedDirectory, Visit
from zfsrewrite.walker.classifier import classify
from zfsrewrite.walker.errors import ListError, StatError, WalkerError

logger = logging.getLogger(__name__)

_SPECIAL_ENTRIES: frozenset[str] = frozenset({".", ".."})

Classifier = Callable[[str], Visit]
ErrorHandler = Callable[[WalkerError], None]


class TraversalEngine:
    """Breadth-first walker emitting regular-file paths.

    An engine holds no per-walk state; every call to walk() owns its own
    queue, so one engine can be reused for independent walks.

    Args:
        one_file_system: If True, skip entries whose volume differs from
            the directory they were found in.
        sort_entries: If True, sort directory entries by name.
        classifier: Callable used to classify each path. Defaults to
            classify() (lstat based).
        on_error: Called with every StatError or ListError the walk
            recovers from. Errors are only logged if not given.
    """

    def __init__(
        self,
        one_file_system: bool = False,
        *,
        sort_entries: bool = False,
        classifier: Classifier = classify,
        on_error: ErrorHandler | None = None,
    ) -> None:
        self._one_file_system = one_file_system
        self._sort_entries = sort_entries
        self._classify = classifier
        self._on_error = on_error

    @property
    def one_file_system(self) -> bool:
        """Check if mount points are never crossed."""
        return self._one_file_system

    def walk(self, roots: Iterable[str]) -> Iterator[str]:
        """Walk the given roots and yield regular-file paths.

        Files are yielded the moment they are discovered. Closing the
        generator stops the walk without visiting the remaining queue.

        Args:
            roots: Files or directories, processed in the given order.

        Yields:
            Paths of regular files in breadth-first order.
        """
        queue: deque[QueuedDirectory] = deque()

        for root in roots:
            try:
                visit = self._classify(root)
            except StatError as e:
                self._report(e)
                continue

            if visit.is_file:
                yield root
            elif visit.is_directory:
                yield from self._process_directory(root, visit.volume_id, queue)
            else:
                logger.debug("Ignoring root that is neither file nor directory: %s", root)

        while queue:
            directory = queue.popleft()
            yield from self._process_directory(directory.path, directory.volume_id, queue)

    def _process_directory(
        self,
        path: str,
        volume_id: int,
        queue: deque[QueuedDirectory],
    ) -> Iterator[str]:
        """Emit the files of one directory and queue its subdirectories.

        Args:
            path: Directory to process.
            volume_id: Mount-boundary reference for the entries.
            queue: Traversal queue that receives subdirectories.

        Yields:
            Paths of regular files directly inside the directory.
        """
        try:
            names = os.listdir(path)
        except OSError as e:
            self._report(ListError(path, e))
            return

        if self._sort_entries:
            names.sort()

        for name in names:
            if name in _SPECIAL_ENTRIES:
                continue

            full_path = f"{path}/{name}"
            try:
                visit = self._classify(full_path)
            except StatError as e:
                self._report(e)
                continue

            if self._one_file_system and visit.volume_id != volume_id:
                logger.debug("Not crossing mount point: %s", full_path)
                continue

            if visit.is_file:
                yield full_path
            elif visit.is_directory:
                queue.append(QueuedDirectory(path=full_path, volume_id=volume_id))

    def _report(self, error: WalkerError) -> None:
        """Log a recovered error and pass it to the error handler."""
        logger.warning("%s", error)
        if self._on_error is not None:
            self._on_error(error)
