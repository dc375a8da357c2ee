"""Per-window invocation lock.

Two hotkey presses handled at the same time would interleave their commands
at the compositor level. The lock lets only one of them run, the other exits.
"""

__all__ = ["invocation_lock", "lock_path"]

import contextlib
import fcntl
import os
import re
from collections.abc import Iterator
from logging import Logger
from pathlib import Path

from .constants import LOCK_FOLDER
from .models import LockError


def lock_path(class_name: str, folder: Path | None = None) -> Path:
    """Return the lock file used for `class_name`, in `folder` or LOCK_FOLDER."""
    safe_name = re.sub(r"[^A-Za-z0-9_.-]", "_", class_name)
    return (folder or LOCK_FOLDER) / f"rdrop-{safe_name}.lock"


@contextlib.contextmanager
def invocation_lock(class_name: str, log: Logger, folder: Path | None = None) -> Iterator[Path]:
    """Hold an exclusive lock for `class_name` while the block runs.

    The lock is released by the kernel if the process dies.

    Raises:
        LockError: if another process holds the lock
    """
    path = lock_path(class_name, folder)
    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o600)
    try:
        try:
            fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        except BlockingIOError as e:
            msg = f"another rdrop invocation is running for {class_name} ({path})"
            raise LockError(msg) from e
        log.debug("Locked %s", path)
        try:
            yield path
        finally:
            fcntl.flock(fd, fcntl.LOCK_UN)
    finally:
        os.close(fd)
