"""Utility functions for working with the operating system."""

from __future__ import annotations

import errno
import os
import shutil
import stat
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType


def create_directory(path: Path) -> None:
    """Create ``path``, accepting an existing empty directory.

    Parameters
    ----------
    path : Path
        The directory to create.

    Raises
    ------
    OSError
        If ``path`` exists and is not an empty directory, or if it cannot be created.

    """
    if path.exists() or path.is_symlink():
        if not path.is_dir():
            msg = f"Failed to create directory {path}: a file with that name already exists"
            raise FileExistsError(errno.EEXIST, msg, str(path))
        if any(path.iterdir()):
            msg = f"Failed to create directory {path}: it already exists and is not empty"
            raise FileExistsError(errno.ENOTEMPTY, msg, str(path))
        return

    try:
        path.mkdir(parents=True)
    except OSError as exc:
        msg = f"Failed to create directory {path}: {exc}"
        raise OSError(msg) from exc


def change_directory(path: Path) -> None:
    """Make ``path`` the working directory of the process.

    Raises
    ------
    OSError
        If ``path`` cannot be entered.

    """
    try:
        os.chdir(path)
    except OSError as exc:
        msg = f"Failed to change the working directory to {path}: {exc}"
        raise OSError(msg) from exc


def move_directory(source: Path, destination_dir: Path) -> Path:
    """Move directory ``source`` (and its contents) into ``destination_dir``.

    Returns
    -------
    Path
        The new location of the directory.

    Raises
    ------
    OSError
        If an entry with the same name already exists in ``destination_dir`` or the move fails.

    """
    target = destination_dir / source.name
    _ensure_absent(target)
    try:
        shutil.move(str(source), str(target))
    except (OSError, shutil.Error) as exc:
        msg = f"Failed to move directory {source} to {target}: {exc}"
        raise OSError(msg) from exc
    return target


def move_file(source: Path, destination_dir: Path) -> Path:
    """Move file ``source`` into ``destination_dir``.

    Returns
    -------
    Path
        The new location of the file.

    Raises
    ------
    OSError
        If an entry with the same name already exists in ``destination_dir`` or the move fails.

    """
    target = destination_dir / source.name
    _ensure_absent(target)
    try:
        shutil.move(str(source), str(target))
    except (OSError, shutil.Error) as exc:
        msg = f"Failed to move file {source} to {target}: {exc}"
        raise OSError(msg) from exc
    return target


def remove_directory(path: Path) -> None:
    """Recursively delete ``path``.

    Read-only entries (git marks its object files read-only on Windows) are made writable and
    the removal is retried once.

    Raises
    ------
    OSError
        If the directory or any of its contents cannot be deleted.

    """
    kwargs = {}
    if sys.version_info >= (3, 12):
        kwargs["onexc"] = _handle_remove_readonly
    else:
        kwargs["onerror"] = _handle_remove_readonly

    try:
        shutil.rmtree(path, **kwargs)
    except OSError as exc:
        msg = f"Failed to remove directory {path}: {exc}"
        raise OSError(msg) from exc


def _ensure_absent(target: Path) -> None:
    if target.exists() or target.is_symlink():
        msg = f"{target} already exists"
        raise FileExistsError(errno.EEXIST, msg, str(target))


def _handle_remove_readonly(
    func: Callable,
    path: str,
    exc_info: BaseException | tuple[type[BaseException], BaseException, TracebackType],
) -> None:
    """Handle permission errors raised by ``shutil.rmtree()``.

    * Makes the target writable (removes the read-only attribute).
    * Retries the original operation (``func``) once.

    """
    # 'onerror' passes a (type, value, tb) tuple; 'onexc' passes the exception
    if isinstance(exc_info, tuple):  # 'onerror' (Python <3.12)
        exc: BaseException = exc_info[1]
    else:  # 'onexc' (Python 3.12+)
        exc = exc_info

    # Handle only 'Permission denied' and 'Operation not permitted'
    if not isinstance(exc, OSError) or exc.errno not in {errno.EACCES, errno.EPERM}:
        raise exc

    Path(path).chmod(stat.S_IWRITE)
    func(path)
