"""Module managing the lifecycle of the directory a checkout is performed in."""

from __future__ import annotations

from pathlib import Path

from gitsparse.schemas import Workspace
from gitsparse.utils.exceptions import DirectoryCreateError, WorkingDirectoryError, WorkspaceRemoveError
from gitsparse.utils.logging_config import get_logger
from gitsparse.utils.os_utils import change_directory, create_directory, remove_directory

# Initialize logger for this module
logger = get_logger(__name__)


def current_directory() -> Path:
    """Return the absolute working directory of the process.

    Raises
    ------
    WorkingDirectoryError
        If the working directory cannot be resolved, e.g. because it was deleted.

    """
    try:
        return Path.cwd().resolve()
    except OSError as exc:
        msg = f"Failed to resolve the current directory: {exc}"
        raise WorkingDirectoryError(msg) from exc


def create_workspace(name: str, *, temporary: bool, origin: Path) -> Workspace:
    """Create the workspace directory ``origin / name``.

    Parameters
    ----------
    name : str
        Name of the workspace directory.
    temporary : bool
        Whether the workspace is discarded after an in-place merge.
    origin : Path
        The directory the workspace is created in, and the one the run started from.

    Returns
    -------
    Workspace
        The newly created workspace.

    Raises
    ------
    DirectoryCreateError
        If the path is already occupied by a file or a non-empty directory, or cannot be created.

    """
    path = origin / name
    logger.info("Creating workspace", extra={"path": str(path), "temporary": temporary})
    try:
        create_directory(path)
    except OSError as exc:
        raise DirectoryCreateError(str(exc)) from exc

    return Workspace(path=path, origin=origin, temporary=temporary)


def enter_workspace(workspace: Workspace) -> None:
    """Make ``workspace`` the working directory of the process.

    Raises
    ------
    WorkingDirectoryError
        If the workspace directory cannot be entered.

    """
    logger.debug("Entering workspace", extra={"path": str(workspace.path)})
    try:
        change_directory(workspace.path)
    except OSError as exc:
        raise WorkingDirectoryError(str(exc)) from exc


def leave_workspace(workspace: Workspace) -> None:
    """Return to the directory the run started from.

    Raises
    ------
    WorkingDirectoryError
        If the original directory cannot be entered.

    """
    try:
        change_directory(workspace.origin)
    except OSError as exc:
        raise WorkingDirectoryError(str(exc)) from exc


def remove_workspace(workspace: Workspace) -> None:
    """Recursively delete ``workspace``.

    The process leaves the workspace first when it is currently inside it.

    Raises
    ------
    WorkspaceRemoveError
        If the directory cannot be deleted.

    """
    logger.info("Removing workspace", extra={"path": str(workspace.path)})
    try:
        if _is_inside(Path.cwd(), workspace.path):
            change_directory(workspace.origin)
    except OSError:
        # The working directory is already gone or unreachable; removal below decides the outcome.
        logger.debug("Could not leave the workspace before removing it", extra={"path": str(workspace.path)})

    try:
        remove_directory(workspace.path)
    except OSError as exc:
        raise WorkspaceRemoveError(str(exc)) from exc


def _is_inside(path: Path, directory: Path) -> bool:
    path = path.resolve()
    directory = directory.resolve()
    return path == directory or directory in path.parents
