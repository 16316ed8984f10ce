"""Module undoing a failed run by deleting its workspace."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from gitsparse.utils.exceptions import RollbackError, WorkspaceRemoveError
from gitsparse.utils.logging_config import get_logger
from gitsparse.workspace import remove_workspace

if TYPE_CHECKING:
    from gitsparse.schemas import Workspace

# Initialize logger for this module
logger = get_logger(__name__)


def abort(workspace: Workspace, cause: BaseException) -> NoReturn:
    """Delete ``workspace`` and re-raise ``cause``.

    Every failure that happens after the workspace was created goes through here, so that no
    partial checkout is left behind.

    Parameters
    ----------
    workspace : Workspace
        The workspace of the failed run.
    cause : BaseException
        The failure that ended the run.

    Raises
    ------
    RollbackError
        If the workspace could not be deleted. The original failure is kept in ``cause``.
    BaseException
        ``cause`` itself, once the workspace is gone.

    """
    logger.info("Rolling back", extra={"path": str(workspace.path), "reason": str(cause)})
    try:
        remove_workspace(workspace)
    except WorkspaceRemoveError as exc:
        logger.error("Failed to remove workspace during rollback", extra={"path": str(workspace.path)})
        raise RollbackError(cause, exc) from cause

    raise cause
