"""Main entry point for sparsely checking out folders of a remote repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitsparse.clone import SparseCloner
from gitsparse.config import DEFAULT_BRANCH
from gitsparse.merge import merge_into
from gitsparse.rollback import abort
from gitsparse.schemas import Invocation, RunConfig
from gitsparse.utils.exceptions import WorkingDirectoryError
from gitsparse.utils.git_utils import GitProcessRunner
from gitsparse.utils.logging_config import get_logger
from gitsparse.workspace import create_workspace, current_directory, enter_workspace, leave_workspace

if TYPE_CHECKING:
    from pathlib import Path

    from gitsparse.schemas import Workspace
    from gitsparse.utils.git_utils import ProcessRunner

# Initialize logger for this module
logger = get_logger(__name__)


def sparse_checkout(
    invocation: Invocation,
    *,
    config: RunConfig | None = None,
    runner: ProcessRunner | None = None,
) -> Path:
    """Check out ``invocation.folders`` of a remote repository into the current directory.

    A workspace directory named after the repository is created in the current directory and
    turned into a sparse checkout of the requested folders. In in-place mode the workspace is
    temporary: its entries (except ``.git``) are moved into the current directory and it is
    deleted afterwards.

    If any step fails once the workspace exists, the workspace is deleted before the error is
    raised. The process working directory is the same on return as on entry.

    Parameters
    ----------
    invocation : Invocation
        What to check out.
    config : RunConfig | None
        Reporting flags (default: quiet).
    runner : ProcessRunner | None
        Runs the ``git`` commands (default: ``GitProcessRunner``).

    Returns
    -------
    Path
        The directory holding the result: the workspace, or the current directory in in-place mode.

    Raises
    ------
    GitSparseError
        If the checkout fails. ``RollbackError`` is raised instead of the original failure when
        the workspace could not be deleted afterwards.

    """
    config = config or RunConfig()
    runner = runner or GitProcessRunner()

    origin = current_directory()
    logger.info(
        "Starting sparse checkout",
        extra={
            "url": invocation.url,
            "folders": invocation.folders,
            "branch": invocation.branch,
            "in_place": invocation.in_place,
        },
    )

    workspace = create_workspace(invocation.workspace_name, temporary=invocation.in_place, origin=origin)

    try:
        enter_workspace(workspace)
        branch = SparseCloner(runner, config).clone(invocation, workspace.path)
        if invocation.in_place:
            moved = merge_into(workspace, origin)
            logger.info("Merged entries into the current directory", extra={"count": len(moved)})
    except (Exception, KeyboardInterrupt) as exc:
        _restore_directory(workspace)
        abort(workspace, exc)

    leave_workspace(workspace)
    result = origin if invocation.in_place else workspace.path
    logger.info("Sparse checkout completed successfully", extra={"path": str(result), "branch": branch})
    return result


def _restore_directory(workspace: Workspace) -> None:
    """Return to the original directory after a failure without hiding the failure itself."""
    try:
        leave_workspace(workspace)
    except WorkingDirectoryError as exc:
        logger.warning("Failed to return to the original directory", extra={"reason": str(exc)})


def sparse_checkout_url(
    url: str,
    folders: list[str],
    *,
    branch: str = DEFAULT_BRANCH,
    in_place: bool = False,
    config: RunConfig | None = None,
) -> Path:
    """Provide a keyword-based wrapper around ``sparse_checkout``.

    See Also
    --------
    ``sparse_checkout`` : The function this one delegates to.

    """
    invocation = Invocation(url=url, folders=folders, branch=branch, in_place=in_place)
    return sparse_checkout(invocation, config=config)
