"""Module merging the checked out entries into the directory the run started from."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitsparse.config import GIT_DIR
from gitsparse.utils.exceptions import MergeError
from gitsparse.utils.logging_config import get_logger
from gitsparse.utils.os_utils import move_directory, move_file
from gitsparse.workspace import remove_workspace

if TYPE_CHECKING:
    from pathlib import Path

    from gitsparse.schemas import Workspace

# Initialize logger for this module
logger = get_logger(__name__)


def merge_into(workspace: Workspace, destination: Path) -> list[Path]:
    """Move every top-level entry of ``workspace`` except ``.git`` into ``destination``.

    Entries are moved one at a time, then the emptied workspace is deleted. A directory that
    already exists in ``destination`` is merged into: its own entries stay, and the checked out
    entries are moved inside it. Existing files are never overwritten. A failed move leaves
    already moved entries where they are; they are listed on the raised ``MergeError``.

    Parameters
    ----------
    workspace : Workspace
        The workspace holding the checkout.
    destination : Path
        The directory to move the entries into.

    Returns
    -------
    list[Path]
        The new locations of the moved entries. Entries merged into an existing directory are
        listed individually.

    Raises
    ------
    MergeError
        If an entry cannot be moved, e.g. because a file with the same path already exists.
    WorkspaceRemoveError
        If the emptied workspace cannot be deleted.

    """
    moved: list[Path] = []
    for entry in sorted(workspace.path.iterdir()):
        if entry.name == GIT_DIR:
            continue

        logger.info("Moving entry", extra={"entry": entry.name, "destination": str(destination)})
        _merge_entry(entry, destination, workspace.path, moved)

    remove_workspace(workspace)
    return moved


def _merge_entry(entry: Path, destination_dir: Path, root: Path, moved: list[Path]) -> None:
    """Move ``entry`` into ``destination_dir``, descending into directories that exist on both sides."""
    target = destination_dir / entry.name
    try:
        if _is_directory(entry) and _is_directory(target):
            logger.debug("Merging into existing directory", extra={"directory": str(target)})
            for child in sorted(entry.iterdir()):
                _merge_entry(child, target, root, moved)
            entry.rmdir()
        elif _is_directory(entry):
            moved.append(move_directory(entry, destination_dir))
        else:
            moved.append(move_file(entry, destination_dir))
    except OSError as exc:
        raise MergeError(entry.relative_to(root), str(exc), moved) from exc


def _is_directory(path: Path) -> bool:
    return path.is_dir() and not path.is_symlink()
