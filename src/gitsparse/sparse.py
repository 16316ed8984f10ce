"""Module recording which folders a sparse checkout materializes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from gitsparse.config import SPARSE_CHECKOUT_FILE
from gitsparse.utils.exceptions import PatternWriteError
from gitsparse.utils.logging_config import get_logger

if TYPE_CHECKING:
    from pathlib import Path

# Initialize logger for this module
logger = get_logger(__name__)


def sparse_checkout_file(repo_root: Path) -> Path:
    """Return the path of the sparse-checkout pattern file of the repository at ``repo_root``."""
    return repo_root.joinpath(*SPARSE_CHECKOUT_FILE.parts)


def record_patterns(repo_root: Path, patterns: Iterable[str]) -> Path:
    """Append ``patterns`` to the sparse-checkout file, one per line.

    Patterns are written in the given order. The file is never truncated and duplicates are kept,
    so calling this twice accumulates both sets.

    Parameters
    ----------
    repo_root : Path
        Root of the working tree that contains the ``.git`` directory.
    patterns : Iterable[str]
        The folder patterns to record.

    Returns
    -------
    Path
        The path of the sparse-checkout file.

    Raises
    ------
    PatternWriteError
        If the file cannot be written.

    """
    path = sparse_checkout_file(repo_root)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8", newline="\n") as f:
            for pattern in patterns:
                f.write(f"{pattern}\n")
                logger.debug("Recorded sparse-checkout pattern", extra={"pattern": pattern})
    except OSError as exc:
        msg = f"Failed to write to {path}: {exc}"
        raise PatternWriteError(msg) from exc

    return path


def read_patterns(repo_root: Path) -> list[str]:
    """Return the patterns recorded in the sparse-checkout file, in file order.

    Returns an empty list when no pattern has been recorded yet.
    """
    path = sparse_checkout_file(repo_root)
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").splitlines()
