"""Utility functions for running Git commands."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

import git

from gitsparse.schemas import ProcessResult
from gitsparse.utils.exceptions import ProcessLaunchError
from gitsparse.utils.logging_config import get_logger

if TYPE_CHECKING:
    from pathlib import Path

# Initialize logger for this module
logger = get_logger(__name__)


class ProcessRunner(Protocol):
    """Something that can run a command line and report how it ended.

    Implementations must return a ``ProcessResult`` for any command that was started, including
    ones that exit with a non-zero status, and raise ``ProcessLaunchError`` only when the command
    could not be started at all.
    """

    def run(self, args: Sequence[str], cwd: Path) -> ProcessResult:
        """Run ``args`` inside ``cwd`` and block until it finishes."""
        ...


class GitProcessRunner:
    """``ProcessRunner`` backed by GitPython's command executor."""

    def run(self, args: Sequence[str], cwd: Path) -> ProcessResult:
        """Run ``args`` inside ``cwd`` and capture its exit status and output.

        Parameters
        ----------
        args : Sequence[str]
            The command and its arguments, e.g. ``["git", "init"]``.
        cwd : Path
            The directory to run the command in.

        Returns
        -------
        ProcessResult
            The exit status and captured output. A negative return code (termination by a signal)
            is reported as an interrupted process, i.e. ``status=None``.

        Raises
        ------
        ProcessLaunchError
            If the command cannot be started.

        """
        command = list(args)
        logger.debug("Running command", extra={"command": " ".join(command), "cwd": str(cwd)})
        try:
            status, stdout, stderr = git.Git(str(cwd)).execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
            )
        except (git.GitCommandNotFound, OSError) as exc:
            raise ProcessLaunchError(command, str(exc)) from exc

        return ProcessResult(
            command=command,
            status=_normalize_status(status),
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )


def _normalize_status(status: int | None) -> int | None:
    """Map a return code to an exit status, with ``None`` meaning the process was interrupted."""
    if status is None or status < 0:
        return None
    return status


def _decode(output: str | bytes | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode(sys.getdefaultencoding(), errors="replace")
    return output


def git_init() -> list[str]:
    """Return the command that creates an empty repository in the current directory."""
    return ["git", "init"]


def git_remote_add_with_fetch(name: str, url: str) -> list[str]:
    """Return the command that registers remote ``name`` for ``url`` and fetches it immediately."""
    return ["git", "remote", "add", "-f", name, url]


def git_enable_sparse_checkout() -> list[str]:
    """Return the command that turns on sparse checkout for the repository."""
    return ["git", "config", "core.sparseCheckout", "true"]


def git_pull(remote: str, branch: str) -> list[str]:
    """Return the command that pulls ``branch`` from ``remote``."""
    return ["git", "pull", remote, branch]
