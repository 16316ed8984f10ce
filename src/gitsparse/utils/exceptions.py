"""Custom exceptions for the gitsparse package."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from gitsparse.schemas.process import ProcessResult


class GitSparseError(Exception):
    """Base class for every fatal error raised during a sparse checkout run."""


class InvalidRepositoryURLError(GitSparseError, ValueError):
    """Exception raised when no repository name can be extracted from a URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Cannot determine the repository name from URL {url!r}")


class DirectoryCreateError(GitSparseError):
    """Exception raised when the workspace directory cannot be created."""


class WorkingDirectoryError(GitSparseError):
    """Exception raised when the current working directory cannot be resolved or changed."""


class WorkspaceRemoveError(GitSparseError):
    """Exception raised when the workspace directory cannot be deleted."""


class ProcessLaunchError(GitSparseError):
    """Exception raised when an external command cannot be started at all."""

    def __init__(self, command: list[str], reason: str) -> None:
        self.command = command
        super().__init__(f"Failed to launch {' '.join(command)!r}: {reason}")


class ProcessInterrupted(GitSparseError):
    """Exception raised when an external command was terminated by a signal."""

    def __init__(self, step: str, result: ProcessResult) -> None:
        self.step = step
        self.result = result
        super().__init__(f"Interrupted! ({step}: {result.command_line})")


class NonZeroExitError(GitSparseError):
    """Exception raised when a git step exits with a non-zero status."""

    def __init__(self, step: str, message: str, result: ProcessResult) -> None:
        self.step = step
        self.result = result
        super().__init__(f"{message} ({result.command_line} exited with status {result.status})")


class PatternWriteError(GitSparseError):
    """Exception raised when the sparse-checkout patterns cannot be written."""


class MergeError(GitSparseError):
    """Exception raised when an entry cannot be moved out of the workspace.

    ``entry`` is the path of the failing entry relative to the workspace. Entries relocated before
    the failure are listed in ``moved``; they are not moved back.
    """

    def __init__(self, entry: Path, reason: str, moved: list[Path]) -> None:
        self.entry = entry
        self.moved = moved
        super().__init__(f"Failed to move {entry.as_posix()!r} into the original directory: {reason}")


class RollbackError(GitSparseError):
    """Exception raised when the workspace could not be deleted after a failure.

    The failure that triggered the rollback is kept in ``cause``.
    """

    def __init__(self, cause: BaseException, removal_error: BaseException) -> None:
        self.cause = cause
        self.removal_error = removal_error
        super().__init__(f"{cause}\nRollback failed, the workspace was left behind: {removal_error}")
