"""Module containing the Git steps of a sparse checkout."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from gitsparse.config import BRANCH_FALLBACKS, REMOTE_NAME
from gitsparse.sparse import record_patterns
from gitsparse.utils.exceptions import NonZeroExitError, ProcessInterrupted
from gitsparse.utils.git_utils import (
    git_enable_sparse_checkout,
    git_init,
    git_pull,
    git_remote_add_with_fetch,
)
from gitsparse.utils.logging_config import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from gitsparse.schemas import Invocation, ProcessResult, RunConfig
    from gitsparse.utils.git_utils import ProcessRunner

# Initialize logger for this module
logger = get_logger(__name__)


class GitStep(str, Enum):
    """The Git steps of a sparse checkout, with the message reported when each one fails."""

    INIT = "init"
    ADD_REMOTE = "add-remote"
    ENABLE_SPARSE = "enable-sparse"
    PULL = "pull"

    @property
    def failure_message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES: dict[GitStep, str] = {
    GitStep.INIT: "Failed to initialize empty git repository",
    GitStep.ADD_REMOTE: "Failed to add remote repository url",
    GitStep.ENABLE_SPARSE: "Failed to enable sparse checkout in .git/config",
    GitStep.PULL: "Failed to get folders from repository. Check the branch name is correct.",
}


class SparseCloner:
    """Drive ``git`` through the steps of a sparse checkout.

    Parameters
    ----------
    runner : ProcessRunner
        Runs the individual ``git`` commands.
    config : RunConfig
        The flags for the current run.

    """

    def __init__(self, runner: ProcessRunner, config: RunConfig) -> None:
        self.runner = runner
        self.config = config

    def clone(self, invocation: Invocation, repo_root: Path) -> str:
        """Sparsely check out ``invocation.folders`` of ``invocation.url`` into ``repo_root``.

        Parameters
        ----------
        invocation : Invocation
            What to check out.
        repo_root : Path
            The (empty) workspace directory to turn into a repository.

        Returns
        -------
        str
            The branch that was pulled, which differs from ``invocation.branch`` when the
            ``main``/``master`` fallback was used.

        Raises
        ------
        NonZeroExitError
            If a Git step fails.
        ProcessInterrupted
            If a Git step is terminated by a signal.
        ProcessLaunchError
            If ``git`` cannot be started.
        PatternWriteError
            If the sparse-checkout patterns cannot be written.

        """
        logger.info("Initializing empty git repository", extra={"path": str(repo_root)})
        self._step(GitStep.INIT, git_init(), repo_root)

        logger.info("Adding remote and fetching", extra={"url": invocation.url})
        self._step(GitStep.ADD_REMOTE, git_remote_add_with_fetch(REMOTE_NAME, invocation.url), repo_root)

        logger.info("Enabling sparse checkout")
        self._step(GitStep.ENABLE_SPARSE, git_enable_sparse_checkout(), repo_root)

        path = record_patterns(repo_root, invocation.folders)
        logger.info("Recorded sparse-checkout patterns", extra={"file": str(path), "folders": invocation.folders})

        return self.pull(invocation.branch, repo_root)

    def pull(self, branch: str, repo_root: Path) -> str:
        """Pull ``branch``, retrying once under its alias if it is ``main`` or ``master``.

        Returns
        -------
        str
            The branch that was pulled.

        """
        logger.info("Pulling branch", extra={"branch": branch})
        result = self.runner.run(git_pull(REMOTE_NAME, branch), repo_root)

        fallback = BRANCH_FALLBACKS.get(branch)
        if fallback is not None and not result.succeeded and not result.interrupted:
            logger.info("Pull failed, retrying with fallback branch", extra={"branch": branch, "fallback": fallback})
            self._log_output(result)
            branch = fallback
            result = self.runner.run(git_pull(REMOTE_NAME, branch), repo_root)

        self._check(GitStep.PULL, result)
        logger.info("Pulled branch", extra={"branch": branch})
        return branch

    def _step(self, step: GitStep, args: list[str], repo_root: Path) -> ProcessResult:
        result = self.runner.run(args, repo_root)
        self._check(step, result)
        return result

    def _check(self, step: GitStep, result: ProcessResult) -> None:
        if result.interrupted:
            raise ProcessInterrupted(step.value, result)
        self._log_output(result)
        if not result.succeeded:
            raise NonZeroExitError(step.value, step.failure_message, result)

    def _log_output(self, result: ProcessResult) -> None:
        if not self.config.verbose:
            return
        for stream, text in (("stdout", result.stdout), ("stderr", result.stderr)):
            if text.strip():
                logger.info("Command output", extra={"command": result.command_line, "stream": stream, "text": text})
