"""Fixtures for tests.

This file provides a scripted stand-in for the ``git`` executable, so that sparse checkouts can be exercised end to
end without spawning processes or touching the network, plus fixtures for an isolated working directory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from gitsparse.schemas import Invocation, ProcessResult
from gitsparse.sparse import read_patterns
from gitsparse.utils.logging_config import PACKAGE_LOGGER_NAME
from gitsparse.workspace import create_workspace

if TYPE_CHECKING:
    from gitsparse.schemas import Workspace

DEMO_URL = "https://github.com/user/repo"

RemoteFiles = dict[str, str]

# Contents of the scripted remote: branch name -> {relative file path: file content}
DEMO_REMOTE: dict[str, RemoteFiles] = {
    "main": {
        "README.md": "# repo",
        "docs/index.md": "Welcome",
        "docs/guide/setup.md": "Setup",
        "src/app.py": "print('app')",
        "src/utils/helpers.py": "def helper(): ...",
        "tests/test_app.py": "def test_app(): ...",
    },
}


class FakeGitRunner:
    """A ``ProcessRunner`` that imitates ``git`` against an in-memory remote.

    * ``git init`` creates ``.git/``.
    * ``git pull origin <branch>`` writes the files of ``<branch>`` that match the recorded sparse-checkout
      patterns, or fails with status 1 if the branch does not exist.
    * Any command listed in ``overrides`` returns the given status instead (``None`` means interrupted).

    Every call is recorded in ``calls``; the sparse-checkout patterns present at each pull are recorded in
    ``patterns_at_pull``.
    """

    def __init__(
        self,
        remote: dict[str, RemoteFiles] | None = None,
        overrides: dict[str, int | None] | None = None,
    ) -> None:
        self.remote = DEMO_REMOTE if remote is None else remote
        self.overrides = overrides or {}
        self.calls: list[list[str]] = []
        self.cwds: list[Path] = []
        self.patterns_at_pull: list[list[str]] = []

    @property
    def commands(self) -> list[str]:
        return [" ".join(call) for call in self.calls]

    def run(self, args: Sequence[str], cwd: Path) -> ProcessResult:
        command = list(args)
        self.calls.append(command)
        self.cwds.append(cwd)
        command_line = " ".join(command)

        if command[:2] == ["git", "pull"]:
            self.patterns_at_pull.append(read_patterns(cwd))

        if command_line in self.overrides:
            status = self.overrides[command_line]
            return ProcessResult(command=command, status=status, stdout="", stderr=f"fatal: {command_line} failed")

        if command[:2] == ["git", "init"]:
            (cwd / ".git").mkdir(exist_ok=True)
            return ProcessResult(command=command, status=0, stdout=f"Initialized empty Git repository in {cwd}/.git/")

        if command[:2] == ["git", "pull"]:
            return self._pull(command, cwd)

        return ProcessResult(command=command, status=0)

    def _pull(self, command: list[str], cwd: Path) -> ProcessResult:
        branch = command[-1]
        if branch not in self.remote:
            return ProcessResult(command=command, status=1, stderr=f"fatal: couldn't find remote ref {branch}")

        patterns = read_patterns(cwd)
        for name, content in self.remote[branch].items():
            if any(name == p.strip("/") or name.startswith(p.strip("/") + "/") for p in patterns):
                target = cwd / name
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(content)

        return ProcessResult(command=command, status=0, stdout=f"From {DEMO_URL}\n * branch {branch} -> FETCH_HEAD")


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` so they do not outlive the test that installed them."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(level)


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty directory and return it."""
    directory = tmp_path / "project"
    directory.mkdir()
    monkeypatch.chdir(directory)
    return directory.resolve()


@pytest.fixture
def fake_runner() -> FakeGitRunner:
    """Provide a ``FakeGitRunner`` whose remote only has a ``main`` branch."""
    return FakeGitRunner()


@pytest.fixture
def master_only_runner() -> FakeGitRunner:
    """Provide a ``FakeGitRunner`` whose remote only has a ``master`` branch."""
    return FakeGitRunner(remote={"master": DEMO_REMOTE["main"]})


@pytest.fixture
def sample_invocation() -> Invocation:
    """Provide an ``Invocation`` for two folders of ``DEMO_URL``."""
    return Invocation(url=DEMO_URL, folders=["docs", "src/utils"])


def snapshot(directory: Path) -> set[str]:
    """Return the relative paths of every file below ``directory``, excluding ``.git``."""
    return {
        path.relative_to(directory).as_posix()
        for path in directory.rglob("*")
        if path.is_file() and ".git" not in path.relative_to(directory).parts
    }


def make_workspace(origin: Path, name: str = "repo", *, temporary: bool = False) -> Workspace:
    """Create a workspace directory below ``origin`` and return its model."""
    return create_workspace(name, temporary=temporary, origin=origin)
