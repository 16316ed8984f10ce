"""Tests for rolling back a failed run."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gitsparse.rollback import abort
from gitsparse.utils.exceptions import PatternWriteError, RollbackError
from tests.conftest import make_workspace

if TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


def test_abort_removes_workspace_and_reraises(work_dir: Path) -> None:
    """The workspace is deleted and the original failure is raised unchanged."""
    workspace = make_workspace(work_dir)
    (workspace.path / ".git").mkdir()
    cause = PatternWriteError("disk full")

    with pytest.raises(PatternWriteError) as exc_info:
        abort(workspace, cause)

    assert exc_info.value is cause
    assert not workspace.path.exists()


def test_abort_reports_both_failures(work_dir: Path, mocker: MockerFixture) -> None:
    """If the workspace cannot be deleted, both the cause and the deletion failure are reported."""
    workspace = make_workspace(work_dir)
    mocker.patch("gitsparse.utils.os_utils.shutil.rmtree", side_effect=OSError("Device or resource busy"))
    cause = PatternWriteError("disk full")

    with pytest.raises(RollbackError) as exc_info:
        abort(workspace, cause)

    error = exc_info.value
    assert error.cause is cause
    assert error.__cause__ is cause
    assert "disk full" in str(error)
    assert "Device or resource busy" in str(error)
    assert workspace.path.exists()
