"""Schema for the directory that hosts one checkout."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Workspace(BaseModel):
    """A workspace directory exclusively owned by one run.

    Attributes
    ----------
    path : Path
        Absolute path of the workspace directory.
    origin : Path
        The directory the run was started from.
    temporary : bool
        Whether the workspace is discarded after its contents are merged into ``origin``.

    """

    model_config = ConfigDict(frozen=True)

    path: Path
    origin: Path
    temporary: bool = False
