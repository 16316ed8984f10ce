"""Configuration for the gitsparse package."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePosixPath
from typing import Final

DEFAULT_BRANCH: Final[str] = "main"
REMOTE_NAME: Final[str] = "origin"

# Prepended to the workspace name in in-place mode, so an existing directory named after the repo is left alone
TEMP_PREFIX: Final[str] = "temp_"

GIT_DIR: Final[str] = ".git"
SPARSE_CHECKOUT_FILE: Final[PurePosixPath] = PurePosixPath(GIT_DIR, "info", "sparse-checkout")

# Branch names that are retried once under their conventional alias when a pull fails
BRANCH_FALLBACKS: Final[Mapping[str, str]] = {
    "main": "master",
    "master": "main",
}
