"""Schemas describing one sparse checkout request and its run flags."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gitsparse.config import DEFAULT_BRANCH, TEMP_PREFIX
from gitsparse.utils.url_utils import repo_name_from_url


class Invocation(BaseModel):
    """A request to sparsely check out folders of a remote repository.

    Attributes
    ----------
    url : str
        The URL of the remote repository.
    folders : list[str]
        Folder patterns to check out, in the order they are written to the sparse-checkout file.
    branch : str
        The branch to pull (default: ``"main"``).
    in_place : bool
        Whether to merge the retrieved entries into the current directory (default: ``False``).

    """

    model_config = ConfigDict(frozen=True)

    url: str
    folders: list[str] = Field(min_length=1)
    branch: str = Field(default=DEFAULT_BRANCH)
    in_place: bool = Field(default=False)

    @field_validator("url")
    @classmethod
    def _url_names_a_repository(cls, url: str) -> str:
        url = url.strip()
        repo_name_from_url(url)
        return url

    @field_validator("branch")
    @classmethod
    def _branch_not_blank(cls, branch: str) -> str:
        branch = branch.strip()
        if not branch:
            msg = "Branch name must not be empty"
            raise ValueError(msg)
        return branch

    @field_validator("folders")
    @classmethod
    def _folders_not_blank(cls, folders: list[str]) -> list[str]:
        if any(not folder.strip() for folder in folders):
            msg = "Folder patterns must not be empty"
            raise ValueError(msg)
        if any("\n" in folder or "\r" in folder for folder in folders):
            msg = "Folder patterns must not contain line breaks"
            raise ValueError(msg)
        return folders

    @property
    def repo_name(self) -> str:
        """Return the repository name taken from the URL."""
        return repo_name_from_url(self.url)

    @property
    def workspace_name(self) -> str:
        """Return the name of the directory the checkout is performed in."""
        if self.in_place:
            return f"{TEMP_PREFIX}{self.repo_name}"
        return self.repo_name


class RunConfig(BaseModel):
    """Flags that control reporting for a run.

    Attributes
    ----------
    verbose : bool
        Report each step as it runs (default: ``False``).
    show_errors : bool
        Echo the captured output of a failing command (default: ``False``).

    """

    model_config = ConfigDict(frozen=True)

    verbose: bool = Field(default=False)
    show_errors: bool = Field(default=False)
