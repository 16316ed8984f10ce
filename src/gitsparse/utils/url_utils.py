"""Utility functions for deriving names from repository URLs."""

from __future__ import annotations

import re
from typing import Final
from urllib.parse import urlparse

from gitsparse.utils.exceptions import InvalidRepositoryURLError

# ``[user@]host:path`` remotes, as accepted by ``git clone``
_SCP_LIKE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(?:[\w.-]+@)?[\w.-]+:(?!//)(?P<path>.*)$")


def repo_name_from_url(url: str) -> str:
    """Return the repository name encoded in ``url``.

    The name is the last non-empty segment of the URL's path, without a trailing ``.git``.
    Scheme URLs (``https://host/owner/repo``), scp-like remotes (``git@host:owner/repo.git``)
    and plain filesystem paths are all accepted.

    Parameters
    ----------
    url : str
        The URL of the remote repository.

    Returns
    -------
    str
        The repository name.

    Raises
    ------
    InvalidRepositoryURLError
        If the URL has no usable path segment.

    """
    url = url.strip()
    if "://" in url:
        path = urlparse(url).path
    else:
        match = _SCP_LIKE_PATTERN.match(url)
        path = match.group("path") if match else url

    segments = [segment for segment in re.split(r"[/\\]", path) if segment]
    if not segments:
        raise InvalidRepositoryURLError(url)

    name = segments[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]

    if name in {"", ".", ".."}:
        raise InvalidRepositoryURLError(url)

    return name
