"""Command-line interface (CLI) for gitsparse."""

# pylint: disable=no-value-for-parameter
from __future__ import annotations

from typing import TypedDict

import click
from pydantic import ValidationError
from typing_extensions import Unpack

from gitsparse.config import DEFAULT_BRANCH
from gitsparse.entrypoint import sparse_checkout
from gitsparse.schemas import Invocation, ProcessResult, RunConfig
from gitsparse.utils.exceptions import GitSparseError, MergeError, RollbackError
from gitsparse.utils.logging_config import configure_logging, get_logger

# Initialize logger for this module
logger = get_logger(__name__)


class _CLIArgs(TypedDict):
    url: str
    folders: tuple[str, ...]
    branch: str
    in_place: bool
    verbose: bool
    errors: bool


@click.command()
@click.version_option(package_name="gitsparse")
@click.argument("url", type=str)
@click.argument("folders", type=str, nargs=-1, required=True)
@click.option("--branch", "-b", default=DEFAULT_BRANCH, show_default=True, help="Branch to check out")
@click.option(
    "--in-place",
    "-i",
    is_flag=True,
    default=False,
    help="Move the checked out folders into the current directory instead of a new subfolder",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Report each step as it runs")
@click.option(
    "--errors",
    "-e",
    is_flag=True,
    default=False,
    help="On failure, print the captured output of the failing git command",
)
def main(**cli_kwargs: Unpack[_CLIArgs]) -> None:
    """Sparsely check out FOLDERS of the repository at URL.

    Parameters
    ----------
    **cli_kwargs : Unpack[_CLIArgs]
        The parsed command-line arguments.

    Examples
    --------
    Check out two folders into ./repo:
        $ gitsparse https://github.com/user/repo docs src/utils

    Use another branch:
        $ gitsparse https://github.com/user/repo docs --branch develop

    Merge the folders into the current directory:
        $ gitsparse https://github.com/user/repo docs --in-place

    """
    _main(**cli_kwargs)


def _main(
    url: str,
    folders: tuple[str, ...],
    *,
    branch: str = DEFAULT_BRANCH,
    in_place: bool = False,
    verbose: bool = False,
    errors: bool = False,
) -> None:
    """Validate the arguments, run the checkout and report the outcome.

    Raises
    ------
    click.Abort
        Raised if the checkout fails, so that the exit status is non-zero.

    """
    config = RunConfig(verbose=verbose, show_errors=errors)
    configure_logging(config)

    try:
        invocation = Invocation(url=url, folders=list(folders), branch=branch, in_place=in_place)
        result = sparse_checkout(invocation, config=config)
    except ValidationError as exc:
        click.echo(f"Error: {_validation_message(exc)}", err=True)
        raise click.Abort from exc
    except GitSparseError as exc:
        _report_failure(exc, config)
        raise click.Abort from exc

    if in_place:
        click.echo(f"Checked out {', '.join(folders)} into {result}")
    else:
        click.echo(f"Checked out {', '.join(folders)} into {result.name}/")


def _report_failure(exc: GitSparseError, config: RunConfig) -> None:
    """Print ``exc`` and, if requested, the output of the command that caused it."""
    click.echo(f"Error: {exc}", err=True)

    cause = exc.cause if isinstance(exc, RollbackError) else exc
    if isinstance(cause, MergeError) and cause.moved:
        moved = ", ".join(str(path) for path in cause.moved)
        click.echo(f"Already moved into the current directory: {moved}", err=True)

    process_result: ProcessResult | None = getattr(cause, "result", None)
    if config.show_errors and process_result is not None:
        click.echo(f"\n--- {process_result.command_line} ---", err=True)
        click.echo(f"stdout:\n{process_result.stdout}", err=True)
        click.echo(f"stderr:\n{process_result.stderr}", err=True)


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors())


if __name__ == "__main__":
    main()
