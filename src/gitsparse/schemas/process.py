"""Schema for the outcome of an external command."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProcessResult(BaseModel):
    """Outcome of running one external command.

    Attributes
    ----------
    command : list[str]
        The command line that was executed.
    status : int | None
        The exit status, or ``None`` when the process was terminated by a signal.
    stdout : str
        Captured standard output.
    stderr : str
        Captured standard error.

    """

    model_config = ConfigDict(frozen=True)

    command: list[str]
    status: int | None
    stdout: str = Field(default="")
    stderr: str = Field(default="")

    @property
    def succeeded(self) -> bool:
        """Return ``True`` if the command exited normally with status 0."""
        return self.status == 0

    @property
    def interrupted(self) -> bool:
        """Return ``True`` if the command did not run to completion."""
        return self.status is None

    @property
    def command_line(self) -> str:
        """Return the command as a single printable string."""
        return " ".join(self.command)
