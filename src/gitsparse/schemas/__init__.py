"""Module containing the schemas for the gitsparse package."""

from gitsparse.schemas.invocation import Invocation, RunConfig
from gitsparse.schemas.process import ProcessResult
from gitsparse.schemas.workspace import Workspace

__all__ = ["Invocation", "ProcessResult", "RunConfig", "Workspace"]
