"""gitsparse: Check out selected folders of a remote Git repository."""

from gitsparse.entrypoint import sparse_checkout, sparse_checkout_url
from gitsparse.schemas import Invocation, RunConfig

__all__ = ["Invocation", "RunConfig", "sparse_checkout", "sparse_checkout_url"]
