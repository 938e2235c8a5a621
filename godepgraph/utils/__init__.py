"""godepgraph utilities package."""

from .error_handler import GraphCommandError, handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger

__all__ = [
    "handle_exceptions",
    "GraphCommandError",
    "ExitCodes",
    "logger",
]
