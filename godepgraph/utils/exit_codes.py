"""Centralized exit codes for the godepgraph CLI."""


class ExitCodes:
    """Standard exit codes for godepgraph."""

    SUCCESS = 0

    # A package failed to resolve, nothing was printed
    RESOLUTION_FAILURE = 1

    # Click's own exit code for bad arguments
    USAGE_ERROR = 2
