"""Errors raised while discovering the dependency graph."""


class PackageNotFoundError(LookupError):
    """A resolver could not produce metadata for an import path."""


class ResolutionError(Exception):
    """An import path could not be resolved from a base directory.

    Always fatal: the builder aborts and no graph is rendered.
    """

    def __init__(self, identifier: str, base_dir: str, cause: BaseException):
        self.identifier = identifier
        self.base_dir = base_dir
        self.cause = cause
        super().__init__(f"failed to import {identifier} from {base_dir}: {cause}")
