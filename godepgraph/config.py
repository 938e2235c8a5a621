"""Runtime configuration for godepgraph.

Two layers:
- load_runtime_config(): defaults, .godepgraph.json and GODEPGRAPH_* env vars
- GraphConfig: the immutable per-run configuration handed to the core
"""

import copy
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from godepgraph.utils.logging import logger

CONFIG_FILE = ".godepgraph.json"

# The cgo pseudo-package never resolves to a directory
ALWAYS_IGNORED = frozenset({"C"})

DEFAULTS = {
    "resolver": {
        "go_binary": "go",
        "timeout": 60,
    },
    "graph": {
        "ignore_prefixes": [],
        "ignore_packages": [],
        "build_tags": [],
    },
}


def split_list(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated option value.

    An empty value yields no entries rather than a single empty string,
    which as a prefix would match every package.
    """
    if not value:
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())


def load_runtime_config(root: str = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .godepgraph.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (GODEPGRAPH_<SECTION>_<KEY>)
    2. .godepgraph.json in root
    3. Built-in defaults

    Args:
        root: Directory to look for the config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / CONFIG_FILE
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key in cfg[section] and isinstance(value, type(cfg[section][key])):
                                cfg[section][key] = value
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config file from {path}: {e}")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"GODEPGRAPH_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                default_value = cfg[section][key]
                try:
                    if isinstance(default_value, int):
                        cfg[section][key] = int(value)
                    elif isinstance(default_value, list):
                        cfg[section][key] = list(split_list(value))
                    else:
                        cfg[section][key] = value
                except ValueError as e:
                    logger.warning(
                        f"Invalid value for environment variable {env_var}: '{value}' - {e}, "
                        f"using default {default_value!r}"
                    )

    return cfg


@dataclass(frozen=True)
class GraphConfig:
    """Immutable configuration for one graph run."""

    roots: tuple[str, ...]
    ignored: frozenset[str] = ALWAYS_IGNORED
    ignored_prefixes: tuple[str, ...] = ()
    ignore_stdlib: bool = False
    delve_goroot: bool = False
    build_tags: tuple[str, ...] = ()
    horizontal: bool = False
    include_tests: bool = False
    unvendor: bool = False

    def __post_init__(self):
        if not self.roots:
            raise ValueError("need at least one package name to process")

    @property
    def sorted_roots(self) -> list[str]:
        return sorted(self.roots)

    @classmethod
    def from_options(
        cls,
        packages: tuple[str, ...] | list[str],
        ignore_prefixes: str | None = None,
        ignore_packages: str | None = None,
        tags: str | None = None,
        runtime: dict[str, Any] | None = None,
        **flags: bool,
    ) -> "GraphConfig":
        """Build a GraphConfig from raw command line values.

        Comma-separated options extend the lists from the runtime config's
        ``graph`` section. Duplicate roots are collapsed, first one wins.
        """
        graph_cfg = (runtime or DEFAULTS)["graph"]

        roots = tuple(dict.fromkeys(packages))
        prefixes = tuple(graph_cfg["ignore_prefixes"]) + split_list(ignore_prefixes)
        ignored = ALWAYS_IGNORED | set(graph_cfg["ignore_packages"]) | set(split_list(ignore_packages))
        build_tags = tuple(graph_cfg["build_tags"]) + split_list(tags)

        return cls(
            roots=roots,
            ignored=frozenset(ignored),
            ignored_prefixes=prefixes,
            build_tags=tuple(dict.fromkeys(build_tags)),
            **flags,
        )
