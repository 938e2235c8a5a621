"""Filtering and identity helpers shared by the builder and the visualizer.

All functions here are pure: they read a GraphConfig and package metadata
and never touch traversal state.
"""

from godepgraph.config import GraphConfig
from godepgraph.graph.types import ResolvedPackage

VENDOR_SEPARATOR = "/vendor/"


def canonical_import_path(import_path: str, goroot: bool, config: GraphConfig) -> str:
    """Strip a vendoring prefix when unvendoring is enabled.

    ``example.com/app/vendor/github.com/x/y`` becomes ``github.com/x/y``.
    Standard library paths are never rewritten.
    """
    if goroot or not config.unvendor:
        return import_path
    idx = import_path.find(VENDOR_SEPARATOR)
    if idx == -1:
        return import_path
    return import_path[idx + len(VENDOR_SEPARATOR):]


def has_prefixes(value: str, prefixes) -> bool:
    return any(value.startswith(p) for p in prefixes)


def is_ignored(raw_identity: str, canonical_identity: str, is_standard: bool, config: GraphConfig) -> bool:
    """Return True when a resolved package must be left out of the graph.

    Both the raw and the canonical identity are checked, so a vendored path
    can match a rule only once it has been unvendored.
    """
    return (
        raw_identity in config.ignored
        or canonical_identity in config.ignored
        or (is_standard and config.ignore_stdlib)
        or has_prefixes(raw_identity, config.ignored_prefixes)
        or has_prefixes(canonical_identity, config.ignored_prefixes)
    )


def is_package_ignored(pkg: ResolvedPackage, config: GraphConfig) -> bool:
    canonical = canonical_import_path(pkg.import_path, pkg.goroot, config)
    return is_ignored(pkg.import_path, canonical, pkg.goroot, config)


def get_imports(pkg: ResolvedPackage, config: GraphConfig) -> tuple[str, ...]:
    """Effective imports of a package, in discovery order.

    Test and external test imports follow the direct imports when tests are
    included. Duplicates are dropped and so is the package itself, which
    shows up when an external test package imports the package under test.
    """
    all_imports = list(pkg.imports)
    if config.include_tests:
        all_imports.extend(pkg.test_imports)
        all_imports.extend(pkg.xtest_imports)

    imports = []
    found = set()
    for imp in all_imports:
        if imp == pkg.import_path or imp in found:
            continue
        found.add(imp)
        imports.append(imp)
    return tuple(imports)
