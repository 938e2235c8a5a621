"""Graph builder module - discovers the transitive import graph."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from godepgraph.config import GraphConfig
from godepgraph.errors import ResolutionError
from godepgraph.graph.policy import canonical_import_path, get_imports, is_package_ignored
from godepgraph.graph.types import PackageRecord
from godepgraph.utils.logging import logger

if TYPE_CHECKING:
    from godepgraph.resolver import Resolver


class DependencyGraphBuilder:
    """Walk the imports of the root packages depth first.

    Packages are memoized by the import path the resolver reports, and
    stored under their canonical (possibly unvendored) identity. Standard
    library packages are leaves unless ``delve_goroot`` is set.

    A builder is meant for one run: construct, call build(), read the result.
    build() resets its own state, so calling it again gives the same map.
    """

    def __init__(self, resolver: Resolver, config: GraphConfig):
        self.resolver = resolver
        self.config = config
        self.processed: set[str] = set()
        self.packages: dict[str, PackageRecord] = {}

    def build(self, base_dir: str | None = None) -> dict[str, PackageRecord]:
        """Resolve all roots from base_dir (default: cwd) and return the node map.

        Raises:
            ResolutionError: if any package fails to resolve. Nothing is
                returned in that case.
        """
        base_dir = base_dir or os.getcwd()
        self.processed = set()
        self.packages = {}

        for root in self.config.sorted_roots:
            self.process_package(base_dir, root)

        logger.debug(f"Built dependency graph with {len(self.packages)} packages")
        return self.packages

    def process_package(self, src_dir: str, import_path: str) -> None:
        config = self.config
        if import_path in config.ignored:
            return

        logger.debug(f"Resolving {import_path} from {src_dir}")
        try:
            pkg = self.resolver.resolve(import_path, src_dir)
        except Exception as e:
            raise ResolutionError(import_path, src_dir, e) from e

        if is_package_ignored(pkg, config):
            return

        if pkg.import_path in self.processed:
            return
        self.processed.add(pkg.import_path)

        record = PackageRecord(
            canonical_identity=canonical_import_path(pkg.import_path, pkg.goroot, config),
            raw_identity=pkg.import_path,
            is_standard=pkg.goroot,
            has_foreign_code=bool(pkg.cgo_files),
            directory=pkg.dir,
            imports=get_imports(pkg, config),
        )
        self.packages[record.canonical_identity] = record

        # Standard library packages are leaves
        if record.is_standard and not config.delve_goroot:
            return

        for imp in record.imports:
            if imp not in self.processed:
                self.process_package(record.directory, imp)
