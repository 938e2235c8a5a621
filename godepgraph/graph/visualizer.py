"""Graph visualizer module - Graphviz DOT output for the package graph.

Visual encoding:
- hotpink1: root packages named on the command line
- palegreen: standard library packages
- darkgoldenrod1: packages with cgo files
- paleturquoise: everything else
"""

from collections import Counter

from godepgraph.config import GraphConfig
from godepgraph.graph.policy import is_ignored
from godepgraph.graph.types import IdentityRegistry, PackageRecord
from godepgraph.utils.logging import logger


class GraphVisualizer:
    """Render a built package map as a DOT digraph."""

    NODE_COLORS = {
        "root": "hotpink1",
        "stdlib": "palegreen",
        "cgo": "darkgoldenrod1",
        "default": "paleturquoise",
    }

    def __init__(self, config: GraphConfig):
        self.config = config
        self.kinds: Counter = Counter()
        self.edge_count = 0

    def classify(self, record: PackageRecord, roots) -> str:
        """Pick the node kind; the first matching rule wins."""
        if record.raw_identity in roots:
            return "root"
        if record.is_standard:
            return "stdlib"
        if record.has_foreign_code:
            return "cgo"
        return "default"

    def _ignored(self, record: PackageRecord) -> bool:
        return is_ignored(record.raw_identity, record.canonical_identity, record.is_standard, self.config)

    @staticmethod
    def _quote(value: str) -> str:
        return value.replace("\\", "\\\\").replace('"', '\\"')

    def generate_dot(self, packages: dict[str, PackageRecord], roots=None) -> str:
        """
        Generate the DOT text for a package map.

        Args:
            packages: canonical identity -> PackageRecord, as built
            roots: root import paths (defaults to the configured roots)

        Returns:
            DOT source, newline terminated
        """
        roots = set(self.config.roots if roots is None else roots)
        registry = IdentityRegistry()
        self.kinds = Counter()
        self.edge_count = 0

        lines = ["digraph godep {"]
        if self.config.horizontal:
            lines.append('rankdir="LR"')

        for name in sorted(packages):
            record = packages[name]
            if self._ignored(record):
                continue

            pkg_id = registry.get_id(name)
            kind = self.classify(record, roots)
            self.kinds[kind] += 1
            lines.append(
                f'_{pkg_id} [label="{self._quote(name)}" style="filled" color="{self.NODE_COLORS[kind]}"];'
            )

            # Mirrors the builder: stdlib imports were never walked
            if record.is_standard and not self.config.delve_goroot:
                continue

            for imp in record.imports:
                target = packages.get(imp)
                if target is None or self._ignored(target):
                    continue
                lines.append(f"_{pkg_id} -> _{registry.get_id(imp)};")
                self.edge_count += 1

        lines.append("}")

        logger.debug(f"Rendered {len(registry)} nodes and {self.edge_count} edges")
        return "\n".join(lines) + "\n"
