"""Graph package - dependency discovery and DOT rendering.

- builder: recursive import discovery
- visualizer: DOT output
- policy: ignore rules, unvendoring, import extraction
"""

from .builder import DependencyGraphBuilder
from .types import IdentityRegistry, PackageRecord, ResolvedPackage
from .visualizer import GraphVisualizer

__all__ = [
    "DependencyGraphBuilder",
    "GraphVisualizer",
    "PackageRecord",
    "ResolvedPackage",
    "IdentityRegistry",
]
