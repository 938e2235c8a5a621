"""Pytest configuration and fixtures."""
import re

import pytest

from godepgraph.config import GraphConfig
from godepgraph.graph.types import ResolvedPackage
from godepgraph.resolver import StaticResolver

NODE_RE = re.compile(r'^_(\d+) \[label="([^"]*)" style="filled" color="([a-z0-9]+)"\];$')
EDGE_RE = re.compile(r"^_(\d+) -> _(\d+);$")


class CountingResolver(StaticResolver):
    """StaticResolver that records every resolve() call."""

    def __init__(self, packages=None):
        super().__init__(packages)
        self.calls = []

    def resolve(self, import_path, src_dir):
        self.calls.append((import_path, src_dir))
        return super().resolve(import_path, src_dir)


def pkg(import_path, imports=(), **kwargs):
    """Shorthand for a ResolvedPackage living in a directory named after it."""
    kwargs.setdefault("dir", f"/src/{import_path}")
    return ResolvedPackage(import_path=import_path, imports=tuple(imports), **kwargs)


def make_resolver(*packages):
    return CountingResolver({p.import_path: p for p in packages})


def parse_dot(text):
    """
    Parse godepgraph DOT output.

    Returns:
        (nodes, edges) where nodes maps id -> (label, color) and edges is a
        list of (source_label, target_label) pairs.
    """
    lines = text.splitlines()
    assert lines[0] == "digraph godep {"
    assert lines[-1] == "}"

    nodes = {}
    raw_edges = []
    for line in lines[1:-1]:
        if line == 'rankdir="LR"':
            continue
        node = NODE_RE.match(line)
        if node:
            node_id = int(node.group(1))
            assert node_id not in nodes, f"duplicate node id {node_id}"
            nodes[node_id] = (node.group(2), node.group(3))
            continue
        edge = EDGE_RE.match(line)
        assert edge, f"unexpected line: {line!r}"
        raw_edges.append((int(edge.group(1)), int(edge.group(2))))

    for src, dst in raw_edges:
        assert src in nodes and dst in nodes, f"dangling edge _{src} -> _{dst}"

    edges = [(nodes[src][0], nodes[dst][0]) for src, dst in raw_edges]
    return nodes, edges


def labels(nodes):
    return sorted(label for label, _ in nodes.values())


@pytest.fixture
def make_config():
    """Factory for GraphConfig with test-friendly defaults."""

    def _make(roots=("app",), **kwargs):
        if "ignored" in kwargs:
            kwargs["ignored"] = frozenset(kwargs["ignored"]) | {"C"}
        return GraphConfig(roots=tuple(roots), **kwargs)

    return _make


@pytest.fixture
def diamond_resolver():
    """app -> libA, libB; libA -> libB."""
    return make_resolver(
        pkg("app", ["libA", "libB"]),
        pkg("libA", ["libB"]),
        pkg("libB"),
    )


@pytest.fixture
def stdlib_resolver():
    """app -> fmt (stdlib) -> io (stdlib); app -> cgolib (cgo)."""
    return make_resolver(
        pkg("app", ["fmt", "cgolib"]),
        pkg("fmt", ["io"], goroot=True),
        pkg("io", goroot=True),
        pkg("cgolib", ["C"], cgo_files=("wrap.go",)),
    )
