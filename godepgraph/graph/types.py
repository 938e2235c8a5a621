"""Shared data structures for the graph module.

- ResolvedPackage: raw metadata as reported by a resolver
- PackageRecord: one node of the built graph
- IdentityRegistry: short numeric node references for DOT output
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResolvedPackage:
    """Package metadata as reported by a resolver, before any filtering."""

    import_path: str
    dir: str = ""
    goroot: bool = False
    imports: tuple[str, ...] = ()
    test_imports: tuple[str, ...] = ()
    xtest_imports: tuple[str, ...] = ()
    cgo_files: tuple[str, ...] = ()


@dataclass(frozen=True)
class PackageRecord:
    """A resolved package stored in the graph under its canonical identity."""

    canonical_identity: str
    raw_identity: str
    is_standard: bool
    has_foreign_code: bool
    directory: str
    imports: tuple[str, ...] = ()


@dataclass
class IdentityRegistry:
    """Assigns small integers to identities in first-seen order."""

    ids: dict[str, int] = field(default_factory=dict)

    def get_id(self, identity: str) -> int:
        node_id = self.ids.get(identity)
        if node_id is None:
            node_id = len(self.ids)
            self.ids[identity] = node_id
        return node_id

    def __len__(self) -> int:
        return len(self.ids)
