"""Package resolvers - turn an import path into package metadata.

The graph builder only depends on the Resolver protocol:

    resolve(import_path, src_dir) -> ResolvedPackage

Implementations:
- GoListResolver: asks the Go toolchain via ``go list -json``
- StaticResolver: serves a fixed package table, loadable from YAML
"""

import json
import shutil
import subprocess
from pathlib import Path
from typing import Any, Protocol

import yaml

from godepgraph.errors import PackageNotFoundError
from godepgraph.graph.types import ResolvedPackage
from godepgraph.utils.logging import logger


class Resolver(Protocol):
    """Anything that can resolve an import path relative to a directory."""

    def resolve(self, import_path: str, src_dir: str) -> ResolvedPackage: ...


def _as_tuple(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(str(v) for v in value)


class GoListResolver:
    """Resolve packages with ``go list -json``.

    The command runs with ``src_dir`` as its working directory so that module
    and vendor lookups happen relative to the importing package, the same way
    the go tool resolves them during a build.
    """

    def __init__(self, build_tags: tuple[str, ...] = (), go_binary: str = "go", timeout: int = 60):
        self.build_tags = tuple(build_tags)
        self.go_binary = go_binary
        self.timeout = timeout
        self._binary_checked = False

    def _command(self, import_path: str) -> list[str]:
        cmd = [self.go_binary, "list", "-json"]
        if self.build_tags:
            cmd.append(f"-tags={','.join(self.build_tags)}")
        cmd.append(import_path)
        return cmd

    def resolve(self, import_path: str, src_dir: str) -> ResolvedPackage:
        if not self._binary_checked:
            if shutil.which(self.go_binary) is None:
                raise FileNotFoundError(f"go toolchain not found: {self.go_binary}")
            self._binary_checked = True

        cmd = self._command(import_path)
        logger.debug(f"Running {' '.join(cmd)} in {src_dir}")

        try:
            result = subprocess.run(
                cmd,
                cwd=src_dir,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise TimeoutError(f"go list timed out after {self.timeout} seconds") from e

        if result.returncode != 0:
            raise PackageNotFoundError(result.stderr.strip() or f"go list exited with {result.returncode}")

        return self.parse_package(result.stdout)

    @staticmethod
    def parse_package(output: str) -> ResolvedPackage:
        """Parse the JSON object printed by ``go list -json``."""
        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise PackageNotFoundError(f"invalid go list output: {e}") from e

        if not isinstance(data, dict) or not data.get("ImportPath"):
            raise PackageNotFoundError("go list output has no ImportPath")

        error = data.get("Error")
        if error:
            raise PackageNotFoundError(error.get("Err", str(error)) if isinstance(error, dict) else str(error))

        # go list reports imports after vendor resolution; ImportMap maps the
        # path written in the source to that resolved path.
        source_paths = {resolved: source for source, resolved in (data.get("ImportMap") or {}).items()}

        def source_imports(key: str) -> tuple[str, ...]:
            return tuple(source_paths.get(imp, imp) for imp in _as_tuple(data.get(key)))

        return ResolvedPackage(
            import_path=data["ImportPath"],
            dir=data.get("Dir", ""),
            goroot=bool(data.get("Goroot") or data.get("Standard")),
            imports=source_imports("Imports"),
            test_imports=source_imports("TestImports"),
            xtest_imports=source_imports("XTestImports"),
            cgo_files=_as_tuple(data.get("CgoFiles")),
        )


class StaticResolver:
    """Resolve packages from a fixed table, ignoring the base directory."""

    def __init__(self, packages: dict[str, ResolvedPackage] | None = None):
        self.packages = dict(packages or {})

    def add(self, pkg: ResolvedPackage) -> None:
        self.packages[pkg.import_path] = pkg

    def resolve(self, import_path: str, src_dir: str) -> ResolvedPackage:
        try:
            return self.packages[import_path]
        except KeyError:
            raise PackageNotFoundError(f"cannot find package \"{import_path}\"") from None

    @classmethod
    def from_mapping(cls, data: Any) -> "StaticResolver":
        """Build a resolver from a manifest mapping.

        Expected shape::

            packages:
              example.com/app:
                dir: /src/app
                goroot: false
                imports: [fmt, example.com/lib]
                test_imports: []
                xtest_imports: []
                cgo_files: []
        """
        if not isinstance(data, dict) or not isinstance(data.get("packages"), dict):
            raise ValueError("manifest must be a mapping with a 'packages' mapping")

        resolver = cls()
        for import_path, meta in data["packages"].items():
            meta = meta or {}
            if not isinstance(meta, dict):
                raise ValueError(f"manifest entry for {import_path} must be a mapping")
            resolver.add(
                ResolvedPackage(
                    import_path=str(import_path),
                    dir=str(meta.get("dir", import_path)),
                    goroot=bool(meta.get("goroot", False)),
                    imports=_as_tuple(meta.get("imports")),
                    test_imports=_as_tuple(meta.get("test_imports")),
                    xtest_imports=_as_tuple(meta.get("xtest_imports")),
                    cgo_files=_as_tuple(meta.get("cgo_files")),
                )
            )
        return resolver

    @classmethod
    def from_yaml(cls, path: str | Path) -> "StaticResolver":
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_mapping(data)
