"""Tests for the shared ignore, unvendor and import extraction helpers."""

import pytest

from conftest import pkg
from godepgraph.graph.policy import canonical_import_path, get_imports, has_prefixes, is_ignored


class TestCanonicalImportPath:

    def test_unchanged_without_flag(self, make_config):
        assert canonical_import_path("app/vendor/lib", False, make_config()) == "app/vendor/lib"

    def test_strips_vendor_prefix(self, make_config):
        config = make_config(unvendor=True)
        assert canonical_import_path("example.com/app/vendor/github.com/x/y", False, config) == "github.com/x/y"

    def test_strips_at_first_marker(self, make_config):
        config = make_config(unvendor=True)
        assert canonical_import_path("a/vendor/b/vendor/c", False, config) == "b/vendor/c"

    def test_stdlib_never_rewritten(self, make_config):
        config = make_config(unvendor=True)
        assert canonical_import_path("vendor/golang.org/x/net/http2", True, config) == "vendor/golang.org/x/net/http2"

    def test_leading_vendor_dir_is_not_a_marker(self, make_config):
        config = make_config(unvendor=True)
        assert canonical_import_path("vendor/lib", False, config) == "vendor/lib"


class TestIsIgnored:

    @pytest.mark.parametrize(
        "raw, canonical, standard, kwargs",
        [
            ("lib", "lib", False, {"ignored": {"lib"}}),
            ("app/vendor/lib", "lib", False, {"ignored": {"lib"}}),
            ("fmt", "fmt", True, {"ignore_stdlib": True}),
            ("golang.org/x/net", "golang.org/x/net", False, {"ignored_prefixes": ("golang.org/",)}),
            ("app/vendor/golang.org/x", "golang.org/x", False, {"ignored_prefixes": ("golang.org/",)}),
        ],
    )
    def test_each_rule_matches(self, make_config, raw, canonical, standard, kwargs):
        assert is_ignored(raw, canonical, standard, make_config(**kwargs))

    def test_nothing_matches(self, make_config):
        config = make_config(ignored={"other"}, ignored_prefixes=("golang.org/",))
        assert not is_ignored("github.com/x/y", "github.com/x/y", False, config)

    def test_stdlib_kept_without_flag(self, make_config):
        assert not is_ignored("fmt", "fmt", True, make_config())

    def test_has_prefixes_empty(self):
        assert not has_prefixes("anything", ())


class TestGetImports:

    def test_direct_only(self, make_config):
        p = pkg("app", ["a", "b"], test_imports=("t",), xtest_imports=("x",))
        assert get_imports(p, make_config()) == ("a", "b")

    def test_test_imports_appended_in_order(self, make_config):
        p = pkg("app", ["a", "b"], test_imports=("t", "a"), xtest_imports=("x", "t"))
        assert get_imports(p, make_config(include_tests=True)) == ("a", "b", "t", "x")

    def test_self_import_dropped(self, make_config):
        p = pkg("app", ["a"], xtest_imports=("app",))
        assert get_imports(p, make_config(include_tests=True)) == ("a",)

    def test_no_imports(self, make_config):
        assert get_imports(pkg("leaf"), make_config(include_tests=True)) == ()
