"""Built-in test suite for the path helpers, run by ``shellkit selftest``."""

from __future__ import annotations

import os
import tempfile

from shellkit.core import expand_link, expand_path, join_path
from shellkit.diagnostics import assert_eq
from shellkit.testing import CaseRegistry


def load_tests(registry: CaseRegistry) -> None:
    @registry.case
    def test_expand_path() -> None:
        assert_eq(expand_path("a/b/c/../d/./"), "a/b/d")
        assert_eq(expand_path("a/b/../.."), ".")
        assert_eq(expand_path("/a/b/../.."), "/")
        # Nothing to collapse; segments that only look like dots stay intact.
        assert_eq(expand_path("/a./ /\\/b../.c/..d"), "/a./ /\\/b../.c/..d")
        assert_eq(expand_path("/./../a/./.././a/.."), "/..")
        assert_eq(expand_path("/../b/././../../a"), "/../../a")
        assert_eq(expand_path("../b/././../../a"), "../../a")

    @registry.case
    def test_join_path() -> None:
        assert_eq(join_path("a", "b"), "a/b")
        assert_eq(join_path("a", "/b"), "/b")
        assert_eq(join_path("a/b/", "c"), "a/b/c")
        assert_eq(join_path("a/b", "c"), "a/b/c")
        assert_eq(join_path("a/b///", "c"), "a/b/c")

    @registry.case
    def test_expand_link() -> None:
        with tempfile.TemporaryDirectory() as workdir:
            workdir = os.path.realpath(workdir)
            os.symlink("_test_file", os.path.join(workdir, "_test_link1"))
            os.symlink("_test_link1", os.path.join(workdir, "_test_link2"))
            assert_eq(
                expand_link(os.path.join(workdir, "_test_link2")),
                os.path.join(workdir, "_test_file"),
            )


def build_registry() -> CaseRegistry:
    registry = CaseRegistry()
    load_tests(registry)
    return registry


__all__ = ["build_registry", "load_tests"]
