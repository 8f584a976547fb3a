"""Tests for symbolic link expansion."""

from __future__ import annotations

import logging
import os

import pytest

from shellkit.core import DEFAULT_MAX_LINK_DEPTH, expand_link, expand_path, join_path, max_link_depth
from shellkit.exceptions import InvalidArgument, LinkCycle


def test_expand_link_follows_chain_in_same_directory(tmp_path) -> None:
    os.symlink("_test_file", tmp_path / "_test_link1")
    os.symlink("_test_link1", tmp_path / "_test_link2")

    result = expand_link(str(tmp_path / "_test_link2"))

    assert result == str(tmp_path / "_test_file")
    assert result == expand_path(join_path(str(tmp_path), "_test_file"))


def test_expand_link_returns_normalized_path_for_regular_file(tmp_path) -> None:
    target = tmp_path / "plain.txt"
    target.write_text("data", encoding="utf-8")

    assert expand_link(f"{tmp_path}/./sub/../plain.txt") == str(target)


def test_expand_link_mixes_absolute_and_relative_targets(tmp_path) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    os.symlink("../final", nested / "relative")
    os.symlink(str(nested / "relative"), tmp_path / "absolute")

    assert expand_link(str(tmp_path / "absolute")) == str(tmp_path / "final")


def test_expand_link_resolves_relative_start(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    os.symlink("dir/./target", "link")

    assert expand_link("link") == "dir/target"


def test_expand_link_detects_two_link_cycle(tmp_path) -> None:
    os.symlink("b", tmp_path / "a")
    os.symlink("a", tmp_path / "b")

    with pytest.raises(LinkCycle) as excinfo:
        expand_link(str(tmp_path / "a"))

    assert excinfo.value.path == str(tmp_path / "a")
    assert excinfo.value.chain == [str(tmp_path / "a"), str(tmp_path / "b")]


def test_expand_link_bounds_cycles_that_never_repeat_a_string(tmp_path) -> None:
    os.symlink("./self", tmp_path / "self")

    with pytest.raises(LinkCycle) as excinfo:
        expand_link(str(tmp_path / "self"), max_depth=5)

    assert len(excinfo.value.chain) == 5


def test_expand_link_with_virtual_link_table() -> None:
    links = {
        "/srv/current": "releases/v2",
        "/srv/releases/v2": "/opt/app/./build/../dist",
    }

    result = expand_link("/srv/current", is_symlink=links.__contains__, read_link=links.__getitem__)

    assert result == "/opt/app/dist"


def test_expand_link_chain_length_does_not_change_result() -> None:
    links = {f"/d/l{i}": f"l{i - 1}" for i in range(1, 30)}
    links["/d/l0"] = "../target"

    short = expand_link("/d/l0", is_symlink=links.__contains__, read_link=links.__getitem__)
    long = expand_link("/d/l29", is_symlink=links.__contains__, read_link=links.__getitem__)

    assert short == long == "/target"


def test_expand_link_reads_depth_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SHELLKIT_MAX_LINK_DEPTH", "3")

    with pytest.raises(LinkCycle) as excinfo:
        expand_link(
            "/d/a",
            is_symlink=lambda path: path.endswith("/a"),
            read_link=lambda path: "./a",
        )

    assert len(excinfo.value.chain) == 3


def test_max_link_depth_defaults() -> None:
    assert max_link_depth() == DEFAULT_MAX_LINK_DEPTH


@pytest.mark.parametrize("raw", ["zero", "0", "-4"])
def test_max_link_depth_rejects_invalid_values(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("SHELLKIT_MAX_LINK_DEPTH", raw)

    with pytest.raises(InvalidArgument):
        max_link_depth()


def test_expand_link_logs_each_hop(caplog) -> None:
    links = {"/d/a": "b", "/d/b": "c"}

    with caplog.at_level(logging.DEBUG, logger="shellkit.core"):
        expand_link("/d/a", is_symlink=links.__contains__, read_link=links.__getitem__)

    hops = [message for message in caplog.messages if message.startswith("link ")]
    assert hops == ["link /d/a -> b (/d/b)", "link /d/b -> c (/d/c)"]
