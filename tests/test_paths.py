"""Tests for path helpers."""

import os

from sass_importer.paths import extension
from sass_importer.paths import is_partial
from sass_importer.paths import partial_path
from sass_importer.paths import pretty_uri
from sass_importer.paths import without_extension


def test_extension():
    assert extension("styles.scss") == ".scss"
    assert extension(os.path.join("a.b", "styles")) == ""
    assert extension("styles.import.sass") == ".sass"
    assert extension(".scss") == ""


def test_without_extension():
    assert without_extension("styles.scss") == "styles"
    assert without_extension(os.path.join("lib", "styles.import.css")) == os.path.join("lib", "styles.import")


def test_partial_path_prefixes_basename_only():
    assert partial_path("styles.scss") == "_styles.scss"
    assert partial_path(os.path.join("_lib", "grid.sass")) == os.path.join("_lib", "_grid.sass")


def test_is_partial():
    assert is_partial(os.path.join("lib", "_grid.scss"))
    assert not is_partial(os.path.join("_lib", "grid.scss"))


def test_pretty_uri_keeps_relative_paths(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert pretty_uri(os.path.join("lib", "_grid.scss")) == os.path.join("lib", "_grid.scss")


def test_pretty_uri_relativizes_paths_under_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert pretty_uri(str(tmp_path / "lib" / "_grid.scss")) == os.path.join("lib", "_grid.scss")


def test_pretty_uri_keeps_shorter_absolute_path(tmp_path, monkeypatch):
    deep = tmp_path / "a" / "b" / "c"
    deep.mkdir(parents=True)
    monkeypatch.chdir(deep)

    target = os.path.abspath(os.sep + "x.scss")
    assert pretty_uri(target) == target


def test_pretty_uri_normalizes_relative_paths():
    assert pretty_uri(os.path.join("lib", "..", "_a.scss")) == "_a.scss"
    assert pretty_uri(os.path.join(".", "lib", "_a.scss")) == os.path.join("lib", "_a.scss")


def test_pretty_uri_prefers_relative_path_at_equal_length(tmp_path, monkeypatch):
    """The root counts as a component, so ``/shared_styles/x.scss`` and ``../shared_styles/x.scss`` tie."""
    top_level = os.path.join(tmp_path.anchor, tmp_path.parts[1])
    monkeypatch.chdir(top_level)

    target = os.path.join(tmp_path.anchor, "shared_styles", "x.scss")
    assert pretty_uri(target) == os.path.join("..", "shared_styles", "x.scss")


def test_pretty_uri_keeps_absolute_path_one_component_shorter(tmp_path, monkeypatch):
    monkeypatch.chdir(os.path.join(tmp_path.anchor, tmp_path.parts[1], tmp_path.parts[2]))

    target = os.path.join(tmp_path.anchor, "shared_styles", "x.scss")
    assert pretty_uri(target) == target
