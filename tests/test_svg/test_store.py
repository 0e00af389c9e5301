"""Tests for the icon set file store."""

import pytest

from pix31.errors import IconSourceNotFoundError, MissingSourceFileError, UnreadableSourceFileError
from pix31.svg.store import IconStore
from tests.conftest import CHEVRON_DOWN_SVG


def test_list_names_only_svgs_sorted(store):
    assert store.list_names() == ["4k-box", "blank", "broken", "chevron-down", "chevron-up", "home"]


def test_list_reflects_directory_changes(store):
    (store.icons_dir / "zap.svg").write_text("<svg/>")
    assert "zap" in store.list_names()


def test_read(store):
    assert store.read("chevron-down") == CHEVRON_DOWN_SVG


def test_read_missing(store):
    with pytest.raises(MissingSourceFileError):
        store.read("nope")


def test_read_undecodable(store):
    (store.icons_dir / "latin.svg").write_bytes(b"<svg>\xff</svg>")
    with pytest.raises(UnreadableSourceFileError, match="latin"):
        store.read("latin")


def test_missing_directory(tmp_path):
    store = IconStore(tmp_path / "node_modules" / "pixelarticons" / "svg")
    with pytest.raises(IconSourceNotFoundError, match="npm install pixelarticons"):
        store.list_names()


def test_for_project(tmp_path):
    store = IconStore.for_project(tmp_path, "icons")
    assert store.icons_dir == tmp_path / "icons"
