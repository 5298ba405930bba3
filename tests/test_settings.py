from pathlib import Path

import pytest

from cardboard_pirates.settings import (
    ASSETS_ENV,
    DEFAULT_ASSETS_ROOT,
    AssetKind,
    asset_path,
)


def test_asset_path_uses_environment_root(monkeypatch, tmp_path):
    monkeypatch.setenv(ASSETS_ENV, str(tmp_path))
    assert asset_path("images", "logo.png") == tmp_path / "images" / "logo.png"


def test_asset_path_default_root(monkeypatch):
    monkeypatch.delenv(ASSETS_ENV, raising=False)
    assert asset_path("maps", "map1.txt") == DEFAULT_ASSETS_ROOT / "maps" / "map1.txt"


def test_default_root_matches_source_layout(monkeypatch):
    monkeypatch.delenv(ASSETS_ENV, raising=False)
    expected = Path("..") / "assets" / "images" / "logo.png"
    assert asset_path(AssetKind.IMAGES, "logo.png") == expected


@pytest.mark.parametrize(
    "kind, folder",
    [
        (AssetKind.IMAGES, "images"),
        (AssetKind.SOUNDS, "sounds"),
        (AssetKind.MAPS, "maps"),
        (AssetKind.FONTS, "fonts"),
    ],
)
def test_asset_kind_enum_and_string_agree(monkeypatch, tmp_path, kind, folder):
    monkeypatch.setenv(ASSETS_ENV, str(tmp_path))
    assert asset_path(kind, "x") == asset_path(folder, "x")
    assert asset_path(kind, "x").parent.name == folder


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        asset_path("videos", "intro.mp4")