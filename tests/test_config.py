"""Tests for loading ``site.yaml`` into ``SiteConfig``."""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest

from just_recipes.config import (
    SiteConfig,
    SiteConfigError,
    load_site_config,
    parse_public_url,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    config = load_site_config(tmp_path / "absent.yaml")
    assert config == SiteConfig()
    assert config.locales == ["en_US"]
    assert config.public_url == "http://localhost:8080/"


def test_values_override_defaults(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        recipe_dir: content
        locales: en_US, fr_FR
        public_url: https://recipes.example/blog/?utm=x
        oembed_width: 480
        """,
    )
    config = load_site_config(path)
    assert config.recipe_dir == Path("content")
    assert config.locales == ["en_US", "fr_FR"]
    assert config.public_url == "https://recipes.example/blog/", (
        "query strings should be dropped"
    )
    assert config.oembed_width == 480
    assert config.oembed_height == 400


def test_non_mapping_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(TypeError):
        load_site_config(_write(tmp_path, "- en_US\n- fr_FR"))


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("locales: []", "At least one locale"),
        ("oembed_height: 0", "oembed_height must be a positive integer"),
        ("public_url: ftp://recipes.example/", "invalid url schema"),
    ],
)
def test_invalid_values(tmp_path: Path, text: str, message: str) -> None:
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(_write(tmp_path, text))


@pytest.mark.parametrize(
    ("url", "message"),
    [
        ("recipes.example", "invalid url schema"),
        ("https:///path/", "invalid url host"),
        ("https://recipes.example/blog", "invalid url path"),
    ],
)
def test_parse_public_url_rejects(url: str, message: str) -> None:
    with pytest.raises(SiteConfigError, match=message):
        parse_public_url(url)


def test_parse_public_url_adds_root_path() -> None:
    assert parse_public_url("https://recipes.example") == "https://recipes.example/"


def test_with_overrides_ignores_none() -> None:
    overrides: dict[str, typ.Any] = {"public_dir": Path("dist"), "recipe_dir": None}
    config = SiteConfig().with_overrides(**overrides)
    assert config.public_dir == Path("dist")
    assert config.recipe_dir == Path("recipes")
