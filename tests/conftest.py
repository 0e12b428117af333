"""Shared fixtures for recipe model and site build tests.

Recipe documents are written as JSON, which is also valid YAML 1.2, so the
fixtures can build payloads as plain dictionaries and still exercise the
YAML loader used in production.
"""

from __future__ import annotations

import copy
import typing as typ

import msgspec.json
import pytest

from just_recipes.config import SiteConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

RecipePayload = dict[str, typ.Any]

BASE_RECIPE: RecipePayload = {
    "id": "gumbo01",
    "locales": ["en_US"],
    "published": "2022-02-01",
    "name": "Gumbo",
    "slug": "gumbo",
    "category": "Main Dish",
    "cuisine": "Cajun",
    "ingredients": ["okra", "andouille"],
    "stages": [
        {
            "name": "Roux",
            "prep_time": "10m",
            "cook_time": "45m",
            "steps": ["Stir flour into hot oil.", "Cook until dark."],
        }
    ],
}


def make_recipe(**overrides: typ.Any) -> RecipePayload:
    """Return a copy of ``BASE_RECIPE`` with ``overrides`` applied."""
    payload = copy.deepcopy(BASE_RECIPE)
    payload.update(overrides)
    return payload


def write_recipe(directory: Path, filename: str, payload: RecipePayload) -> Path:
    """Write ``payload`` as a recipe document and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_bytes(msgspec.json.encode(payload))
    return path


@pytest.fixture
def site_config(tmp_path: Path) -> SiteConfig:
    """Return a config whose directories all live under ``tmp_path``."""
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "style.css").write_text("body {}\n", encoding="utf-8")
    (tmp_path / "recipes").mkdir()
    return SiteConfig(
        recipe_dir=tmp_path / "recipes",
        static_dir=static_dir,
        public_dir=tmp_path / "public",
        public_url="https://recipes.example/",
    )
