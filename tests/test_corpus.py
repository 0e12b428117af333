"""Tests for walking and parsing the recipe directory."""

from __future__ import annotations

import logging
import typing as typ

import pytest
from conftest import make_recipe, write_recipe
from ruamel.yaml import YAML

from just_recipes.corpus import (
    dump_recipe,
    iter_recipe_files,
    load_recipes,
    parse_recipe,
    scan_recipes,
)
from just_recipes.errors import MissingLocaleError, RecipeParseError
from just_recipes.model import Recipe

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_iter_recipe_files_accepts_both_suffixes(tmp_path: Path) -> None:
    write_recipe(tmp_path / "b", "two.yaml", make_recipe())
    write_recipe(tmp_path / "a", "one.yml", make_recipe())
    (tmp_path / "notes.txt").write_text("not a recipe", encoding="utf-8")
    names = [path.name for path in iter_recipe_files(tmp_path)]
    assert names == ["one.yml", "two.yaml"], f"unexpected walk order {names!r}"


def test_iter_recipe_files_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        iter_recipe_files(tmp_path / "missing")


def test_parse_recipe_reads_yaml_dates() -> None:
    recipe = parse_recipe(
        "id: abc\nlocales: [en_US]\nname: Tea\nslug: tea\n"
        "published: 2022-06-01\ningredients: [tea]\n"
        "category: Beverage\ncuisine: Southern\n"
        "stages:\n  - name: Brew\n    steps: [Steep.]\n"
    )
    assert recipe.published == "2022-06-01"
    assert recipe.name.localized() == "Tea"


def test_parse_recipe_wraps_yaml_errors() -> None:
    with pytest.raises(RecipeParseError, match="invalid YAML"):
        parse_recipe("id: [unterminated\n")


def test_duplicate_ids_keep_first_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """The later of two documents sharing an id is skipped and logged."""
    write_recipe(tmp_path, "a.yml", make_recipe(name="First"))
    write_recipe(tmp_path, "b.yml", make_recipe(name="Second", slug="second"))
    with caplog.at_level(logging.ERROR, logger="just_recipes.corpus"):
        corpus = load_recipes(tmp_path)
    assert [source.recipe.name.localized() for source in corpus.recipes] == ["First"]
    assert [path.name for path in corpus.duplicates] == ["b.yml"]
    assert "duplicate recipe id: gumbo01" in caplog.text


def test_load_recipes_fails_on_first_bad_document(tmp_path: Path) -> None:
    write_recipe(tmp_path, "a.yml", make_recipe())
    payload = make_recipe(id="other")
    del payload["cuisine"]
    bad = write_recipe(tmp_path, "b.yml", payload)
    with pytest.raises(RecipeParseError) as excinfo:
        load_recipes(tmp_path)
    assert str(excinfo.value).startswith(str(bad)), "error should name the file"
    assert "missing field `cuisine`" in str(excinfo.value)


def test_sorted_by_name_uses_default_locale(tmp_path: Path) -> None:
    write_recipe(tmp_path, "a.yml", make_recipe(id="1", name="Tea", slug="tea"))
    write_recipe(
        tmp_path,
        "b.yml",
        make_recipe(id="2", name={"en_US": "Beans", "fr_FR": "Zut"}, slug="beans"),
    )
    names = [s.recipe.name.localized() for s in load_recipes(tmp_path).sorted_by_name()]
    assert names == ["Beans", "Tea"]


def test_scan_recipes_reports_every_document(tmp_path: Path) -> None:
    write_recipe(tmp_path, "a.yml", {"id": "broken"})
    write_recipe(tmp_path, "b.yml", make_recipe())
    results = list(scan_recipes(tmp_path))
    assert isinstance(results[0][1], RecipeParseError)
    assert isinstance(results[1][1], Recipe)


def test_dump_recipe_is_loadable_yaml() -> None:
    recipe = Recipe.init("abc1234", "Red Beans", mock=True)
    text = dump_recipe(recipe)
    assert text.startswith("---\n")
    loaded = YAML(typ="safe").load(text)
    assert loaded["slug"] == "abc1234-red-beans"
    assert parse_recipe(text) == recipe


def test_read_recipe_rejects_undecodable_bytes(tmp_path: Path) -> None:
    """Non-UTF-8 documents fail the load with an error naming the file."""
    write_recipe(tmp_path, "a.yml", make_recipe())
    (tmp_path / "b.yml").write_bytes(b"id: x\nname: \xff\n")
    with pytest.raises(RecipeParseError, match=r"b\.yml: not valid UTF-8"):
        load_recipes(tmp_path)


def test_sort_key_names_file_and_field(tmp_path: Path) -> None:
    write_recipe(tmp_path, "fr.yml", make_recipe(name={"fr_FR": "Gombo"}))
    corpus = load_recipes(tmp_path)
    with pytest.raises(MissingLocaleError) as excinfo:
        corpus.sorted_by_name()
    assert excinfo.value.field == "name"
    assert str(excinfo.value).startswith(f"{tmp_path / 'fr.yml'}: name: "), (
        str(excinfo.value)
    )
