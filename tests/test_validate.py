"""Tests for recipe validation messages and the per-file report."""

from __future__ import annotations

import typing as typ

import pytest
from conftest import make_recipe, write_recipe

from just_recipes.errors import (
    DuplicateIdentifierError,
    DuplicateSlugError,
    EmptyCollectionError,
    MissingLocaleError,
    RecipeParseError,
)
from just_recipes.model import Recipe
from just_recipes.validate import validate_recipe, validate_recipes

if typ.TYPE_CHECKING:
    from pathlib import Path


def _stage(**overrides: typ.Any) -> dict[str, typ.Any]:
    stage: dict[str, typ.Any] = {"name": "Cook", "steps": ["Stir."]}
    stage.update(overrides)
    return stage


@pytest.mark.parametrize(
    ("overrides", "error", "message"),
    [
        ({"locales": []}, EmptyCollectionError, "locales cannot be empty"),
        ({"ingredients": []}, EmptyCollectionError, "ingredients cannot be empty"),
        ({"stages": []}, EmptyCollectionError, "stages cannot be empty"),
        (
            {"stages": [_stage(steps=[])]},
            EmptyCollectionError,
            "steps cannot be empty",
        ),
        (
            {"name": {"fr_FR": "Gombo"}},
            MissingLocaleError,
            "name must have en_US translation",
        ),
        (
            {"description": {"fr_FR": "Bon"}},
            MissingLocaleError,
            "description must have en_US translation",
        ),
        (
            {"equipment": [{"fr_FR": "cocotte"}]},
            MissingLocaleError,
            "equipment must have en_US translation",
        ),
        (
            {"stages": [_stage(footer={"fr_FR": "Servir"})]},
            MissingLocaleError,
            "stage.footer must have en_US translation",
        ),
        (
            {"stages": [_stage(steps=[{"fr_FR": "Remuer"}])]},
            MissingLocaleError,
            "stage.steps must have en_US translation",
        ),
    ],
)
def test_validate_recipe_errors(
    overrides: dict[str, typ.Any], error: type[Exception], message: str
) -> None:
    recipe = Recipe.from_data(make_recipe(**overrides))
    with pytest.raises(error) as excinfo:
        validate_recipe(recipe)
    assert str(excinfo.value) == message, f"unexpected message {excinfo.value}"


def test_validate_recipe_passes_clean_recipe() -> None:
    assert validate_recipe(Recipe.from_data(make_recipe())) == []


def test_validate_recipe_warns_on_large_recipes() -> None:
    """Six stages of four steps exceed both the stage and step thresholds."""
    stages = [_stage(steps=["a", "b", "c", "d"]) for _ in range(6)]
    warnings = validate_recipe(Recipe.from_data(make_recipe(stages=stages)))
    assert warnings == ["has more than 5 stages", "has over 20 steps"]


def test_validate_recipe_warns_on_unknown_category() -> None:
    warnings = validate_recipe(Recipe.from_data(make_recipe(category="Snackery")))
    assert warnings == ["has unknown category 'Snackery'"]


def test_validate_recipes_reports_every_file(tmp_path: Path) -> None:
    """Validation keeps going after failures and records one result per file."""
    write_recipe(tmp_path, "a.yml", make_recipe())
    write_recipe(tmp_path, "b.yml", make_recipe(slug="other"))
    write_recipe(tmp_path, "c.yml", make_recipe(id="c", slug="gumbo"))
    write_recipe(tmp_path, "d.yml", {"id": "d"})
    write_recipe(tmp_path, "e.yml", make_recipe(id="e", slug="fine"))

    report = validate_recipes(tmp_path)

    errors = [type(result.error) for result in report.results]
    assert errors == [
        type(None),
        DuplicateIdentifierError,
        DuplicateSlugError,
        RecipeParseError,
        type(None),
    ], f"unexpected per-file errors {errors!r}"
    assert not report.ok
    assert [result.path.name for result in report.failures] == [
        "b.yml",
        "c.yml",
        "d.yml",
    ]


def test_failed_documents_do_not_claim_slugs(tmp_path: Path) -> None:
    write_recipe(tmp_path, "a.yml", make_recipe(ingredients=[]))
    write_recipe(tmp_path, "b.yml", make_recipe(id="b"))
    report = validate_recipes(tmp_path)
    assert [result.ok for result in report.results] == [False, True]


def test_slugs_are_unique_per_locale(tmp_path: Path) -> None:
    """The same slug may be reused in a different locale."""
    write_recipe(tmp_path, "a.yml", make_recipe(slug={"en_US": "pain"}))
    write_recipe(
        tmp_path,
        "b.yml",
        make_recipe(id="b", slug={"en_US": "bread", "fr_FR": "pain"}),
    )
    assert validate_recipes(tmp_path).ok


def test_undecodable_file_is_reported_and_scan_continues(tmp_path: Path) -> None:
    """A file that is not UTF-8 fails on its own; later files are still checked."""
    write_recipe(tmp_path, "a.yml", make_recipe())
    (tmp_path / "b.yml").write_bytes(b"id: x\nname: \xff\n")
    write_recipe(tmp_path, "c.yml", make_recipe(id="c", slug="other"))

    report = validate_recipes(tmp_path)

    assert [result.path.name for result in report.results] == [
        "a.yml",
        "b.yml",
        "c.yml",
    ], "every file should have a result"
    assert [result.ok for result in report.results] == [True, False, True]
    error = report.results[1].error
    assert isinstance(error, RecipeParseError)
    assert "b.yml" in str(error), f"error should name the file: {error}"
    assert "UTF-8" in str(error)
