"""Structural checks for recipe documents.

Validation walks the whole recipe directory and reports every problem it
finds instead of stopping at the first one. Each document is checked for the
required collections (locales, ingredients, stages, steps), for an ``en_US``
translation on every translatable field, and for identifiers and localized
slugs that collide with an earlier document.

Examples
--------
>>> from pathlib import Path
>>> report = validate_recipes(Path("recipes"))  # doctest: +SKIP
>>> report.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import (
    CATEGORIES,
    STAGE_WARNING_THRESHOLD,
    STEP_WARNING_THRESHOLD,
    US_ENGLISH,
)
from .corpus import scan_recipes
from .errors import (
    DuplicateIdentifierError,
    DuplicateSlugError,
    EmptyCollectionError,
    MissingLocaleError,
    RecipeError,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .model import LocalizedString, Recipe

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class ValidationResult:
    """Outcome for a single recipe document."""

    path: Path
    error: RecipeError | None = None
    warnings: list[str] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


@dc.dataclass(slots=True)
class ValidationReport:
    """Per-file outcomes in walk order."""

    results: list[ValidationResult] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every document passed."""
        return all(result.ok for result in self.results)

    @property
    def failures(self) -> list[ValidationResult]:
        return [result for result in self.results if not result.ok]


def validate_recipes(recipe_dir: Path) -> ValidationReport:
    """Validate every recipe document below ``recipe_dir``.

    Parse errors, structural errors, duplicate identifiers, and duplicate
    localized slugs are recorded against the offending file and the walk
    continues. A document that fails is not registered, so its id and slugs
    do not cause follow-on duplicate reports.
    """
    report = ValidationReport()
    found_ids: set[str] = set()
    found_slugs: set[tuple[str, str]] = set()

    for path, parsed in scan_recipes(recipe_dir):
        result = ValidationResult(path=path)
        report.results.append(result)
        if isinstance(parsed, RecipeError):
            result.error = parsed
            continue
        try:
            result.warnings = validate_recipe(parsed)
            _check_unique(parsed, found_ids, found_slugs)
        except RecipeError as exc:
            result.error = exc
            continue
        for warning in result.warnings:
            logger.warning("%s %s", path, warning)
        found_ids.add(parsed.id)
        found_slugs.update(parsed.slug.inner.items())
    return report


def validate_recipe(recipe: Recipe) -> list[str]:
    """Check one recipe and return any non-fatal warnings.

    Raises
    ------
    EmptyCollectionError
        If locales, ingredients, stages, or any stage's steps are empty.
    MissingLocaleError
        If a translatable field lacks an ``en_US`` translation.
    """
    if not recipe.locales:
        msg = "locales cannot be empty"
        raise EmptyCollectionError(msg)
    if not recipe.ingredients:
        msg = "ingredients cannot be empty"
        raise EmptyCollectionError(msg)

    _require_default("name", recipe.name)
    _require_default("slug", recipe.slug)
    _require_default("category", recipe.category)
    _require_default("cuisine", recipe.cuisine)
    _require_optional_default("description", recipe.description)
    _require_all_default("ingredients", recipe.ingredients)
    _require_all_default("equipment", recipe.equipment or [])

    if not recipe.stages:
        msg = "stages cannot be empty"
        raise EmptyCollectionError(msg)

    warnings: list[str] = []
    category = recipe.category.localized(US_ENGLISH)
    if category.lower() not in CATEGORIES:
        warnings.append(f"has unknown category {category!r}")
    if len(recipe.stages) > STAGE_WARNING_THRESHOLD:
        warnings.append(f"has more than {STAGE_WARNING_THRESHOLD} stages")

    step_count = 0
    for stage in recipe.stages:
        if not stage.steps:
            msg = "steps cannot be empty"
            raise EmptyCollectionError(msg)
        step_count += len(stage.steps)
        _require_default("stage.name", stage.name)
        _require_optional_default("stage.description", stage.description)
        _require_optional_default("stage.footer", stage.footer)
        _require_all_default("stage.steps", stage.steps)

    if step_count > STEP_WARNING_THRESHOLD:
        warnings.append(f"has over {STEP_WARNING_THRESHOLD} steps")
    return warnings


def _check_unique(
    recipe: Recipe, found_ids: set[str], found_slugs: set[tuple[str, str]]
) -> None:
    if recipe.id in found_ids:
        msg = f"duplicate id {recipe.id}"
        raise DuplicateIdentifierError(msg)
    for locale, slug in recipe.slug.inner.items():
        if (locale, slug) in found_slugs:
            msg = f"duplicate slug {slug} for {locale}"
            raise DuplicateSlugError(msg)


def _require_default(key: str, value: LocalizedString) -> None:
    if not value.has_locale(US_ENGLISH):
        msg = f"{key} must have {US_ENGLISH} translation"
        raise MissingLocaleError(US_ENGLISH, field=key, message=msg)


def _require_optional_default(key: str, value: LocalizedString | None) -> None:
    if value is not None:
        _require_default(key, value)


def _require_all_default(key: str, values: cabc.Iterable[LocalizedString]) -> None:
    for value in values:
        _require_default(key, value)


__all__ = [
    "ValidationReport",
    "ValidationResult",
    "validate_recipe",
    "validate_recipes",
]
