"""Walk a recipe directory and parse every recipe document in it.

Two failure policies are offered over the same directory walk:

* :func:`load_recipes` is used by the site builder. It stops at the first
  document that does not parse, so a broken recipe never produces a partial
  site. Documents that reuse an already-seen ``id`` are logged and skipped.
* :func:`scan_recipes` is used by the validator. It yields every document
  with either its parsed recipe or the error it raised and never stops early.

Documents are visited in sorted path order so "first seen" is stable across
machines.

Examples
--------
>>> from pathlib import Path
>>> corpus = load_recipes(Path("recipes"))  # doctest: +SKIP
>>> [source.recipe.id for source in corpus.recipes]  # doctest: +SKIP
['a1b2c3d', 'x9y8z7w']
"""

from __future__ import annotations

import dataclasses as dc
import io
import logging
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import RECIPE_SUFFIXES
from .errors import (
    MissingLocaleError,
    RecipeError,
    RecipeParseError,
    SiteBuildError,
)
from .model import Recipe

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True, frozen=True)
class RecipeSource:
    """A parsed recipe together with the file it came from."""

    path: Path
    recipe: Recipe

    def default_text(self, field: str) -> str:
        """Return the ``en_US`` text of a required translatable ``field``.

        Raises
        ------
        MissingLocaleError
            If the field has no ``en_US`` translation; the message names the
            source file and the field.
        """
        try:
            return getattr(self.recipe, field).localized()
        except MissingLocaleError as exc:
            msg = f"{self.path}: {field}: {exc}"
            raise MissingLocaleError(exc.locale, field=field, message=msg) from exc


@dc.dataclass(slots=True)
class Corpus:
    """Recipes accepted by :func:`load_recipes`.

    Attributes
    ----------
    recipes : list[RecipeSource]
        Accepted recipes in walk order.
    duplicates : list[Path]
        Files skipped because their ``id`` was already taken.
    """

    recipes: list[RecipeSource] = dc.field(default_factory=list)
    duplicates: list[Path] = dc.field(default_factory=list)

    def sorted_by_name(self) -> list[RecipeSource]:
        """Return the recipes ordered by their default-locale name."""
        return sorted(self.recipes, key=lambda source: source.default_text("name"))


def iter_recipe_files(recipe_dir: Path) -> list[Path]:
    """Return every recipe document below ``recipe_dir`` in sorted order.

    Raises
    ------
    FileNotFoundError
        If ``recipe_dir`` is not a directory.
    """
    if not recipe_dir.is_dir():
        msg = f"Recipe directory '{recipe_dir}' not found."
        raise FileNotFoundError(msg)
    return sorted(
        path
        for path in recipe_dir.rglob("*")
        if path.is_file() and path.suffix in RECIPE_SUFFIXES
    )


def parse_recipe(text: str) -> Recipe:
    """Parse one YAML recipe document.

    Raises
    ------
    RecipeParseError
        If the YAML is malformed or does not describe a recipe.
    """
    try:
        payload = _safe_yaml().load(text)
    except YAMLError as exc:
        msg = f"invalid YAML: {exc}"
        raise RecipeParseError(msg) from exc
    return Recipe.from_data(payload)


def read_recipe(path: Path) -> Recipe:
    """Read and parse the recipe document at ``path``.

    Error messages are prefixed with the path so the failing file is always
    identified.
    """
    try:
        text = _read_text(path)
    except OSError as exc:
        msg = f"unable to read recipe {path}: {exc}"
        raise SiteBuildError(msg) from exc
    try:
        return parse_recipe(text)
    except RecipeParseError as exc:
        msg = f"{path}: {exc}"
        raise RecipeParseError(msg) from exc


def load_recipes(recipe_dir: Path) -> Corpus:
    """Load every recipe below ``recipe_dir``, failing on the first bad document.

    A document whose ``id`` was already loaded is skipped and logged at error
    level; loading itself never fails because of a duplicate.

    Raises
    ------
    RecipeParseError
        If any document cannot be parsed.
    """
    corpus = Corpus()
    seen_ids: set[str] = set()
    for path in iter_recipe_files(recipe_dir):
        recipe = read_recipe(path)
        if recipe.id in seen_ids:
            logger.error("duplicate recipe id: %s (%s)", recipe.id, path)
            corpus.duplicates.append(path)
            continue
        seen_ids.add(recipe.id)
        logger.debug("loaded %s from %s", recipe, path)
        corpus.recipes.append(RecipeSource(path=path, recipe=recipe))
    return corpus


def scan_recipes(
    recipe_dir: Path,
) -> cabc.Iterator[tuple[Path, Recipe | RecipeError]]:
    """Yield every recipe document with its parsed recipe or its error."""
    for path in iter_recipe_files(recipe_dir):
        try:
            text = _read_text(path)
        except OSError as exc:
            msg = f"{path}: unable to read recipe: {exc}"
            yield path, RecipeParseError(msg)
            continue
        except RecipeParseError as exc:
            yield path, exc
            continue
        try:
            recipe = parse_recipe(text)
        except RecipeError as exc:
            yield path, exc
            continue
        yield path, recipe


def dump_recipe(recipe: Recipe) -> str:
    """Return ``recipe`` as an authoring-friendly YAML document."""
    yaml = YAML()
    yaml.explicit_start = True
    yaml.default_flow_style = False
    yaml.indent(mapping=2, sequence=4, offset=2)
    buffer = io.StringIO()
    yaml.dump(recipe.to_document(), buffer)
    return buffer.getvalue()


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"{path}: not valid UTF-8: {exc}"
        raise RecipeParseError(msg) from exc


def _safe_yaml() -> YAML:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader


__all__ = [
    "Corpus",
    "RecipeSource",
    "dump_recipe",
    "iter_recipe_files",
    "load_recipes",
    "parse_recipe",
    "read_recipe",
    "scan_recipes",
]
