"""Recipe source-of-truth model and its single-locale projection.

A :class:`Recipe` is parsed from one YAML document and holds every
translation of every field. The site builder never renders a ``Recipe``
directly; it projects one into a :class:`RecipePartial` per published locale
with :meth:`Recipe.to_partial`, which resolves translations, sums stage
durations, and formats them for display and for structured data.

Examples
--------
>>> recipe = Recipe.init("abc1234", "Red Beans", mock=True)
>>> partial = recipe.to_partial("en_US", ["en_US"], [])
>>> partial.slug
'abc1234-red-beans'
>>> partial.total_time is None
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import datetime as dt
import random
import string
import typing as typ

from slugify import slugify

from just_recipes._constants import US_ENGLISH
from just_recipes.errors import MissingLocaleError, RecipeParseError
from just_recipes.model.localized import LocalizedString, localized_list
from just_recipes.when import duration_iso8601, format_duration, parse_duration

ZERO = dt.timedelta()
RECIPE_ID_LENGTH = 7


@dc.dataclass(slots=True, frozen=True)
class Stage:
    """An ordered phase of a recipe with its own steps and timings."""

    name: LocalizedString
    steps: list[LocalizedString]
    cook_time: dt.timedelta | None = None
    prep_time: dt.timedelta | None = None
    description: LocalizedString | None = None
    footer: LocalizedString | None = None

    @classmethod
    def from_data(cls, payload: object, *, context: str = "stage") -> Stage:
        """Parse a stage mapping from a recipe document."""
        if not isinstance(payload, cabc.Mapping):
            msg = f"{context}: expected a mapping, found {payload!r}"
            raise RecipeParseError(msg)
        name = LocalizedString.parse(
            _require(payload, "name", context=context), field=f"{context}.name"
        )
        steps = _parse_localized_list(
            _require(payload, "steps", context=context), field=f"{context}.steps"
        )
        return cls(
            name=name,
            steps=steps,
            cook_time=_parse_duration_field(
                payload.get("cook_time"), field=f"{context}.cook_time"
            ),
            prep_time=_parse_duration_field(
                payload.get("prep_time"), field=f"{context}.prep_time"
            ),
            description=_parse_optional_localized(
                payload.get("description"), field=f"{context}.description"
            ),
            footer=_parse_optional_localized(
                payload.get("footer"), field=f"{context}.footer"
            ),
        )

    @classmethod
    def init(cls, name: str) -> Stage:
        """Return a placeholder stage used when scaffolding new recipes."""
        return cls(
            name=LocalizedString.new(name),
            steps=[
                LocalizedString.new("First do this"),
                LocalizedString.new("Then do that"),
            ],
        )

    def to_partial(self, locale: str | None) -> StagePartial:
        """Resolve the stage for ``locale``.

        Raises
        ------
        MissingLocaleError
            If the name, description, footer, or any step lacks both the
            requested and the default translation.
        """
        cook_time = self.cook_time or ZERO
        prep_time = self.prep_time or ZERO
        return StagePartial(
            name=_localize(self.name, locale, field="stage.name"),
            cook_time=_human_time(cook_time),
            prep_time=_human_time(prep_time),
            total_time=_human_time(cook_time + prep_time),
            description=_localize_optional(
                self.description, locale, field="stage.description"
            ),
            footer=_localize_optional(self.footer, locale, field="stage.footer"),
            steps=localized_list(self.steps, locale, field="stage.steps"),
        )

    def to_data(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of every stage field."""
        return {
            "name": self.name.to_data(),
            "cook_time": _duration_data(self.cook_time),
            "prep_time": _duration_data(self.prep_time),
            "description": _optional_data(self.description),
            "footer": _optional_data(self.footer),
            "steps": [step.to_data() for step in self.steps],
        }

    def to_document(self) -> dict[str, typ.Any]:
        """Return the stage in the shape an author would write it."""
        document: dict[str, typ.Any] = {"name": _author_text(self.name)}
        if self.cook_time is not None:
            document["cook_time"] = format_duration(self.cook_time)
        if self.prep_time is not None:
            document["prep_time"] = format_duration(self.prep_time)
        if self.description is not None:
            document["description"] = _author_text(self.description)
        if self.footer is not None:
            document["footer"] = _author_text(self.footer)
        document["steps"] = [_author_text(step) for step in self.steps]
        return document


@dc.dataclass(slots=True, frozen=True)
class Recipe:
    """A dish with every translation of every field.

    Attributes
    ----------
    id : str
        Globally unique identifier; also the stem of the recipe's image
        files (``<id>.jpg`` and ``<id>_thumbnail.jpg``).
    locales : list[str]
        Locales the recipe is published in, in authoring order.
    published : str
        Publication date as written in the document.
    name, slug, category, cuisine : LocalizedString
        Required translatable fields.
    description : LocalizedString or None
        Optional summary shown under the title.
    keywords : list[LocalizedString] or None
        Optional search keywords.
    ingredients : list[LocalizedString]
        Ingredient lines; validation requires at least one.
    equipment : list[LocalizedString] or None
        Optional equipment lines.
    stages : list[Stage]
        Ordered stages; validation requires at least one.
    """

    id: str
    locales: list[str]
    published: str
    name: LocalizedString
    slug: LocalizedString
    category: LocalizedString
    cuisine: LocalizedString
    ingredients: list[LocalizedString]
    stages: list[Stage]
    description: LocalizedString | None = None
    keywords: list[LocalizedString] | None = None
    equipment: list[LocalizedString] | None = None

    def __str__(self) -> str:
        return f"Recipe {self.name} ({self.id})"

    @classmethod
    def from_data(cls, payload: object) -> Recipe:
        """Parse a recipe document that has already been decoded from YAML/JSON.

        Required fields are checked in document order so the first missing
        field is the one reported.

        Raises
        ------
        RecipeParseError
            If a required field is missing or a value has the wrong shape.
        """
        if not isinstance(payload, cabc.Mapping):
            msg = f"invalid type: expected a recipe mapping, found {payload!r}"
            raise RecipeParseError(msg)

        recipe_id = _require(payload, "id", context="")
        if not isinstance(recipe_id, str | int):
            msg = f"id: expected a string, found {recipe_id!r}"
            raise RecipeParseError(msg)
        locales = _require(payload, "locales", context="")
        if not isinstance(locales, list) or not all(
            isinstance(locale, str) for locale in locales
        ):
            msg = f"locales: expected a list of locale codes, found {locales!r}"
            raise RecipeParseError(msg)
        name = _require(payload, "name", context="")
        slug = _require(payload, "slug", context="")
        published = _parse_published(_require(payload, "published", context=""))
        ingredients = _require(payload, "ingredients", context="")
        category = _require(payload, "category", context="")
        cuisine = _require(payload, "cuisine", context="")
        stages_raw = _require(payload, "stages", context="")
        if not isinstance(stages_raw, list):
            msg = f"stages: expected a list, found {stages_raw!r}"
            raise RecipeParseError(msg)

        return cls(
            id=str(recipe_id),
            locales=list(locales),
            published=published,
            name=LocalizedString.parse(name, field="name"),
            slug=LocalizedString.parse(slug, field="slug"),
            category=LocalizedString.parse(category, field="category"),
            cuisine=LocalizedString.parse(cuisine, field="cuisine"),
            ingredients=_parse_localized_list(ingredients, field="ingredients"),
            stages=[
                Stage.from_data(stage, context=f"stages[{index}]")
                for index, stage in enumerate(stages_raw)
            ],
            description=_parse_optional_localized(
                payload.get("description"), field="description"
            ),
            keywords=_parse_optional_localized_list(
                payload.get("keywords"), field="keywords"
            ),
            equipment=_parse_optional_localized_list(
                payload.get("equipment"), field="equipment"
            ),
        )

    @classmethod
    def init(
        cls,
        recipe_id: str | None = None,
        name: str | None = None,
        *,
        mock: bool = False,
    ) -> Recipe:
        """Scaffold a new recipe, optionally filled with sample content.

        Parameters
        ----------
        recipe_id : str, optional
            Identifier to use; a random seven character alphanumeric id is
            generated when omitted.
        name : str, optional
            Recipe name; defaults to ``"A wonderful new recipe"``.
        mock : bool, optional
            When ``True`` include a description, ingredients, equipment, and a
            single stage so the scaffold validates and builds immediately.
        """
        if recipe_id is None:
            alphabet = string.ascii_letters + string.digits
            recipe_id = "".join(random.choices(alphabet, k=RECIPE_ID_LENGTH))
        name = name or "A wonderful new recipe"
        return cls(
            id=recipe_id,
            locales=[US_ENGLISH],
            published="2022-01-01",
            name=LocalizedString.new(name),
            slug=LocalizedString.new(slugify(f"{recipe_id}-{name}")),
            category=LocalizedString.new("Dinner"),
            cuisine=LocalizedString.new("American"),
            description=(
                LocalizedString.new("This recipe is pretty neat.") if mock else None
            ),
            keywords=[LocalizedString.new("favorite")],
            ingredients=(
                [
                    LocalizedString.new("celery"),
                    LocalizedString.new("onion"),
                    LocalizedString.new("bell pepper"),
                ]
                if mock
                else []
            ),
            equipment=[LocalizedString.new("dutch oven")] if mock else [],
            stages=[Stage.init("Cook")] if mock else [],
        )

    @property
    def cook_time(self) -> dt.timedelta:
        """Sum of every stage's cook time."""
        return sum((stage.cook_time or ZERO for stage in self.stages), ZERO)

    @property
    def prep_time(self) -> dt.timedelta:
        """Sum of every stage's prep time."""
        return sum((stage.prep_time or ZERO for stage in self.stages), ZERO)

    def to_partial(
        self,
        locale: str | None,
        allowed_locales: cabc.Sequence[str],
        images: cabc.Sequence[tuple[str, str]] = (),
    ) -> RecipePartial:
        """Project the recipe into a single resolved locale.

        Parameters
        ----------
        locale : str or None
            Locale to resolve; ``None`` selects ``en_US``.
        allowed_locales : Sequence[str]
            Locales the site publishes. Alternate links are taken from the
            recipe's own locale list for as long as each entry is allowed;
            the first disallowed locale ends the list.
        images : Sequence[tuple[str, str]]
            ``(thumbnail, full)`` filename pairs attached as given.

        Raises
        ------
        MissingLocaleError
            When a required translation is missing. Keywords are the
            exception: a missing keyword translation becomes ``""``.
        """
        cook_time = self.cook_time
        prep_time = self.prep_time
        total_time = cook_time + prep_time

        alternate_locales: list[tuple[str, str]] = []
        for alternate in self.locales:
            if alternate not in allowed_locales:
                break
            alternate_locales.append(
                (alternate, _localize(self.slug, alternate, field="slug"))
            )

        return RecipePartial(
            id=self.id,
            alternate_locales=alternate_locales,
            name=_localize(self.name, locale, field="name"),
            published=self.published,
            slug=_localize(self.slug, locale, field="slug"),
            description=_localize_optional(self.description, locale, field="description"),
            category=_localize(self.category, locale, field="category"),
            cuisine=_localize(self.cuisine, locale, field="cuisine"),
            keywords=[_keyword(keyword, locale) for keyword in self.keywords or []],
            ingredients=localized_list(self.ingredients, locale, field="ingredients"),
            equipment=localized_list(self.equipment or [], locale, field="equipment"),
            stages=[stage.to_partial(locale) for stage in self.stages],
            cook_time=_human_time(cook_time),
            prep_time=_human_time(prep_time),
            total_time=_human_time(total_time),
            sd_cook_time=_iso_time(cook_time),
            sd_prep_time=_iso_time(prep_time),
            sd_total_time=_iso_time(total_time),
            images=list(images),
        )

    def to_data(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping that :meth:`from_data` parses back."""
        return {
            "id": self.id,
            "locales": list(self.locales),
            "published": self.published,
            "name": self.name.to_data(),
            "slug": self.slug.to_data(),
            "category": self.category.to_data(),
            "cuisine": self.cuisine.to_data(),
            "description": _optional_data(self.description),
            "keywords": _optional_list_data(self.keywords),
            "ingredients": [value.to_data() for value in self.ingredients],
            "equipment": _optional_list_data(self.equipment),
            "stages": [stage.to_data() for stage in self.stages],
        }

    def to_document(self) -> dict[str, typ.Any]:
        """Return the recipe in the shape an author would write by hand.

        Single-locale values collapse to bare strings and absent optional
        fields are left out, so ``init`` scaffolds read naturally.
        """
        document: dict[str, typ.Any] = {
            "id": self.id,
            "locales": list(self.locales),
            "published": self.published,
            "name": _author_text(self.name),
            "slug": _author_text(self.slug),
            "category": _author_text(self.category),
            "cuisine": _author_text(self.cuisine),
        }
        if self.description is not None:
            document["description"] = _author_text(self.description)
        if self.keywords is not None:
            document["keywords"] = [_author_text(value) for value in self.keywords]
        document["ingredients"] = [_author_text(value) for value in self.ingredients]
        if self.equipment is not None:
            document["equipment"] = [_author_text(value) for value in self.equipment]
        document["stages"] = [stage.to_document() for stage in self.stages]
        return document


@dc.dataclass(slots=True)
class StagePartial:
    """A stage resolved for one locale."""

    name: str
    cook_time: str | None
    prep_time: str | None
    total_time: str | None
    description: str | None
    footer: str | None
    steps: list[str]


@dc.dataclass(slots=True)
class RecipePartial:
    """A recipe resolved for one locale and ready for rendering."""

    id: str
    alternate_locales: list[tuple[str, str]]
    name: str
    published: str
    slug: str
    description: str | None
    category: str
    cuisine: str
    keywords: list[str]
    ingredients: list[str]
    equipment: list[str]
    stages: list[StagePartial]
    cook_time: str | None
    prep_time: str | None
    total_time: str | None
    sd_cook_time: str | None
    sd_prep_time: str | None
    sd_total_time: str | None
    images: list[tuple[str, str]]

    def flat_steps(self) -> list[str]:
        """Return every stage's steps in order as one list."""
        return [step for stage in self.stages for step in stage.steps]


def _require(payload: cabc.Mapping[str, typ.Any], key: str, *, context: str) -> typ.Any:
    if key not in payload:
        prefix = f"{context}: " if context else ""
        msg = f"{prefix}missing field `{key}`"
        raise RecipeParseError(msg)
    return payload[key]


def _parse_published(value: object) -> str:
    match value:
        case dt.date():
            return value.isoformat()
        case str():
            return value
        case _:
            msg = f"published: expected a date string, found {value!r}"
            raise RecipeParseError(msg)


def _parse_localized_list(raw: object, *, field: str) -> list[LocalizedString]:
    if not isinstance(raw, list):
        msg = f"{field}: expected a list, found {raw!r}"
        raise RecipeParseError(msg)
    return [
        LocalizedString.parse(item, field=f"{field}[{index}]")
        for index, item in enumerate(raw)
    ]


def _parse_optional_localized(raw: object, *, field: str) -> LocalizedString | None:
    if raw is None:
        return None
    return LocalizedString.parse(raw, field=field)


def _parse_optional_localized_list(
    raw: object, *, field: str
) -> list[LocalizedString] | None:
    if raw is None:
        return None
    return _parse_localized_list(raw, field=field)


def _parse_duration_field(raw: object, *, field: str) -> dt.timedelta | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        msg = f"{field}: invalid value: {raw!r}, expected a duration"
        raise RecipeParseError(msg)
    try:
        return parse_duration(raw)
    except ValueError as exc:
        msg = f"{field}: invalid value: string {raw!r}, expected a duration"
        raise RecipeParseError(msg) from exc


def _localize(value: LocalizedString, locale: str | None, *, field: str) -> str:
    try:
        return value.localized(locale)
    except MissingLocaleError as exc:
        raise MissingLocaleError(locale, field=field) from exc


def _localize_optional(
    value: LocalizedString | None, locale: str | None, *, field: str
) -> str | None:
    if value is None:
        return None
    return _localize(value, locale, field=field)


def _keyword(value: LocalizedString, locale: str | None) -> str:
    try:
        return value.localized(locale)
    except MissingLocaleError:
        return ""


def _human_time(duration: dt.timedelta) -> str | None:
    return None if duration == ZERO else format_duration(duration)


def _iso_time(duration: dt.timedelta) -> str | None:
    return None if duration == ZERO else duration_iso8601(duration)


def _duration_data(duration: dt.timedelta | None) -> str | None:
    return None if duration is None else format_duration(duration)


def _optional_data(value: LocalizedString | None) -> dict[str, str] | None:
    return None if value is None else value.to_data()


def _optional_list_data(
    values: list[LocalizedString] | None,
) -> list[dict[str, str]] | None:
    return None if values is None else [value.to_data() for value in values]


def _author_text(value: LocalizedString) -> str | dict[str, str]:
    if list(value.inner) == [US_ENGLISH]:
        return value.inner[US_ENGLISH]
    return value.to_data()


__all__ = ["Recipe", "RecipePartial", "Stage", "StagePartial"]
