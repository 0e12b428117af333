"""View objects handed to the template renderer.

Each dataclass here is the complete context for one template. The renderer
exposes every field as a top-level template variable, so a template written
against ``RecipeView`` can use ``recipe``, ``site``, ``self_url``, and so on.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from just_recipes._constants import US_ENGLISH
from just_recipes.model.recipe import RecipePartial


@dc.dataclass(slots=True, frozen=True)
class SiteView:
    """Per-build context threaded into every page.

    Attributes
    ----------
    public_url : str
        Absolute base URL of the published site, always ending in ``/``.
    version : str
        Version of the generator, used for cache busting asset URLs.
    name : str
        Site name used in page titles and oEmbed provider metadata.
    """

    public_url: str
    version: str
    name: str = "Just Recipes"

    def url(self, path: str) -> str:
        """Return the absolute URL for a site-relative ``path``."""
        return f"{self.public_url}{path.lstrip('/')}"


@dc.dataclass(slots=True)
class HomeView:
    """Context for the locale-neutral home and about pages."""

    locales: list[str]
    title: str
    site: SiteView
    self_url: str
    locale: str = US_ENGLISH


@dc.dataclass(slots=True)
class IndexView:
    locale: str
    title: str
    recipes: list[RecipePartial]
    site: SiteView
    self_url: str


@dc.dataclass(slots=True)
class RecipeView:
    """Context for a full recipe page."""

    locale: str
    title: str
    recipe: RecipePartial
    site: SiteView
    flat_steps: list[str]
    self_url: str
    oembed_url: str
    meta: list[tuple[str, str]]


@dc.dataclass(slots=True)
class SearchView:
    """One entry of a locale's ``search.json``."""

    name: str
    link: str


@dc.dataclass(slots=True)
class SiteMapView:
    links: list[str]
    site: SiteView


@dc.dataclass(slots=True)
class LinkListView:
    """Context for a page that lists labelled links (groups or group members).

    ``links`` holds ``(href, label)`` pairs in display order.
    """

    locale: str
    title: str
    links_label: str
    links: list[tuple[str, str]]
    site: SiteView
    self_url: str


@dc.dataclass(slots=True)
class OembedView:
    """Context for the embeddable ``oembed.html`` card."""

    locale: str
    title: str
    recipe: RecipePartial
    site: SiteView
    recipe_url: str
    image_url: str | None


@dc.dataclass(slots=True)
class OembedJsonView:
    """Fixed-shape oEmbed ``rich`` response written to ``oembed.json``."""

    html: str
    response_type: str = "rich"
    version: str = "1.0"
    title: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    provider_name: str | None = None
    provider_url: str | None = None
    cache_age: str | None = None
    thumbnail_url: str | None = None
    thumbnail_width: int | None = None
    thumbnail_height: int | None = None
    width: int | None = None
    height: int | None = None

    def to_data(self) -> dict[str, typ.Any]:
        """Return the oEmbed payload, naming ``response_type`` as ``type``."""
        payload = dc.asdict(self)
        payload = {"type": payload.pop("response_type"), **payload}
        return {key: value for key, value in payload.items() if value is not None}


__all__ = [
    "HomeView",
    "IndexView",
    "LinkListView",
    "OembedJsonView",
    "OembedView",
    "RecipeView",
    "SearchView",
    "SiteMapView",
    "SiteView",
]
