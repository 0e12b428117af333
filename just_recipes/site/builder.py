"""Orchestrate a full static build of the recipe site.

:class:`SiteBuilder` performs one sequential pass:

1. Recreate the output directory and copy the static assets into it.
2. Load the recipe corpus (failing on the first unparseable document) and
   order it by default-locale name.
3. For every configured locale, render each published recipe (page, raw JSON,
   oEmbed card and descriptor), the flat index, the search index, and the
   category and cuisine trees.
4. Render the home page, the about page, and the sitemap.

Every rendering step returns a :class:`BuildOutput` describing the files it
wrote and the site-relative links it contributed; :meth:`SiteBuilder.run`
merges them, and the merged link set becomes the sitemap.

Examples
--------
>>> from just_recipes.config import SiteConfig
>>> from just_recipes.site import SiteBuilder
>>> result = SiteBuilder(SiteConfig()).run()  # doctest: +SKIP
>>> sorted(result.links)[:2]  # doctest: +SKIP
['', 'en_US/']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import shutil
import typing as typ
from html import escape

import msgspec.json
from slugify import slugify

from just_recipes._version import __version__
from just_recipes.corpus import RecipeSource, load_recipes
from just_recipes.errors import MissingLocaleError, SiteBuildError
from just_recipes.images import find_image_pair
from just_recipes.model import (
    HomeView,
    IndexView,
    LinkListView,
    OembedJsonView,
    OembedView,
    RecipePartial,
    RecipeView,
    SearchView,
    SiteMapView,
    SiteView,
)
from just_recipes.site.renderer import Renderer, TemplateRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from just_recipes.config import SiteConfig

logger = logging.getLogger(__name__)

ROOT_LINK = ""
UNGROUPED_KEY = "other"


@dc.dataclass(slots=True)
class BuildOutput:
    """Files written and links contributed by one rendering step."""

    links: set[str] = dc.field(default_factory=set)
    written: list[Path] = dc.field(default_factory=list)

    def merge(self, other: BuildOutput) -> BuildOutput:
        """Return a new output combining ``self`` and ``other``."""
        return BuildOutput(
            links=self.links | other.links, written=[*self.written, *other.written]
        )


@dc.dataclass(slots=True)
class BuildResult:
    """Summary of a completed build."""

    links: list[str]
    written: list[Path]
    recipes: int
    duplicates: list[Path]


@dc.dataclass(slots=True)
class _Group:
    """Recipes sharing a category or cuisine within one locale."""

    key: str
    label: str
    links: list[tuple[str, str]] = dc.field(default_factory=list)


@dc.dataclass(slots=True, frozen=True)
class _Grouping:
    """One grouping dimension: where it lives and how its pages are titled."""

    directory: str
    label: str


CATEGORY_GROUPING = _Grouping(directory="categories", label="Categories")
CUISINE_GROUPING = _Grouping(directory="cuisines", label="Cuisines")


class SiteBuilder:
    """Render the whole site for a :class:`~just_recipes.config.SiteConfig`."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        renderer: Renderer | None = None,
        version: str | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : SiteConfig
            Directories, locales, and public URL for the build.
        renderer : Renderer, optional
            Template backend; defaults to :class:`TemplateRenderer` over
            ``config.templates_dir``.
        version : str, optional
            Version string exposed to templates; defaults to the package
            ``__version__``.
        """
        self.config = config
        self.renderer = renderer or TemplateRenderer(config.templates_dir)
        self.site = SiteView(
            public_url=config.public_url,
            version=version or __version__,
            name=config.site_name,
        )

    def run(self) -> BuildResult:
        """Build the site into ``config.public_dir``.

        Raises
        ------
        RecipeError
            If a recipe cannot be parsed or localized; nothing is cleaned up.
        SiteBuildError
            If the output cannot be written or a template fails to render.
        """
        output = self._prepare_output()
        corpus = load_recipes(self.config.recipe_dir)
        sources = corpus.sorted_by_name()
        for locale in self.config.locales:
            output = output.merge(self._build_locale(locale, sources))
        output = output.merge(self._build_global_pages(output.links | {ROOT_LINK}))
        return BuildResult(
            links=sorted(output.links),
            written=output.written,
            recipes=len(sources),
            duplicates=list(corpus.duplicates),
        )

    def _prepare_output(self) -> BuildOutput:
        public_dir = self.config.public_dir
        static_dir = self.config.static_dir
        if not static_dir.is_dir():
            msg = f"static directory {static_dir} not found"
            raise SiteBuildError(msg)
        try:
            if public_dir.is_dir():
                shutil.rmtree(public_dir)
            public_dir.mkdir(parents=True)
            shutil.copytree(static_dir, public_dir, dirs_exist_ok=True)
        except OSError as exc:
            msg = f"unable to prepare output directory {public_dir}: {exc}"
            raise SiteBuildError(msg) from exc
        return BuildOutput()

    def _build_locale(self, locale: str, sources: list[RecipeSource]) -> BuildOutput:
        """Render every recipe published in ``locale`` plus the locale's indexes."""
        locale_root = self.config.public_dir / locale
        output = BuildOutput(links={f"{locale}/"})
        partials: list[RecipePartial] = []
        search_views: list[SearchView] = []
        categories: dict[str, _Group] = {}
        cuisines: dict[str, _Group] = {}

        for source in sources:
            recipe = source.recipe
            if locale not in recipe.locales:
                continue
            logger.debug("rendering %s for %s", recipe, locale)
            partial, recipe_output = self._build_recipe(locale, source)
            output = output.merge(recipe_output)
            partials.append(partial)
            link = f"/{locale}/{partial.slug}"
            search_views.append(SearchView(name=partial.name, link=link))
            _add_to_group(
                categories,
                _group_key(source.default_text("category")),
                partial.category,
                (f"{link}/", partial.name),
            )
            _add_to_group(
                cuisines,
                _group_key(source.default_text("cuisine")),
                partial.cuisine,
                (f"{link}/", partial.name),
            )

        index_html = self.renderer.render(
            "recipe_list",
            IndexView(
                locale=locale,
                title=f"{self.site.name} - Home",
                recipes=partials,
                site=self.site,
                self_url=self.site.url(f"{locale}/"),
            ),
        )
        output.written.append(self._write_text(locale_root / "index.html", index_html))
        output.written.append(
            self._write_json(locale_root / "search.json", search_views)
        )
        output = output.merge(self._build_groups(locale, CATEGORY_GROUPING, categories))
        return output.merge(self._build_groups(locale, CUISINE_GROUPING, cuisines))

    def _build_recipe(
        self, locale: str, source: RecipeSource
    ) -> tuple[RecipePartial, BuildOutput]:
        """Render the page, JSON document, and oEmbed files for one recipe."""
        recipe = source.recipe
        try:
            slug = recipe.slug.localized(locale)
            recipe_root = self.config.public_dir / locale / slug
            images = self._copy_images(source, recipe_root)
            partial = recipe.to_partial(locale, self.config.locales, images)
        except MissingLocaleError as exc:
            msg = f"{source.path}: {exc}"
            raise MissingLocaleError(locale, field=exc.field, message=msg) from exc

        relative = f"{locale}/{partial.slug}/"
        self_url = self.site.url(relative)
        oembed_html_url = self.site.url(f"{relative}oembed.html")
        image_url = (
            self.site.url(f"{relative}{partial.images[0][1]}") if partial.images else None
        )
        thumbnail_url = (
            self.site.url(f"{relative}{partial.images[0][0]}") if partial.images else None
        )
        output = BuildOutput(links={relative})

        page_html = self.renderer.render(
            "recipe",
            RecipeView(
                locale=locale,
                title=f"{self.site.name} - {partial.name}",
                recipe=partial,
                site=self.site,
                flat_steps=partial.flat_steps(),
                self_url=self_url,
                oembed_url=self.site.url(f"{relative}oembed.json"),
                meta=_page_meta(partial, locale, self_url, image_url),
            ),
        )
        output.written.append(self._write_text(recipe_root / "index.html", page_html))
        output.written.append(
            self._write_json(recipe_root / "index.json", recipe.to_data())
        )

        oembed_html = self.renderer.render(
            "oembed",
            OembedView(
                locale=locale,
                title=f"{self.site.name} - {partial.name}",
                recipe=partial,
                site=self.site,
                recipe_url=self_url,
                image_url=thumbnail_url,
            ),
        )
        output.written.append(self._write_text(recipe_root / "oembed.html", oembed_html))
        width = self.config.oembed_width
        height = self.config.oembed_height
        descriptor = OembedJsonView(
            html=(
                f'<iframe src="{escape(oembed_html_url, quote=True)}" '
                f'width="{width}" height="{height}" frameborder="0"></iframe>'
            ),
            title=partial.name,
            provider_name=self.site.name,
            provider_url=self.site.public_url,
            thumbnail_url=thumbnail_url,
            width=width,
            height=height,
        )
        output.written.append(
            self._write_json(recipe_root / "oembed.json", descriptor.to_data())
        )
        return partial, output

    def _build_groups(
        self, locale: str, grouping: _Grouping, groups: dict[str, _Group]
    ) -> BuildOutput:
        """Render one page per group plus the index of groups."""
        root = f"{locale}/{grouping.directory}/"
        output = BuildOutput(links={root})
        index_links: list[tuple[str, str]] = []
        for key in sorted(groups):
            group = groups[key]
            relative = f"{root}{group.key}/"
            index_links.append((f"/{relative}", group.label))
            html = self.renderer.render(
                "link_list",
                LinkListView(
                    locale=locale,
                    title=f"{self.site.name} - {group.label}",
                    links_label=group.label,
                    links=list(group.links),
                    site=self.site,
                    self_url=self.site.url(relative),
                ),
            )
            path = self.config.public_dir / relative / "index.html"
            output.written.append(self._write_text(path, html))
            output.links.add(relative)

        html = self.renderer.render(
            "link_list",
            LinkListView(
                locale=locale,
                title=f"{self.site.name} - {grouping.label}",
                links_label=grouping.label,
                links=index_links,
                site=self.site,
                self_url=self.site.url(root),
            ),
        )
        path = self.config.public_dir / root / "index.html"
        output.written.append(self._write_text(path, html))
        return output

    def _build_global_pages(self, links: set[str]) -> BuildOutput:
        """Render the home page, the about page, and the sitemap."""
        public_dir = self.config.public_dir
        output = BuildOutput(links={ROOT_LINK})
        home_html = self.renderer.render(
            "home_page",
            HomeView(
                locales=list(self.config.locales),
                title=f"{self.site.name} - Home",
                site=self.site,
                self_url=self.site.url(ROOT_LINK),
                locale=self.config.locales[0],
            ),
        )
        output.written.append(self._write_text(public_dir / "index.html", home_html))

        about_html = self.renderer.render(
            "about_page",
            HomeView(
                locales=list(self.config.locales),
                title=f"{self.site.name} - About",
                site=self.site,
                self_url=self.site.url("about/"),
                locale=self.config.locales[0],
            ),
        )
        output.written.append(
            self._write_text(public_dir / "about" / "index.html", about_html)
        )

        sitemap = self.renderer.render(
            "sitemap", SiteMapView(links=sorted(links), site=self.site)
        )
        output.written.append(self._write_text(public_dir / "sitemap.xml", sitemap))
        return output

    def _copy_images(self, source: RecipeSource, recipe_root: Path) -> list[tuple[str, str]]:
        pair = find_image_pair(source.path.parent, source.recipe.id)
        if pair is None:
            return []
        try:
            recipe_root.mkdir(parents=True, exist_ok=True)
            shutil.copy2(pair.thumbnail, recipe_root / pair.thumbnail.name)
            shutil.copy2(pair.full, recipe_root / pair.full.name)
        except OSError as exc:
            msg = f"unable to copy images for {source.recipe.id}: {exc}"
            raise SiteBuildError(msg) from exc
        return [pair.names()]

    def _write_text(self, path: Path, text: str) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            msg = f"unable to write {path}: {exc}"
            raise SiteBuildError(msg) from exc
        logger.debug("wrote %s", path)
        return path

    def _write_json(self, path: Path, payload: object) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(msgspec.json.encode(payload))
        except OSError as exc:
            msg = f"unable to write {path}: {exc}"
            raise SiteBuildError(msg) from exc
        logger.debug("wrote %s", path)
        return path


def _group_key(label: str) -> str:
    return slugify(label) or UNGROUPED_KEY


def _add_to_group(
    groups: dict[str, _Group], key: str, label: str, link: tuple[str, str]
) -> None:
    group = groups.setdefault(key, _Group(key=key, label=label))
    group.links.append(link)


def _page_meta(
    partial: RecipePartial, locale: str, self_url: str, image_url: str | None
) -> list[tuple[str, str]]:
    """Return Open Graph style ``(property, content)`` pairs for a recipe page."""
    meta = [
        ("og:type", "article"),
        ("og:title", partial.name),
        ("og:url", self_url),
        ("og:locale", locale),
    ]
    if partial.description:
        meta.append(("og:description", partial.description))
    if image_url:
        meta.append(("og:image", image_url))
    if partial.keywords:
        meta.append(("keywords", ", ".join(keyword for keyword in partial.keywords if keyword)))
    return meta


__all__ = ["BuildOutput", "BuildResult", "SiteBuilder"]
