"""Cyclopts CLI entrypoint for building and maintaining the recipe site.

The ``recipes`` console script defined here builds the static site from the
YAML recipe corpus, validates recipe documents, generates photo thumbnails,
scaffolds new recipes, and serves the built output for local previews.
Every option can also be supplied as an ``INPUT_*`` environment variable so
the same commands run unchanged in CI.

Examples
--------
Build the site with the settings from ``config/site.yaml``:

>>> from just_recipes.cli import main
>>> main()  # doctest: +SKIP

Validate recipes from a different directory:

>>> from just_recipes.cli import app
>>> app(["validate", "--recipe-dir", "drafts"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfig, SiteConfigError, load_site_config, parse_public_url
from .corpus import dump_recipe
from .errors import RecipeError, SiteBuildError
from .images import generate_thumbnails
from .model import Recipe
from .server import DEFAULT_LISTEN, serve
from .site import SiteBuilder
from .validate import validate_recipes

DEFAULT_CONFIG = Path("config/site.yaml")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="recipes", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
]
RecipeDirOption = typ.Annotated[
    Path | None,
    Parameter(help="Override the recipe directory", env_var="INPUT_RECIPE_DIR"),
]
PublicDirOption = typ.Annotated[
    Path | None,
    Parameter(help="Override the output directory", env_var="INPUT_PUBLIC_DIR"),
]
VerboseOption = typ.Annotated[
    bool, Parameter(help="Log debug output", env_var="INPUT_VERBOSE")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )


def _fail(exc: BaseException) -> typ.NoReturn:
    """Report ``exc`` on stderr and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


def _site_config(
    config: Path,
    *,
    recipe_dir: Path | None = None,
    static_dir: Path | None = None,
    public_dir: Path | None = None,
    templates_dir: Path | None = None,
    locales: list[str] | None = None,
    public_url: str | None = None,
) -> SiteConfig:
    """Load ``config`` and layer command-line overrides on top."""
    site_config = load_site_config(config)
    return site_config.with_overrides(
        recipe_dir=recipe_dir,
        static_dir=static_dir,
        public_dir=public_dir,
        templates_dir=templates_dir,
        locales=list(locales) if locales else None,
        public_url=parse_public_url(public_url) if public_url else None,
    )


@app.command(help="Render the recipe site into the output directory.")
def build(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    recipe_dir: RecipeDirOption = None,
    static_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the static asset folder", env_var="INPUT_STATIC_DIR"),
    ] = None,
    public_dir: PublicDirOption = None,
    templates_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the template folder", env_var="INPUT_TEMPLATES_DIR"),
    ] = None,
    locales: typ.Annotated[
        list[str] | None,
        Parameter(help="Locales to publish", env_var="INPUT_LOCALES"),
    ] = None,
    public_url: typ.Annotated[
        str | None,
        Parameter(help="Absolute base URL of the site", env_var="INPUT_PUBLIC_URL"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Build the static site from the recipe corpus.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``). A missing file selects the defaults.
    recipe_dir, static_dir, public_dir, templates_dir : Path or None, optional
        Override the matching directory from the configuration.
    locales : list[str] or None, optional
        Override the published locales.
    public_url : str or None, optional
        Override the absolute base URL; it must be ``http`` or ``https`` and
        end with ``/``.
    verbose : bool, optional
        Log per-recipe progress.

    Returns
    -------
    None
        Writes the site and prints every generated path.

    Raises
    ------
    SystemExit
        With status 1 when the configuration is invalid, a recipe cannot be
        parsed or localized, or the output cannot be written.
    """
    _configure_logging(verbose=verbose)
    try:
        site_config = _site_config(
            config,
            recipe_dir=recipe_dir,
            static_dir=static_dir,
            public_dir=public_dir,
            templates_dir=templates_dir,
            locales=locales,
            public_url=public_url,
        )
        result = SiteBuilder(site_config).run()
    except (RecipeError, SiteBuildError, SiteConfigError, OSError, TypeError) as exc:
        _fail(exc)
    for path in result.written:
        print(f"wrote {_format_path(path)}")
    print(f"built {result.recipes} recipes ({len(result.links)} pages)")


@app.command(help="Check every recipe document for structural problems.")
def validate(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    recipe_dir: RecipeDirOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Validate the recipe corpus and report one line per document.

    Passing documents print ``OK: <file>``; failing ones print
    ``ERROR: <file>: <message>``. Every document is checked even after a
    failure.

    Raises
    ------
    SystemExit
        With status 1 when any document failed or the recipe directory is
        missing.
    """
    _configure_logging(verbose=verbose)
    try:
        site_config = _site_config(config, recipe_dir=recipe_dir)
        report = validate_recipes(site_config.recipe_dir)
    except (SiteConfigError, OSError, TypeError) as exc:
        _fail(exc)
    for result in report.results:
        if result.ok:
            print(f"OK: {_format_path(result.path)}")
        else:
            print(f"ERROR: {_format_path(result.path)}: {result.error}")
    if not report.ok:
        raise SystemExit(1)


@app.command(help="Generate thumbnails for recipe photos that lack one.")
def convert(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    recipe_dir: RecipeDirOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Write ``<stem>_thumbnail.jpg`` beside every photo missing a thumbnail."""
    _configure_logging(verbose=verbose)
    try:
        site_config = _site_config(config, recipe_dir=recipe_dir)
        written = generate_thumbnails(site_config.recipe_dir)
    except (SiteConfigError, OSError, TypeError) as exc:
        _fail(exc)
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Scaffold a new recipe document.")
def init(
    *,
    name: typ.Annotated[
        str | None, Parameter(help="Recipe name", env_var="INPUT_NAME")
    ] = None,
    recipe_id: typ.Annotated[
        str | None,
        Parameter(help="Recipe id (random when omitted)", env_var="INPUT_RECIPE_ID"),
    ] = None,
    mock: typ.Annotated[
        bool, Parameter(help="Fill in sample content", env_var="INPUT_MOCK")
    ] = False,
    config: ConfigOption = DEFAULT_CONFIG,
    recipe_dir: RecipeDirOption = None,
) -> None:
    """Write a new recipe document to ``<recipe_dir>/<slug>.yml``.

    The YAML is also echoed to stdout. An existing file is never overwritten.

    Raises
    ------
    SystemExit
        With status 1 when the target file already exists or cannot be
        written.
    """
    try:
        site_config = _site_config(config, recipe_dir=recipe_dir)
    except (SiteConfigError, OSError, TypeError) as exc:
        _fail(exc)
    recipe = Recipe.init(recipe_id, name, mock=mock)
    document = dump_recipe(recipe)
    target = site_config.recipe_dir / f"{recipe.slug.localized()}.yml"
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("x", encoding="utf-8") as handle:
            handle.write(document)
    except OSError as exc:
        _fail(exc)
    print(document, end="")
    print(f"wrote {_format_path(target)}")


@app.command(help="Serve the built site over HTTP.")
def server(
    *,
    listen: typ.Annotated[
        str, Parameter(help="Address to bind as host:port", env_var="INPUT_LISTEN")
    ] = DEFAULT_LISTEN,
    config: ConfigOption = DEFAULT_CONFIG,
    public_dir: PublicDirOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Serve the output directory until interrupted."""
    _configure_logging(verbose=verbose)
    try:
        site_config = _site_config(config, public_dir=public_dir)
        serve(site_config.public_dir, listen)
    except (SiteConfigError, OSError, TypeError, ValueError) as exc:
        _fail(exc)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``recipes`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
