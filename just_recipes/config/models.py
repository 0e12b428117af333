"""Typed dataclasses describing just_recipes site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from just_recipes._constants import DEFAULT_PUBLIC_URL, DEFAULT_SITE_NAME, US_ENGLISH


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class SiteConfig:
    """Directories, locales, and public URL for one site build.

    Attributes
    ----------
    recipe_dir : Path
        Directory walked for ``.yml``/``.yaml`` recipe documents and photos.
    static_dir : Path
        Directory whose contents are copied verbatim into ``public_dir``.
    public_dir : Path
        Output directory; removed and recreated by every build.
    templates_dir : Path or None
        Jinja template directory; ``None`` selects the packaged templates.
    locales : list[str]
        Locales the site publishes, in navigation order.
    public_url : str
        Absolute base URL ending in ``/``.
    site_name : str
        Name used in page titles and oEmbed provider metadata.
    oembed_width, oembed_height : int
        Size advertised for embedded recipe cards.
    """

    recipe_dir: Path = Path("recipes")
    static_dir: Path = Path("static")
    public_dir: Path = Path("public")
    templates_dir: Path | None = None
    locales: list[str] = dc.field(default_factory=lambda: [US_ENGLISH])
    public_url: str = DEFAULT_PUBLIC_URL
    site_name: str = DEFAULT_SITE_NAME
    oembed_width: int = 600
    oembed_height: int = 400

    def with_overrides(self, **overrides: object) -> SiteConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dc.replace(self, **changes)


__all__ = ["SiteConfig", "SiteConfigError"]
