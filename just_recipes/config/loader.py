"""Load site configuration YAML into a typed dataclass."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _normalize_locales, _positive_int, parse_public_url
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path | None) -> SiteConfig:
    """Load the YAML configuration describing where and how to build the site.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML configuration (for example,
        ``config/site.yaml``). A missing file, or ``None``, yields the
        defaults so a bare checkout builds without any configuration.

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for absent keys.

    Raises
    ------
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the locale list is empty, the public URL is invalid, or the
        oEmbed size is not a positive integer.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.locales  # doctest: +SKIP
    ['en_US', 'fr_FR']
    """
    defaults = SiteConfig()
    if path is None or not path.exists():
        return defaults

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    locales = _normalize_locales(raw.get("locales", defaults.locales))
    if not locales:
        msg = "At least one locale must be configured."
        raise SiteConfigError(msg)

    templates_dir = raw.get("templates_dir")
    return SiteConfig(
        recipe_dir=Path(raw.get("recipe_dir", defaults.recipe_dir)),
        static_dir=Path(raw.get("static_dir", defaults.static_dir)),
        public_dir=Path(raw.get("public_dir", defaults.public_dir)),
        templates_dir=Path(templates_dir) if templates_dir else None,
        locales=locales,
        public_url=parse_public_url(str(raw.get("public_url", defaults.public_url))),
        site_name=str(raw.get("site_name", defaults.site_name)),
        oembed_width=_positive_int(
            "oembed_width", raw.get("oembed_width", defaults.oembed_width)
        ),
        oembed_height=_positive_int(
            "oembed_height", raw.get("oembed_height", defaults.oembed_height)
        ),
    )


__all__ = ["load_site_config"]
