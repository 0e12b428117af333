"""Load and validate the site configuration for recipe builds.

This subpackage parses the optional ``config/site.yaml`` file into a
:class:`SiteConfig` that the CLI and the site builder consume. Command-line
flags and ``INPUT_*`` environment variables are layered on top with
:meth:`SiteConfig.with_overrides`.

Examples
--------
>>> from pathlib import Path
>>> from just_recipes.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.public_url  # doctest: +SKIP
'https://justrecipes.blog/'
"""

from .helpers import parse_public_url
from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config", "parse_public_url"]
