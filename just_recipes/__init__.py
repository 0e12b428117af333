"""Static site generator for a multilingual recipe blog.

Recipes are authored as YAML documents, one per file, with every
translatable field written either as a plain string (``en_US``) or as a
mapping of locale codes to translations. The ``recipes`` console script
renders them into a static site with per-locale recipe pages, category and
cuisine indexes, search data, oEmbed cards, and a sitemap.

Exports
-------
- ``app``: Cyclopts application holding the subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from just_recipes import main
>>> main()  # doctest: +SKIP
>>> from just_recipes import app
>>> app(["validate"])  # doctest: +SKIP
"""

from __future__ import annotations

from ._version import __version__
from .cli import app, main

__all__ = ["__version__", "app", "main"]
