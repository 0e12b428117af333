"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from .models import SiteConfigError


def parse_public_url(value: str) -> str:
    """Validate and normalise the public base URL of the site.

    The URL must use ``http`` or ``https``, name a host, and have a path that
    ends with ``/``. Query strings and fragments are dropped.

    Raises
    ------
    SiteConfigError
        If any of the rules above is broken.

    Examples
    --------
    >>> parse_public_url("https://justrecipes.blog/?utm=x#top")
    'https://justrecipes.blog/'
    """
    parts = urlsplit(value.strip())
    if parts.scheme not in {"http", "https"}:
        msg = f"invalid url schema: {value}"
        raise SiteConfigError(msg)
    if not parts.hostname:
        msg = f"invalid url host: {value}"
        raise SiteConfigError(msg)
    path = parts.path or "/"
    if not path.endswith("/"):
        msg = f"invalid url path: {value}"
        raise SiteConfigError(msg)
    return urlunsplit((parts.scheme, parts.netloc, path, "", ""))


def _normalize_locales(value: object) -> list[str]:
    """Return a list of locale codes from a string or a list of strings."""
    if isinstance(value, str):
        return [segment for segment in value.replace(",", " ").split() if segment]
    if isinstance(value, list):
        return [str(segment).strip() for segment in value if str(segment).strip()]
    msg = f"locales must be a string or a list, found {value!r}"
    raise SiteConfigError(msg)


def _positive_int(key: str, value: object) -> int:
    """Return ``value`` as a positive integer or raise ``SiteConfigError``."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        msg = f"{key} must be a positive integer, found {value!r}"
        raise SiteConfigError(msg)
    return value


__all__ = ["_normalize_locales", "_positive_int", "parse_public_url"]
