"""Pluggable template rendering for the site builder.

The builder only depends on the :class:`Renderer` protocol: a named template
plus a view object in, text out. :class:`TemplateRenderer` implements it with
Jinja2 over ``just_recipes/templates`` (or a caller-supplied directory) and
registers the helper filters the packaged templates rely on.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from just_recipes._constants import US_ENGLISH
from just_recipes.errors import MissingLocaleError, TemplateRenderError
from just_recipes.model import LocalizedString
from just_recipes.site.labels import LABELS

TEMPLATE_SUFFIX = ".jinja"
_FNV_OFFSET_BASIS = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK_64 = 0xFFFFFFFFFFFFFFFF


class Renderer(typ.Protocol):
    """Anything that can turn a named template and a view into text."""

    def render(self, template_name: str, view: object) -> str: ...


class TemplateRenderer:
    """Render views with Jinja2 templates named ``<template_name>.jinja``."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the templates. Defaults to the templates
            shipped inside the package.

        Notes
        -----
        Undefined variables raise instead of rendering as empty strings, so a
        view that is missing a field a template uses fails the build.
        """
        self.templates_dir = templates_dir or Path(__file__).resolve().parents[1] / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["fnv"] = fnv_hash
        self.env.filters["localized"] = localized
        self.env.globals["labels"] = LABELS

    def render(self, template_name: str, view: object) -> str:
        """Render ``view`` with the template called ``template_name``.

        Raises
        ------
        TemplateRenderError
            If the template is missing or malformed, uses a field the view
            does not provide, or hands a filter a value it cannot localize.
        TypeError
            If ``view`` is neither a dataclass instance nor a mapping.
        """
        context = _view_context(view)
        try:
            template = self.env.get_template(f"{template_name}{TEMPLATE_SUFFIX}")
            text = template.render(**context)
        except (TemplateError, IndexError, TypeError) as exc:
            msg = f"unable to render {template_name}: {exc}"
            raise TemplateRenderError(msg) from exc
        if not text.endswith("\n"):
            text += "\n"
        return text


def fnv_hash(value: object) -> str:
    """Return the 64-bit FNV-1a digest of ``value`` as lowercase hex.

    Examples
    --------
    >>> fnv_hash("")
    'cbf29ce484222325'
    """
    digest = _FNV_OFFSET_BASIS
    for byte in str(value).encode("utf-8"):
        digest ^= byte
        digest = (digest * _FNV_PRIME) & _MASK_64
    return f"{digest:x}"


def localized(value: object, locale: str | int | None = None) -> object:
    """Look up ``locale`` in a localized value, falling back to ``en_US``.

    Accepts a :class:`LocalizedString`, a plain locale mapping, or a sequence
    indexed by an integer ``locale``.
    """
    match value:
        case LocalizedString():
            return value.localized(None if locale is None else str(locale))
        case cabc.Mapping():
            if locale in value:
                return value[locale]
            if US_ENGLISH in value:
                return value[US_ENGLISH]
            raise MissingLocaleError(str(locale))
        case cabc.Sequence() if isinstance(locale, int):
            return value[locale]
        case _:
            msg = f"cannot localize {value!r}"
            raise TypeError(msg)


def _view_context(view: object) -> dict[str, typ.Any]:
    if dc.is_dataclass(view) and not isinstance(view, type):
        return {field.name: getattr(view, field.name) for field in dc.fields(view)}
    if isinstance(view, cabc.Mapping):
        return dict(view)
    msg = f"views must be dataclasses or mappings, found {type(view).__name__}"
    raise TypeError(msg)


__all__ = ["Renderer", "TemplateRenderer", "fnv_hash", "localized"]
