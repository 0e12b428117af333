"""Exception hierarchy shared by the recipe model, loader, and site builder."""

from __future__ import annotations

from ._constants import US_ENGLISH


class RecipeError(ValueError):
    """Base class for problems found in recipe content."""


class RecipeParseError(RecipeError):
    """Raised when a recipe document cannot be parsed into a ``Recipe``."""


class MissingLocaleError(RecipeError):
    """Raised when neither the requested nor the default locale is present."""

    def __init__(
        self,
        locale: str | None,
        *,
        field: str | None = None,
        message: str | None = None,
    ) -> None:
        self.locale = locale or US_ENGLISH
        self.field = field
        msg = message or f"Missing locale: {self.locale}"
        if field and message is None:
            msg = f"{field}: {msg}"
        super().__init__(msg)


class DuplicateIdentifierError(RecipeError):
    """Raised when two recipe documents share the same ``id``."""


class DuplicateSlugError(RecipeError):
    """Raised when a localized slug is claimed by more than one recipe."""


class EmptyCollectionError(RecipeError):
    """Raised when a required list (locales, ingredients, stages, steps) is empty."""


class SiteBuildError(RuntimeError):
    """Raised when the site cannot be written to the output directory."""


class TemplateRenderError(SiteBuildError):
    """Raised when a template is missing or references an undefined field."""


__all__ = [
    "DuplicateIdentifierError",
    "DuplicateSlugError",
    "EmptyCollectionError",
    "MissingLocaleError",
    "RecipeError",
    "RecipeParseError",
    "SiteBuildError",
    "TemplateRenderError",
]
