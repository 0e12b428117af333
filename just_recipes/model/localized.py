"""Per-locale text values with silent fallback to the default locale.

Recipe authors may write any translatable field either as a bare string or as
a mapping of locale codes to text::

    name: Soup
    name: {en_US: Soup, fr_FR: Soupe}

Both shapes parse into a :class:`LocalizedString`. Resolution prefers the
requested locale and falls back to ``en_US`` without reporting which text was
actually used.

Examples
--------
>>> soup = LocalizedString.parse({"en_US": "Soup", "fr_FR": "Soupe"})
>>> soup.localized("fr_FR")
'Soupe'
>>> soup.localized("de_DE")
'Soup'
>>> LocalizedString.parse("Soup") == LocalizedString.new("Soup")
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from just_recipes._constants import US_ENGLISH
from just_recipes.errors import MissingLocaleError, RecipeParseError


@dc.dataclass(slots=True, frozen=True)
class LocalizedString:
    """Text keyed by locale code.

    Attributes
    ----------
    inner : dict[str, str]
        Mapping of locale code (``en_US``) to translated text. May be empty
        while a document is being parsed; validation requires ``en_US`` for
        every validated field.
    """

    inner: dict[str, str] = dc.field(default_factory=dict)

    @classmethod
    def new(cls, text: str) -> LocalizedString:
        """Return a value holding ``text`` for the default locale only."""
        return cls({US_ENGLISH: text})

    @classmethod
    def parse(cls, raw: object, *, field: str = "value") -> LocalizedString:
        """Build a value from a bare string or a locale mapping.

        Parameters
        ----------
        raw : object
            Either a scalar string, interpreted as the default locale, or a
            mapping of locale codes to strings, kept as written.
        field : str, optional
            Name used in error messages.

        Raises
        ------
        RecipeParseError
            If ``raw`` is neither a string nor a mapping of strings.
        """
        match raw:
            case str():
                return cls.new(raw)
            case cabc.Mapping():
                inner: dict[str, str] = {}
                for key, value in raw.items():
                    if not isinstance(value, str):
                        msg = f"{field}.{key}: expected a string, found {value!r}"
                        raise RecipeParseError(msg)
                    inner[str(key)] = value
                return cls(inner)
            case _:
                msg = f"{field}: expected {US_ENGLISH} string or map, found {raw!r}"
                raise RecipeParseError(msg)

    def localized(self, locale: str | None = None) -> str:
        """Return the text for ``locale``, falling back to ``en_US``.

        Raises
        ------
        MissingLocaleError
            When neither ``locale`` nor ``en_US`` has a value.
        """
        search_locale = locale or US_ENGLISH
        if search_locale in self.inner:
            return self.inner[search_locale]
        if US_ENGLISH in self.inner:
            return self.inner[US_ENGLISH]
        raise MissingLocaleError(search_locale)

    def values(self) -> list[str]:
        """Return every stored translation."""
        return list(self.inner.values())

    def has_locale(self, locale: str) -> bool:
        """Return ``True`` when a translation for ``locale`` is stored."""
        return locale in self.inner

    def to_data(self) -> dict[str, str]:
        """Return a plain mapping suitable for JSON encoding."""
        return dict(self.inner)

    def __str__(self) -> str:
        return ";".join(f"{key}={value}" for key, value in self.inner.items())


def localized_list(
    values: typ.Iterable[LocalizedString], locale: str | None, *, field: str
) -> list[str]:
    """Resolve each value for ``locale``, failing on the first missing one."""
    results: list[str] = []
    for index, value in enumerate(values):
        try:
            results.append(value.localized(locale))
        except MissingLocaleError as exc:
            raise MissingLocaleError(locale, field=f"{field}[{index}]") from exc
    return results


__all__ = ["LocalizedString", "localized_list"]
