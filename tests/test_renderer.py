"""Tests for the Jinja renderer and its template helpers."""

from __future__ import annotations

import typing as typ

import pytest

from just_recipes.errors import MissingLocaleError, TemplateRenderError
from just_recipes.model import LocalizedString, SiteMapView, SiteView
from just_recipes.site import TemplateRenderer
from just_recipes.site.renderer import fnv_hash, localized

if typ.TYPE_CHECKING:
    from pathlib import Path

SITE = SiteView(public_url="https://recipes.example/", version="1.2.3")


@pytest.mark.parametrize(
    ("value", "expected"),
    [("", "cbf29ce484222325"), ("a", "af63dc4c8601ec8c")],
)
def test_fnv_hash_known_vectors(value: str, expected: str) -> None:
    assert fnv_hash(value) == expected


def test_localized_filter_shapes() -> None:
    assert localized({"en_US": "Home", "fr_FR": "Accueil"}, "fr_FR") == "Accueil"
    assert localized({"en_US": "Home"}, "de_DE") == "Home"
    assert localized(LocalizedString.new("Soup"), "fr_FR") == "Soup"
    assert localized(["a", "b"], 1) == "b"
    with pytest.raises(MissingLocaleError):
        localized({"fr_FR": "Accueil"}, "de_DE")


def test_sitemap_template_uses_absolute_links() -> None:
    text = TemplateRenderer().render(
        "sitemap", SiteMapView(links=["", "en_US/gumbo/"], site=SITE)
    )
    assert "<loc>https://recipes.example/</loc>" in text
    assert "<loc>https://recipes.example/en_US/gumbo/</loc>" in text
    assert text.endswith("\n")


def test_undefined_fields_fail_rendering(tmp_path: Path) -> None:
    """A template that reads a field the view lacks is a build error."""
    (tmp_path / "broken.jinja").write_text("{{ missing }}", encoding="utf-8")
    renderer = TemplateRenderer(tmp_path)
    with pytest.raises(TemplateRenderError, match="broken"):
        renderer.render("broken", {"present": 1})


def test_missing_template_fails_rendering(tmp_path: Path) -> None:
    with pytest.raises(TemplateRenderError):
        TemplateRenderer(tmp_path).render("absent", {})


def test_views_must_be_dataclasses_or_mappings() -> None:
    with pytest.raises(TypeError):
        TemplateRenderer().render("sitemap", object())


@pytest.mark.parametrize(
    ("source", "context"),
    [
        ("{{ items | localized(5) }}", {"items": ["a"]}),
        ("{{ count | localized('en_US') }}", {"count": 3}),
    ],
)
def test_filter_failures_fail_rendering(
    tmp_path: Path, source: str, context: dict[str, typ.Any]
) -> None:
    """Bad filter input surfaces as a render error naming the template."""
    (tmp_path / "labels.jinja").write_text(source, encoding="utf-8")
    with pytest.raises(TemplateRenderError, match="labels"):
        TemplateRenderer(tmp_path).render("labels", context)
