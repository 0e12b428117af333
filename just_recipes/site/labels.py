"""Interface strings shown by the packaged templates, keyed by locale.

Templates reach these through the ``labels`` global and the ``localized``
filter, e.g. ``{{ labels.ingredients | localized(locale) }}``. Locales without
an entry fall back to ``en_US``.
"""

from __future__ import annotations

LABELS: dict[str, dict[str, str]] = {
    "home": {"en_US": "Home", "fr_FR": "Accueil", "de_DE": "Startseite"},
    "about": {"en_US": "About", "fr_FR": "À propos", "de_DE": "Über uns"},
    "categories": {"en_US": "Categories", "fr_FR": "Catégories", "de_DE": "Kategorien"},
    "cuisines": {"en_US": "Cuisines", "fr_FR": "Cuisines", "de_DE": "Küchen"},
    "recipes": {"en_US": "Recipes", "fr_FR": "Recettes", "de_DE": "Rezepte"},
    "ingredients": {"en_US": "Ingredients", "fr_FR": "Ingrédients", "de_DE": "Zutaten"},
    "equipment": {"en_US": "Equipment", "fr_FR": "Ustensiles", "de_DE": "Ausrüstung"},
    "prep_time": {"en_US": "Prep time", "fr_FR": "Préparation", "de_DE": "Vorbereitung"},
    "cook_time": {"en_US": "Cook time", "fr_FR": "Cuisson", "de_DE": "Kochzeit"},
    "total_time": {"en_US": "Total time", "fr_FR": "Temps total", "de_DE": "Gesamtzeit"},
    "published": {"en_US": "Published", "fr_FR": "Publié", "de_DE": "Veröffentlicht"},
    "other_languages": {
        "en_US": "Also available in",
        "fr_FR": "Aussi disponible en",
        "de_DE": "Auch verfügbar auf",
    },
}

__all__ = ["LABELS"]
