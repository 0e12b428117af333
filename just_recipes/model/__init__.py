"""Recipe content model: localized text, recipes, partial views, page views.

Examples
--------
>>> from just_recipes.model import LocalizedString
>>> LocalizedString.new("Gumbo").localized("fr_FR")
'Gumbo'
"""

from .localized import LocalizedString, localized_list
from .recipe import Recipe, RecipePartial, Stage, StagePartial
from .views import (
    HomeView,
    IndexView,
    LinkListView,
    OembedJsonView,
    OembedView,
    RecipeView,
    SearchView,
    SiteMapView,
    SiteView,
)

__all__ = [
    "HomeView",
    "IndexView",
    "LinkListView",
    "LocalizedString",
    "OembedJsonView",
    "OembedView",
    "Recipe",
    "RecipePartial",
    "RecipeView",
    "SearchView",
    "SiteMapView",
    "SiteView",
    "Stage",
    "StagePartial",
    "localized_list",
]
