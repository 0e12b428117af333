"""Common literal values used across just_recipes.

These constants keep locale codes, file names, and page titles centralized so
the model, the site builder, templates, and tests can import the same values
without drifting.

Examples
--------
>>> from just_recipes import _constants
>>> _constants.US_ENGLISH
'en_US'
>>> _constants.THUMBNAIL_TEMPLATE.format(stem="gumbo")
'gumbo_thumbnail.jpg'
"""

US_ENGLISH = "en_US"

RECIPE_SUFFIXES = (".yml", ".yaml")
IMAGE_TEMPLATE = "{stem}.jpg"
THUMBNAIL_TEMPLATE = "{stem}_thumbnail.jpg"
THUMBNAIL_SIZE = (200, 200)

DEFAULT_SITE_NAME = "Just Recipes"
DEFAULT_PUBLIC_URL = "http://localhost:8080/"

CATEGORIES = (
    "breakfast",
    "lunch",
    "beverage",
    "cocktail",
    "appetizer",
    "soup",
    "salad",
    "main dish",
    "side dish",
    "dessert",
    "break",
    "holiday",
    "entertaining",
)

STAGE_WARNING_THRESHOLD = 5
STEP_WARNING_THRESHOLD = 20
