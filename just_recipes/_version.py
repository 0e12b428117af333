"""Version of the just_recipes package, exposed to templates for cache busting."""

__version__ = "0.1.0"
