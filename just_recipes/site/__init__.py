"""Render recipes, indexes, and site-wide pages into a static output tree."""

from .builder import BuildOutput, BuildResult, SiteBuilder
from .renderer import Renderer, TemplateRenderer

__all__ = ["BuildOutput", "BuildResult", "Renderer", "SiteBuilder", "TemplateRenderer"]
