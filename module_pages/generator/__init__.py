"""Utilities for rendering and writing module documentation pages."""

from .renderer import HtmlContentRenderer
from .site_builder import SiteBuildError, SiteBuilder, output_path_for

__all__ = [
    "HtmlContentRenderer",
    "SiteBuildError",
    "SiteBuilder",
    "output_path_for",
]
