"""Typed dataclasses describing module_pages site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class BuildConfig:
    """Filesystem and rendering options for a site build."""

    name: str = "PowerShell Docs"
    source_dir: Path = Path("site")
    output_dir: Path = Path("public")
    permalink: str = "html"
    pygments_style: str = "monokai"
    default_layout: str = "page.jinja"
    templates_dir: Path | None = None


@dc.dataclass(slots=True)
class HooksConfig:
    """Names of the hooks fired at each page lifecycle point."""

    pre_render: list[str] = dc.field(default_factory=lambda: ["breadcrumbs"])


@dc.dataclass(slots=True)
class SiteConfig:
    """Top-level configuration consumed by the site builder and CLI."""

    site: BuildConfig = dc.field(default_factory=BuildConfig)
    hooks: HooksConfig = dc.field(default_factory=HooksConfig)


__all__ = ["BuildConfig", "HooksConfig", "SiteConfig", "SiteConfigError"]
