"""Utility helpers shared by the module_pages configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from module_pages.hooks import HOOK_FACTORIES
from module_pages.pages import PERMALINK_STYLES

from .models import BuildConfig, HooksConfig, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: object | None) -> Path | None:
    """Return a Path for non-empty values, otherwise None."""
    text = _optional_str(value)
    return Path(text) if text else None


def _build_site_section(payload: typ.Mapping[str, typ.Any]) -> BuildConfig:
    """Build a BuildConfig from the ``site`` mapping, applying defaults."""
    base = BuildConfig()
    permalink = _optional_str(payload.get("permalink")) or base.permalink
    if permalink not in PERMALINK_STYLES:
        allowed = ", ".join(PERMALINK_STYLES)
        msg = f"Unknown permalink style '{permalink}'. Expected one of: {allowed}"
        raise SiteConfigError(msg)

    return BuildConfig(
        name=_optional_str(payload.get("name")) or base.name,
        source_dir=_optional_path(payload.get("source_dir")) or base.source_dir,
        output_dir=_optional_path(payload.get("output_dir")) or base.output_dir,
        permalink=permalink,
        pygments_style=_optional_str(payload.get("pygments_style"))
        or base.pygments_style,
        default_layout=_optional_str(payload.get("default_layout"))
        or base.default_layout,
        templates_dir=_optional_path(payload.get("templates_dir")),
    )


def _build_hooks_section(payload: typ.Mapping[str, typ.Any]) -> HooksConfig:
    """Build a HooksConfig, validating hook names against the known factories."""
    if "pre_render" not in payload:
        return HooksConfig()
    names = payload.get("pre_render") or []
    if not isinstance(names, list):
        msg = "'hooks.pre_render' must be a list of hook names."
        raise SiteConfigError(msg)

    pre_render = [str(name).strip() for name in names]
    unknown = [name for name in pre_render if name not in HOOK_FACTORIES]
    if unknown:
        available = ", ".join(sorted(HOOK_FACTORIES))
        msg = (
            f"Unknown pre_render hooks: {', '.join(unknown)}. "
            f"Known hooks: {available}"
        )
        raise SiteConfigError(msg)
    return HooksConfig(pre_render=pre_render)


__all__ = [
    "_build_hooks_section",
    "_build_site_section",
    "_optional_path",
    "_optional_str",
]
