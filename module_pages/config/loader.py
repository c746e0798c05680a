"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_hooks_section, _build_site_section
from .models import SiteConfig, SiteConfigError


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key`` or an empty mapping when absent."""
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        msg = f"'{key}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with build options and the pre-render hook list.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section is malformed, the permalink style is unknown, or a hook
        name has no registered implementation.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from module_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.hooks.pre_render  # doctest: +SKIP
    ['breadcrumbs']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    return SiteConfig(
        site=_build_site_section(_section(raw, "site")),
        hooks=_build_hooks_section(_section(raw, "hooks")),
    )


__all__ = ["load_site_config"]
