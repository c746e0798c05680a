"""Load and validate site configuration YAML for module_pages builds.

This subpackage parses the project's ``site.yaml`` file, applies defaults for
every optional key, checks the permalink style and hook names, and produces
slotted dataclasses (:class:`SiteConfig`, :class:`BuildConfig`,
:class:`HooksConfig`) that the site builder consumes.

Examples
--------
>>> from pathlib import Path
>>> from module_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.site.output_dir  # doctest: +SKIP
PosixPath('public')
"""

from .loader import load_site_config
from .models import BuildConfig, HooksConfig, SiteConfig, SiteConfigError

__all__ = [
    "BuildConfig",
    "HooksConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
