"""Cyclopts CLI entrypoint for building the PowerShell module documentation site.

The ``pages`` console script defined here renders the Markdown sources into
static HTML, firing the configured pre-render hooks (breadcrumb annotation for
module pages) along the way. ``pages crumbs`` prints the metadata the
breadcrumb hook would attach to a URL, which helps when debugging theme
templates.

Examples
--------
Build the site with the default configuration:

>>> from module_pages.cli import main
>>> main()  # doctest: +SKIP

Inspect the breadcrumb metadata for a command page:

>>> from module_pages.cli import app
>>> app(["crumbs", "/modules/foo/commands/bar/"])  # doctest: +SKIP
{"data": {"breadcrumb_paths": ["/", "/modules", ...], ...}, "url": "/modules/foo/commands/bar/"}
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .breadcrumbs import derive_breadcrumbs
from .config import load_site_config
from .generator import SiteBuilder

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Build static HTML pages from the Markdown sources.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Build every page described by the site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.

    Returns
    -------
    None
        Writes rendered pages and prints each generated path.
    """
    site_config = load_site_config(config)
    written = SiteBuilder(site_config, output_dir=output_dir).run()
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the breadcrumb metadata derived for page URLs.")
def crumbs(
    urls: typ.Annotated[list[str], Parameter(help="Page URLs to inspect")],
) -> None:
    """Print one JSON object per URL with the fields the hook would write.

    Out-of-scope URLs report an empty ``data`` mapping.
    """
    for url in urls:
        data = derive_breadcrumbs(url)
        metadata = data.as_metadata() if data is not None else {}
        print(json.dumps({"url": url, "data": metadata}, sort_keys=True))


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
