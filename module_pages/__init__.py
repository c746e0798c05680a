"""Build the PowerShell module documentation site.

This package exposes the CLI entry points used by ``uv run pages`` to render
the Markdown sources into static HTML, annotating module pages with breadcrumb
metadata before they reach the theme templates.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from module_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
