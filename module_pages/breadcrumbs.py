"""Derive breadcrumb navigation metadata for PowerShell module pages.

The :class:`BreadcrumbAnnotator` hook runs once per page before rendering. For
pages whose URL lives under ``/modules/`` or ``/powershellmodules/`` it writes
the ancestor path prefixes (``breadcrumb_paths``) and a few presentation hints
into the page's metadata mapping, which the theme layer then turns into a
breadcrumb trail. Pages outside that scope are left untouched.

The derivation never raises: unexpected URL shapes just yield shorter path
lists or skip the optional fields.

Examples
--------
>>> from module_pages.breadcrumbs import derive_breadcrumbs
>>> data = derive_breadcrumbs("/modules/foo/commands/bar/")
>>> data.breadcrumb_paths[-1]
'/modules/foo/commands/bar'
>>> data.module_name, data.command_section
('Foo', True)
>>> derive_breadcrumbs("/blog/2024/post.html") is None
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import (
    BREADCRUMB_PATHS_KEY,
    BREADCRUMB_TITLE_KEY,
    COMMAND_SECTION_KEY,
    COMMANDS_SEGMENT,
    INDEX_SEGMENT,
    MODULE_NAME_KEY,
    MODULES_MARKER,
    POWERSHELL_MODULES_MARKER,
    POWERSHELL_MODULES_TITLE,
    ROOT_PATH,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .pages import Page


@dc.dataclass(slots=True)
class BreadcrumbData:
    """Navigation fields derived from a single page URL.

    Attributes
    ----------
    breadcrumb_paths : list[str]
        Ancestor path prefixes, always starting with ``"/"``.
    breadcrumb_title : str or None
        Trail title for pages under ``/powershellmodules/``.
    module_name : str or None
        Module name taken from the second segment of ``/modules/`` URLs.
    command_section : bool or None
        ``True`` when the page sits in a module's ``commands`` directory.
    """

    breadcrumb_paths: list[str]
    breadcrumb_title: str | None = None
    module_name: str | None = None
    command_section: bool | None = None

    def as_metadata(self) -> dict[str, typ.Any]:
        """Return the populated fields keyed by their page metadata names."""
        metadata: dict[str, typ.Any] = {
            BREADCRUMB_PATHS_KEY: list(self.breadcrumb_paths)
        }
        if self.breadcrumb_title is not None:
            metadata[BREADCRUMB_TITLE_KEY] = self.breadcrumb_title
        if self.module_name is not None:
            metadata[MODULE_NAME_KEY] = self.module_name
        if self.command_section is not None:
            metadata[COMMAND_SECTION_KEY] = self.command_section
        return metadata

    def apply(self, metadata: cabc.MutableMapping[str, typ.Any]) -> None:
        """Write the populated fields into ``metadata``, overwriting old values."""
        metadata.update(self.as_metadata())


def in_scope(url: str) -> bool:
    """Return whether ``url`` belongs to the module documentation tree."""
    return MODULES_MARKER in url or POWERSHELL_MODULES_MARKER in url


def split_segments(url: str) -> list[str]:
    """Split ``url`` into path segments, dropping blanks and ``index.html``."""
    return [part for part in url.split("/") if part and part != INDEX_SEGMENT]


def build_breadcrumb_paths(url: str, segments: cabc.Sequence[str]) -> list[str]:
    """Return the cumulative path prefixes for ``segments``.

    The final segment only contributes a prefix when ``url`` ends with a
    slash; otherwise it names the page itself and is left out of the trail.
    """
    paths = [ROOT_PATH]
    current = ""
    last = len(segments) - 1
    for idx, segment in enumerate(segments):
        if idx == last and not url.endswith("/"):
            continue
        current += f"/{segment}"
        paths.append(current)
    return paths


def capitalize_first(text: str) -> str:
    """Upper-case the first character of ``text`` and keep the rest as-is."""
    return text[:1].upper() + text[1:]


def derive_breadcrumbs(url: str) -> BreadcrumbData | None:
    """Compute the breadcrumb fields for ``url``.

    Parameters
    ----------
    url : str
        Slash-delimited page URL, for example ``/modules/foo/commands/bar/``.

    Returns
    -------
    BreadcrumbData or None
        Derived fields, or ``None`` when the URL is outside the module tree.
    """
    if not in_scope(url):
        return None

    segments = split_segments(url)
    data = BreadcrumbData(breadcrumb_paths=build_breadcrumb_paths(url, segments))
    if POWERSHELL_MODULES_MARKER in url:
        data.breadcrumb_title = POWERSHELL_MODULES_TITLE
    elif MODULES_MARKER in url and len(segments) >= 2:  # noqa: PLR2004
        data.module_name = capitalize_first(segments[1])
        if len(segments) >= 3 and segments[2] == COMMANDS_SEGMENT:  # noqa: PLR2004
            data.command_section = True
    return data


def annotate(url: str, metadata: cabc.MutableMapping[str, typ.Any]) -> bool:
    """Write breadcrumb fields for ``url`` into ``metadata`` in place.

    Returns
    -------
    bool
        ``True`` when the URL was in scope and fields were written.
    """
    data = derive_breadcrumbs(url)
    if data is None:
        return False
    data.apply(metadata)
    return True


class BreadcrumbAnnotator:
    """Pre-render hook that annotates module pages with breadcrumb metadata."""

    name = "breadcrumbs"

    def __call__(self, page: Page) -> None:
        """Annotate ``page.data`` based on ``page.url``."""
        annotate(page.url, page.data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = [
    "BreadcrumbAnnotator",
    "BreadcrumbData",
    "annotate",
    "build_breadcrumb_paths",
    "capitalize_first",
    "derive_breadcrumbs",
    "in_scope",
    "split_segments",
]
