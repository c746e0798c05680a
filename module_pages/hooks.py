"""Pre-render hook pipeline for the page build.

Hooks are plain callables that receive a :class:`~module_pages.pages.Page` and
mutate it in place before the page is rendered. Rather than registering them
against a process-wide event, callers build a :class:`PreRenderPipeline` with
an explicit, ordered list of hooks and hand it to the site builder.

Examples
--------
>>> from module_pages.hooks import build_pipeline
>>> pipeline = build_pipeline(["breadcrumbs"])
>>> pipeline.names
('breadcrumbs',)
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .breadcrumbs import BreadcrumbAnnotator
from .config.models import SiteConfigError

if typ.TYPE_CHECKING:
    from .pages import Page


class PageHook(typ.Protocol):
    """Callable invoked once per page before rendering."""

    def __call__(self, page: Page) -> None: ...


class UnknownHookError(SiteConfigError):
    """Raised when a hook name has no registered factory."""


HOOK_FACTORIES: dict[str, cabc.Callable[[], PageHook]] = {
    BreadcrumbAnnotator.name: BreadcrumbAnnotator,
}


class PreRenderPipeline:
    """Run an ordered sequence of page hooks against each page."""

    def __init__(self, hooks: cabc.Iterable[PageHook] = ()) -> None:
        self.hooks: tuple[PageHook, ...] = tuple(hooks)

    @property
    def names(self) -> tuple[str, ...]:
        """Return hook names, falling back to the callable's type name."""
        return tuple(
            getattr(hook, "name", None) or type(hook).__name__ for hook in self.hooks
        )

    def run(self, page: Page) -> Page:
        """Invoke every hook against ``page`` in order and return it."""
        for hook in self.hooks:
            hook(page)
        return page

    def run_all(self, pages: cabc.Iterable[Page]) -> list[Page]:
        """Run the pipeline over ``pages``, returning them in input order."""
        return [self.run(page) for page in pages]


def build_pipeline(names: cabc.Iterable[str]) -> PreRenderPipeline:
    """Instantiate the built-in hooks named in ``names``.

    Raises
    ------
    UnknownHookError
        If a name does not match a key in :data:`HOOK_FACTORIES`.
    """
    hooks: list[PageHook] = []
    for name in names:
        try:
            factory = HOOK_FACTORIES[name]
        except KeyError as exc:
            available = ", ".join(sorted(HOOK_FACTORIES))
            msg = f"Unknown hook '{name}'. Known hooks: {available}"
            raise UnknownHookError(msg) from exc
        hooks.append(factory())
    return PreRenderPipeline(hooks)


__all__ = [
    "HOOK_FACTORIES",
    "PageHook",
    "PreRenderPipeline",
    "UnknownHookError",
    "build_pipeline",
]
