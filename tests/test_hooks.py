"""Unit tests for the pre-render hook pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from module_pages.breadcrumbs import BreadcrumbAnnotator
from module_pages.config import HooksConfig, SiteConfig, SiteConfigError
from module_pages.generator import SiteBuilder
from module_pages.hooks import (
    HOOK_FACTORIES,
    PreRenderPipeline,
    UnknownHookError,
    build_pipeline,
)
from module_pages.pages import Page


def _page(url: str) -> Page:
    return Page(source_path=Path("page.md"), url=url)


def test_hooks_run_in_order() -> None:
    calls: list[str] = []

    def first(page: Page) -> None:
        calls.append(f"first:{page.url}")

    def second(page: Page) -> None:
        calls.append(f"second:{page.url}")

    PreRenderPipeline([first, second]).run(_page("/a/"))

    assert calls == ["first:/a/", "second:/a/"]


def test_later_hooks_see_earlier_metadata() -> None:
    seen: dict[str, object] = {}

    def inspect(page: Page) -> None:
        seen.update(page.data)

    pipeline = PreRenderPipeline([BreadcrumbAnnotator(), inspect])
    pipeline.run(_page("/modules/foo/"))

    assert seen["module_name"] == "Foo"


def test_run_all_preserves_page_order() -> None:
    pages = [_page("/modules/b/"), _page("/modules/a/")]
    result = build_pipeline(["breadcrumbs"]).run_all(pages)
    assert [page.data["module_name"] for page in result] == ["B", "A"]


def test_hook_errors_propagate() -> None:
    def explode(page: Page) -> None:
        msg = f"cannot process {page.url}"
        raise RuntimeError(msg)

    with pytest.raises(RuntimeError, match="cannot process"):
        PreRenderPipeline([explode]).run(_page("/x/"))


def test_empty_pipeline_is_a_no_op() -> None:
    page = _page("/modules/foo/")
    PreRenderPipeline().run(page)
    assert page.data == {}


def test_build_pipeline_uses_registered_factories() -> None:
    pipeline = build_pipeline(["breadcrumbs"])
    assert pipeline.names == ("breadcrumbs",)
    assert isinstance(pipeline.hooks[0], BreadcrumbAnnotator)
    assert "breadcrumbs" in HOOK_FACTORIES


def test_build_pipeline_rejects_unknown_names() -> None:
    with pytest.raises(UnknownHookError, match="Known hooks: breadcrumbs"):
        build_pipeline(["sitemap"])


def test_names_fall_back_to_callable_type() -> None:
    def custom(page: Page) -> None:
        return None

    assert PreRenderPipeline([custom]).names == ("function",)


def test_unknown_hook_is_a_config_error() -> None:
    """Callers catching SiteConfigError also see unknown hook names."""
    with pytest.raises(SiteConfigError, match="sitemap"):
        build_pipeline(["breadcrumbs", "sitemap"])


def test_site_builder_reports_unknown_hook_as_config_error() -> None:
    config = SiteConfig(hooks=HooksConfig(pre_render=["sitemap"]))
    with pytest.raises(SiteConfigError, match="Unknown hook 'sitemap'"):
        SiteBuilder(config)
