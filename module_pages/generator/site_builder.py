"""High-level orchestration for building the module documentation site.

:class:`SiteBuilder` walks the configured source directory, loads each
Markdown page with its front matter, fires the pre-render hooks once per page
(this is where breadcrumb metadata is attached), renders the body with
:class:`~module_pages.generator.renderer.HtmlContentRenderer`, and writes the
page through its Jinja layout into the output directory.

Example
-------
>>> from pathlib import Path
>>> from module_pages.config import load_site_config
>>> from module_pages.generator import SiteBuilder
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('public/index.html'), PosixPath('public/modules/foo/index.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import json
import posixpath
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from module_pages.hooks import PreRenderPipeline, build_pipeline
from module_pages.pages import Page, discover_pages

from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from module_pages.config import SiteConfig

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
LAYOUT_SUFFIX = ".jinja"


class SiteBuildError(ValueError):
    """Raised when the site cannot be built from the configured sources."""


class SiteBuilder:
    """Load source pages, run pre-render hooks, and write themed HTML."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        pipeline: PreRenderPipeline | None = None,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder with configuration and template context.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed configuration describing sources, output, and hooks.
        pipeline : PreRenderPipeline, optional
            Hooks to fire before rendering; defaults to the hooks named in
            ``site_config.hooks.pre_render``.
        templates_dir : Path, optional
            Theme directory searched before the packaged templates; falls back
            to ``site_config.site.templates_dir``.
        output_dir : Path, optional
            Override for the HTML output directory.
        """
        self.config = site_config
        self.pipeline = (
            pipeline
            if pipeline is not None
            else build_pipeline(site_config.hooks.pre_render)
        )
        self.output_dir = output_dir or site_config.site.output_dir
        self.renderer = HtmlContentRenderer(site_config.site.pygments_style)
        search_path = [str(DEFAULT_TEMPLATES_DIR)]
        theme_dir = templates_dir or site_config.site.templates_dir
        if theme_dir is not None:
            search_path.insert(0, str(theme_dir))
        self.env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def load_pages(self) -> list[Page]:
        """Discover source pages and run the pre-render pipeline over them.

        Raises
        ------
        SiteBuildError
            When the source directory is missing or holds no Markdown pages.
        """
        source_dir = self.config.site.source_dir
        if not source_dir.is_dir():
            msg = f"Source directory '{source_dir}' not found."
            raise SiteBuildError(msg)
        pages = discover_pages(source_dir, style=self.config.site.permalink)
        if not pages:
            msg = f"No Markdown pages were found under '{source_dir}'."
            raise SiteBuildError(msg)
        return self.pipeline.run_all(pages)

    def run(self) -> list[Path]:
        """Render every page into the output directory.

        Returns
        -------
        list[Path]
            Paths to the written HTML files, in source path order.

        Notes
        -----
        All hooks run for every page before the first page is rendered, so a
        template never sees a page whose metadata is still incomplete.

        Raises
        ------
        SiteBuildError
            When two source pages resolve to the same output file; nothing is
            written in that case.
        """
        pages = self.load_pages()
        targets = self._output_targets(pages)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        generated_at = dt.datetime.now(dt.UTC)
        written: list[Path] = []
        for page, output_path in zip(pages, targets, strict=True):
            html = self.render_page(page, generated_at=generated_at)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        return written

    def _output_targets(self, pages: list[Page]) -> list[Path]:
        """Return the output file for each page, rejecting destination conflicts."""
        owners: dict[Path, Path] = {}
        targets: list[Path] = []
        for page in pages:
            output_path = self.output_dir / output_path_for(page.url)
            previous = owners.get(output_path)
            if previous is not None:
                msg = (
                    f"Destination conflict: '{previous}' and '{page.source_path}' "
                    f"both write '{output_path}'."
                )
                raise SiteBuildError(msg)
            owners[output_path] = page.source_path
            targets.append(output_path)
        return targets

    def render_page(
        self, page: Page, *, generated_at: dt.datetime | None = None
    ) -> str:
        """Render ``page`` through its layout and return the HTML document."""
        template = self.env.get_template(self._layout_name(page))
        context = {
            "page": page,
            "site": self.config.site,
            "content": self.renderer.markdown(page.content),
            "page_data_json": _page_data_json(page.data),
            "pygments_css": self.renderer.stylesheet,
            "generated_at": generated_at or dt.datetime.now(dt.UTC),
        }
        html = template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def _layout_name(self, page: Page) -> str:
        """Return the template name for ``page``, appending ``.jinja`` if needed."""
        layout = page.data.get("layout")
        if not isinstance(layout, str) or not layout.strip():
            return self.config.site.default_layout
        name = layout.strip()
        if not Path(name).suffix:
            name = f"{name}{LAYOUT_SUFFIX}"
        return name


def output_path_for(url: str) -> Path:
    """Map a page URL to a path relative to the output directory.

    Directory URLs map to ``index.html`` and extensionless URLs gain an
    ``.html`` suffix. Parent references are collapsed at the site root.
    """
    normalized = posixpath.normpath("/" + url.lstrip("/"))
    relative = normalized.lstrip("/")
    if url.endswith("/") or not relative:
        return Path(relative) / "index.html"
    if not posixpath.splitext(relative)[1]:
        relative = f"{relative}.html"
    return Path(relative)


def _page_data_json(data: typ.Mapping[str, typ.Any]) -> str:
    """Serialize page metadata for embedding in a ``<script>`` data island."""
    encoded = json.dumps(data, default=str, sort_keys=True)
    return encoded.replace("</", "<\\/")


__all__ = ["SiteBuildError", "SiteBuilder", "output_path_for"]
