r"""Load Markdown pages with YAML front matter and derive their site URLs.

Pages mirror the Jekyll model: a Markdown body, a mutable ``data`` mapping
seeded from front matter, and a URL derived from the file's location under
the source directory (or an explicit ``permalink``). Pre-render hooks read
``url`` and write derived fields back into ``data``.

Example
-------
>>> from pathlib import Path
>>> page_url(Path("modules/foo/index.md"))
'/modules/foo/'
>>> page_url(Path("modules/foo/commands/get-foo.md"), style="pretty")
'/modules/foo/commands/get-foo/'
>>> parse_front_matter("---\ntitle: Foo\n---\n# Body\n")
({'title': 'Foo'}, '# Body\n')
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from pathlib import Path, PurePosixPath

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)
PERMALINK_STYLES = ("html", "pretty")
PAGE_SUFFIX = ".md"


class PageError(ValueError):
    """Raised when a page source file cannot be turned into a Page."""


@dc.dataclass(slots=True)
class Page:
    """A single source page flowing through the build pipeline.

    Attributes
    ----------
    source_path : Path
        Location of the Markdown source file.
    url : str
        Site-relative URL, for example ``/modules/foo/commands/bar.html``.
    content : str
        Markdown body with the front matter removed.
    data : dict[str, Any]
        Front matter values plus metadata written by pre-render hooks.
    """

    source_path: Path
    url: str
    content: str = ""
    data: dict[str, typ.Any] = dc.field(default_factory=dict)

    @property
    def title(self) -> str:
        """Return the front matter title or one derived from the file name."""
        title = self.data.get("title")
        if isinstance(title, str) and title.strip():
            return title.strip()
        return self.source_path.stem.replace("-", " ").title()


def parse_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into its front matter mapping and Markdown body.

    Parameters
    ----------
    text : str
        Raw file contents, optionally starting with a ``---`` delimited YAML
        block.

    Returns
    -------
    tuple[dict[str, Any], str]
        The parsed front matter (empty when absent) and the remaining body.

    Raises
    ------
    PageError
        If the front matter is not valid YAML or not a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1))
    except YAMLError as exc:
        msg = f"Invalid front matter: {exc}"
        raise PageError(msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise PageError(msg)
    return dict(loaded), text[match.end() :]


def page_url(
    relative_path: Path | PurePosixPath,
    *,
    permalink: str | None = None,
    style: str = "html",
) -> str:
    """Return the site URL for a page at ``relative_path``.

    An explicit ``permalink`` wins. Otherwise ``index.md`` maps to its
    directory with a trailing slash and other files map to ``<stem>.html``
    (``style="html"``) or ``<stem>/`` (``style="pretty"``).
    """
    if permalink:
        return permalink if permalink.startswith("/") else f"/{permalink}"
    if style not in PERMALINK_STYLES:
        msg = f"Unknown permalink style '{style}'."
        raise PageError(msg)

    posix = PurePosixPath(relative_path.as_posix())
    parent = "" if str(posix.parent) == "." else f"/{posix.parent}"
    if posix.stem == "index":
        return f"{parent}/"
    if style == "pretty":
        return f"{parent}/{posix.stem}/"
    return f"{parent}/{posix.stem}.html"


def load_page(source_dir: Path, path: Path, *, style: str = "html") -> Page:
    """Read ``path`` and build a Page whose URL is relative to ``source_dir``."""
    try:
        data, body = parse_front_matter(path.read_text(encoding="utf-8"))
    except (PageError, UnicodeDecodeError) as exc:
        msg = f"{path}: {exc}"
        raise PageError(msg) from exc
    permalink = data.get("permalink")
    url = page_url(
        path.relative_to(source_dir),
        permalink=permalink if isinstance(permalink, str) else None,
        style=style,
    )
    return Page(source_path=path, url=url, content=body, data=data)


def _is_hidden(relative_path: Path) -> bool:
    """Return True when any path component starts with ``_`` or ``.``."""
    return any(part.startswith(("_", ".")) for part in relative_path.parts)


def discover_pages(source_dir: Path, *, style: str = "html") -> list[Page]:
    """Load every Markdown page beneath ``source_dir`` in path order."""
    candidates = sorted(
        (
            path
            for path in source_dir.rglob(f"*{PAGE_SUFFIX}")
            if path.is_file() and not _is_hidden(path.relative_to(source_dir))
        ),
        key=lambda path: path.relative_to(source_dir).as_posix(),
    )
    return [load_page(source_dir, path, style=style) for path in candidates]


__all__ = [
    "PERMALINK_STYLES",
    "Page",
    "PageError",
    "discover_pages",
    "load_page",
    "page_url",
    "parse_front_matter",
]
