"""Page collection and blog indexing.

Every ``.jinja`` file under the pages root becomes a :class:`PageRecord`
holding its source text, destination path, site-relative link, and merged
metadata. Records are built before anything is rendered so each template can
see the complete blog index.

Examples
--------
>>> from pathlib import PurePosixPath
>>> link_for(PurePosixPath("blog/post-one.jinja"))
'/blog/post-one.html'
>>> link_for(PurePosixPath("docs/index.jinja"))
'/docs'
>>> link_for(PurePosixPath("index.jinja"))
'/'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from pathlib import Path, PurePath

from ._constants import INDEX_FILENAME, OUTPUT_SUFFIX, PAGE_SUFFIX
from .errors import SitemillError
from .frontmatter import parse_frontmatter

if typ.TYPE_CHECKING:
    from concurrent.futures import Executor

PAGE_DEFAULTS: typ.Final[cabc.Mapping[str, typ.Any]] = {"type": "page", "title": ""}
BLOG_TYPE = "blog"


@dc.dataclass(frozen=True, slots=True)
class PageRecord:
    """One discovered page template and everything derived from it.

    Attributes
    ----------
    source_path : Path
        Absolute location of the template; unique within a build.
    source_text : str
        Template contents as read during collection.
    output_path : Path
        Absolute destination of the rendered HTML, inside the output root.
    link : str
        Site-relative URL of the rendered page.
    metadata : dict[str, Any]
        Merged defaults, site title, link, and frontmatter. Templates see it
        as ``pageConfig``.
    """

    source_path: Path
    source_text: str
    output_path: Path
    link: str
    metadata: dict[str, typ.Any]

    @property
    def is_blog(self) -> bool:
        """Return ``True`` when the page is classified as a blog post."""
        return self.metadata.get("type") == BLOG_TYPE


def _html_name(relative: PurePath) -> PurePath:
    stem = relative.name.removesuffix(PAGE_SUFFIX)
    return relative.with_name(stem + OUTPUT_SUFFIX)


def output_path_for(relative: PurePath, out_dir: Path) -> Path:
    """Map a template path relative to the pages root onto the output root."""
    return out_dir / _html_name(relative)


def link_for(relative: PurePath) -> str:
    """Return the site-relative link for a template path.

    A trailing ``index.html`` collapses to its directory, and the root index
    collapses to ``/``.
    """
    parts = list(_html_name(relative).parts)
    if parts and parts[-1] == INDEX_FILENAME:
        parts.pop()
    return "/" + "/".join(parts)


def build_metadata(
    site_config: cabc.Mapping[str, typ.Any],
    link: str,
    frontmatter: cabc.Mapping[str, typ.Any],
) -> dict[str, typ.Any]:
    """Merge page metadata from lowest to highest precedence.

    Built-in defaults, then the site ``title``, then ``link``, then the page
    frontmatter. A frontmatter ``link`` of ``null`` leaves the computed link
    in place.
    """
    metadata = dict(PAGE_DEFAULTS)
    if site_config.get("title"):
        metadata["title"] = site_config["title"]
    metadata["link"] = link
    metadata.update(frontmatter)
    if metadata.get("link") is None:
        metadata["link"] = link
    return metadata


def read_page(
    source: Path,
    *,
    pages_dir: Path,
    out_dir: Path,
    site_config: cabc.Mapping[str, typ.Any],
) -> PageRecord:
    """Read ``source`` and derive its :class:`PageRecord`.

    Raises
    ------
    SitemillError
        If ``source`` is not below ``pages_dir``, which would place its output
        outside ``out_dir``, or if it cannot be read. Undecodable bytes are
        replaced rather than rejected.
    """
    try:
        relative = source.relative_to(pages_dir)
    except ValueError as exc:
        msg = f"Page '{source}' is outside the pages directory '{pages_dir}'."
        raise SitemillError(msg) from exc
    try:
        text = source.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        msg = f"Failed to read page '{source}': {exc}"
        raise SitemillError(msg) from exc
    link = link_for(relative)
    return PageRecord(
        source_path=source,
        source_text=text,
        output_path=output_path_for(relative, out_dir),
        link=link,
        metadata=build_metadata(site_config, link, parse_frontmatter(text)),
    )


def collect_pages(
    files: cabc.Iterable[Path],
    *,
    pages_dir: Path,
    out_dir: Path,
    site_config: cabc.Mapping[str, typ.Any],
    executor: Executor | None = None,
) -> list[PageRecord]:
    """Build records for every page template in ``files``.

    Files without the ``.jinja`` suffix are skipped. When ``executor`` is
    given the reads run concurrently; the result keeps the order of
    ``files`` either way.
    """
    templates = [path for path in files if path.name.endswith(PAGE_SUFFIX)]

    def _read(source: Path) -> PageRecord:
        return read_page(
            source, pages_dir=pages_dir, out_dir=out_dir, site_config=site_config
        )

    if executor is None:
        return [_read(source) for source in templates]
    return list(executor.map(_read, templates))


def _date_key(record: PageRecord) -> tuple[bool, str]:
    date = record.metadata.get("date")
    if date is None:
        return (False, "")
    return (True, str(date))


def build_blog_index(records: cabc.Iterable[PageRecord]) -> tuple[PageRecord, ...]:
    """Return blog posts ordered newest first by their ``date`` metadata.

    Dates compare as strings. Posts sharing a date keep their discovery
    order, and posts without a date follow every dated post.
    """
    blogs = [record for record in records if record.is_blog]
    return tuple(sorted(blogs, key=_date_key, reverse=True))


__all__ = [
    "BLOG_TYPE",
    "PAGE_DEFAULTS",
    "PageRecord",
    "build_blog_index",
    "build_metadata",
    "collect_pages",
    "link_for",
    "output_path_for",
    "read_page",
]
