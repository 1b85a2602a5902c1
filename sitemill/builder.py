"""Build orchestration: directories, static assets, collection, and rendering.

:func:`build` runs one complete build. The static copy and the page renders
are submitted to a shared thread pool and joined at a single point, so
neither waits for the other to start and both must finish before a result is
returned. The first failure cancels any renders that have not started and is
raised to the caller; no partial result is produced.

Examples
--------
>>> from pathlib import Path
>>> from sitemill.builder import build
>>> from sitemill.config import BuildOptions
>>> result = build({"title": "My Site"}, BuildOptions(cwd=Path("site")))  # doctest: +SKIP
>>> result.page_count  # doctest: +SKIP
5
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import shutil
import time
import typing as typ
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from pathlib import Path

from .config import BuildOptions, BuildPaths
from .pages import PageRecord, build_blog_index, collect_pages
from .renderer import PageRenderer
from .walker import walk_files

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class BuildContext:
    """Values shared by every page render in one build."""

    site_config: cabc.Mapping[str, typ.Any]
    paths: BuildPaths
    blogs: tuple[PageRecord, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class BuildResult:
    """Summary of a finished build.

    Attributes
    ----------
    page_count : int
        Number of page templates rendered.
    elapsed : int
        Wall time of the build in milliseconds.
    blogs : tuple[PageRecord, ...]
        The blog index handed to templates, newest first.
    """

    page_count: int
    elapsed: int
    blogs: tuple[PageRecord, ...]


def _reset_output_dir(out_dir: Path) -> None:
    if out_dir.exists():
        shutil.rmtree(out_dir)
    out_dir.mkdir(parents=True)


def copy_static(static_dir: Path, out_dir: Path) -> bool:
    """Copy ``static_dir`` into ``out_dir``, preserving its layout.

    Returns
    -------
    bool
        ``False`` when ``static_dir`` does not exist and nothing was copied.
    """
    if not static_dir.is_dir():
        logger.debug("No static directory at %s; skipping copy", static_dir)
        return False
    shutil.copytree(static_dir, out_dir, dirs_exist_ok=True)
    return True


def _join(futures: list[Future[typ.Any]]) -> None:
    done, pending = wait(futures, return_when=FIRST_EXCEPTION)
    for future in pending:
        future.cancel()
    for future in done:
        exc = future.exception()
        if exc is not None:
            wait(pending)
            raise exc


def build(
    site_config: cabc.Mapping[str, typ.Any] | None = None,
    options: BuildOptions | None = None,
) -> BuildResult:
    """Render every page template and copy static assets into the output root.

    Parameters
    ----------
    site_config : Mapping[str, Any], optional
        Site-wide values exposed to templates as ``config``; ``title`` also
        seeds each page's default title.
    options : BuildOptions, optional
        Directory layout; defaults to ``pages``, ``partials``, ``static``, and
        ``dist`` under the working directory.

    Returns
    -------
    BuildResult
        Page count, elapsed milliseconds, and the blog index.

    Raises
    ------
    DirectoryNotFoundError
        If the working directory or the pages directory does not exist.
    RenderError
        If any page fails to render or be written.
    OSError
        If the output directory cannot be reset or static files cannot be
        copied.
    """
    started = time.perf_counter()
    config = dict(site_config or {})
    paths = BuildPaths.resolve(options or BuildOptions())

    _reset_output_dir(paths.out_dir)

    with ThreadPoolExecutor(thread_name_prefix="sitemill") as executor:
        static_future = executor.submit(copy_static, paths.static_dir, paths.out_dir)
        records = collect_pages(
            walk_files(paths.pages_dir),
            pages_dir=paths.pages_dir,
            out_dir=paths.out_dir,
            site_config=config,
            executor=executor,
        )
        context = BuildContext(
            site_config=config, paths=paths, blogs=build_blog_index(records)
        )
        renderer = PageRenderer(context)
        futures = [executor.submit(renderer.run, record) for record in records]
        _join([static_future, *futures])

    elapsed = round((time.perf_counter() - started) * 1000)
    logger.debug("%d pages built in %dms", len(records), elapsed)
    return BuildResult(page_count=len(records), elapsed=elapsed, blogs=context.blogs)


__all__ = ["BuildContext", "BuildResult", "build", "copy_static"]
