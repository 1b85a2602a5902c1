"""Render page records through Jinja2 and write the resulting HTML.

:class:`PageRenderer` owns a single Jinja ``Environment`` per build. Every
page is rendered from the source text captured during collection with the
same context shape:

``config``
    The site configuration mapping.
``pages`` / ``partials``
    Absolute roots, each ending in a path separator, so templates can write
    ``{% include partials ~ "header.jinja" %}``.
``pageConfig``
    The page's merged metadata.
``blogs``
    The blog index, newest first.

Pages never read each other's output, so renders may run in any order or in
parallel.
"""

from __future__ import annotations

import collections.abc as cabc
import os
import tempfile
import typing as typ
from pathlib import Path

from jinja2 import BaseLoader, Environment, FileSystemLoader, TemplateNotFound

from .errors import RenderError

if typ.TYPE_CHECKING:
    from .builder import BuildContext
    from .pages import PageRecord


class SiteTemplateLoader(BaseLoader):
    """Load included templates from the partials and pages roots.

    Relative names are looked up in each root in order. Absolute names are
    accepted only when they point inside one of the roots, and are then
    loaded from that root alone.
    """

    def __init__(self, roots: cabc.Sequence[Path]) -> None:
        self.roots = tuple(Path(root) for root in roots)
        self._loaders = {root: FileSystemLoader(str(root)) for root in self.roots}

    def get_source(
        self, environment: Environment, template: str
    ) -> tuple[str, str | None, cabc.Callable[[], bool] | None]:
        path = Path(template)
        if path.is_absolute():
            for root, loader in self._loaders.items():
                if path.is_relative_to(root):
                    name = path.relative_to(root).as_posix()
                    return loader.get_source(environment, name)
            raise TemplateNotFound(template)
        for loader in self._loaders.values():
            try:
                return loader.get_source(environment, template)
            except TemplateNotFound:
                continue
        raise TemplateNotFound(template)


def _with_separator(path: Path) -> str:
    return str(path).rstrip(os.sep) + os.sep


class PageRenderer:
    """Render and persist pages for one build."""

    def __init__(self, context: BuildContext) -> None:
        """Configure the Jinja environment for ``context``.

        Parameters
        ----------
        context : BuildContext
            Site config, resolved directories, and the blog index shared by
            every page in the build.
        """
        self.context = context
        paths = context.paths
        self.env = Environment(
            loader=SiteTemplateLoader([paths.partials_dir, paths.pages_dir]),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._pages_root = _with_separator(paths.pages_dir)
        self._partials_root = _with_separator(paths.partials_dir)

    def template_context(self, record: PageRecord) -> dict[str, typ.Any]:
        """Return the variables exposed to ``record``'s template."""
        return {
            "config": self.context.site_config,
            "pages": self._pages_root,
            "partials": self._partials_root,
            "pageConfig": record.metadata,
            "blogs": self.context.blogs,
        }

    def render(self, record: PageRecord) -> str:
        """Render ``record`` to an HTML string."""
        template = self.env.from_string(record.source_text)
        return template.render(**self.template_context(record))

    @staticmethod
    def write(record: PageRecord, html: str) -> Path:
        """Atomically replace ``record.output_path`` with ``html``."""
        output_path = record.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(html)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, output_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return output_path

    def run(self, record: PageRecord) -> Path:
        """Render and write ``record``, returning the written path.

        Raises
        ------
        RenderError
            If the template fails to compile or render, or the output cannot
            be written. The original exception is chained.
        """
        try:
            html = self.render(record)
        except Exception as exc:  # noqa: BLE001
            raise RenderError(record.source_path, str(exc)) from exc
        try:
            return self.write(record, html)
        except OSError as exc:
            raise RenderError(record.source_path, str(exc)) from exc


__all__ = ["PageRenderer", "SiteTemplateLoader"]
