"""A minimal static-site generator built on Jinja2.

sitemill renders every ``.jinja`` template under a pages folder into HTML,
copies a static folder verbatim, and can serve the result for local preview.
Pages may open with a JSON frontmatter block; pages whose ``type`` is
``"blog"`` form a newest-first index available to every template.

Exports
-------
- ``build``: run one build and return a :class:`BuildResult`.
- ``serve``: build, then serve the output folder.
- ``parse_frontmatter``: extract a page's metadata block.
- ``app`` / ``main``: the Cyclopts CLI.

Examples
--------
>>> from sitemill import parse_frontmatter
>>> parse_frontmatter('{#- {"title": "Hello"} #}')
{'title': 'Hello'}
>>> from sitemill import build
>>> build({"title": "My Site"})  # doctest: +SKIP
BuildResult(page_count=5, elapsed=12, blogs=(...))
"""

from __future__ import annotations

from .builder import BuildResult, build
from .cli import app, main
from .config import BuildOptions
from .frontmatter import parse_frontmatter
from .server import DevServer, serve

__all__ = [
    "BuildOptions",
    "BuildResult",
    "DevServer",
    "app",
    "build",
    "main",
    "parse_frontmatter",
    "serve",
]
