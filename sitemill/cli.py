"""Cyclopts CLI entrypoint for building and previewing a sitemill site.

The ``sitemill`` console script renders the templates under ``pages/`` into
``dist/`` (``sitemill build``, the default) or builds and then serves the
output locally (``sitemill serve``). Site-wide values come from ``site.yaml``
in the working directory when it exists. Every option can also be supplied
through a ``SITEMILL_``-prefixed environment variable.

Examples
--------
Build the site in the current directory:

>>> from sitemill.cli import main
>>> main()  # doctest: +SKIP

Build into a custom folder:

>>> from sitemill.cli import app
>>> app(["build", "--out-dir", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import BuildResult, build
from .config import BuildOptions, BuildPaths, load_site_config
from .server import serve

DEFAULT_CONFIG = Path("site.yaml")

app = App(name="sitemill", config=cyclopts.config.Env("SITEMILL_", command=False))


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _load_config(config: Path | None, cwd: Path | None) -> dict[str, typ.Any]:
    """Load ``config``, or the default ``site.yaml`` when one exists."""
    if config is not None:
        return load_site_config(config)
    default = (cwd or Path.cwd()) / DEFAULT_CONFIG
    if default.is_file():
        return load_site_config(default)
    return {}


def _options(
    *,
    cwd: Path | None,
    pages_dir: str | None,
    partials_dir: str | None,
    static_dir: str | None,
    out_dir: str | None,
    port: int | None = None,
) -> BuildOptions:
    return BuildOptions().with_overrides(
        cwd=cwd,
        pages_dir=pages_dir,
        partials_dir=partials_dir,
        static_dir=static_dir,
        out_dir=out_dir,
        port=port,
    )


def _report(result: BuildResult, options: BuildOptions) -> None:
    out_dir = BuildPaths.resolve(options).out_dir
    print(f"built {result.page_count} pages in {result.elapsed}ms")
    print(f"wrote {_format_path(out_dir)}")


ConfigOption = typ.Annotated[
    Path | None, Parameter(help="Path to the site config (defaults to site.yaml)")
]
CwdOption = typ.Annotated[
    Path | None, Parameter(help="Directory the other paths are relative to")
]
PagesOption = typ.Annotated[str | None, Parameter(help="Page templates folder")]
PartialsOption = typ.Annotated[str | None, Parameter(help="Partial templates folder")]
StaticOption = typ.Annotated[str | None, Parameter(help="Static assets folder")]
OutOption = typ.Annotated[str | None, Parameter(help="Output folder")]


@app.default
@app.command(name="build", help="Render page templates into the output folder.")
def build_site(
    *,
    config: ConfigOption = None,
    cwd: CwdOption = None,
    pages_dir: PagesOption = None,
    partials_dir: PartialsOption = None,
    static_dir: StaticOption = None,
    out_dir: OutOption = None,
) -> None:
    """Build the site once.

    Parameters
    ----------
    config : Path or None, optional
        Site configuration file; ``site.yaml`` in ``cwd`` is used when omitted
        and present.
    cwd : Path or None, optional
        Base directory for the folder options; defaults to the process
        working directory.
    pages_dir, partials_dir, static_dir, out_dir : str or None, optional
        Folder overrides relative to ``cwd``.

    Returns
    -------
    None
        Prints the page count, elapsed time, and output folder.
    """
    options = _options(
        cwd=cwd,
        pages_dir=pages_dir,
        partials_dir=partials_dir,
        static_dir=static_dir,
        out_dir=out_dir,
    )
    result = build(_load_config(config, cwd), options)
    _report(result, options)


@app.command(name="serve", help="Build the site and serve it for local preview.")
def serve_site(
    *,
    config: ConfigOption = None,
    cwd: CwdOption = None,
    pages_dir: PagesOption = None,
    partials_dir: PartialsOption = None,
    static_dir: StaticOption = None,
    out_dir: OutOption = None,
    port: typ.Annotated[
        int | None, Parameter(help="Port to listen on (PORT overrides it; default 8080)")
    ] = None,
) -> None:
    """Build the site and serve the output folder until interrupted."""
    options = _options(
        cwd=cwd,
        pages_dir=pages_dir,
        partials_dir=partials_dir,
        static_dir=static_dir,
        out_dir=out_dir,
        port=port,
    )
    server = serve(_load_config(config, cwd), options)
    print(f"serving at {server.url}")
    try:
        server.wait()
    except KeyboardInterrupt:
        pass
    finally:
        server.close()


def main() -> None:
    """Configure logging and invoke the Cyclopts application."""
    logging.basicConfig(level=logging.INFO, format="sitemill: %(message)s")
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
