"""Typed dataclasses describing sitemill build options and resolved paths."""

from __future__ import annotations

import dataclasses as dc
import os
from pathlib import Path

from sitemill._constants import DEFAULT_PORT, PORT_ENV_VAR
from sitemill.errors import DirectoryNotFoundError, SiteConfigError


@dc.dataclass(frozen=True, slots=True)
class BuildOptions:
    """Caller-supplied knobs for a single build or serve invocation.

    Attributes
    ----------
    pages_dir : str or Path
        Directory holding page templates, relative to ``cwd``.
    partials_dir : str or Path
        Directory holding templates that pages include.
    static_dir : str or Path
        Directory copied verbatim into the output root.
    out_dir : str or Path
        Directory that receives the rendered site. It is wiped on each build.
    cwd : Path or None
        Base directory for the relative paths above; ``None`` means the
        process working directory.
    port : int or None
        Port for the dev server; ``PORT`` overrides it and ``8080`` is
        used when neither is set.
    """

    pages_dir: str | Path = "pages"
    partials_dir: str | Path = "partials"
    static_dir: str | Path = "static"
    out_dir: str | Path = "dist"
    cwd: Path | None = None
    port: int | None = None

    def with_overrides(self, **changes: object) -> BuildOptions:
        """Return a copy with ``changes`` applied, ignoring ``None`` values."""
        filtered = {key: value for key, value in changes.items() if value is not None}
        return dc.replace(self, **filtered)


@dc.dataclass(frozen=True, slots=True)
class BuildPaths:
    """Absolute directory locations used by one build."""

    pages_dir: Path
    partials_dir: Path
    static_dir: Path
    out_dir: Path

    @classmethod
    def resolve(cls, options: BuildOptions) -> BuildPaths:
        """Resolve ``options`` against its working directory.

        Raises
        ------
        DirectoryNotFoundError
            If ``options.cwd`` does not exist.
        """
        cwd = Path(options.cwd) if options.cwd is not None else Path.cwd()
        if not cwd.is_dir():
            raise DirectoryNotFoundError(cwd)
        cwd = cwd.resolve()
        return cls(
            pages_dir=cwd / options.pages_dir,
            partials_dir=cwd / options.partials_dir,
            static_dir=cwd / options.static_dir,
            out_dir=cwd / options.out_dir,
        )


def resolve_port(options: BuildOptions) -> int:
    """Return the dev server port: ``$PORT``, then the explicit option, then 8080."""
    raw = os.getenv(PORT_ENV_VAR)
    if not raw:
        return options.port if options.port is not None else DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"{PORT_ENV_VAR} must be an integer, got {raw!r}."
        raise SiteConfigError(msg) from exc


__all__ = ["BuildOptions", "BuildPaths", "resolve_port"]
