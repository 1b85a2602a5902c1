"""Exception types raised by the sitemill build pipeline."""

from __future__ import annotations

from pathlib import Path


class SitemillError(Exception):
    """Base class for sitemill failures."""


class DirectoryNotFoundError(SitemillError, FileNotFoundError):
    """Raised when a directory the build reads from does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' not found.")


class SiteConfigError(SitemillError, ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class RenderError(SitemillError):
    """Raised when a page fails to render or its output cannot be written.

    Attributes
    ----------
    page : Path
        Source template that failed. The underlying error is available as
        ``__cause__``.
    """

    def __init__(self, page: Path, reason: str) -> None:
        self.page = page
        super().__init__(f"Failed to render '{page}': {reason}")


__all__ = [
    "DirectoryNotFoundError",
    "RenderError",
    "SiteConfigError",
    "SitemillError",
]
