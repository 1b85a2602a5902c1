"""Recursive file listing for the pages and static directories."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import DirectoryNotFoundError


def walk_files(directory: Path) -> list[Path]:
    """Return every regular file below ``directory`` as a sorted list.

    Parameters
    ----------
    directory : Path
        Root to enumerate; subdirectories are followed, including
        symlinked ones.

    Returns
    -------
    list[Path]
        Absolute file paths sorted lexicographically so repeated walks of the
        same tree agree on order.

    Raises
    ------
    DirectoryNotFoundError
        If ``directory`` does not exist or is not a directory.
    """
    root = Path(directory)
    if not root.is_dir():
        raise DirectoryNotFoundError(root)
    root = root.absolute()

    def _raise(error: OSError) -> None:
        raise error

    files: list[Path] = []
    walker = os.walk(root, onerror=_raise, followlinks=True)
    for current, _dirnames, filenames in walker:
        base = Path(current)
        files.extend(base / name for name in filenames if (base / name).is_file())
    return sorted(files)


__all__ = ["walk_files"]
