"""Load the site-wide configuration mapping from YAML."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from sitemill.errors import SiteConfigError


def load_site_config(path: Path) -> dict[str, typ.Any]:
    """Load the YAML mapping passed to every template as ``config``.

    Parameters
    ----------
    path : Path
        Filesystem path to the site configuration (for example ``site.yaml``).

    Returns
    -------
    dict[str, Any]
        Plain mapping of site-wide values. Only ``title`` has meaning to the
        build itself; every other key is handed to templates untouched.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level YAML structure is not a mapping.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
    >>> config["title"]  # doctest: +SKIP
    'My Site'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise SiteConfigError(msg)
    return dict(loaded)


__all__ = ["load_site_config"]
