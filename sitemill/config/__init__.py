"""Build options and site configuration for sitemill.

``BuildOptions`` carries the caller's directory choices and is resolved into
absolute ``BuildPaths`` once per build, so no defaults are shared between
invocations. ``load_site_config`` reads the YAML mapping that templates see as
``config``.

Examples
--------
>>> from sitemill.config import BuildOptions
>>> BuildOptions().out_dir
'dist'
>>> BuildOptions().with_overrides(out_dir="public", port=None).out_dir
'public'
"""

from .loader import load_site_config
from .models import BuildOptions, BuildPaths, resolve_port

__all__ = ["BuildOptions", "BuildPaths", "load_site_config", "resolve_port"]
