"""Common literal values used across sitemill.

Template suffixes, frontmatter markers, and server defaults live here so the
collector, renderer, CLI, and tests share one definition.

Examples
--------
>>> from sitemill import _constants
>>> _constants.PAGE_SUFFIX
'.jinja'
>>> _constants.FRONTMATTER_OPEN + ' {"title": "Hi"} ' + _constants.FRONTMATTER_CLOSE
'{#- {"title": "Hi"} #}'
"""

PAGE_SUFFIX = ".jinja"
OUTPUT_SUFFIX = ".html"
INDEX_FILENAME = "index.html"

FRONTMATTER_OPEN = "{#-"
FRONTMATTER_CLOSE = "#}"

DEFAULT_PORT = 8080
PORT_ENV_VAR = "PORT"
