"""Extract the JSON metadata block embedded at the top of a page template.

A page may open with a Jinja comment whose body is a JSON object::

    {#- {"title": "Hello", "type": "blog", "date": "2025-01-02"} #}
    <h1>{{ pageConfig.title }}</h1>

Jinja drops the comment when rendering, so the block never reaches the output.
The closing marker is located by its first occurrence, which means a value
containing ``#}`` cuts the block short; such a block fails to decode and is
treated as absent.
"""

from __future__ import annotations

import logging
import typing as typ

import msgspec
import msgspec.json as msgspec_json

from ._constants import FRONTMATTER_CLOSE, FRONTMATTER_OPEN

logger = logging.getLogger(__name__)

_DECODER = msgspec_json.Decoder(dict[str, typ.Any])


def parse_frontmatter(text: str) -> dict[str, typ.Any]:
    """Return the frontmatter mapping of ``text``, or ``{}`` when there is none.

    Missing markers and undecodable JSON are not errors; decode failures are
    logged as warnings so a broken block never aborts a build.

    Examples
    --------
    >>> parse_frontmatter('{#- {"title": "Hello"} #}\\n<h1>Content</h1>')
    {'title': 'Hello'}
    >>> parse_frontmatter("<h1>No frontmatter</h1>")
    {}
    """
    trimmed = text.lstrip("\ufeff").strip()
    if not trimmed.startswith(FRONTMATTER_OPEN):
        return {}
    start = len(FRONTMATTER_OPEN)
    end = trimmed.find(FRONTMATTER_CLOSE, start)
    if end == -1:
        return {}
    payload = trimmed[start:end].strip()
    try:
        return _DECODER.decode(payload)
    except msgspec.DecodeError as exc:
        logger.warning("Error parsing frontmatter: %s", exc)
        return {}


__all__ = ["parse_frontmatter"]
