"""Helpers for walking through paginated API listings.

Listing endpoints return links to the next and previous pages; the
cursor for a page travels in the ``from`` query parameter of those links.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlsplit

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHARACTER = re.compile(r"[\x00-\x1f\x7f]")


def extract_from_query_param(uri: str) -> str:
    """Return the ``from`` query parameter of *uri*, or "" when it is absent.

    Raises ValueError when *uri* cannot be parsed.
    """
    return _query_param(uri, "from")


def _query_param(uri: str, param: str) -> str:
    if _CONTROL_CHARACTER.search(uri):
        raise ValueError(f"parse {uri!r}: invalid control character in URL")

    parts = urlsplit(uri)

    for component in (parts.netloc, parts.path, parts.fragment):
        match = _BAD_ESCAPE.search(component)
        if match:
            escape = component[match.start() : match.start() + 3]
            raise ValueError(f"parse {uri!r}: invalid URL escape {escape!r}")

    values = parse_qs(parts.query, keep_blank_values=True).get(param)
    return values[0] if values else ""