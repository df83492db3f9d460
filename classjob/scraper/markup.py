"""Recover page markup from a browser "view-source" rendering.

Some captures of the class/job page are not the page itself but the
syntax-highlighted source listing of it: a table with one
``<td class="line-content">`` cell per source line, each line HTML-escaped
and wrapped in decorative ``<span>`` tags.  :func:`reconstruct_from_view_source`
turns such a listing back into the original markup and leaves ordinary pages
untouched.
"""

from __future__ import annotations

import html
import re

_LINE_CELL = re.compile(
    r"""<td[^>]*class=(?:"|')([^"']*line-content[^"']*)(?:"|')[^>]*>([\s\S]*?)</td>""",
    re.IGNORECASE,
)
_TAG = re.compile(r"<[^>]+>")


def decode_entities(text: str) -> str:
    """Resolve named and numeric character references in *text*.

    Unknown references are left as written.
    """
    return html.unescape(text)


def reconstruct_from_view_source(page: str) -> str:
    """Return the original markup if *page* is a view-source dump.

    Cells are joined with newlines in scan order.  A cell whose closing
    ``</td>`` is missing does not match and its line is dropped.
    """
    lines = [
        decode_entities(_TAG.sub("", match.group(2)))
        for match in _LINE_CELL.finditer(page)
    ]
    if not lines:
        return page
    return "\n".join(lines)
