"""Markup rendering for buffered node records.

Pure functions only.  ``open_tag`` renders ``<name attr="value" ...>``
followed by the record's accumulated content, ``close_tag`` renders
``</name>``.  The ``lower_case`` flag affects output names only; path
matching always uses lowercased names regardless.
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from streamkit_xml.buffer import NodeRecord

_CDATA_OPEN = "<![CDATA["
_CDATA_CLOSE = "]]>"


def escape_attribute(value: str) -> str:
    """Escape ``&``, ``<``, ``>`` and both quote characters."""
    return html.escape(value, quote=True)


def wrap_cdata(text: str) -> str:
    """Wrap character data in a CDATA section.

    A literal ``]]>`` inside *text* would terminate the section early, so it
    is split across two adjacent sections.
    """
    body = text.replace(_CDATA_CLOSE, "]]" + _CDATA_CLOSE + _CDATA_OPEN + ">")
    return _CDATA_OPEN + body + _CDATA_CLOSE


def render_open(name: str, attributes: dict[str, str], lower_case: bool = False) -> str:
    """Render an opening tag without any content."""
    parts = ["<", name.lower() if lower_case else name]
    for key, value in attributes.items():
        parts.append(" ")
        parts.append(key.lower() if lower_case else key)
        parts.append('="')
        parts.append(escape_attribute(value))
        parts.append('"')
    parts.append(">")
    return "".join(parts)


def open_tag(record: NodeRecord, lower_case: bool = False) -> str:
    """Render the opening tag of *record* followed by its buffered content."""
    return render_open(record.name, record.attributes, lower_case) + record.content


def close_tag(name: str, lower_case: bool = False) -> str:
    return "</" + (name.lower() if lower_case else name) + ">"
