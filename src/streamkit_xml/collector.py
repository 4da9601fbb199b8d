"""Event-driven collector -- the start/end/data state machine.

A ``Collector`` lives for exactly one ``parse`` call.  The drive loop
binds its ``start``, ``end`` and ``data`` methods as tokenizer handlers;
all mutable state (path, node stack, match count) is owned here, so the
reader instance only keeps its registration between calls.

Per element start, while collecting or extracting:

* inside the extract region but not exactly at the target, the element is
  flattened into the content of the frame on top of the stack;
* otherwise a new ``NodeRecord`` frame is pushed.

Per element end, an exact match of the extract path renders the buffered
frames and hands the string to the callback.  Flattened elements are
closed by appending a closing tag to the top frame; pushed ones are
popped.
"""

from __future__ import annotations

from typing import Callable

from streamkit_xml.buffer import NodeRecord, NodeStack
from streamkit_xml.paths import PathTracker
from streamkit_xml.serializer import close_tag, render_open, wrap_cdata

# Only these four characters are whitespace in XML.
_XML_WHITESPACE = " \t\r\n"


def _as_mapping(attributes: dict[str, str] | list[str]) -> dict[str, str]:
    # ordered_attributes delivers a flat [name, value, name, value, ...] list
    if isinstance(attributes, list):
        return dict(zip(attributes[::2], attributes[1::2]))
    return dict(attributes)


class Collector:
    """Buffers elements inside the collect/extract region and emits matches."""

    def __init__(
        self,
        tracker: PathTracker,
        callback: Callable[[str], None],
        *,
        lower_case: bool = False,
        include_ancestors: bool = False,
    ) -> None:
        self.tracker = tracker
        self.stack = NodeStack()
        self.matches = 0
        self._pending: list[str] = []
        self._callback = callback
        self._lower_case = lower_case
        self._include_ancestors = include_ancestors

    @property
    def active(self) -> bool:
        return self.tracker.collecting or self.tracker.extracting

    def start(self, name: str, attributes: dict[str, str] | list[str]) -> None:
        self._flush_text()
        tracker = self.tracker
        tracker.enter(name)
        if not self.active:
            return

        attrs = _as_mapping(attributes)
        if tracker.extracting and not tracker.is_extract_target:
            self.stack.append_to_top(render_open(name, attrs, self._lower_case))
            return
        self.stack.push(NodeRecord(name=name, attributes=attrs))

    def end(self, name: str) -> None:
        self._flush_text()
        tracker = self.tracker
        extract = tracker.is_extract_target
        if extract:
            xml = self.stack.render(
                include_ancestors=self._include_ancestors,
                lower_case=self._lower_case,
            )
            self._callback(xml)
            self.matches += 1

        if self.active:
            if tracker.extracting and not extract:
                self.stack.append_to_top(close_tag(name, self._lower_case))
            else:
                self.stack.pop()

        tracker.leave()

    def data(self, text: str) -> None:
        if not self.active:
            return
        # The tokenizer may split one text node across several calls.
        self._pending.append(text)

    def _flush_text(self) -> None:
        if not self._pending:
            return
        text = "".join(self._pending)
        self._pending.clear()
        if not text.strip(_XML_WHITESPACE):
            return
        self.stack.append_to_top(wrap_cdata(text))

    def close(self) -> None:
        """Discard all buffered frames and reset the path."""
        self._pending.clear()
        self.stack.clear()
        self.tracker.reset()
