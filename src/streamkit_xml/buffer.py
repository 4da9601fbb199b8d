"""Node buffer stack for elements inside the collect/extract region.

Each open element of interest gets a ``NodeRecord`` holding its name, its
attributes in document order and the markup accumulated for its body.
Descendants of an extraction target are not pushed; they are rendered
straight into the content of the record on top of the stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from streamkit_xml.serializer import close_tag, open_tag

logger = logging.getLogger("streamkit_xml")


@dataclass
class NodeRecord:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    content: str = ""

    def append(self, markup: str) -> None:
        self.content += markup


class NodeStack:
    """Ordered stack of ``NodeRecord`` frames, bottom first."""

    def __init__(self) -> None:
        self._frames: list[NodeRecord] = []
        self.dropped = 0

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def top(self) -> NodeRecord | None:
        return self._frames[-1] if self._frames else None

    def push(self, record: NodeRecord) -> None:
        self._frames.append(record)

    def pop(self) -> NodeRecord | None:
        if not self._frames:
            return None
        return self._frames.pop()

    def append_to_top(self, markup: str) -> bool:
        """Append *markup* to the top frame's content.

        Returns False (and drops the markup) when there is no frame to hold
        it, which happens when a literal prefix match opens the extract
        region above any buffered element.
        """
        top = self.top
        if top is None:
            self.dropped += 1
            logger.debug("streamkit_xml | dropped unanchored markup | size=%d", len(markup))
            return False
        top.append(markup)
        return True

    def render(self, include_ancestors: bool = False, lower_case: bool = False) -> str:
        """Serialize the buffered frames into one balanced string.

        Opens are rendered bottom-to-top with their accumulated content,
        closes top-to-bottom.  Without *include_ancestors* only the top
        frame (the extraction target) is rendered.
        """
        if not self._frames:
            return ""
        frames = self._frames if include_ancestors else self._frames[-1:]
        opens = [open_tag(frame, lower_case) for frame in frames]
        closes = [close_tag(frame.name, lower_case) for frame in reversed(frames)]
        return "".join(opens) + "".join(closes)

    def clear(self) -> None:
        self._frames.clear()
        self.dropped = 0
