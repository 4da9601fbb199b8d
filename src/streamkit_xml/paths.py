"""Path tracking for the open-element stack.

``PathTracker`` keeps the slash-joined, lowercased path of the elements
currently open and classifies it against the configured collect and
extract paths.  Matching is a literal string-prefix test: an extract path
of ``/da`` also covers ``/data``.  Only the extract boundary itself
(``is_extract_target``) requires exact equality.
"""

from __future__ import annotations


class PathTracker:
    """Live element path plus the collecting/extracting flags derived from it."""

    def __init__(self, extract_path: str, collect_path: str | None = None) -> None:
        self.extract_path = extract_path
        self.collect_path = collect_path
        self._segments: list[str] = []
        self.current = ""
        self.collecting = False
        self.extracting = False
        self.max_depth = 0

    @property
    def depth(self) -> int:
        return len(self._segments)

    @property
    def is_extract_target(self) -> bool:
        """True when the current path equals the extract path exactly."""
        return self.current == self.extract_path

    def enter(self, name: str) -> None:
        """Push *name* onto the path and recompute the flags."""
        self._segments.append(name.lower())
        self.current = "/" + "/".join(self._segments)
        if len(self._segments) > self.max_depth:
            self.max_depth = len(self._segments)
        self._update()

    def leave(self) -> None:
        """Drop the innermost segment and recompute the flags."""
        if self._segments:
            self._segments.pop()
        self.current = "/" + "/".join(self._segments) if self._segments else ""
        self._update()

    def reset(self) -> None:
        self._segments.clear()
        self.current = ""
        self.collecting = False
        self.extracting = False
        self.max_depth = 0

    def _update(self) -> None:
        # A missing collect path never collects.
        if self.collect_path is None:
            self.collecting = False
        else:
            self.collecting = self.current.startswith(self.collect_path)
        self.extracting = self.current.startswith(self.extract_path)
