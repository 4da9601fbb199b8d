"""Reader protocol for the streamkit-xml package.

Defines ``StreamReader``, the structural interface every push-style
extractor satisfies, so callers can type against it and swap readers
without inheritance.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Callable, Protocol, runtime_checkable

from streamkit_xml.models import ParseResult


@runtime_checkable
class StreamReader(Protocol):
    """Interface for single-pass, callback-driven subtree extractors."""

    def register_callback(
        self,
        collect_path: str | None,
        extract_path: str,
        callback: Callable[[str], None],
    ) -> StreamReader:
        """Configure the tracked paths and the sink for matched subtrees."""
        ...

    def set_option_callbacks(
        self,
        configurator: Callable[[Any], None],
    ) -> StreamReader:
        """Install a hook that tunes the tokenizer once per ``parse`` call."""
        ...

    def parse(self, source: BinaryIO, buffer_size: int | None = None) -> ParseResult:
        """Run one full pass over *source*, invoking the callback per match."""
        ...


__all__ = [
    "StreamReader",
]
