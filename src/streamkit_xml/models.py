"""Pydantic models for the streamkit-xml package.

Contains ``ParseResult``, the summary returned by every ``parse`` call.
"""

from __future__ import annotations

from pydantic import BaseModel


class ParseResult(BaseModel):
    """Summary of one completed pass over a source.

    Matches themselves are delivered through the registered callback; this
    model only records what the pass did.
    """

    extract_path: str
    parser_version: str = ""
    collect_path: str | None = None
    matches: int = 0
    bytes_read: int = 0
    chunks_read: int = 0
    max_depth: int = 0
    warnings: list[str] = []
    processing_time_seconds: float = 0.0
