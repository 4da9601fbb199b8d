"""Error codes, structured error models and raisable exceptions.

``ErrorCode`` contains all error/warning codes the reader can produce.
``ReaderError`` is the Pydantic model describing a failure;
``StreamReaderException`` and its subclasses carry one in ``.error`` so it
can be raised through the drive loop and inspected by the caller.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes for stream extraction.

    Values equal their names so they are stable strings suitable for
    metrics and alerting.  ``E_`` prefix = fatal, ``W_`` prefix = warning.
    """

    # Parse
    E_PARSE_MALFORMED = "E_PARSE_MALFORMED"

    # Configuration
    E_CONFIG_NO_CALLBACK = "E_CONFIG_NO_CALLBACK"
    E_CONFIG_BAD_PATH = "E_CONFIG_BAD_PATH"

    # Warnings (non-fatal)
    W_UNANCHORED_MARKUP = "W_UNANCHORED_MARKUP"


class ReaderError(BaseModel):
    """Structured error with code, message, and path context.

    ``path`` holds the element path that was open when the error occurred
    (or the offending configured path for configuration errors).
    """

    code: str
    message: str
    stage: str | None = None
    recoverable: bool = False
    path: str | None = None


class ParseErrorDetail(ReaderError):
    """Diagnostics reported by the tokenizer for malformed input."""

    xml_error_code: int
    line: int
    column: int = 0
    chunk: str = ""


class StreamReaderException(Exception):
    """Raisable exception wrapping a ``ReaderError`` data model."""

    def __init__(self, error: ReaderError) -> None:
        self.error = error
        super().__init__(error.message)

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def stage(self) -> str | None:
        return self.error.stage


class ReaderConfigError(StreamReaderException):
    """Raised when the reader is used with a missing or invalid registration."""


class XMLParseError(StreamReaderException):
    """Raised when the tokenizer rejects the input as malformed.

    ``code`` is the tokenizer's numeric error code, ``line`` the 1-based
    line number where parsing stopped and ``chunk`` the raw chunk that was
    being fed at the time.
    """

    error: ParseErrorDetail

    def __init__(self, error: ParseErrorDetail) -> None:
        super().__init__(error)

    @property
    def code(self) -> int:
        return self.error.xml_error_code

    @property
    def line(self) -> int:
        return self.error.line

    @property
    def chunk(self) -> str:
        return self.error.chunk
