"""XMLStreamReader -- drive loop and public API of streamkit-xml.

Feeds a byte source to the ``xml.parsers.expat`` tokenizer in fixed-size
chunks and routes its start/end/character-data events to a per-call
:class:`Collector`.  Every element found exactly at the registered extract
path is delivered to the callback as a self-contained XML string, without
ever holding the whole document in memory.

Usage::

    reader = XMLStreamReader().register_callback("/data", "/data/data", sink)
    with open("feed.xml", "rb") as fh:
        result = reader.parse(fh)

Malformed input raises :class:`XMLParseError`; matches delivered before
the failure point stay delivered.  The tokenizer and all buffered state
are released on every exit path, so the same reader can parse again.
"""

from __future__ import annotations

import logging
import time
from typing import Any, BinaryIO, Callable
from xml.parsers import expat

from streamkit_xml.collector import Collector
from streamkit_xml.config import ReaderConfig
from streamkit_xml.errors import (
    ErrorCode,
    ParseErrorDetail,
    ReaderConfigError,
    ReaderError,
    XMLParseError,
)
from streamkit_xml.models import ParseResult
from streamkit_xml.paths import PathTracker

logger = logging.getLogger("streamkit_xml")


def _normalise_path(path: str, field: str) -> str:
    if not path or not path.startswith("/"):
        raise ReaderConfigError(
            ReaderError(
                code=ErrorCode.E_CONFIG_BAD_PATH,
                message=f"{field} must be a non-empty path starting with '/': {path!r}",
                stage="configure",
                path=path,
            )
        )
    return path.lower()


def _is_seekable(source: Any) -> bool:
    seekable = getattr(source, "seekable", None)
    return bool(seekable and seekable())


def _chunk_text(chunk: bytes | str) -> str:
    if isinstance(chunk, bytes):
        return chunk.decode("utf-8", errors="replace")
    return chunk


class XMLStreamReader:
    """Push-style extractor of XML subtrees from a byte stream.

    Parameters
    ----------
    config:
        Reader configuration.  Uses defaults when *None*.
    """

    def __init__(self, config: ReaderConfig | None = None) -> None:
        self._config = config or ReaderConfig()
        self._extract_path: str | None = None
        self._collect_path: str | None = None
        self._callback: Callable[[str], None] | None = None
        self._options_callback: Callable[[Any], None] | None = None

    @property
    def config(self) -> ReaderConfig:
        return self._config

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_callback(
        self,
        collect_path: str | None,
        extract_path: str,
        callback: Callable[[str], None],
    ) -> XMLStreamReader:
        """Configure the tracked paths and the sink for matched subtrees.

        Paths are slash-delimited from the document root (``/feed/item``)
        and matched case-insensitively against the open-element path.
        *collect_path* may be ``None``.
        """
        self._extract_path = _normalise_path(extract_path, "extract_path")
        self._collect_path = (
            None if collect_path is None else _normalise_path(collect_path, "collect_path")
        )
        self._callback = callback
        return self

    def set_option_callbacks(self, configurator: Callable[[Any], None]) -> XMLStreamReader:
        """Install a hook that receives the expat parser before each pass.

        It runs after the default options are applied, so it can override
        them (e.g. ``parser.buffer_text = False``).
        """
        self._options_callback = configurator
        return self

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, source: BinaryIO, buffer_size: int | None = None) -> ParseResult:
        """Run one full pass over *source*.

        Parameters
        ----------
        source:
            Readable binary stream.  Seekable streams are rewound to
            position 0 first, so repeated calls replay the same document.
        buffer_size:
            Bytes per read.  Defaults to ``config.buffer_size``.

        Returns
        -------
        ParseResult
            Match count and read statistics for the pass.

        Raises
        ------
        XMLParseError
            When the tokenizer rejects the input.
        ReaderConfigError
            When no callback has been registered.
        """
        if self._callback is None or self._extract_path is None:
            raise ReaderConfigError(
                ReaderError(
                    code=ErrorCode.E_CONFIG_NO_CALLBACK,
                    message="register_callback() must be called before parse()",
                    stage="configure",
                )
            )
        size = buffer_size if buffer_size is not None else self._config.buffer_size
        if size <= 0:
            raise ValueError(f"buffer_size must be positive, got {size}")

        overall_start = time.monotonic()
        logger.debug(
            "streamkit_xml | parse start | extract=%s | collect=%s | buffer=%d",
            self._extract_path,
            self._collect_path,
            size,
        )

        parser, collector = self._open()
        bytes_read = 0
        chunks_read = 0
        try:
            if _is_seekable(source):
                source.seek(0)

            # Read one chunk ahead so the last data chunk is fed as final.
            chunk = source.read(size)
            while True:
                following = source.read(size) if chunk else chunk
                final = not following
                if chunk:
                    chunks_read += 1
                    bytes_read += len(chunk)
                try:
                    parser.Parse(chunk, final)
                except expat.ExpatError as exc:
                    raise self._malformed(exc, chunk, collector) from exc
                if final:
                    break
                chunk = following

            warnings: list[str] = []
            if collector.stack.dropped:
                warnings.append(ErrorCode.W_UNANCHORED_MARKUP.value)

            result = ParseResult(
                extract_path=self._extract_path,
                parser_version=self._config.parser_version,
                collect_path=self._collect_path,
                matches=collector.matches,
                bytes_read=bytes_read,
                chunks_read=chunks_read,
                max_depth=collector.tracker.max_depth,
                warnings=warnings,
                processing_time_seconds=time.monotonic() - overall_start,
            )
        finally:
            # Release the tokenizer.
            parser.StartElementHandler = None
            parser.EndElementHandler = None
            parser.CharacterDataHandler = None
            collector.close()

        logger.info(
            "streamkit_xml | extract=%s | matches=%d | bytes=%d | chunks=%d | elapsed=%.3fs",
            result.extract_path,
            result.matches,
            result.bytes_read,
            result.chunks_read,
            result.processing_time_seconds,
        )
        return result

    def parse_file(self, file_path: str, buffer_size: int | None = None) -> ParseResult:
        """Open *file_path* in binary mode and :meth:`parse` it."""
        with open(file_path, "rb") as fh:
            return self.parse(fh, buffer_size)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _open(self) -> tuple[Any, Collector]:
        """Create the tokenizer and collector for one pass."""
        config = self._config
        tracker = PathTracker(self._extract_path, self._collect_path)
        collector = Collector(
            tracker,
            self._callback,
            lower_case=config.lower_case,
            include_ancestors=config.include_ancestors,
        )

        parser = expat.ParserCreate(config.encoding)
        parser.buffer_text = config.buffer_text
        if self._options_callback is not None:
            self._options_callback(parser)
        parser.StartElementHandler = collector.start
        parser.EndElementHandler = collector.end
        parser.CharacterDataHandler = collector.data

        return parser, collector

    def _malformed(
        self,
        exc: expat.ExpatError,
        chunk: bytes | str,
        collector: Collector,
    ) -> XMLParseError:
        code = exc.code
        line = exc.lineno
        path = collector.tracker.current
        detail = ParseErrorDetail(
            code=ErrorCode.E_PARSE_MALFORMED,
            message=f"XML Parse Error: {code} at line {line} ({expat.ErrorString(code)})",
            stage="parse",
            path=path or None,
            xml_error_code=code,
            line=line,
            column=exc.offset,
            chunk=_chunk_text(chunk),
        )
        logger.error(
            "streamkit_xml | code=%s | line=%d | detail=%s",
            detail.code,
            line,
            detail.message,
        )
        if self._config.log_sample_data:
            logger.debug("streamkit_xml | malformed chunk=%r", detail.chunk)
        return XMLParseError(detail)
