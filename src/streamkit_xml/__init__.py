"""streamkit-xml -- streaming extraction of XML subtrees by path.

Public API re-exports for convenient access.
"""

from streamkit_xml.buffer import NodeRecord, NodeStack
from streamkit_xml.collector import Collector
from streamkit_xml.config import ReaderConfig
from streamkit_xml.converter import extract_file, extract_subtrees
from streamkit_xml.errors import (
    ErrorCode,
    ParseErrorDetail,
    ReaderConfigError,
    ReaderError,
    StreamReaderException,
    XMLParseError,
)
from streamkit_xml.models import ParseResult
from streamkit_xml.paths import PathTracker
from streamkit_xml.protocols import StreamReader
from streamkit_xml.reader import XMLStreamReader

__all__ = [
    "XMLStreamReader",
    "StreamReader",
    "ReaderConfig",
    "ErrorCode",
    "ReaderError",
    "ParseErrorDetail",
    "StreamReaderException",
    "ReaderConfigError",
    "XMLParseError",
    "ParseResult",
    "PathTracker",
    "NodeRecord",
    "NodeStack",
    "Collector",
    "extract_subtrees",
    "extract_file",
]
