"""One-shot extraction helpers.

``extract_subtrees()`` and ``extract_file()`` wrap :class:`XMLStreamReader`
for callers that just want every match as a list of strings, in document
order.
"""

from __future__ import annotations

from typing import BinaryIO

from streamkit_xml.config import ReaderConfig
from streamkit_xml.reader import XMLStreamReader


def extract_subtrees(
    source: BinaryIO,
    extract_path: str,
    collect_path: str | None = None,
    config: ReaderConfig | None = None,
) -> list[str]:
    """Return every subtree found at *extract_path* in *source*.

    Parameters
    ----------
    source:
        Readable binary stream holding the document.
    extract_path:
        Slash-delimited path of the elements to extract.
    collect_path:
        Optional wider path whose elements are buffered as context.
    config:
        Reader configuration.  Uses defaults when *None*.

    Returns
    -------
    list[str]
        The serialized matches.
    """
    matches: list[str] = []
    reader = XMLStreamReader(config)
    reader.register_callback(collect_path, extract_path, matches.append)
    reader.parse(source)
    return matches


def extract_file(
    file_path: str,
    extract_path: str,
    collect_path: str | None = None,
    config: ReaderConfig | None = None,
) -> list[str]:
    """Like :func:`extract_subtrees` but reads from *file_path*."""
    with open(file_path, "rb") as fh:
        return extract_subtrees(fh, extract_path, collect_path, config)
