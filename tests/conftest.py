"""Shared test fixtures for streamkit-xml tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from streamkit_xml.config import ReaderConfig

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def default_config() -> ReaderConfig:
    """Return a default ReaderConfig."""
    return ReaderConfig()


@pytest.fixture
def fixture_xml() -> str:
    """Path to the bundled two-match fixture document."""
    return str(DATA_DIR / "test.xml")


@pytest.fixture
def stream():
    """Factory fixture turning an XML string into a seekable byte stream."""

    def _make(xml_content: str) -> io.BytesIO:
        return io.BytesIO(xml_content.encode("utf-8"))

    return _make


@pytest.fixture
def tmp_xml_file(tmp_path: Path):
    """Factory fixture to write XML string to a temp .xml file and return the path."""

    def _write(xml_content: str, filename: str = "test.xml") -> str:
        file_path = tmp_path / filename
        file_path.write_text(xml_content, encoding="utf-8")
        return str(file_path)

    return _write


@pytest.fixture
def sample_xml_feed() -> str:
    """Feed with three items, attributes, nested children and whitespace."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<Feed version="2">
    <Title>Catalogue</Title>
    <Items>
        <Item id="1" kind="book">
            <Name>First</Name>
            <Price currency="EUR">10</Price>
        </Item>
        <Item id="2" kind="disc">
            <Name>Second</Name>
        </Item>
        <Item id="3">Third</Item>
    </Items>
</Feed>"""
