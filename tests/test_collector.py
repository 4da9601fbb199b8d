"""Unit tests for streamkit_xml.collector -- driven with synthetic events."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from streamkit_xml.collector import Collector
from streamkit_xml.paths import PathTracker


@pytest.fixture
def sink() -> MagicMock:
    return MagicMock()


def _collector(sink, extract_path, collect_path=None, **kwargs) -> Collector:
    return Collector(PathTracker(extract_path, collect_path), sink, **kwargs)


class TestEvents:
    """start/data/end sequences produce the expected emissions."""

    def test_single_match(self, sink):
        c = _collector(sink, "/r/i")
        c.start("r", {})
        c.start("i", {"id": "1"})
        c.data("hello")
        c.end("i")
        c.end("r")
        sink.assert_called_once_with('<i id="1"><![CDATA[hello]]></i>')
        assert c.matches == 1
        assert len(c.stack) == 0

    def test_split_text_is_coalesced(self, sink):
        c = _collector(sink, "/i")
        c.start("i", {})
        c.data("hel")
        c.data(" ")
        c.data("lo")
        c.end("i")
        sink.assert_called_once_with("<i><![CDATA[hel lo]]></i>")

    def test_whitespace_only_text_skipped(self, sink):
        c = _collector(sink, "/i")
        c.start("i", {})
        c.data("\n")
        c.data("   \t")
        c.end("i")
        sink.assert_called_once_with("<i></i>")

    def test_text_outside_region_ignored(self, sink):
        c = _collector(sink, "/r/i")
        c.start("r", {})
        c.data("outside")
        c.start("i", {})
        c.end("i")
        c.end("r")
        assert c.stack.dropped == 0
        sink.assert_called_once_with("<i></i>")

    def test_descendants_flattened_into_target(self, sink):
        c = _collector(sink, "/r/i")
        c.start("r", {})
        c.start("i", {})
        c.start("b", {"x": "1"})
        assert len(c.stack) == 1
        c.data("t")
        c.end("b")
        c.end("i")
        c.end("r")
        sink.assert_called_once_with('<i><b x="1"><![CDATA[t]]></b></i>')

    def test_ordered_attribute_list(self, sink):
        c = _collector(sink, "/i")
        c.start("i", ["b", "2", "a", "1"])
        c.end("i")
        sink.assert_called_once_with('<i b="2" a="1"></i>')

    def test_collect_region_pushes_frames(self, sink):
        c = _collector(sink, "/r/i", "/r", include_ancestors=True)
        c.start("r", {"v": "1"})
        assert len(c.stack) == 1
        c.start("i", {})
        assert len(c.stack) == 2
        c.end("i")
        assert len(c.stack) == 1
        c.end("r")
        assert len(c.stack) == 0
        sink.assert_called_once_with('<r v="1"><i></i></r>')

    def test_close_discards_state(self, sink):
        c = _collector(sink, "/r/i", "/r")
        c.start("r", {})
        c.data("pending")
        c.close()
        assert len(c.stack) == 0
        assert c.tracker.current == ""
        sink.assert_not_called()


class TestWhitespace:
    """Only XML whitespace (space, tab, CR, LF) counts as ignorable."""

    @pytest.mark.parametrize("text", ["\u00a0", "\u2003", "\u00a0 \u00a0"])
    def test_unicode_space_kept(self, sink, text):
        c = _collector(sink, "/i")
        c.start("i", {})
        c.data(text)
        c.end("i")
        sink.assert_called_once_with(f"<i><![CDATA[{text}]]></i>")

    def test_crlf_and_tabs_dropped(self, sink):
        c = _collector(sink, "/i")
        c.start("i", {})
        c.data("\r\n\t ")
        c.end("i")
        sink.assert_called_once_with("<i></i>")
