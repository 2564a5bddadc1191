"""Tests for offsets reported by events and errors."""

from __future__ import annotations

import pytest

from tagscan import SourceLocation, TagMismatchError, tokenize
from tagscan.lexer import Tokenizer


class TestEventOffsets:
    """Event.offset is the character that completed the event."""

    def test_offsets(self) -> None:
        events = tokenize("<a>hi</a>")
        assert [e.offset for e in events] == [2, 5, 8]

    def test_self_closing_offset_is_gt(self) -> None:
        source = '<a x="1"/>'
        events = tokenize(source)
        assert events[0].offset == len(source) - 1

    def test_position_follows_events(self) -> None:
        tokenizer = Tokenizer("<a></a>")
        tokenizer.pull()
        assert tokenizer.position == 2
        tokenizer.pull()
        assert tokenizer.position == 6
        tokenizer.pull()
        assert tokenizer.position == 7


class TestErrorOffsets:
    def test_mismatch_on_later_line(self) -> None:
        source = "<a>\n  <b>\n  </a>"
        with pytest.raises(TagMismatchError) as exc_info:
            tokenize(source)
        err = exc_info.value
        assert err.offset == source.index("</a>")
        assert (err.lineno, err.col_offset) == (3, 3)


class TestSourceLocation:
    def test_from_offset_first_line(self) -> None:
        loc = SourceLocation.from_offset("<a/>", 2)
        assert (loc.lineno, loc.col_offset, loc.offset) == (1, 3, 2)

    def test_from_offset_after_newline(self) -> None:
        loc = SourceLocation.from_offset("<a>\n<b>", 4)
        assert (loc.lineno, loc.col_offset) == (2, 1)

    def test_from_offset_clamps_to_end(self) -> None:
        loc = SourceLocation.from_offset("ab\ncd", 99)
        assert (loc.lineno, loc.col_offset, loc.offset) == (2, 3, 5)

    def test_str(self) -> None:
        assert str(SourceLocation(2, 4)) == "2:4"
        assert str(SourceLocation(2, 4, source_file="doc.xml")) == "doc.xml:2:4"
