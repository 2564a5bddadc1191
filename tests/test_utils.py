"""Tests for utility modules."""

import logging

import pytest

from tagscan import EmptyTagNameError, Tokenizer
from tagscan.stringbuilder import StringBuilder
from tagscan.utils import get_logger


class TestGetLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("mymodule").name == "tagscan.mymodule"

    def test_prefix_not_doubled(self) -> None:
        assert get_logger("tagscan.lexer.core").name == "tagscan.lexer.core"
        assert get_logger("tagscan").name == "tagscan"


class TestTokenizerLogging:
    def test_prolog_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tagscan"):
            list(Tokenizer("<?decl?><a/>").events())
        assert any("decl?" in record.getMessage() for record in caplog.records)

    def test_errors_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tagscan"):
            with pytest.raises(EmptyTagNameError):
                Tokenizer("<>").pull()
        assert any("EmptyTagNameError" in record.getMessage() for record in caplog.records)


class TestStringBuilder:
    def test_take_clears(self) -> None:
        sb = StringBuilder()
        sb.append("a").append("").append("b")
        assert sb.take() == "ab"
        assert sb.take() == ""

    def test_clear(self) -> None:
        sb = StringBuilder().append("abc")
        sb.clear()
        assert sb.take() == ""
