"""Attribute scanner mixin."""

from __future__ import annotations

from tagscan.coerce import coerce_attribute
from tagscan.config import TokenizerConfig
from tagscan.errors import (
    IllegalCharacterError,
    MissingEqualsError,
    MissingQuoteError,
    XmlStatementError,
)
from tagscan.events import Attribute, EventKind
from tagscan.lexer.modes import ILLEGAL_IN_KEY, QUOTES, Stage
from tagscan.lexer.state import ParseState


class AttributeScannerMixin:
    """Mixin providing the WAIT_KEY, KEY, WAIT_EQUAL, WAIT_VALUE and VALUE stages.

    Reads `key="value"` pairs between the tag name and the end of the
    opening tag. Values may use either quote character; the one that
    opens a value is the only one that closes it.

    """

    # These will be set by the Tokenizer class
    _index: int
    _state: ParseState
    _config: TokenizerConfig

    def _error(
        self, error_cls: type[XmlStatementError], message: str, offset: int, **extra: object
    ) -> XmlStatementError:
        """Build a located error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _finish_open_tag(self) -> EventKind:
        """Implemented by TagScannerMixin."""
        raise NotImplementedError

    def _finish_self_closing(self, message: str) -> EventKind:
        """Implemented by TagScannerMixin."""
        raise NotImplementedError

    def _scan_wait_key(self, char: str) -> EventKind | None:
        state = self._state
        if char == ">":
            return self._finish_open_tag()
        if char == "/":
            return self._finish_self_closing(
                f"Tag {state.tag!r} is not closed: '>' expected after '/'"
            )
        if char in QUOTES:
            raise self._error(
                IllegalCharacterError,
                f"Empty attribute key: quote {char!r} is not expected",
                self._index,
                char=char,
            )
        if not char.isspace():
            state.stage = Stage.KEY
            state.key = char
        return None

    def _scan_key(self, char: str) -> EventKind | None:
        state = self._state
        if char.isspace():
            state.stage = Stage.WAIT_EQUAL
        elif char == "=":
            state.stage = Stage.WAIT_VALUE
        elif char in ILLEGAL_IN_KEY:
            raise self._error(
                IllegalCharacterError,
                f"Unexpected character {char!r} in attribute key",
                self._index,
                char=char,
            )
        else:
            state.key += char
        return None

    def _scan_wait_equal(self, char: str) -> EventKind | None:
        if char == "=":
            self._state.stage = Stage.WAIT_VALUE
        elif not char.isspace():
            raise self._error(
                MissingEqualsError,
                f"Equal sign '=' expected after attribute {self._state.key!r}",
                self._index,
            )
        return None

    def _scan_wait_value(self, char: str) -> EventKind | None:
        state = self._state
        if char in QUOTES:
            state.quote = char
            state.stage = Stage.VALUE
        elif not char.isspace():
            raise self._error(
                MissingQuoteError,
                f"Opening quote expected for the value of attribute {state.key!r}",
                self._index,
            )
        return None

    def _scan_value(self, char: str) -> EventKind | None:
        state = self._state
        if char == state.quote:
            raw = state.value.take()
            value = coerce_attribute(raw, literals=self._config.coerce_values)
            state.attributes.append(Attribute(state.key, value))
            state.key = ""
            state.stage = Stage.WAIT_KEY
        else:
            state.value.append(char)
        return None
