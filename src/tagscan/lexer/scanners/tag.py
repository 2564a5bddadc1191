"""Tag-start and tag-name scanner mixin."""

from __future__ import annotations

from tagscan.errors import (
    DuplicatePrologError,
    EmptyTagNameError,
    IllegalCharacterError,
    UnclosedTagError,
    XmlStatementError,
)
from tagscan.events import EventKind
from tagscan.lexer.modes import ILLEGAL_IN_TAG, Stage
from tagscan.lexer.state import ParseState
from tagscan.stringbuilder import StringBuilder


class TagScannerMixin:
    """Mixin providing the WAIT_TAG, TAG_START and TAG stages.

    Also owns the two ways an opening tag can finish (`>` and `/>`),
    which the attribute stages share.

    """

    # These will be set by the Tokenizer class
    _index: int
    _state: ParseState
    _prolog: str | None
    _prolog_buffer: StringBuilder

    def _peek_next(self) -> str:
        """Character after the current one. Implemented by Tokenizer."""
        raise NotImplementedError

    def _error(
        self, error_cls: type[XmlStatementError], message: str, offset: int, **extra: object
    ) -> XmlStatementError:
        """Build a located error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _scan_wait_tag(self, char: str) -> EventKind | None:
        """Skip everything up to the next `<`."""
        if char == "<":
            self._state.stage = Stage.TAG_START
            self._state.tag_start = self._index
        return None

    def _scan_tag_start(self, char: str) -> EventKind | None:
        """Decide what kind of markup follows a `<`.

        Raises:
            DuplicatePrologError: `<?` after a prolog was already read.
            EmptyTagNameError: `<` followed by `>` or whitespace.
            IllegalCharacterError: The tag name starts with a forbidden character.
        """
        state = self._state
        if char == "/":
            state.stage = Stage.CLOSE_TAG
        elif char == "!":
            state.stage = Stage.COMMENT
        elif char == "?":
            if self._prolog is not None:
                raise self._error(
                    DuplicatePrologError, "Duplicate prolog declaration", self._index
                )
            self._prolog_buffer.clear()
            state.stage = Stage.PROLOG
        elif char == ">" or char.isspace():
            raise self._error(EmptyTagNameError, "Empty tag name", self._index)
        elif char in ILLEGAL_IN_TAG:
            # First character of the name; same set _scan_tag rejects
            raise self._error(
                IllegalCharacterError,
                f"Unexpected character {char!r} in tag name",
                self._index,
                char=char,
            )
        else:
            state.stage = Stage.TAG
            state.tag = char
        return None

    def _scan_tag(self, char: str) -> EventKind | None:
        """Read a tag name until whitespace, `>` or `/`."""
        state = self._state
        if char.isspace():
            state.stage = Stage.WAIT_KEY
            return None
        if char == ">":
            return self._finish_open_tag()
        if char == "/":
            return self._finish_self_closing("Tag is not closed: '>' expected after '/'")
        if char in ILLEGAL_IN_TAG:
            raise self._error(
                IllegalCharacterError,
                f"Unexpected character {char!r} in tag name",
                self._index,
                char=char,
            )
        state.tag += char
        return None

    def _finish_open_tag(self) -> EventKind:
        state = self._state
        state.stack.append(state.tag)
        state.next_stage = Stage.WAIT_CONTENT
        return EventKind.OPENED

    def _finish_self_closing(self, message: str) -> EventKind:
        """Consume the `>` of `/>`.

        Raises:
            UnclosedTagError: The `/` is not immediately followed by `>`.
        """
        if self._peek_next() != ">":
            raise self._error(UnclosedTagError, message, self._index + 1)
        self._index += 1
        self._state.next_stage = Stage.WAIT_TAG
        return EventKind.SELF_CLOSED
