"""Closing tag, comment and prolog scanner mixin."""

from __future__ import annotations

from tagscan.errors import IllegalCharacterError, TagMismatchError, XmlStatementError
from tagscan.events import EventKind
from tagscan.lexer.modes import ILLEGAL_IN_CLOSE_TAG, Stage
from tagscan.lexer.state import ParseState
from tagscan.stringbuilder import StringBuilder
from tagscan.utils.logger import get_logger

logger = get_logger(__name__)


class MarkupScannerMixin:
    """Mixin providing the CLOSE_TAG, COMMENT and PROLOG stages.

    Comments and the prolog never produce events: both are read up to
    the first `>` and the tokenizer goes back to waiting for a tag.

    """

    # These will be set by the Tokenizer class
    _index: int
    _state: ParseState
    _prolog: str | None
    _prolog_buffer: StringBuilder

    def _error(
        self, error_cls: type[XmlStatementError], message: str, offset: int, **extra: object
    ) -> XmlStatementError:
        """Build a located error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _scan_close_tag(self, char: str) -> EventKind | None:
        """Read `</name>` and match it against the innermost open tag.

        Raises:
            TagMismatchError: The name differs from the innermost open tag,
                or no tag is open. Reported at the `<` of the closing tag.
            IllegalCharacterError: A forbidden character appears in the name.
        """
        state = self._state
        if char == ">":
            open_tag = state.stack.pop() if state.stack else None
            close_tag = state.tag
            if open_tag != close_tag:
                if open_tag is None:
                    message = f"Close tag </{close_tag}> has no matching open tag"
                else:
                    message = f"Close tag </{close_tag}> does not match open tag <{open_tag}>"
                raise self._error(
                    TagMismatchError,
                    message,
                    state.tag_start,
                    open_tag=open_tag,
                    close_tag=close_tag,
                )
            state.next_stage = Stage.WAIT_TAG
            return EventKind.CLOSED
        if char in ILLEGAL_IN_CLOSE_TAG:
            raise self._error(
                IllegalCharacterError,
                f"Unexpected character {char!r} in closing tag",
                self._index,
                char=char,
            )
        state.tag += char
        return None

    def _scan_comment(self, char: str) -> EventKind | None:
        if char == ">":
            self._state.stage = Stage.WAIT_TAG
        return None

    def _scan_prolog(self, char: str) -> EventKind | None:
        if char == ">":
            self._prolog = self._prolog_buffer.take()
            self._state.stage = Stage.WAIT_TAG
            logger.debug("Prolog read: %r", self._prolog)
        else:
            self._prolog_buffer.append(char)
        return None
