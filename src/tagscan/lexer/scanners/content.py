"""Content scanner mixin."""

from __future__ import annotations

from tagscan.coerce import coerce_content
from tagscan.config import TokenizerConfig
from tagscan.events import EventKind
from tagscan.lexer.modes import Stage
from tagscan.lexer.state import ParseState


class ContentScannerMixin:
    """Mixin providing the WAIT_CONTENT and CONTENT stages.

    Content is whatever follows an opening tag up to the next `<`. Leading
    whitespace is skipped; a `<` right after the opening tag (possibly
    after whitespace) starts the next tag without a content event.

    """

    # These will be set by the Tokenizer class
    _index: int
    _state: ParseState
    _config: TokenizerConfig

    def _scan_wait_content(self, char: str) -> EventKind | None:
        state = self._state
        if char == "<":
            state.stage = Stage.TAG_START
            state.tag_start = self._index
        elif not char.isspace():
            state.stage = Stage.CONTENT
            state.content_buffer.append(char)
        return None

    def _scan_content(self, char: str) -> EventKind | None:
        state = self._state
        if char != "<":
            state.content_buffer.append(char)
            return None
        state.content = coerce_content(
            state.content_buffer.take(), literals=self._config.coerce_values
        )
        # The < that ended the content opens the next tag
        state.tag_start = self._index
        state.next_stage = Stage.TAG_START
        return EventKind.CONTENT
