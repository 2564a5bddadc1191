"""Pull-based state-machine tokenizer.

Scans the text one character at a time. Each pull runs the automaton
until one lexical event is complete (tag opened, tag closed, tag
self-closed, content read) or the input runs out.

Thread Safety:
Tokenizer instances are single-use. Create one per text.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from tagscan.config import TokenizerConfig, get_tokenizer_config
from tagscan.errors import UnclosedTagError, UnexpectedEndError, XmlStatementError
from tagscan.events import EXHAUSTED, Attribute, Event, EventKind, PullResult
from tagscan.lexer.modes import EVENT_STAGES, RESTING_STAGES, STAGE_DESCRIPTIONS, Stage
from tagscan.lexer.scanners import (
    AttributeScannerMixin,
    ContentScannerMixin,
    MarkupScannerMixin,
    TagScannerMixin,
)
from tagscan.lexer.state import ParseState
from tagscan.location import SourceLocation
from tagscan.stringbuilder import StringBuilder
from tagscan.text import LinkedText
from tagscan.utils.logger import get_logger

logger = get_logger(__name__)

# One shared result per event kind; PullResult is immutable
_RESULTS = {kind: PullResult(done=False, kind=kind) for kind in EventKind}


class Tokenizer(
    TagScannerMixin,
    AttributeScannerMixin,
    ContentScannerMixin,
    MarkupScannerMixin,
):
    """State-machine tokenizer for the tag dialect.

    Usage:
            >>> tokenizer = Tokenizer('<a x="1">hello</a>')
            >>> while not (result := tokenizer.pull()).done:
            ...     print(result.kind, tokenizer.tag_name, tokenizer.content)
        EventKind.OPENED a None
        EventKind.CONTENT  hello
        EventKind.CLOSED a None

    The accessors (tag_name, attributes, content) describe the last event
    and are only valid until the next pull. Use events() for snapshots
    that outlive the pull.

    Thread Safety:
        Tokenizer instances are single-use. Create one per text.

    """

    __slots__ = (
        "_text",
        "_source",
        "_length",
        "_index",
        "_state",
        "_prolog",
        "_prolog_buffer",
        "_config",
        "_source_file",
        "_handlers",
        "_exhausted",
    )

    def __init__(
        self,
        source: str | LinkedText,
        *,
        config: TokenizerConfig | None = None,
        source_file: str | None = None,
    ) -> None:
        """Bind the tokenizer to a text.

        Args:
            source: Text to scan, or a LinkedText holding it
            config: Overrides the context-local TokenizerConfig
            source_file: Optional source file path for error messages
        """
        self._text = LinkedText.from_str(source)
        self._source = self._text.text
        self._length = len(self._text)
        self._index = -1
        self._state = ParseState()
        self._prolog: str | None = None
        self._prolog_buffer = StringBuilder()
        self._config = config if config is not None else get_tokenizer_config()
        self._source_file = source_file
        self._exhausted = False

        self._handlers: dict[Stage, Callable[[str], EventKind | None]] = {
            Stage.WAIT_TAG: self._scan_wait_tag,
            Stage.TAG_START: self._scan_tag_start,
            Stage.TAG: self._scan_tag,
            Stage.WAIT_KEY: self._scan_wait_key,
            Stage.KEY: self._scan_key,
            Stage.WAIT_EQUAL: self._scan_wait_equal,
            Stage.WAIT_VALUE: self._scan_wait_value,
            Stage.VALUE: self._scan_value,
            Stage.WAIT_CONTENT: self._scan_wait_content,
            Stage.CONTENT: self._scan_content,
            Stage.CLOSE_TAG: self._scan_close_tag,
            Stage.COMMENT: self._scan_comment,
            Stage.PROLOG: self._scan_prolog,
        }

    # =========================================================================
    # Pull protocol
    # =========================================================================

    def pull(self) -> PullResult:
        """Run the automaton to the next event.

        Returns:
            PullResult with done=False and the event kind, or the
            exhausted result once the text has been consumed.

        Raises:
            XmlStatementError: On any structural violation. The tokenizer
                cannot be used after a failure.
        """
        if self._exhausted:
            return EXHAUSTED

        self._state.begin_event()
        self._index += 1

        kind = self._run()
        if kind is None:
            self._exhausted = True
            self._check_end()
            return EXHAUSTED

        self._state.stage = EVENT_STAGES[kind]
        return _RESULTS[kind]

    def _run(self) -> EventKind | None:
        """Advance one character at a time until a handler completes an event."""
        source = self._source
        source_len = self._length
        state = self._state
        handlers = self._handlers
        while self._index < source_len:
            kind = handlers[state.stage](source[self._index])
            if kind is not None:
                return kind
            self._index += 1
        return None

    def _check_end(self) -> None:
        """Validate the state left behind when the text runs out.

        Raises:
            UnexpectedEndError: The text ends inside markup.
            UnclosedTagError: Tags are still open.
        """
        state = self._state
        logger.debug(
            "End of input at offset %d (stage %s, depth %d)",
            self._length,
            state.stage.name,
            len(state.stack),
        )
        if not self._config.strict_end:
            return
        if state.stage not in RESTING_STAGES:
            raise self._error(
                UnexpectedEndError,
                f"Unexpected end of input inside {STAGE_DESCRIPTIONS[state.stage]}",
                self._length,
            )
        if state.stack:
            raise self._error(
                UnclosedTagError,
                f"Tag <{state.stack[-1]}> is never closed",
                self._length,
            )

    def __iter__(self) -> Iterator[EventKind]:
        return self

    def __next__(self) -> EventKind:
        result = self.pull()
        if result.done:
            raise StopIteration
        return result.kind  # type: ignore[return-value]

    def events(self) -> Iterator[Event]:
        """Pull every remaining event as an immutable snapshot.

        Yields:
            Event objects one at a time
        """
        while True:
            result = self.pull()
            if result.done:
                return
            yield self.snapshot(result.kind)  # type: ignore[arg-type]

    def snapshot(self, kind: EventKind) -> Event:
        """Freeze the accessors for the event just pulled."""
        state = self._state
        return Event(
            kind=kind,
            name=state.tag,
            attributes=tuple(state.attributes),
            content=state.content,
            offset=self._index,
        )

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def tag_name(self) -> str:
        return self._state.tag

    @property
    def attributes(self) -> list[Attribute]:
        return self._state.attributes

    @property
    def content(self) -> Any:
        return self._state.content

    @property
    def prolog(self) -> str | None:
        """Text between `<?` and `>`, or None if no prolog was read."""
        return self._prolog

    @property
    def depth(self) -> int:
        """Number of currently open tags."""
        return len(self._state.stack)

    @property
    def position(self) -> int:
        """Offset of the last character scanned (-1 before the first pull)."""
        return self._index

    @property
    def stage(self) -> Stage:
        return self._state.stage

    @property
    def text(self) -> LinkedText:
        return self._text

    # =========================================================================
    # Helpers used by the scanner mixins
    # =========================================================================

    def _peek_next(self) -> str:
        """Character after the current one, or "" at end of input."""
        next_index = self._index + 1
        if next_index >= self._length:
            return ""
        return self._source[next_index]

    def _error(
        self, error_cls: type[XmlStatementError], message: str, offset: int, **extra: Any
    ) -> XmlStatementError:
        """Build an error located at offset."""
        location = SourceLocation.from_offset(self._source, offset, self._source_file)
        logger.debug("%s at %s: %s", error_cls.__name__, location, message)
        return error_cls(
            message,
            offset,
            lineno=location.lineno,
            col_offset=location.col_offset,
            source_file=self._source_file,
            **extra,
        )


def tokenize(
    source: str | LinkedText,
    *,
    config: TokenizerConfig | None = None,
    source_file: str | None = None,
) -> list[Event]:
    """Tokenize a whole text into a list of event snapshots.

    Example:
        >>> tokenize("<a>1</a>")
        [Event(opened, 'a'), Event(content, 1), Event(closed, 'a')]
    """
    return list(Tokenizer(source, config=config, source_file=source_file).events())
