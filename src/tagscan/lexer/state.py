"""Transient working memory of one tokenizer."""

from __future__ import annotations

from typing import Any

from tagscan.events import Attribute
from tagscan.lexer.modes import Stage
from tagscan.stringbuilder import StringBuilder


class ParseState:
    """Mutable scan state owned by exactly one Tokenizer.

    Per-event fields (tag, attributes, content) are reset at the start of
    every pull. The key/value accumulators reset when an attribute is
    stored, and the stack lives for the whole parse.
    """

    __slots__ = (
        "stage",
        "next_stage",
        "tag",
        "key",
        "value",
        "attributes",
        "content_buffer",
        "content",
        "stack",
        "quote",
        "tag_start",
    )

    def __init__(self) -> None:
        self.stage: Stage = Stage.WAIT_TAG
        self.next_stage: Stage = Stage.WAIT_TAG
        self.tag: str = ""
        self.key: str = ""
        self.value = StringBuilder()
        self.attributes: list[Attribute] = []
        self.content_buffer = StringBuilder()
        self.content: Any = None
        self.stack: list[str] = []
        self.quote: str = '"'
        self.tag_start: int = -1  # Offset of the last <

    def begin_event(self) -> None:
        """Enter the stage chosen by the previous event and clear its output."""
        self.stage = self.next_stage
        self.tag = ""
        self.attributes = []
        self.content = None
        self.content_buffer.clear()
