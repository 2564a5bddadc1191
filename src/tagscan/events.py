"""Event definitions for the tagscan tokenizer.

The tokenizer reports one EventKind per pull. Attribute holds a single
key/value pair of the current tag, Event is an immutable snapshot of
everything queryable after a pull, and PullResult is what the explicit
pull protocol returns.

Thread Safety:
All types here are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventKind(Enum):
    """Lexical events produced by the tokenizer."""

    OPENED = "opened"  # <tag ...>
    CLOSED = "closed"  # </tag>
    SELF_CLOSED = "self-closed"  # <tag ... />
    CONTENT = "content"  # text between tags


@dataclass(frozen=True, slots=True)
class Attribute:
    """One attribute of a tag.

    value is the coerced value: None, bool, int, float, str, list or dict.
    """

    key: str
    value: Any


@dataclass(frozen=True, slots=True)
class Event:
    """Snapshot of one tokenizer event.

    The tokenizer's accessors are only valid until the next pull;
    an Event keeps them for as long as the caller needs.

    Attributes:
        kind: Which event was recognized
        name: Tag name for OPENED, SELF_CLOSED and CLOSED; "" for CONTENT
        attributes: Attributes for OPENED and SELF_CLOSED, in source order
        content: Coerced value for CONTENT; None otherwise
        offset: Offset of the character that completed the event

    """

    kind: EventKind
    name: str = ""
    attributes: tuple[Attribute, ...] = field(default=())
    content: Any = None
    offset: int = -1

    def __repr__(self) -> str:
        if self.kind is EventKind.CONTENT:
            return f"Event({self.kind.value}, {self.content!r})"
        if self.attributes:
            attrs = ", ".join(f"{a.key}={a.value!r}" for a in self.attributes)
            return f"Event({self.kind.value}, {self.name!r}, [{attrs}])"
        return f"Event({self.kind.value}, {self.name!r})"


@dataclass(frozen=True, slots=True)
class PullResult:
    """Result of Tokenizer.pull().

    done is True once the input is exhausted; kind is None in that case.
    """

    done: bool
    kind: EventKind | None = None


EXHAUSTED = PullResult(done=True)
