"""
tagscan — Streaming tokenizer for a small XML-like tag dialect

Turns text into a lazy sequence of events (tag opened, tag closed,
tag self-closed, content read) without building a tree. Attribute values
and content are coerced to null, booleans, numbers, strings, lists or
dicts when they read as literals.

Quick Start:
    >>> from tagscan import tokenize
    >>> tokenize('<a x="1" y="true"/>')
    [Event(self-closed, 'a', [x=1, y=True])]

    >>> # Or pull events one at a time
    >>> from tagscan import Tokenizer
    >>> tokenizer = Tokenizer("<a>hello</a>")
    >>> tokenizer.pull()
    PullResult(done=False, kind=<EventKind.OPENED: 'opened'>)
    >>> tokenizer.tag_name
    'a'

Errors:
    Structural problems raise a subclass of XmlStatementError carrying the
    message and the 0-based offset of the offending character.
"""

from tagscan.coerce import coerce_attribute, coerce_content, parse_literal
from tagscan.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from tagscan.errors import (
    DuplicatePrologError,
    EmptyTagNameError,
    ErrorKind,
    IllegalCharacterError,
    LiteralError,
    MissingEqualsError,
    MissingQuoteError,
    TagMismatchError,
    TagscanError,
    UnclosedTagError,
    UnexpectedEndError,
    XmlStatementError,
)
from tagscan.events import Attribute, Event, EventKind, PullResult
from tagscan.lexer import Stage, Tokenizer, tokenize
from tagscan.location import SourceLocation
from tagscan.text import LinkedText

__version__ = "0.1.0"

__all__ = [
    # Core
    "LinkedText",
    "Tokenizer",
    "tokenize",
    "Stage",
    # Events
    "Attribute",
    "Event",
    "EventKind",
    "PullResult",
    # Coercion
    "coerce_attribute",
    "coerce_content",
    "parse_literal",
    # Configuration
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
    # Errors
    "ErrorKind",
    "TagscanError",
    "XmlStatementError",
    "EmptyTagNameError",
    "DuplicatePrologError",
    "IllegalCharacterError",
    "UnclosedTagError",
    "MissingEqualsError",
    "MissingQuoteError",
    "TagMismatchError",
    "UnexpectedEndError",
    "LiteralError",
    # Location
    "SourceLocation",
    "__version__",
]
