"""State-machine tokenizer for the tagscan dialect.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, Stage, tokenize
├── core.py              # Tokenizer class (mixin composition + pull driver)
├── modes.py             # Stage enum, character sets
├── state.py             # ParseState (transient working memory)
└── scanners/            # Stage-specific scanners
    ├── tag.py           # WAIT_TAG, TAG_START, TAG
    ├── attribute.py     # WAIT_KEY, KEY, WAIT_EQUAL, WAIT_VALUE, VALUE
    ├── content.py       # WAIT_CONTENT, CONTENT
    └── markup.py        # CLOSE_TAG, COMMENT, PROLOG

Usage:
    >>> from tagscan.lexer import Tokenizer
    >>> for event in Tokenizer("<a/>").events():
    ...     print(event)
Event(self-closed, 'a')

"""

from tagscan.lexer.core import Tokenizer, tokenize
from tagscan.lexer.modes import Stage
from tagscan.lexer.state import ParseState

__all__ = ["ParseState", "Stage", "Tokenizer", "tokenize"]
