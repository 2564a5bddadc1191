"""Tokenizer stages and character constants.

This module defines the finite state machine stages for the tokenizer
and the character sets the stage scanners reject.
"""

from __future__ import annotations

from enum import Enum, auto

from tagscan.events import EventKind


class Stage(Enum):
    """Tokenizer stages.

    Scanning stages describe what is being read right now; the emitted
    markers are the stage left behind by a pull that produced an event.
    """

    # Scanning stages
    WAIT_TAG = auto()  # Between tags, looking for <
    TAG_START = auto()  # Just read <, deciding what follows
    TAG = auto()  # Reading a tag name
    WAIT_KEY = auto()  # Inside a tag, before an attribute key
    KEY = auto()  # Reading an attribute key
    WAIT_EQUAL = auto()  # After a key, before =
    WAIT_VALUE = auto()  # After =, before the opening quote
    VALUE = auto()  # Inside a quoted value
    WAIT_CONTENT = auto()  # After an opening tag
    CONTENT = auto()  # Reading content
    CLOSE_TAG = auto()  # Reading the name of </tag>
    COMMENT = auto()  # Inside <! ... >
    PROLOG = auto()  # Inside <? ... >

    # Emitted markers
    OPEN_TAG = auto()
    CLOSED_TAG = auto()
    SINGLE_TAG = auto()
    CONTENT_READ = auto()


EVENT_STAGES = {
    EventKind.OPENED: Stage.OPEN_TAG,
    EventKind.CLOSED: Stage.CLOSED_TAG,
    EventKind.SELF_CLOSED: Stage.SINGLE_TAG,
    EventKind.CONTENT: Stage.CONTENT_READ,
}

# Stages that may be active when the input runs out without error
# (the open-tag stack is checked separately)
RESTING_STAGES = frozenset({Stage.WAIT_TAG, Stage.WAIT_CONTENT, Stage.CONTENT})

# Human-readable names used in end-of-input errors
STAGE_DESCRIPTIONS = {
    Stage.TAG_START: "a tag",
    Stage.TAG: "a tag name",
    Stage.WAIT_KEY: "a tag",
    Stage.KEY: "an attribute key",
    Stage.WAIT_EQUAL: "an attribute",
    Stage.WAIT_VALUE: "an attribute",
    Stage.VALUE: "an attribute value",
    Stage.CLOSE_TAG: "a closing tag",
    Stage.COMMENT: "a comment",
    Stage.PROLOG: "the prolog",
}

QUOTES = frozenset({'"', "'"})

# Characters rejected inside names
ILLEGAL_IN_TAG = frozenset({'"', "'", "<", "&"})
ILLEGAL_IN_KEY = frozenset({'"', "'", "/", ">", "<", "&"})
ILLEGAL_IN_CLOSE_TAG = frozenset({'"', "'", "/", "<"})
