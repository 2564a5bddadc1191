"""Exception classes for tagscan.

Every structural violation found by the tokenizer is raised as a subclass of
XmlStatementError carrying the message and the 0-based offset of the
character that triggered it. Failures are fatal: the tokenizer that raised
cannot be resumed.
"""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    """Categories of structural failure."""

    EMPTY_TAG_NAME = auto()
    DUPLICATE_PROLOG = auto()
    ILLEGAL_CHARACTER = auto()
    UNCLOSED_TAG = auto()
    MISSING_EQUALS = auto()
    MISSING_QUOTE = auto()
    TAG_MISMATCH = auto()
    UNEXPECTED_END = auto()


class TagscanError(Exception):
    """Base exception for all tagscan errors.

    Subclass this for specific error categories.
    """

    pass


class LiteralError(TagscanError):
    """Raised by the literal parser when a raw value is not a literal.

    Coercion catches it and falls back to the raw text, so it never
    escapes the tokenizer.
    """

    def __init__(self, message: str, pos: int) -> None:
        self.message = message
        self.pos = pos
        super().__init__(f"{message} at {pos}")


class XmlStatementError(TagscanError):
    """Structural failure in the scanned text.

    Raised when the tokenizer meets a character that the current stage
    does not accept. kind is None here and set by each subclass.
    """

    kind: ErrorKind | None = None

    def __init__(
        self,
        message: str,
        offset: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize the error with its location.

        Args:
            message: Error description
            offset: 0-based character offset where the violation was found
            lineno: Line number of the offset (1-indexed)
            col_offset: Column of the offset (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class EmptyTagNameError(XmlStatementError):
    """`<` followed directly by `>` or whitespace."""

    kind = ErrorKind.EMPTY_TAG_NAME


class DuplicatePrologError(XmlStatementError):
    """A second `<?` declaration."""

    kind = ErrorKind.DUPLICATE_PROLOG


class IllegalCharacterError(XmlStatementError):
    """A character that is not allowed in a tag name, key or closing tag."""

    kind = ErrorKind.ILLEGAL_CHARACTER

    def __init__(
        self,
        message: str,
        offset: int,
        char: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.char = char
        super().__init__(message, offset, lineno, col_offset, source_file)


class UnclosedTagError(XmlStatementError):
    """A `/` not followed by `>`, or a tag still open at end of input."""

    kind = ErrorKind.UNCLOSED_TAG


class MissingEqualsError(XmlStatementError):
    """Attribute key not followed by `=`."""

    kind = ErrorKind.MISSING_EQUALS


class MissingQuoteError(XmlStatementError):
    """Attribute value without an opening quote."""

    kind = ErrorKind.MISSING_QUOTE


class TagMismatchError(XmlStatementError):
    """Closing tag name differs from the innermost open tag.

    open_tag is None when there was no open tag left to close.
    """

    kind = ErrorKind.TAG_MISMATCH

    def __init__(
        self,
        message: str,
        offset: int,
        open_tag: str | None,
        close_tag: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.open_tag = open_tag
        self.close_tag = close_tag
        super().__init__(message, offset, lineno, col_offset, source_file)


class UnexpectedEndError(XmlStatementError):
    """Input ended inside a tag, attribute, comment or prolog."""

    kind = ErrorKind.UNEXPECTED_END
