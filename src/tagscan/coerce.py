"""Literal coercion for attribute values and content.

Raw values are read as literals of the familiar structured-data notation:
null, true, false, numbers, double-quoted strings, arrays and objects.
Anything the grammar does not accept falls back to the raw text.

The parser is deliberately small: no NaN/Infinity, no single quotes, no
comments, no trailing commas. Insignificant whitespace (space, tab, CR, LF)
may surround any token.

Example:
    >>> coerce_attribute("42")
    42
    >>> coerce_attribute("hello")
    'hello'
    >>> coerce_content("  [1, 2]  ")
    [1, 2]
    >>> coerce_content("  plain text ")
    'plain text'
    >>> coerce_attribute("") is None
    True
"""

from __future__ import annotations

from typing import Any

from tagscan.errors import LiteralError

_WHITESPACE = frozenset(" \t\r\n")
_DIGITS = frozenset("0123456789")
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
_KEYWORDS = (("null", None), ("true", True), ("false", False))
_MAX_DEPTH = 200


class _LiteralParser:
    """Recursive-descent parser over a single raw value."""

    __slots__ = ("_text", "_pos", "_len", "_depth")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._len = len(text)
        self._depth = 0

    def parse(self) -> Any:
        self._skip_ws()
        value = self._value()
        self._skip_ws()
        if self._pos != self._len:
            raise LiteralError("Unexpected trailing data", self._pos)
        return value

    def _skip_ws(self) -> None:
        text = self._text
        while self._pos < self._len and text[self._pos] in _WHITESPACE:
            self._pos += 1

    def _peek(self) -> str:
        if self._pos >= self._len:
            return ""
        return self._text[self._pos]

    def _value(self) -> Any:
        char = self._peek()
        if char == "":
            raise LiteralError("Unexpected end of value", self._pos)
        if char == '"':
            return self._string()
        if char == "[":
            return self._array()
        if char == "{":
            return self._object()
        if char == "-" or char in _DIGITS:
            return self._number()
        for word, value in _KEYWORDS:
            if self._text.startswith(word, self._pos):
                self._pos += len(word)
                return value
        raise LiteralError(f"Unexpected character {char!r}", self._pos)

    def _number(self) -> int | float:
        text = self._text
        start = self._pos
        if self._peek() == "-":
            self._pos += 1

        # Integer part: a single 0, or a non-zero digit followed by digits
        if self._peek() == "0":
            self._pos += 1
        elif not self._consume_digits():
            raise LiteralError("Digit expected", self._pos)

        is_float = False
        if self._peek() == ".":
            self._pos += 1
            if not self._consume_digits():
                raise LiteralError("Digit expected after decimal point", self._pos)
            is_float = True
        if self._peek() in ("e", "E"):
            self._pos += 1
            if self._peek() in ("+", "-"):
                self._pos += 1
            if not self._consume_digits():
                raise LiteralError("Digit expected in exponent", self._pos)
            is_float = True

        literal = text[start : self._pos]
        if is_float:
            return float(literal)
        try:
            return int(literal)
        except ValueError:
            # Past the interpreter's int digit limit; read it as a float
            return float(literal)

    def _consume_digits(self) -> bool:
        start = self._pos
        while self._pos < self._len and self._text[self._pos] in _DIGITS:
            self._pos += 1
        return self._pos > start

    def _string(self) -> str:
        text = self._text
        self._pos += 1  # opening quote
        parts: list[str] = []
        chunk_start = self._pos
        while True:
            if self._pos >= self._len:
                raise LiteralError("Unterminated string", self._pos)
            char = text[self._pos]
            if char == '"':
                parts.append(text[chunk_start : self._pos])
                self._pos += 1
                return "".join(parts)
            if char < " ":
                raise LiteralError("Control character in string", self._pos)
            if char == "\\":
                parts.append(text[chunk_start : self._pos])
                parts.append(self._escape())
                chunk_start = self._pos
                continue
            self._pos += 1

    def _escape(self) -> str:
        """Decode the escape sequence at the current backslash."""
        self._pos += 1
        char = self._peek()
        if char in _ESCAPES:
            self._pos += 1
            return _ESCAPES[char]
        if char != "u":
            raise LiteralError(f"Invalid escape {char!r}", self._pos)
        self._pos += 1
        code = self._hex4()
        # Join a surrogate pair into one code point
        if 0xD800 <= code <= 0xDBFF and self._text.startswith("\\u", self._pos):
            saved = self._pos
            self._pos += 2
            low = self._hex4()
            if 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
            self._pos = saved
        return chr(code)

    def _hex4(self) -> int:
        digits = self._text[self._pos : self._pos + 4]
        if len(digits) != 4 or not all(c in "0123456789abcdefABCDEF" for c in digits):
            raise LiteralError("Invalid unicode escape", self._pos)
        self._pos += 4
        return int(digits, 16)

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > _MAX_DEPTH:
            raise LiteralError("Literal nested too deeply", self._pos)

    def _array(self) -> list[Any]:
        self._enter()
        self._pos += 1  # [
        items: list[Any] = []
        self._skip_ws()
        if self._peek() == "]":
            self._pos += 1
            self._depth -= 1
            return items
        while True:
            self._skip_ws()
            items.append(self._value())
            self._skip_ws()
            char = self._peek()
            self._pos += 1
            if char == ",":
                continue
            if char == "]":
                self._depth -= 1
                return items
            raise LiteralError("Expected ',' or ']'", self._pos - 1)

    def _object(self) -> dict[str, Any]:
        self._enter()
        self._pos += 1  # {
        members: dict[str, Any] = {}
        self._skip_ws()
        if self._peek() == "}":
            self._pos += 1
            self._depth -= 1
            return members
        while True:
            self._skip_ws()
            if self._peek() != '"':
                raise LiteralError("Object key must be a string", self._pos)
            key = self._string()
            self._skip_ws()
            if self._peek() != ":":
                raise LiteralError("Expected ':'", self._pos)
            self._pos += 1
            self._skip_ws()
            members[key] = self._value()
            self._skip_ws()
            char = self._peek()
            self._pos += 1
            if char == ",":
                continue
            if char == "}":
                self._depth -= 1
                return members
            raise LiteralError("Expected ',' or '}'", self._pos - 1)


def parse_literal(raw: str) -> Any:
    """Parse raw as a single literal.

    Args:
        raw: Text of the value, optionally surrounded by whitespace

    Returns:
        None, bool, int, float, str, list or dict

    Raises:
        LiteralError: If raw is not exactly one valid literal.
    """
    return _LiteralParser(raw).parse()


def coerce_attribute(raw: str, *, literals: bool = True) -> Any:
    """Coerce an attribute value. Non-literals are returned verbatim."""
    if raw == "":
        return None
    if not literals:
        return raw
    try:
        return parse_literal(raw)
    except LiteralError:
        return raw


def coerce_content(raw: str, *, literals: bool = True) -> Any:
    """Coerce tag content. Non-literals are returned trimmed."""
    if raw == "":
        return None
    if not literals:
        return raw.strip()
    try:
        return parse_literal(raw)
    except LiteralError:
        return raw.strip()
