"""StringBuilder for O(n) string accumulation.

The tokenizer reads one character at a time. Attribute values, content and
the prolog are collected here and joined once when the value is complete,
instead of growing a string on every character.

Thread Safety:
StringBuilder instances belong to a single tokenizer.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Appends to a list, joins once at the end.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("he").append("llo")
            >>> sb.take()
            'hello'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def take(self) -> str:
        """Build the string and clear the builder."""
        result = "".join(self._parts)
        self._parts.clear()
        return result

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        return self
