"""Text holder shared between a caller and one tokenizer.

LinkedText stores the scanned text once. The tokenizer keeps a reference
to the holder and indexes into its string; nothing slices or copies the
whole buffer while scanning.

Example:
    >>> from tagscan import LinkedText, Tokenizer
    >>> holder = LinkedText("<a>1</a>")
    >>> len(holder)
    8
    >>> tokenizer = Tokenizer(holder)
"""

from __future__ import annotations


class LinkedText:
    """Immutable wrapper around the text being tokenized."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"LinkedText expects str, got {type(text).__name__}")
        self._text = text

    @classmethod
    def from_str(cls, source: str | LinkedText) -> LinkedText:
        """Wrap source, or return it unchanged if it is already a holder."""
        if isinstance(source, LinkedText):
            return source
        return cls(source)

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        preview = self._text if len(self._text) <= 30 else self._text[:27] + "..."
        return f"LinkedText({preview!r})"
