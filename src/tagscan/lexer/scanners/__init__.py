"""Stage-specific scanners for the tagscan tokenizer.

Each scanner is a mixin providing one `_scan_*` handler per stage. A
handler receives the current character, updates the parse state and
returns the EventKind it completed, or None to keep scanning.
"""

from __future__ import annotations

from tagscan.lexer.scanners.attribute import AttributeScannerMixin
from tagscan.lexer.scanners.content import ContentScannerMixin
from tagscan.lexer.scanners.markup import MarkupScannerMixin
from tagscan.lexer.scanners.tag import TagScannerMixin

__all__ = [
    "AttributeScannerMixin",
    "ContentScannerMixin",
    "MarkupScannerMixin",
    "TagScannerMixin",
]
