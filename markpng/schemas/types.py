"""
Type definitions and enums for schema types.
"""

from enum import Enum


class SpanKind(str, Enum):
    """Inline span kinds"""

    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    LINK = "link"


class BlockKind(str, Enum):
    """Block node kinds"""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BLOCKQUOTE = "blockquote"
    LIST = "list"
    CODE_BLOCK = "code-block"
    HORIZONTAL_RULE = "horizontal-rule"
