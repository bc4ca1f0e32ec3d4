"""
Block parser - splits markdown into block nodes
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from .inline import InlineScanner
from ..schemas.blocks import (
    Block,
    HeadingBlock,
    ParagraphBlock,
    BlockquoteBlock,
    ListItem,
    ListBlock,
    CodeBlock,
    HorizontalRuleBlock,
)
from ..utils.logger import logger

HEADING_PATTERN = re.compile(r"^(#{1,6})\s(.+)$")
LIST_MARKER_PATTERN = re.compile(r"^(?:[-*] |[0-9]+\.\s)")
RULE_PATTERN = re.compile(r"^[-*_]{3,}$")
CODE_FENCE = "```"


@dataclass
class LineCursor:
    """
    Forward-only position over the lines of one parse call

    Each parse builds its own cursor, so parser instances hold no
    per-document state.
    """

    lines: list[str]
    index: int = 0

    @classmethod
    def from_text(cls, text: str) -> "LineCursor":
        return cls(lines=text.split("\n"))

    def has_line(self) -> bool:
        return self.index < len(self.lines)

    @property
    def raw(self) -> str:
        """Current line, untouched"""
        return self.lines[self.index]

    @property
    def current(self) -> str:
        """Current line, trimmed"""
        return self.lines[self.index].strip()

    def advance(self) -> None:
        self.index += 1

    def rewind(self) -> None:
        self.index -= 1


@dataclass
class BlockParser:
    """
    Single-pass markdown block parser

    Each non-blank line is classified in fixed priority order (first match
    wins): heading, blockquote, list, fenced code, horizontal rule,
    paragraph. Lists and code fences consume further lines through the
    shared cursor; everything else is one line per block.

    Usage:
        parser = BlockParser()
        blocks = parser.parse("# Title\\n\\n- one\\n- two")
    """

    scanner: InlineScanner = field(default_factory=InlineScanner)

    def parse(self, markdown: str) -> list[Block]:
        """
        Parse markdown into blocks

        Args:
            markdown: Raw markdown source

        Returns:
            Blocks in document order (empty for blank input)
        """
        cursor = LineCursor.from_text(markdown)
        blocks: list[Block] = []

        while cursor.has_line():
            line = cursor.current
            if line == "":
                cursor.advance()
                continue

            block = self._parse_line(line, cursor)
            if block is not None:
                blocks.append(block)
            cursor.advance()

        logger.debug(f"Parsed {len(blocks)} blocks from {len(cursor.lines)} lines")
        return blocks

    def _parse_line(self, line: str, cursor: LineCursor) -> Optional[Block]:
        if line.startswith("#"):
            return self._parse_heading(line)

        if line.startswith(">"):
            return self._parse_blockquote(line)

        if LIST_MARKER_PATTERN.match(line):
            return self._parse_list(cursor)

        if line.startswith(CODE_FENCE):
            return self._parse_code_block(line, cursor)

        if RULE_PATTERN.match(line):
            return HorizontalRuleBlock()

        return self._parse_paragraph(line)

    def _parse_heading(self, line: str) -> Block:
        match = HEADING_PATTERN.match(line)
        if match:
            return HeadingBlock(
                level=len(match.group(1)),
                content=self.scanner.scan(match.group(2)),
            )
        # Not a valid heading, keep the hashes as prose
        return self._parse_paragraph(line)

    def _parse_blockquote(self, line: str) -> BlockquoteBlock:
        return BlockquoteBlock(content=self.scanner.scan(line[1:].strip()))

    def _parse_list(self, cursor: LineCursor) -> ListBlock:
        items: list[ListItem] = []

        while cursor.has_line():
            line = cursor.current
            if line == "":
                break

            marker = LIST_MARKER_PATTERN.match(line)
            if marker is None:
                break

            items.append(ListItem(content=self.scanner.scan(line[marker.end():])))
            cursor.advance()

        # Step back onto the last item so the caller's advance lands on
        # the line that ended the list
        cursor.rewind()
        return ListBlock(items=items)

    def _parse_code_block(self, line: str, cursor: LineCursor) -> CodeBlock:
        language = line[len(CODE_FENCE):].strip() or None
        code_lines: list[str] = []

        cursor.advance()
        while cursor.has_line():
            if cursor.current == CODE_FENCE:
                break
            code_lines.append(cursor.raw)
            cursor.advance()

        return CodeBlock.from_lines(code_lines, language=language)

    def _parse_paragraph(self, line: str) -> ParagraphBlock:
        return ParagraphBlock(content=self.scanner.scan(line))


def parse(markdown: str) -> list[Block]:
    """Parse markdown text into block nodes"""
    return BlockParser().parse(markdown)
