"""
Parsed Markdown document.
"""

from pydantic import BaseModel

from .blocks import Block


class Document(BaseModel):
    """
    Ordered sequence of block nodes

    Created once per conversion and immutable afterwards. Nothing is
    shared between documents.

    Usage:
        doc = Document.from_markdown("# Title\\n\\nSome *text*")
        for block in doc.blocks:
            print(block.kind)
    """

    blocks: tuple[Block, ...] = ()

    model_config = {
        "frozen": True,
    }

    @classmethod
    def from_markdown(cls, markdown: str) -> "Document":
        """
        Parse markdown text into a new document

        Args:
            markdown: Raw markdown source

        Returns:
            Document holding the parsed blocks
        """
        from ..parsing.blocks import parse

        return cls(blocks=tuple(parse(markdown)))

    def __len__(self) -> int:
        return len(self.blocks)
