"""
Inline span definitions.

Spans are tagged variants discriminated on ``kind``. Each one knows how to
write itself back as Markdown, so a scanned line can be reconstructed.
"""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field

from .types import SpanKind


class BaseSpan(BaseModel):
    """Base class for all inline spans"""

    content: str

    model_config = {
        "frozen": True,
    }

    def to_markdown(self) -> str:
        """Markdown source this span was scanned from"""
        return self.content


class TextSpan(BaseSpan):
    """Plain text run"""

    kind: Literal[SpanKind.TEXT] = SpanKind.TEXT


class BoldSpan(BaseSpan):
    """``**bold**`` run"""

    kind: Literal[SpanKind.BOLD] = SpanKind.BOLD

    def to_markdown(self) -> str:
        return f"**{self.content}**"


class ItalicSpan(BaseSpan):
    """``*italic*`` run"""

    kind: Literal[SpanKind.ITALIC] = SpanKind.ITALIC

    def to_markdown(self) -> str:
        return f"*{self.content}*"


class CodeSpan(BaseSpan):
    """Inline code run"""

    kind: Literal[SpanKind.CODE] = SpanKind.CODE

    def to_markdown(self) -> str:
        return f"`{self.content}`"


class LinkSpan(BaseSpan):
    """``[text](url)`` run, ``content`` is the display text"""

    kind: Literal[SpanKind.LINK] = SpanKind.LINK
    url: str

    def to_markdown(self) -> str:
        return f"[{self.content}]({self.url})"


InlineSpan = Annotated[
    Union[TextSpan, BoldSpan, ItalicSpan, CodeSpan, LinkSpan],
    Field(discriminator="kind"),
]
