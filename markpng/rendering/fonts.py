"""
Font configuration and per-render font lookup
"""

import io
from pathlib import Path
from typing import Literal, Optional, Sequence, Union

from PIL import ImageFont
from pydantic import BaseModel, model_validator

from ..errors import FontLoadError
from ..utils.logger import logger

# Font id used when no font resources are configured
DEFAULT_FACE = -1
BOLD_WEIGHT = 600

PillowFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class FontConfig(BaseModel):
    """
    One named font resource owned by the caller

    Exactly one of ``data`` (raw font bytes) or ``path`` must be given.
    """

    name: str
    data: Optional[bytes] = None
    path: Optional[Path] = None
    weight: int = 400
    style: Literal["normal", "italic"] = "normal"
    monospace: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _one_source(self) -> "FontConfig":
        if (self.data is None) == (self.path is None):
            raise ValueError(f"font '{self.name}' needs exactly one of data or path")
        return self


class FontBook:
    """
    Loaded fonts for a single conversion

    Every resource is read and validated up front, so a broken font fails
    before any layout work starts. Sized faces are cached on the instance
    only; build a new book for each conversion.

    Usage:
        book = FontBook([FontConfig(name="Noto Sans", path="NotoSans.ttf")])
        face = book.select(bold=True, italic=False, monospace=False)
        width = book.measure("Hello", face, 20)
    """

    def __init__(self, fonts: Sequence[FontConfig] = ()):
        self.fonts: list[FontConfig] = list(fonts)
        self._data: list[bytes] = [self._load(font) for font in self.fonts]
        self._cache: dict[tuple[int, int], PillowFont] = {}

    @staticmethod
    def _load(font: FontConfig) -> bytes:
        if font.data is not None:
            data = font.data
        else:
            try:
                data = Path(font.path).read_bytes()
            except OSError as e:
                logger.error(f"Cannot read font '{font.name}' from {font.path}: {e}")
                raise FontLoadError(font.name, str(e)) from e

        try:
            ImageFont.truetype(io.BytesIO(data), 16)
        except OSError as e:
            logger.error(f"Font '{font.name}' is not a usable font: {e}")
            raise FontLoadError(font.name, f"not a usable font file ({e})") from e

        logger.debug(f"Loaded font '{font.name}' ({len(data)} bytes)")
        return data

    @property
    def names(self) -> list[str]:
        """Configured font names, in priority order"""
        return [font.name for font in self.fonts]

    def select(self, bold: bool, italic: bool, monospace: bool) -> int:
        """
        Pick the best configured face for a text style

        Monospace fit weighs most, then weight, then slant. Ties go to
        the earliest font in the configuration.

        Returns:
            Font id for get()/measure()
        """
        if not self.fonts:
            return DEFAULT_FACE

        best_id, best_score = 0, -1
        for font_id, font in enumerate(self.fonts):
            score = 0
            if font.monospace == monospace:
                score += 4
            if (font.weight >= BOLD_WEIGHT) == bold:
                score += 2
            if (font.style == "italic") == italic:
                score += 1
            if score > best_score:
                best_id, best_score = font_id, score
        return best_id

    def synthetic_bold(self, font_id: int, bold: bool) -> bool:
        """Whether bold must be faked with a stroke for this face"""
        if not bold:
            return False
        return font_id == DEFAULT_FACE or self.fonts[font_id].weight < BOLD_WEIGHT

    def get(self, font_id: int, size: float) -> PillowFont:
        """Face at a pixel size, cached for this book"""
        px = max(1, round(size))
        key = (font_id, px)
        face = self._cache.get(key)
        if face is None:
            if font_id == DEFAULT_FACE:
                face = ImageFont.load_default(size=px)
            else:
                face = ImageFont.truetype(io.BytesIO(self._data[font_id]), px)
            self._cache[key] = face
        return face

    def measure(self, text: str, font_id: int, size: float) -> float:
        """Advance width of text in pixels"""
        if not text:
            return 0.0
        return float(self.get(font_id, size).getlength(text))
