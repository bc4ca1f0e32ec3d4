"""
Base classes for the layout engine and rasterizer collaborators
"""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, Field

from .fonts import FontBook
from .scene import VectorScene
from ..layout.presentation import VisualBox


class FitTo(BaseModel):
    """
    How a rasterizer sizes its output

    ``width``/``height`` scale the scene to that many pixels, ``zoom``
    multiplies it by ``value``, ``original`` keeps the scene size.
    """

    mode: str = "width"
    value: float = Field(default=1000)


class BaseLayoutEngine(ABC):
    """
    Base class for layout engines

    A layout engine turns a tree of styled boxes into a vector scene of the
    requested size.
    """

    @abstractmethod
    def layout(self, root: VisualBox, width: int, height: int, fonts: FontBook) -> VectorScene:
        """
        Lay out a visual tree

        Args:
            root: Root box from the presentation mapper
            width: Canvas width in pixels
            height: Canvas height in pixels
            fonts: Loaded fonts of this conversion

        Returns:
            Scene of exactly width x height
        """
        pass


class BaseRasterizer(ABC):
    """
    Base class for rasterizers

    A rasterizer turns a vector scene into encoded image bytes.
    """

    @abstractmethod
    def render(
        self,
        scene: VectorScene,
        fonts: FontBook,
        background: str = "#ffffff",
        fit_to: Optional[FitTo] = None,
    ) -> bytes:
        """
        Rasterize a scene

        Args:
            scene: Scene from a layout engine
            fonts: Fonts the scene was laid out with
            background: Fill colour behind the scene
            fit_to: Output sizing, defaults to the scene size

        Returns:
            Encoded image bytes

        Raises:
            RenderError: If the scene cannot be rasterized
        """
        pass
