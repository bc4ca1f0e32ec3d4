"""
Exception types raised by the rendering collaborators.

Parsing, scanning and height estimation never raise for string input;
only font loading and rendering can fail.
"""


class MarkpngError(Exception):
    """Base class for all markpng errors"""


class FontLoadError(MarkpngError):
    """A font resource is missing, unreadable or not a usable font"""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to load font '{name}': {reason}")


class RenderError(MarkpngError):
    """Layout or rasterization of a scene failed"""
