"""
Render and logging settings

Defaults can be overridden through environment variables:
    export MARKPNG_WIDTH=1200          # default: 1000
    export MARKPNG_BACKGROUND=#ffffff  # default: #ffffff
    export LOG_LEVEL=DEBUG             # default: INFO
    export LOG_TO_FILE=true            # default: false
    export LOG_FILE=logs/markpng.log
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_WIDTH = 1000
DEFAULT_BACKGROUND = "#ffffff"
DEFAULT_LOG_FILE = "logs/markpng.log"


class RenderSettings(BaseModel):
    """Output settings of a conversion"""

    width: int = Field(default=DEFAULT_WIDTH, gt=0, description="Output width in pixels")
    background: str = Field(default=DEFAULT_BACKGROUND, description="Fill colour behind the document")

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> "RenderSettings":
        """
        Build settings from MARKPNG_* environment variables

        Raises:
            ValidationError: If MARKPNG_WIDTH is not a positive integer
        """
        return cls(
            width=os.getenv("MARKPNG_WIDTH", str(DEFAULT_WIDTH)),
            background=os.getenv("MARKPNG_BACKGROUND", DEFAULT_BACKGROUND),
        )


class LogSettings(BaseModel):
    """Where and how verbosely markpng logs"""

    level: str = "INFO"
    to_file: bool = False
    file: Path = Path(DEFAULT_LOG_FILE)

    model_config = {"frozen": True}

    @field_validator("level")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls) -> "LogSettings":
        """Build settings from LOG_LEVEL, LOG_TO_FILE and LOG_FILE"""
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            to_file=os.getenv("LOG_TO_FILE", "false").lower() == "true",
            file=os.getenv("LOG_FILE", DEFAULT_LOG_FILE),
        )
