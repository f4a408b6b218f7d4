"""Rendering options shared by the cell formatter, renderer and CLI."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_WIDTH = 80
MIN_MAX_WIDTH = 4


class OutputFormat(str, Enum):
    TABLE = "table"
    MARKDOWN = "markdown"
    HTML = "html"
    SVG = "svg"


class RenderOptions(BaseModel):
    """How one rendering pass formats its cells."""

    model_config = ConfigDict(frozen=True)

    output_format: OutputFormat = OutputFormat.TABLE
    max_width: int = Field(default=DEFAULT_MAX_WIDTH, ge=MIN_MAX_WIDTH)
    show_details: bool = False
    color: bool = False
    """Emit ANSI colours. Only meaningful for ``table`` output on a terminal."""

    @property
    def is_html(self) -> bool:
        return self.output_format is OutputFormat.HTML


__all__ = ["DEFAULT_MAX_WIDTH", "MIN_MAX_WIDTH", "OutputFormat", "RenderOptions"]
