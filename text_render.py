# text_render.py
from __future__ import annotations

import io
import logging

from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field
from PIL import Image, ImageColor, ImageDraw, ImageFont

from font_registry import FontRegistry, get_font_registry
from render_config import CFG
from render_errors import InvalidColorError
from text_layout import Measurement, font_for, measure, run_width
from text_markup import TextRun, parse

logger = logging.getLogger("text2png.render")

TRANSPARENT = "transparent"
TEXT_FILL = (0, 0, 0, 255)


# ----------------------------
# Request model
# ----------------------------

class RenderRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(CFG.default_text, description="Text to render; '__' toggles bold")
    font_family: str = Field(CFG.default_font, description="Font family from the allow-list")
    font_size: int = Field(CFG.default_font_size, ge=1, description="Base font size in logical px")
    background_color: str = Field(CFG.default_background, description="CSS color or 'transparent'")
    scale: int = Field(CFG.default_scale, ge=1, description="Supersampling multiplier")

    @property
    def scaled_font_size(self) -> int:
        return self.font_size * self.scale


# ----------------------------
# Core helpers
# ----------------------------

def _background_fill(background_color: str) -> Tuple[int, int, int, int]:
    if background_color == TRANSPARENT:
        return (0, 0, 0, 0)
    try:
        return ImageColor.getcolor(background_color, "RGBA")
    except ValueError as e:
        raise InvalidColorError(background_color) from e


def render(
    runs: Sequence[TextRun],
    regular_font: ImageFont.FreeTypeFont,
    bold_font: ImageFont.FreeTypeFont,
    width: int,
    height: int,
    background_color: str,
    padding: int,
) -> Image.Image:
    """
    Draws the runs left to right on a fresh RGBA canvas of exactly (width, height).

    The cursor starts at ``padding`` and advances by run_width(), the same
    measurement used to size the canvas, so the right padding matches the left.
    Text is anchored left/middle on the canvas midline.
    """
    canvas = Image.new("RGBA", (width, height), _background_fill(background_color))
    draw = ImageDraw.Draw(canvas)

    x = float(padding)
    y = height / 2
    for run in runs:
        font = font_for(run, regular_font, bold_font)
        draw.text((x, y), run.text, font=font, fill=TEXT_FILL, anchor="lm")
        x += run_width(font, run.text)

    return canvas


def render_image(req: RenderRequest, registry: Optional[FontRegistry] = None) -> Tuple[Image.Image, Measurement]:
    registry = registry or get_font_registry()

    # Both faces are resolved up front so a bad family fails before any drawing
    regular_handle, bold_handle = registry.resolve_pair(req.font_family)

    size = req.scaled_font_size
    regular_font = regular_handle.font(size)
    bold_font = bold_handle.font(size)

    runs = parse(req.text)
    m = measure(runs, regular_font, bold_font, size, req.scale)
    logger.debug(
        "Rendering %d run(s) with %s at %dpx: canvas %dx%d (text width %.2f)",
        len(runs), req.font_family, size, m.width, m.height, m.total_width,
    )

    image = render(runs, regular_font, bold_font, m.width, m.height, req.background_color, m.padding)
    return image, m


# ----------------------------
# Main render function
# ----------------------------

def render_png(req: RenderRequest, registry: Optional[FontRegistry] = None) -> bytes:
    image, _ = render_image(req, registry)
    out = io.BytesIO()
    image.save(out, format="PNG", optimize=True)
    return out.getvalue()
