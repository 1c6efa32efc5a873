# text2png.py
from __future__ import annotations

import io
import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, StreamingResponse

from font_registry import FontRegistry, get_font_registry
from render_config import CFG
from text_render import RenderRequest, render_png

logger = logging.getLogger("text2png.api")

router = APIRouter(tags=["text2png"])

ERROR_PAYLOAD = {"error": "Failed to generate image"}


# ----------------------------
# FastAPI endpoints
# ----------------------------

@router.get("/api/text2png.png", summary="Render a line of text ('__' toggles bold) to a tight PNG")
def text2png_endpoint(
    text: str = Query(CFG.default_text, description="Text to render; wrap words in __ for bold"),
    font: str = Query(CFG.default_font, description="Font family from the allow-list"),
    font_size: int = Query(CFG.default_font_size, ge=1, description="Base font size in px"),
    background_color: str = Query(CFG.default_background, description="CSS color or 'transparent'"),
    scale: int = Query(CFG.default_scale, ge=1, description="Supersampling multiplier"),
    registry: FontRegistry = Depends(get_font_registry),
):
    try:
        # empty values fall back to the defaults, same as a missing parameter
        req = RenderRequest(
            text=text or CFG.default_text,
            font_family=font or CFG.default_font,
            font_size=font_size,
            background_color=background_color or CFG.default_background,
            scale=scale,
        )
        png = render_png(req, registry)
    except Exception:
        logger.exception("Error generating PNG (font=%r, font_size=%s, scale=%s)", font, font_size, scale)
        return JSONResponse(ERROR_PAYLOAD, status_code=500)

    return StreamingResponse(
        io.BytesIO(png),
        media_type="image/png",
        headers={"Cache-Control": CFG.cache_control},
    )


@router.get("/api/fonts", summary="List allow-listed font families and whether their files exist")
def list_fonts(registry: FontRegistry = Depends(get_font_registry)):
    return {"fonts_dir": str(registry.fonts_dir), "fonts": registry.describe()}
