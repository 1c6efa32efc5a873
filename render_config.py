# render_config.py
from __future__ import annotations

import os

from pathlib import Path
from dataclasses import dataclass


PROJECT_ROOT = Path(__file__).resolve().parent
DEFAULT_FONTS_REL = "public/fonts"


def _resolve_dir(p: str) -> Path:
    # absolute paths win, anything else is relative to the project directory
    path = Path(p)
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


# ----------------------------
# Config
# ----------------------------

@dataclass(frozen=True)
class Text2PngConfig:
    fonts_dir: Path = _resolve_dir(os.getenv("FONTS_DIR", DEFAULT_FONTS_REL).strip())

    # Canvas padding around the text, in logical px (multiplied by scale)
    base_padding: int = int(os.getenv("TEXT2PNG_BASE_PADDING", "8"))

    # Request defaults
    default_text: str = os.getenv("TEXT2PNG_DEFAULT_TEXT", "Hello World")
    default_font: str = os.getenv("TEXT2PNG_DEFAULT_FONT", "Suisse")
    default_font_size: int = int(os.getenv("TEXT2PNG_DEFAULT_FONT_SIZE", "24"))
    default_background: str = os.getenv("TEXT2PNG_DEFAULT_BACKGROUND", "transparent")
    default_scale: int = int(os.getenv("TEXT2PNG_DEFAULT_SCALE", "2"))

    # Rendered output never changes for the same query, so let clients keep it
    cache_control: str = os.getenv("TEXT2PNG_CACHE_CONTROL", "public, max-age=31536000")

    # Logging
    log_dir: str = os.getenv("LOG_DIR", "logs")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


CFG = Text2PngConfig()
