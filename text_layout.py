# text_layout.py
from __future__ import annotations

import math

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from PIL import ImageFont

from render_config import CFG
from text_markup import TextRun


@dataclass(frozen=True)
class Measurement:
    run_widths: Tuple[float, ...]
    total_width: float
    padding: int
    width: int
    height: int


def font_for(run: TextRun, regular_font: ImageFont.FreeTypeFont, bold_font: ImageFont.FreeTypeFont):
    return bold_font if run.bold else regular_font


def run_width(font: ImageFont.FreeTypeFont, text: str) -> float:
    # Advance width, not ink bbox: runs are laid end to end on the cursor
    return font.getlength(text)


def measure_runs(
    runs: Sequence[TextRun],
    regular_font: ImageFont.FreeTypeFont,
    bold_font: ImageFont.FreeTypeFont,
) -> Tuple[List[float], float]:
    """
    Measures each run on its own face and returns (per-run widths, total).
    Kerning across run boundaries is not applied.
    """
    widths = [run_width(font_for(run, regular_font, bold_font), run.text) for run in runs]
    return widths, sum(widths)


def canvas_size(total_width: float, scaled_font_size: int, scale: int, base_padding: int = CFG.base_padding) -> Tuple[int, int, int]:
    """Returns (width, height, padding) for a single line of text."""
    padding = base_padding * scale
    width = math.ceil(total_width + padding * 2)
    height = math.ceil(scaled_font_size + padding * 2)
    return width, height, padding


def measure(
    runs: Sequence[TextRun],
    regular_font: ImageFont.FreeTypeFont,
    bold_font: ImageFont.FreeTypeFont,
    scaled_font_size: int,
    scale: int,
    *,
    base_padding: int = CFG.base_padding,
) -> Measurement:
    widths, total = measure_runs(runs, regular_font, bold_font)
    width, height, padding = canvas_size(total, scaled_font_size, scale, base_padding)
    return Measurement(
        run_widths=tuple(widths),
        total_width=total,
        padding=padding,
        width=width,
        height=height,
    )
