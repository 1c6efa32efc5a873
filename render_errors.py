# render_errors.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable


class Text2PngError(Exception):
    """Base class for failures raised by the text rendering pipeline."""


class UnsupportedFontError(Text2PngError):
    def __init__(self, family: str, supported: Iterable[str]):
        self.family = family
        self.supported = list(supported)
        super().__init__(
            f'Font "{family}" is not supported. Supported fonts are: {", ".join(self.supported)}'
        )


class FontFileMissingError(Text2PngError):
    def __init__(self, family: str, path: Path):
        self.family = family
        self.path = path
        super().__init__(f"Font file not found for {family}: {path}")


class InvalidColorError(Text2PngError):
    def __init__(self, color: str):
        self.color = color
        super().__init__(f"Unrecognised background color: {color!r}")
