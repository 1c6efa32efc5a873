# font_registry.py
from __future__ import annotations

import io
import logging
import threading

from pathlib import Path
from dataclasses import dataclass
from typing import Dict, Mapping, NamedTuple, Optional, Tuple, Union

from PIL import ImageFont

from render_config import CFG
from render_errors import FontFileMissingError, UnsupportedFontError

logger = logging.getLogger("text2png.fonts")

BOLD_SUFFIX = "-bold"


class FontFiles(NamedTuple):
    regular: str
    bold: str


# A family is either one file (bold is an alias for the same file) or a
# regular/bold pair. Paths are relative to the fonts directory.
FontConfig = Union[str, FontFiles]

SUPPORTED_FONTS: Dict[str, FontConfig] = {
    "Roboto": FontFiles(
        regular="Roboto/Roboto-VariableFont_wdth,wght.ttf",
        bold="Roboto/Roboto-VariableFont_wdth,wght.ttf",
    ),
    "Roboto-Italic": "Roboto/Roboto-Italic-VariableFont_wdth,wght.ttf",
    "Patua One": "Patua_One/PatuaOne-Regular.ttf",
    "Suisse": FontFiles(
        regular="Suisse/suisse-intl-regular.ttf",
        bold="Suisse/suisse-intl-bold.ttf",
    ),
}


@dataclass(frozen=True)
class FontSpec:
    family: str
    bold: bool = False

    @property
    def backend_name(self) -> str:
        # regular and bold faces must never share a name in the cache
        return f"{self.family}{BOLD_SUFFIX}" if self.bold else self.family


@dataclass(frozen=True, eq=False)
class FontHandle:
    """
    A registered font face.

    Holds the raw font bytes read once at registration, so sized fonts can be
    built for every request without touching the filesystem again.
    """

    name: str
    spec: FontSpec
    path: Path
    data: bytes

    def font(self, size: int) -> ImageFont.FreeTypeFont:
        return ImageFont.truetype(io.BytesIO(self.data), size=size)


def _read_font_bytes(path: Path) -> bytes:
    return path.read_bytes()


def _pick_file(config: FontConfig, bold: bool) -> str:
    if isinstance(config, str):
        return config
    return config.bold if bold else config.regular


class FontRegistry:
    """
    Process-lifetime cache of registered font faces, keyed by (family, bold).

    - entries are created on first use and never evicted
    - resolve() is register-if-absent: a second call returns the cached handle
    - thread-safe; concurrent first use of a key registers it once
    """

    def __init__(self, fonts: Optional[Mapping[str, FontConfig]] = None, fonts_dir: Optional[Path] = None):
        self.fonts: Dict[str, FontConfig] = dict(SUPPORTED_FONTS if fonts is None else fonts)
        self.fonts_dir = Path(fonts_dir) if fonts_dir is not None else CFG.fonts_dir

        self._handles: Dict[Tuple[str, bool], FontHandle] = {}
        self._lock = threading.Lock()

    def font_path(self, family: str, bold: bool = False) -> Path:
        config = self.fonts.get(family)
        if config is None:
            raise UnsupportedFontError(family, self.fonts)
        return self.fonts_dir / _pick_file(config, bold)

    def is_registered(self, family: str, bold: bool = False) -> bool:
        with self._lock:
            return (family, bold) in self._handles

    def resolve(self, family: str, bold: bool = False) -> FontHandle:
        key = (family, bold)

        with self._lock:
            cached = self._handles.get(key)
            if cached is not None:
                return cached

            path = self.font_path(family, bold)
            if not path.is_file():
                raise FontFileMissingError(family, path)

            spec = FontSpec(family=family, bold=bold)
            handle = FontHandle(name=spec.backend_name, spec=spec, path=path, data=_read_font_bytes(path))
            self._handles[key] = handle

        logger.info("Registered font %s from %s (%d bytes)", handle.name, path, len(handle.data))
        return handle

    def resolve_pair(self, family: str) -> Tuple[FontHandle, FontHandle]:
        """Resolve both faces of a family; returns (regular, bold)."""
        return self.resolve(family, False), self.resolve(family, True)

    def describe(self) -> list[dict]:
        out = []
        for family in self.fonts:
            regular = self.font_path(family, False)
            bold = self.font_path(family, True)
            out.append({
                "family": family,
                "regular": {"path": str(regular), "exists": regular.is_file()},
                "bold": {"path": str(bold), "exists": bold.is_file()},
                "shared_file": regular == bold,
            })
        return out


_font_registry: Optional[FontRegistry] = None
_font_registry_lock = threading.Lock()


def get_font_registry() -> FontRegistry:
    global _font_registry
    with _font_registry_lock:
        if _font_registry is None:
            _font_registry = FontRegistry()
        return _font_registry
