import os
import sys
import tempfile
from pathlib import Path

import pytest
from PIL import ImageFont

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "text2png-test-logs"))

from font_registry import FontFiles, FontRegistry


@pytest.fixture(scope="session")
def fonts_dir(tmp_path_factory):
    """
    Writes Pillow's bundled FreeType font out as a small font tree, so tests
    measure real glyphs without depending on system fonts.
    """
    default = ImageFont.load_default(size=24)
    if not isinstance(default, ImageFont.FreeTypeFont):
        pytest.skip("Pillow built without FreeType")

    root = tmp_path_factory.mktemp("fonts")
    (root / "Sans").mkdir()
    (root / "Sans" / "Sans-Regular.ttf").write_bytes(default.font_bytes)
    (root / "Sans" / "Sans-Bold.ttf").write_bytes(default.font_bytes)
    (root / "Solo.ttf").write_bytes(default.font_bytes)
    return root


@pytest.fixture
def test_fonts():
    return {
        "Suisse": FontFiles(regular="Sans/Sans-Regular.ttf", bold="Sans/Sans-Bold.ttf"),
        "Solo": "Solo.ttf",
        "Ghost": FontFiles(regular="Ghost/Ghost-Regular.ttf", bold="Ghost/Ghost-Bold.ttf"),
    }


@pytest.fixture
def registry(fonts_dir, test_fonts):
    return FontRegistry(test_fonts, fonts_dir=fonts_dir)
