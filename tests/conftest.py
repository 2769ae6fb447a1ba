import shutil
import subprocess

import numpy as np
import pytest

from asciivid.config import RenderConfig
from asciivid.glyph import Glyph

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_monospace_font():
    """Find a monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if shutil.os.path.exists(path):
            return path
    result = shutil.which("fc-match")
    if result:
        out = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if out.returncode == 0 and out.stdout.strip():
            return out.stdout.strip()
    return None


FONT_PATH = _find_monospace_font()
needs_font = pytest.mark.skipif(FONT_PATH is None, reason="No monospace font found on system")


def block_glyph(width=3, height=4):
    """A glyph that fills its whole cell, independent of any font."""
    return Glyph(char="#", mask=np.ones((height, width), dtype=bool))


@pytest.fixture
def glyph():
    return block_glyph()


@pytest.fixture
def small_config():
    # 8x4 grid; an 80x40 frame gives 10x10 windows
    return RenderConfig(text_width=8, text_height=4, show_progress=False)
