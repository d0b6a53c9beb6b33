"""
Shared fixtures for Post Composer tests.

Provides PNG builders, sample compositions and a fresh editor bound to a
temporary config directory.
"""
import sys
import os
import pytest

# Run Qt headless when no display is available
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


# ── Raster helpers ──────────────────────────────────────────────────────

def build_png(width=4, height=4, fill=(255, 255, 255, 255), pixels=None):
    """Solid RGBA PNG with optional per-pixel overrides {(x, y): (r, g, b, a)}."""
    from PIL import Image
    from models.raster import RasterImage

    img = Image.new('RGBA', (width, height), fill)
    for (x, y), value in (pixels or {}).items():
        img.putpixel((x, y), value)
    return RasterImage.from_pil(img)


def pixel_at(image, x, y):
    """RGBA tuple of a pixel of a RasterImage."""
    return image.to_pil().convert('RGBA').getpixel((x, y))


@pytest.fixture
def png_factory():
    return build_png


@pytest.fixture
def white_png():
    return build_png(8, 8)


@pytest.fixture
def keyable_png():
    """White background, one near-white pixel and one grey pixel."""
    return build_png(3, 1, pixels={
        (1, 0): (250, 250, 250, 255),
        (2, 0): (100, 100, 100, 255),
    })


# ── Editor fixtures ─────────────────────────────────────────────────────

@pytest.fixture
def config_dir(tmp_path):
    return str(tmp_path / 'config')


@pytest.fixture
def editor(config_dir):
    """Fresh editing session with default seed state"""
    from editor_session import CompositionEditor
    return CompositionEditor(config_dir=config_dir)


@pytest.fixture(autouse=True)
def _no_message_boxes():
    """Keep popups from blocking tests after a window registered itself"""
    from utils.logger import set_main_window
    set_main_window(None)
    yield
    set_main_window(None)
