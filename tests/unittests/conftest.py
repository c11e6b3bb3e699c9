import json

import numpy as np
import pytest
from PIL import Image, ImageFont


def solid(width, height, color):
    """RGBA array filled with one color."""
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[...] = color
    return arr


def save(arr, path, **kwargs):
    mode = "RGBA" if arr.shape[2] == 4 else "RGB"
    img = Image.fromarray(arr, mode)
    if path.suffix.lower() in (".jpg", ".jpeg"):
        img = img.convert("RGB")
    img.save(path, **kwargs)
    return path


@pytest.fixture
def make_image(tmp_path):
    """Write a solid color image to tmp_path and return its path."""

    def _make(name, width, height, color=(128, 128, 128, 255), **kwargs):
        return save(solid(width, height, color), tmp_path / name, **kwargs)

    return _make


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture(scope="session")
def font_bytes():
    """Bytes of the FreeType font bundled with Pillow."""
    font = ImageFont.load_default(size=24)
    data = getattr(font, "font_bytes", None)
    if not data:
        pytest.skip("Pillow was built without FreeType support")
    return data
