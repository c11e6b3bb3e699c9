"""
Single-line text rendering onto a transparent canvas-sized layer.
"""

import io
from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from logobaker import logger
from logobaker.api.layout import center_offset
from logobaker.core.defs import FontLoadError

TEXT_COLOR = (255, 255, 255, 255)


def load_font(font_bytes: bytes, font_size: float) -> ImageFont.FreeTypeFont:
    """Load a TrueType/OpenType face from raw font bytes."""
    try:
        return ImageFont.truetype(io.BytesIO(font_bytes), font_size)
    except (OSError, ValueError) as e:
        raise FontLoadError(f"Cannot load font: {e}") from e


def text_position(
    font: ImageFont.FreeTypeFont,
    text: str,
    canvas_w: int,
    canvas_h: int,
    baseline_offset_y: int,
) -> Tuple[int, int]:
    """
    Left end of the baseline for the text.

    Horizontally centred on the canvas, vertically biased toward
    baseline_offset_y.
    """
    measured_w = int(font.getlength(text))
    x = center_offset(canvas_w, measured_w)
    y = baseline_offset_y + center_offset(canvas_h, baseline_offset_y)
    return x, y


def render_text(
    text: str,
    font_bytes: bytes,
    font_size: float,
    canvas_w: int,
    canvas_h: int,
    baseline_offset_y: int,
) -> np.ndarray:
    """
    Render one line of white text into a transparent RGBA layer.

    Args:
        text: Text to draw, no wrapping
        font_bytes: Raw font file contents
        font_size: Font size in pixels
        canvas_w: Width of the returned layer
        canvas_h: Height of the returned layer
        baseline_offset_y: Vertical offset the baseline is biased toward

    Returns:
        RGBA array with shape (canvas_h, canvas_w, 4)
    """
    font = load_font(font_bytes, font_size)
    x, y = text_position(font, text, canvas_w, canvas_h, baseline_offset_y)

    layer = Image.new("RGBA", (canvas_w, canvas_h), (0, 0, 0, 0))
    if text:
        draw = ImageDraw.Draw(layer)
        draw.text((x, y), text, font=font, fill=TEXT_COLOR, anchor="ls")
    logger.debug(f"Rendered text {text!r} at ({x}, {y}) size {font_size}")
    return np.array(layer, dtype=np.uint8)
