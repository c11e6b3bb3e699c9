"""
Alpha Compositor

Turns a scalar opacity into a uniform alpha mask and draws one RGBA image over
another with the "over" law. All arrays are (height, width, 4) uint8 RGBA with
straight alpha.
"""

from typing import Tuple

import numpy as np

from logobaker import logger


def clamp_opacity(opacity: float) -> float:
    if opacity < 0:
        return 0.0
    if opacity > 1:
        return 1.0
    return float(opacity)


def opacity_mask_value(opacity: float) -> int:
    """
    Map an opacity in [0, 1] to the alpha value of a uniform mask.

    Values outside the range are clamped. 1 maps to 255 (opaque) and 0 maps
    to 0 (transparent); the map is linear with truncation.
    """
    opacity = clamp_opacity(opacity)
    return 255 - int(255 * (1 - opacity))


def apply_opacity(image: np.ndarray, opacity: float) -> np.ndarray:
    """
    Return a copy of the image whose alpha is scaled by the opacity mask.

    Args:
        image: RGBA array
        opacity: Opacity value, clamped to [0, 1]

    Returns:
        New RGBA array of the same size
    """
    mask = opacity_mask_value(opacity)
    out = image.copy()
    if mask == 255:
        return out
    alpha = image[..., 3].astype(np.uint32)
    out[..., 3] = ((alpha * mask + 127) // 255).astype(np.uint8)
    return out


def draw_over(
    dst: np.ndarray, src: np.ndarray, point: Tuple[int, int] = (0, 0)
) -> np.ndarray:
    """
    Composite src over dst with its top-left corner at point.

    The source rectangle is clipped to the destination bounds, so negative
    points and sources larger than the destination are fine. Neither input is
    modified.

    Args:
        dst: Destination RGBA array
        src: Source RGBA array
        point: (x, y) of the source's top-left corner in dst coordinates

    Returns:
        New RGBA array with the size of dst
    """
    out = dst.copy()
    x, y = int(point[0]), int(point[1])
    src_h, src_w = src.shape[:2]
    dst_h, dst_w = dst.shape[:2]

    x0, y0 = max(x, 0), max(y, 0)
    x1, y1 = min(x + src_w, dst_w), min(y + src_h, dst_h)
    if x0 >= x1 or y0 >= y1:
        logger.debug(f"Overlay at ({x}, {y}) lies outside the {dst_w}x{dst_h} canvas")
        return out

    s = src[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float64) / 255.0
    d = out[y0:y1, x0:x1].astype(np.float64) / 255.0
    src_a = s[..., 3:4]
    dst_a = d[..., 3:4]

    out_a = src_a + dst_a * (1.0 - src_a)
    rgb = s[..., :3] * src_a + d[..., :3] * dst_a * (1.0 - src_a)
    rgb = np.divide(rgb, out_a, out=np.zeros_like(rgb), where=out_a > 0)

    region = np.concatenate([rgb, out_a], axis=-1)
    out[y0:y1, x0:x1] = np.clip(np.rint(region * 255.0), 0, 255).astype(np.uint8)
    return out


def blend(
    base: np.ndarray,
    overlay: np.ndarray,
    opacity: float = 1.0,
    point: Tuple[int, int] = (0, 0),
) -> np.ndarray:
    """Draw overlay over base through a uniform opacity mask."""
    return draw_over(base, apply_opacity(overlay, opacity), point)
