"""
Aspect-ratio aware resizing and centred cropping.
"""

from enum import Enum

import cv2
import numpy as np

from logobaker import logger
from logobaker.api.layout import center_offset
from logobaker.core.defs import InsufficientSourceSize


class Resample(int, Enum):
    # highest quality, used for the final export and the base canvas
    LANCZOS = cv2.INTER_LANCZOS4
    BICUBIC = cv2.INTER_CUBIC
    BILINEAR = cv2.INTER_LINEAR


def proportional_size(old_side: int, old_other: int, new_side: int) -> int:
    """Length of the free side when one side is resized to new_side."""
    return max(1, int(0.7 + old_other * new_side / old_side))


def _resize(image: np.ndarray, width: int, height: int, resample: Resample) -> np.ndarray:
    """
    Resize an RGBA array on alpha-premultiplied values.

    Filtering straight alpha would pull the colour of fully transparent
    pixels into the edges of the result.
    """
    if (width, height) == (image.shape[1], image.shape[0]):
        return image.copy()
    logger.debug(
        f"Resize {image.shape[1]}x{image.shape[0]} -> {width}x{height} ({resample.name})"
    )
    premultiplied = image.astype(np.float32)
    premultiplied[..., :3] *= premultiplied[..., 3:4] / 255.0
    resized = cv2.resize(premultiplied, (width, height), interpolation=int(resample))

    alpha = np.clip(resized[..., 3:4], 0.0, 255.0)
    rgb = np.zeros_like(resized[..., :3])
    np.divide(resized[..., :3] * 255.0, alpha, out=rgb, where=alpha > 0)

    out = np.empty((height, width, 4), dtype=np.uint8)
    out[..., :3] = np.clip(np.rint(rgb), 0, 255)
    out[..., 3:4] = np.rint(alpha)
    return out


def resize_to_width(
    image: np.ndarray, width: int, resample: Resample = Resample.LANCZOS
) -> np.ndarray:
    old_h, old_w = image.shape[:2]
    width = max(1, int(width))
    return _resize(image, width, proportional_size(old_w, old_h, width), resample)


def resize_to_height(
    image: np.ndarray, height: int, resample: Resample = Resample.LANCZOS
) -> np.ndarray:
    old_h, old_w = image.shape[:2]
    height = max(1, int(height))
    return _resize(image, proportional_size(old_h, old_w, height), height, resample)


def fit_by_orientation(
    image: np.ndarray, target_size: int, resample: Resample = Resample.LANCZOS
) -> np.ndarray:
    """
    Resize so the driving side equals target_size.

    Landscape and square images are resized by width, portrait images by
    height. The other side keeps the aspect ratio.
    """
    height, width = image.shape[:2]
    if width >= height:
        return resize_to_width(image, target_size, resample)
    return resize_to_height(image, target_size, resample)


def center_crop(image: np.ndarray, target_w: int, target_h: int) -> np.ndarray:
    """
    Crop a target_w x target_h rectangle from the centre of the image.

    Raises:
        InsufficientSourceSize: if the image is smaller than the target in
            either dimension
    """
    height, width = image.shape[:2]
    if width < target_w or height < target_h:
        raise InsufficientSourceSize((width, height), (target_w, target_h))
    x = center_offset(width, target_w)
    y = center_offset(height, target_h)
    return image[y : y + target_h, x : x + target_w].copy()
