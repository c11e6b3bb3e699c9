import io
from pathlib import Path
from typing import Tuple, Union

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from logobaker.core.defs import AssetDecodeError, AssetOpenError

# Decoder formats that belong to another codec family. Pillow reports JPEGs
# carrying an MPF segment (most camera photos) as MPO.
FORMAT_ALIASES = {
    "mpo": "jpeg",
}


def read_bytes(path: Union[str, Path]) -> bytes:
    """Read an asset file, raising AssetOpenError when it cannot be opened."""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise AssetOpenError(f"Cannot open {path}: {e}") from e


def decode_image(data: bytes, name: str = "<bytes>") -> Tuple[np.ndarray, str]:
    """
    Decode encoded image bytes into an RGBA numpy array.

    The format is detected from the content, not from the file name, and is
    reported by codec family (an MPO photo is "jpeg").

    Args:
        data: Encoded JPEG/PNG/GIF/WebP bytes
        name: Name used in error messages

    Returns:
        Tuple of (array with shape (height, width, 4), lowercased source type).
        The source type is "" when the decoder reports no format.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            source_type = (img.format or "").lower()
            source_type = FORMAT_ALIASES.get(source_type, source_type)
            arr = np.array(img.convert("RGBA"), dtype=np.uint8)
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise AssetDecodeError(f"Cannot decode {name}: {e}") from e
    return arr, source_type


def load_image(path: Union[str, Path]) -> Tuple[np.ndarray, str]:
    return decode_image(read_bytes(path), name=str(path))


def rgba_to_bgr(image: np.ndarray) -> np.ndarray:
    return cv2.cvtColor(flatten_alpha(image), cv2.COLOR_RGB2BGR)


def rgba_to_bgra(image: np.ndarray) -> np.ndarray:
    return cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)


def flatten_alpha(image: np.ndarray) -> np.ndarray:
    """
    Drop the alpha channel by compositing the RGBA image onto black.

    Returns:
        numpy.ndarray: RGB array with shape (height, width, 3)
    """
    rgb = image[..., :3].astype(np.float64)
    alpha = image[..., 3:4].astype(np.float64) / 255.0
    return np.clip(np.rint(rgb * alpha), 0, 255).astype(np.uint8)
