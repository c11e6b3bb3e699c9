"""
Layer API

A decoded image together with its placement and opacity.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np

from logobaker import logger
from logobaker.api.compositor import blend, clamp_opacity
from logobaker.utils.image import load_image


class Layer:
    """
    Image plus placement used while compositing.

    Example:
        >>> layer = Layer.from_file("logo.png")
        >>> layer.set_position(100, 100)
        >>> layer.set_opacity(0.5)
        >>> canvas = layer.draw_onto(canvas)
    """

    def __init__(self, image: np.ndarray, name: Optional[str] = None, source_type: str = ""):
        """
        Initialize a Layer.

        Args:
            image: RGBA numpy array (H, W, 4)
            name: Optional layer name
            source_type: Decoder format name of the source, "" if unknown
        """
        if image.ndim != 3 or image.shape[2] != 4:
            raise ValueError("Layer image must be an RGBA array")
        self.image = image
        self.name = name or "Layer"
        self.source_type = source_type
        self.opacity = 1.0
        self.position = (0, 0)

    @classmethod
    def from_file(cls, image_path: Union[str, Path], name: Optional[str] = None) -> "Layer":
        """
        Create a Layer from an image file.

        Args:
            image_path: Path to the image file
            name: Optional layer name

        Returns:
            Layer instance
        """
        image_path = Path(image_path)
        image, source_type = load_image(image_path)
        layer_name = name or image_path.stem
        logger.info(
            f"Created layer '{layer_name}' from {image_path} "
            f"({image.shape[1]}x{image.shape[0]}, {source_type or 'unknown'})"
        )
        return cls(image, layer_name, source_type)

    @classmethod
    def from_array(cls, image: np.ndarray, name: Optional[str] = None) -> "Layer":
        """Create a Layer from an RGBA numpy array."""
        return cls(image, name)

    def set_position(self, x: int, y: int):
        self.position = (int(x), int(y))
        logger.debug(f"Set layer '{self.name}' position to {self.position}")

    def set_opacity(self, opacity: float):
        """Set the opacity of the layer, clamped to 0.0 - 1.0."""
        self.opacity = clamp_opacity(opacity)
        logger.debug(f"Set layer '{self.name}' opacity to {self.opacity}")

    def get_size(self) -> Tuple[int, int]:
        """Get the (width, height) of the layer."""
        return (self.image.shape[1], self.image.shape[0])

    def draw_onto(self, canvas: np.ndarray) -> np.ndarray:
        """Blend this layer over the canvas and return the new canvas."""
        return blend(canvas, self.image, self.opacity, self.position)

    def __repr__(self):
        return f"Layer(name='{self.name}', size={self.get_size()}, position={self.position})"
