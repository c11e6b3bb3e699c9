"""
LogoBaker API Module

Programmatic access to the compositing and export pipeline.
"""

from .baker import BakeResult, OgpBaker, WatermarkBaker
from .compositor import apply_opacity, blend, draw_over, opacity_mask_value
from .exporter import BatchExporter, encode_image, webp_is_lossless
from .layer import Layer
from .layout import bottom_right_placement, center_offset, overlay_geometry, row_layout
from .resize import Resample, center_crop, fit_by_orientation
from .text import render_text

__all__ = [
    "WatermarkBaker",
    "OgpBaker",
    "BakeResult",
    "BatchExporter",
    "Layer",
    "Resample",
    "apply_opacity",
    "blend",
    "draw_over",
    "opacity_mask_value",
    "encode_image",
    "webp_is_lossless",
    "bottom_right_placement",
    "center_offset",
    "overlay_geometry",
    "row_layout",
    "center_crop",
    "fit_by_orientation",
    "render_text",
]
