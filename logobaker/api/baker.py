"""
LogoBaker Core API

Composition pipelines that turn a base image plus overlays into one final
canvas. Two pipelines exist: the watermark pipeline, which stamps a logo in
the bottom-right corner of a photo, and the OGP pipeline, which builds a fixed
size social preview from a background, a row of elements, a logo and an
optional line of text.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np

from logobaker import logger
from logobaker.api.compositor import apply_opacity
from logobaker.api.exporter import BatchExporter
from logobaker.api.layer import Layer
from logobaker.api.layout import (
    bottom_right_placement,
    center_offset,
    overlay_geometry,
    row_positions,
)
from logobaker.api.resize import (
    Resample,
    center_crop,
    fit_by_orientation,
    resize_to_width,
)
from logobaker.api.text import render_text
from logobaker.core.configs import ExportProfile, OgpConfig, WatermarkConfig
from logobaker.core.defs import BakeStage, LayoutSpec, WrittenFile
from logobaker.utils.image import read_bytes


@dataclass
class BakeResult:
    canvas: np.ndarray
    source_type: str = ""
    base_name: str = ""

    @property
    def size(self):
        return (self.canvas.shape[1], self.canvas.shape[0])


class _Baker:
    def __init__(self):
        self.stage = BakeStage.IDLE

    def _enter(self, stage: BakeStage):
        logger.debug(f"{type(self).__name__}: {self.stage.value} -> {stage.value}")
        self.stage = stage


class WatermarkBaker(_Baker):
    """
    Stamps a translucent logo onto the bottom-right corner of an image.

    Example:
        >>> baker = WatermarkBaker(load_watermark_config("config.json"))
        >>> result = baker.bake("photo.jpg")
        >>> baker.export(result, load_profiles("profiles.json"))
    """

    def __init__(self, config: WatermarkConfig):
        super().__init__()
        self.config = config
        self.layout: Optional[LayoutSpec] = None

    def bake(self, image_path: Union[str, Path]) -> BakeResult:
        image_path = Path(image_path)

        self._enter(BakeStage.LOAD_BASE)
        base = Layer.from_file(image_path)
        canvas_w, canvas_h = base.get_size()

        self._enter(BakeStage.LOAD_OVERLAYS)
        logo = Layer.from_file(self.config.logo_img_path, name="logo")

        self._enter(BakeStage.COMPUTE_LAYOUT)
        width, margin = overlay_geometry(
            canvas_w,
            canvas_h,
            self.config.logo_width_magnification,
            self.config.logo_margin_magnification,
        )
        margin = int(margin)
        logo.image = resize_to_width(logo.image, int(width), Resample.LANCZOS)
        # placement uses the resized logo, which is at least 1px wide
        width, logo_h = logo.get_size()
        point = bottom_right_placement(canvas_w, canvas_h, width, logo_h, margin)
        self.layout = LayoutSpec(width=width, margin=margin, point=point)
        logo.set_position(*point)
        logo.set_opacity(self.config.logo_alpha_value)
        logger.info(
            f"Logo {logo.get_size()[0]}x{logo.get_size()[1]} at {tuple(self.layout.point)} "
            f"margin {self.layout.margin} on {canvas_w}x{canvas_h}"
        )

        self._enter(BakeStage.BLEND)
        canvas = logo.draw_onto(base.image)

        self._enter(BakeStage.FINALIZE)
        result = BakeResult(canvas, base.source_type, image_path.stem)
        self._enter(BakeStage.DONE)
        return result

    def export(
        self, result: BakeResult, profiles: Sequence[ExportProfile]
    ) -> List[WrittenFile]:
        exporter = BatchExporter(self.config.output_dir, Resample.LANCZOS)
        return exporter.export(result.canvas, profiles, result.source_type, result.base_name)


class OgpBaker(_Baker):
    """
    Builds a social preview image of a fixed size.

    Layers are drawn strictly in the order background, elements (left to
    right), logo, text.

    Example:
        >>> baker = OgpBaker(load_ogp_config("config.json"))
        >>> result = baker.bake(["a.png", "b.png"], text="Hello")
        >>> baker.export(result)
    """

    def __init__(self, config: OgpConfig):
        super().__init__()
        self.config = config
        self.source_type = ""

    def _load_background(self) -> np.ndarray:
        cfg = self.config
        bg = Layer.from_file(cfg.src_path(cfg.bg_img_path), name="background")
        self.source_type = bg.source_type
        image = resize_to_width(bg.image, cfg.img_width, Resample.LANCZOS)
        image = apply_opacity(image, cfg.bg_alpha_value)
        return center_crop(image, cfg.img_width, cfg.img_height)

    def bake(
        self,
        elements: Sequence[str] = (),
        text: str = "",
        font_size: Optional[float] = None,
        base_name: str = "ogp",
    ) -> BakeResult:
        """
        Composite the preview.

        Args:
            elements: Element file names relative to the source directory
            text: Optional line of text, drawn last
            font_size: Overrides the configured font size
            base_name: Output base file name

        Returns:
            BakeResult with a canvas of exactly img_width x img_height
        """
        cfg = self.config
        self.source_type = ""

        self._enter(BakeStage.LOAD_BASE)
        canvas = self._load_background()

        self._enter(BakeStage.LOAD_OVERLAYS)
        element_size = int(cfg.img_width * cfg.element_width_magnification)
        element_margin = int(cfg.img_width * cfg.element_margin_magnification)
        element_layers = []
        for name in elements:
            layer = Layer.from_file(cfg.src_path(name))
            layer.image = fit_by_orientation(layer.image, element_size, Resample.BILINEAR)
            element_layers.append(layer)

        logo = Layer.from_file(cfg.src_path(cfg.logo_img_path), name="logo")
        logo.image = resize_to_width(
            logo.image, int(cfg.img_width * cfg.logo_width_magnification), Resample.BICUBIC
        )

        self._enter(BakeStage.COMPUTE_LAYOUT)
        row_y = center_offset(cfg.img_height, element_size)
        xs = row_positions(cfg.img_width, len(element_layers), element_size, element_margin)
        for layer, x in zip(element_layers, xs):
            layer.set_position(x, row_y + center_offset(element_size, layer.get_size()[1]))
        logo_w, logo_h = logo.get_size()
        logo.set_position(center_offset(cfg.img_width, logo_w), center_offset(row_y, logo_h))

        self._enter(BakeStage.BLEND)
        for layer in element_layers:
            canvas = layer.draw_onto(canvas)
        canvas = logo.draw_onto(canvas)

        if text:
            self._enter(BakeStage.TEXT)
            font_bytes = read_bytes(cfg.src_path(cfg.font_bin_path))
            text_layer = Layer.from_array(
                render_text(
                    text,
                    font_bytes,
                    font_size if font_size is not None else cfg.font_size,
                    cfg.img_width,
                    cfg.img_height,
                    row_y + element_size,
                ),
                name="text",
            )
            canvas = text_layer.draw_onto(canvas)

        self._enter(BakeStage.FINALIZE)
        result = BakeResult(canvas, self.source_type, base_name or "ogp")
        logger.info(
            f"Baked {cfg.img_width}x{cfg.img_height} preview with "
            f"{len(element_layers)} elements{' and text' if text else ''}"
        )
        self._enter(BakeStage.DONE)
        return result

    def export(self, result: BakeResult) -> List[WrittenFile]:
        profiles = [ExportProfile(format=fmt) for fmt in self.config.out_format]
        exporter = BatchExporter(self.config.dest_dir)
        return exporter.export(result.canvas, profiles, result.source_type, result.base_name)
