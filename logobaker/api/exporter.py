"""
Batch Exporter

Resizes the final canvas per export profile and encodes it in the requested
format.
"""

import io
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Union

import cv2
import numpy as np
from PIL import Image

from logobaker import logger
from logobaker.api.resize import Resample, fit_by_orientation
from logobaker.core.configs import ExportProfile
from logobaker.core.defs import FileCreateError, UnsupportedFormat, WrittenFile
from logobaker.utils.image import flatten_alpha, rgba_to_bgr, rgba_to_bgra

JPEG_QUALITY = 85
WEBP_QUALITY = 80
# OpenCV switches WebP to lossless for any quality above 100
WEBP_LOSSLESS_QUALITY = 101

# Source decode type -> whether WebP output is lossless. Unlisted types are
# lossless.
WEBP_LOSSLESS_BY_SOURCE: Dict[str, bool] = {
    "jpeg": False,
    "": False,
}


def webp_is_lossless(source_type: str) -> bool:
    return WEBP_LOSSLESS_BY_SOURCE.get(source_type, True)


def _imencode(ext: str, image: np.ndarray, params: List[int]) -> bytes:
    ok, buf = cv2.imencode(ext, image, params)
    if not ok:
        raise ValueError(f"OpenCV failed to encode {ext}")
    return buf.tobytes()


def _encode_jpeg(image: np.ndarray, source_type: str) -> bytes:
    return _imencode(".jpg", rgba_to_bgr(image), [cv2.IMWRITE_JPEG_QUALITY, JPEG_QUALITY])


def _encode_png(image: np.ndarray, source_type: str) -> bytes:
    return _imencode(".png", rgba_to_bgra(image), [])


def _encode_gif(image: np.ndarray, source_type: str) -> bytes:
    # flattened onto black like JPEG
    buf = io.BytesIO()
    Image.fromarray(flatten_alpha(image)).save(buf, format="GIF")
    return buf.getvalue()


def _encode_webp(image: np.ndarray, source_type: str) -> bytes:
    if webp_is_lossless(source_type):
        quality = WEBP_LOSSLESS_QUALITY
    else:
        quality = WEBP_QUALITY
    return _imencode(".webp", rgba_to_bgra(image), [cv2.IMWRITE_WEBP_QUALITY, quality])


ENCODERS: Dict[str, Callable[[np.ndarray, str], bytes]] = {
    "jpeg": _encode_jpeg,
    "jpg": _encode_jpeg,
    "png": _encode_png,
    "gif": _encode_gif,
    "webp": _encode_webp,
}


def encode_image(image: np.ndarray, format: str, source_type: str = "") -> bytes:
    """
    Encode an RGBA array.

    The format match is exact and case sensitive.

    Args:
        image: RGBA array
        format: One of jpeg, jpg, png, gif, webp
        source_type: Decoder format of the original source; selects lossy or
            lossless WebP

    Raises:
        UnsupportedFormat: for any other format string
    """
    encoder = ENCODERS.get(format)
    if encoder is None:
        raise UnsupportedFormat(format)
    return encoder(image, source_type)


def output_file_name(base_name: str, profile: ExportProfile) -> str:
    return f"{profile.prefix}{base_name}{profile.suffix}.{profile.format}"


class BatchExporter:
    """
    Writes one file per export profile.

    Example:
        >>> exporter = BatchExporter(Path("tmp"))
        >>> written = exporter.export(canvas, profiles, "jpeg", base_name="photo")
    """

    def __init__(self, output_dir: Union[str, Path] = ".", resample: Resample = Resample.LANCZOS):
        self.output_dir = Path(output_dir)
        self.resample = resample

    def _prepare_output_dir(self):
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileCreateError(f"Cannot create {self.output_dir}: {e}") from e

    def _write(self, path: Path, data: bytes):
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise FileCreateError(f"Cannot write {path}: {e}") from e

    def export(
        self,
        canvas: np.ndarray,
        profiles: Sequence[ExportProfile],
        source_type: str = "",
        base_name: str = "",
    ) -> List[WrittenFile]:
        """
        Export the canvas once per profile, in the given order.

        Profiles with an unknown format are skipped with a warning and write
        nothing. Any failure to create a file aborts the batch.

        Args:
            canvas: Final RGBA canvas, never modified
            profiles: Ordered export profiles
            source_type: Decoder format of the original source image
            base_name: Name inserted between profile prefix and suffix

        Returns:
            The written files in profile order
        """
        self._prepare_output_dir()
        written = []
        for profile in profiles:
            if profile.size is None:
                image = canvas
            else:
                image = fit_by_orientation(canvas, profile.size, self.resample)

            try:
                data = encode_image(image, profile.format, source_type)
            except UnsupportedFormat as e:
                logger.warning(f"Skipping profile {profile.prefix}{base_name}{profile.suffix}: {e}")
                continue

            path = self.output_dir / output_file_name(base_name, profile)
            self._write(path, data)
            result = WrittenFile(
                path=path,
                format=profile.format,
                width=image.shape[1],
                height=image.shape[0],
            )
            logger.info(f"Wrote {path} ({result.width}x{result.height})")
            written.append(result)
        return written
