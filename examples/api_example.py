"""
Example: Using LogoBaker as a Python library

Builds a synthetic photo and logo, stamps the logo and exports three profiles
into ./examples/output.
"""

from pathlib import Path

import numpy as np
from PIL import Image

from logobaker.api import WatermarkBaker
from logobaker.core.configs import ExportProfile, WatermarkConfig


def main():
    print("=== LogoBaker API Example ===\n")

    out_dir = Path("examples/output")
    out_dir.mkdir(parents=True, exist_ok=True)

    # Gradient photo and a red square logo
    gradient = np.linspace(0, 255, 1000, dtype=np.uint8)
    photo = np.dstack([np.tile(gradient, (600, 1))] * 3)
    Image.fromarray(photo, "RGB").save(out_dir / "photo.jpg", quality=95)
    logo = np.zeros((100, 100, 4), dtype=np.uint8)
    logo[..., 0] = 255
    logo[..., 3] = 255
    Image.fromarray(logo, "RGBA").save(out_dir / "logo.png")

    config = WatermarkConfig(
        logo_width_magnification=0.2,
        logo_margin_magnification=0.05,
        logo_alpha_value=0.6,
        use_tmp_dir=True,
        tmp_dir=out_dir,
        logo_img_path=out_dir / "logo.png",
    )
    baker = WatermarkBaker(config)
    result = baker.bake(out_dir / "photo.jpg")
    print(f"Logo placed at {tuple(baker.layout.point)} with width {baker.layout.width}")

    profiles = [
        ExportProfile(size=800, format="jpg", suffix="_m"),
        ExportProfile(size=300, format="webp", prefix="thumb_"),
        ExportProfile(size=300, format="png", prefix="thumb_"),
    ]
    for written in baker.export(result, profiles):
        print(f"Saved {written.path} ({written.width}x{written.height})")


if __name__ == "__main__":
    main()
