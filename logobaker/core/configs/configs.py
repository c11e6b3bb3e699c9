import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from logobaker.core.defs import ConfigLoadError, ProfileLoadError
from logobaker import logger


class BaseConfig(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class WatermarkConfig(BaseConfig):
    logo_width_magnification: float = 0.2
    logo_margin_magnification: float = 0.05
    logo_alpha_value: float = 1.0
    use_tmp_dir: bool = False
    logo_img_path: Path = Path("logo.png")
    # the original tool wrote to "./tmp/"
    tmp_dir: Path = Path("tmp")

    @property
    def output_dir(self) -> Path:
        return self.tmp_dir if self.use_tmp_dir else Path(".")


class OgpConfig(BaseConfig):
    img_width: int = Field(1200, gt=0)
    img_height: int = Field(630, gt=0)
    logo_width_magnification: float = 0.5
    element_width_magnification: float = 0.1
    element_margin_magnification: float = 0.02
    font_size: float = 32.0
    bg_alpha_value: float = 1.0
    out_format: List[str] = Field(default_factory=lambda: ["png"])
    bg_img_path: Path = Path("bg.jpg")
    logo_img_path: Path = Path("logo.png")
    font_bin_path: Path = Path("font.ttf")
    src_dir: Path = Path(".")
    dest_dir: Path = Path("out")

    @field_validator("out_format", mode="before")
    @classmethod
    def split_out_format(cls, value: Union[str, List[str]]):
        if isinstance(value, str):
            return [fmt.strip() for fmt in value.split(",") if fmt.strip()]
        return value

    def src_path(self, name: Union[str, Path]) -> Path:
        return self.src_dir / name


class ExportProfile(BaseConfig):
    """
    One output variant.

    size is the length of the longer side after the orientation-aware resize;
    None keeps the canvas size.
    """

    size: Optional[int] = Field(None, gt=0)
    format: str
    prefix: str = ""
    suffix: str = ""


def _read_json(path: Path, error_cls: type[Exception]):
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise error_cls(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise error_cls(f"Invalid JSON in {path}: {e}") from e


def load_watermark_config(path: Union[str, Path] = "config.json") -> WatermarkConfig:
    data = _read_json(path, ConfigLoadError)
    try:
        config = WatermarkConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid watermark config {path}: {e}") from e
    logger.info(f"Loaded watermark config from {path}")
    return config


def load_ogp_config(path: Union[str, Path] = "config.json") -> OgpConfig:
    data = _read_json(path, ConfigLoadError)
    try:
        config = OgpConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid OGP config {path}: {e}") from e
    logger.info(f"Loaded OGP config from {path}")
    return config


_PROFILE_LIST = TypeAdapter(List[ExportProfile])


def load_profiles(path: Union[str, Path] = "profiles.json") -> List[ExportProfile]:
    """
    Load the ordered export profile list.

    Args:
        path: JSON file holding a list of {size, format, prefix, suffix}

    Returns:
        Profiles in file order
    """
    data = _read_json(path, ProfileLoadError)
    try:
        profiles = _PROFILE_LIST.validate_python(data)
    except ValidationError as e:
        raise ProfileLoadError(f"Invalid profiles {path}: {e}") from e
    logger.info(f"Loaded {len(profiles)} export profiles from {path}")
    return profiles
