from enum import Enum
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple


class BakeStage(str, Enum):
    IDLE = "idle"
    LOAD_BASE = "load_base"
    LOAD_OVERLAYS = "load_overlays"
    COMPUTE_LAYOUT = "compute_layout"
    BLEND = "blend"
    TEXT = "text"
    FINALIZE = "finalize"
    DONE = "done"


class Point(NamedTuple):
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class LayoutSpec:
    width: int
    margin: int
    point: Point = Point(0, 0)


@dataclass(frozen=True)
class WrittenFile:
    path: Path
    format: str
    width: int
    height: int


class LogoBakerError(Exception):
    """Base class for every failure raised by logobaker."""


class ConfigLoadError(LogoBakerError):
    pass


class ProfileLoadError(LogoBakerError):
    pass


class AssetOpenError(LogoBakerError):
    pass


class AssetDecodeError(LogoBakerError):
    pass


class FontLoadError(LogoBakerError):
    pass


class InsufficientSourceSize(LogoBakerError):
    """The crop target is larger than the source image."""

    def __init__(self, source_size: tuple[int, int], target_size: tuple[int, int]):
        self.source_size = source_size
        self.target_size = target_size
        super().__init__(
            f"Cannot crop {source_size[0]}x{source_size[1]} "
            f"to {target_size[0]}x{target_size[1]}"
        )


class FileCreateError(LogoBakerError):
    pass


class UnsupportedFormat(LogoBakerError):
    def __init__(self, format: str):
        self.format = format
        super().__init__(f"Unsupported output format: {format!r}")
