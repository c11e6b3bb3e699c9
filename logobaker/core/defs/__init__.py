from .defs import (
    AssetDecodeError,
    AssetOpenError,
    BakeStage,
    ConfigLoadError,
    FileCreateError,
    FontLoadError,
    InsufficientSourceSize,
    LayoutSpec,
    LogoBakerError,
    Point,
    ProfileLoadError,
    UnsupportedFormat,
    WrittenFile,
)
