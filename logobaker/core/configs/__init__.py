from .configs import (
    ExportProfile,
    OgpConfig,
    WatermarkConfig,
    load_ogp_config,
    load_profiles,
    load_watermark_config,
)
