from src.config.loader import CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH, load_config
from src.config.models import AssetsConfig, IconsSettings, StyleSettings

__all__ = [
    "AssetsConfig",
    "IconsSettings",
    "StyleSettings",
    "load_config",
    "CONFIG_PATH_ENV",
    "DEFAULT_CONFIG_PATH",
]
