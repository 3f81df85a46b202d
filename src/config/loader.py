import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.config.models import AssetsConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("assets.yaml")
CONFIG_PATH_ENV = "ASSETS_CONFIG_PATH"


def resolve_config_path(
    path: Path | None = None, default_path: Path = DEFAULT_CONFIG_PATH
) -> tuple[Path, bool]:
    """
    Pick the config file to read.
    Returns (path, required): an explicit or env-provided path must exist,
    the default path may be absent.
    """
    if path is not None:
        return path, True

    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path), True

    return default_path, False


def load_config(
    path: Path | None = None, default_path: Path = DEFAULT_CONFIG_PATH
) -> AssetsConfig:
    """
    Load and validate the assets config.
    Raises FileNotFoundError if a required file is missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    config_path, required = resolve_config_path(path, default_path)

    if not config_path.exists():
        if required:
            raise FileNotFoundError(f"Config file not found at: {config_path}")
        logger.debug("No %s found, using defaults", config_path)
        return AssetsConfig()

    with open(config_path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

    # An empty file means defaults
    if data is None:
        data = {}

    try:
        return AssetsConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e
