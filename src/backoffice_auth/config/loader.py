"""Loader for the provider registration config file."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import BackOfficeAuthConfigModel

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BACKOFFICE_AUTH_CONFIG"


def default_config_candidates() -> list[Path]:
    return [
        Path.home() / ".backoffice-auth" / "config.yml",
        Path.cwd() / "backoffice-auth.yml",
    ]


def load_auth_config(config_path: Path | None = None) -> BackOfficeAuthConfigModel:
    """Load provider registrations from a YAML file.

    Args:
        config_path: Optional path to the config file.
                    If not provided, looks for:
                    1. BACKOFFICE_AUTH_CONFIG environment variable
                    2. ~/.backoffice-auth/config.yml
                    3. ./backoffice-auth.yml

    Returns:
        BackOfficeAuthConfigModel, empty when no file is found in the default locations

    Raises:
        FileNotFoundError: If an explicitly requested config file doesn't exist
        ValueError: If the file is not valid YAML or fails validation
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            config_path = Path(env_path)
        else:
            for candidate in default_config_candidates():
                if candidate.exists():
                    config_path = candidate
                    break

            if config_path is None:
                logger.info("No backoffice-auth config file found, using empty configuration")
                return BackOfficeAuthConfigModel()

    if not config_path.exists():
        raise FileNotFoundError(f"backoffice-auth config file not found at {config_path}")

    logger.debug(f"Loading backoffice-auth config from: {config_path}")

    try:
        with open(config_path) as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML config file {config_path}: {e}") from e

    if not raw_config:
        logger.info("Empty backoffice-auth config file, using empty configuration")
        return BackOfficeAuthConfigModel()

    if not isinstance(raw_config, dict):
        raise ValueError(f"backoffice-auth config must be a mapping: {config_path}")

    try:
        config = BackOfficeAuthConfigModel.model_validate(raw_config)
    except ValidationError as e:
        raise ValueError(f"Invalid backoffice-auth config: {e}") from e

    logger.debug(f"Loaded {len(config.providers)} provider registration(s)")
    return config
