"""Transform configuration loaded from ``dwtbank.toml``.

Example file:

    [transform]
    wavelet = "db4"
    strategy = "symmetric"
    level = 3
"""

from __future__ import annotations

import logging
import os
from typing import Any, cast

from pydantic import BaseModel, Field, ValidationError

# TOML loading for Python 3.11+ and older
try:
    import tomllib  # type: ignore[import-not-found, unused-ignore]
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found, no-redef, unused-ignore]

logger = logging.getLogger(__name__)

CONFIG_ENV = "DWTBANK_CONFIG"
CONFIG_FILENAME = "dwtbank.toml"


class TransformConfig(BaseModel):
    """Settings of the ``[transform]`` table.

    Attributes:
        wavelet: Discrete wavelet name understood by PyWavelets
        strategy: Registered transform strategy name
        level: Decomposition level, None for full decomposition
    """

    model_config = {"extra": "forbid"}

    wavelet: str = Field(default="haar", min_length=1)
    strategy: str = Field(default="default", min_length=1)
    level: int | None = Field(default=None, ge=1)


def _resolve_config_path(config_path: str | None) -> str | None:
    """Resolve configuration path from env, explicit path, or defaults."""
    env_config = os.environ.get(CONFIG_ENV)
    if env_config:
        return env_config
    if config_path:
        return config_path
    candidates = [
        CONFIG_FILENAME,
        os.path.expanduser(f"~/{CONFIG_FILENAME}"),
    ]
    for candidate in candidates:
        if os.path.exists(candidate):
            return candidate
    return None


def load_config(config_path: str | None = None) -> TransformConfig:
    """Load the transform configuration.

    Resolution order: ``$DWTBANK_CONFIG``, ``config_path``, ``./dwtbank.toml``,
    ``~/dwtbank.toml``. Defaults are returned when no file is found.

    Args:
        config_path: Explicit path to a TOML file

    Returns:
        Parsed TransformConfig

    Raises:
        FileNotFoundError: If an explicitly given path does not exist
        ValueError: If the file is not valid TOML or holds invalid settings
    """
    resolved_path = _resolve_config_path(config_path)
    if resolved_path is None:
        logger.debug("No %s found, using defaults", CONFIG_FILENAME)
        return TransformConfig()
    if not os.path.exists(resolved_path):
        raise FileNotFoundError(
            f"Config file not found at {resolved_path}. "
            f"Set {CONFIG_ENV} or create {CONFIG_FILENAME}"
        )

    with open(resolved_path, "rb") as f:
        try:
            config = cast(dict[str, Any], tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {resolved_path}: {e}") from e

    try:
        transform_cfg = TransformConfig(**config.get("transform", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid [transform] settings in {resolved_path}: {e}") from e

    logger.debug("Loaded transform config from %s: %s", resolved_path, transform_cfg)
    return transform_cfg
