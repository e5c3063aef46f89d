# Area: Shared
"""
hexwire.config — Settings for the command-line tools
====================================================

Settings come from, lowest priority first:
    1. defaults on WireSettings
    2. a .env file (python-dotenv)
    3. the process environment
    4. explicit overrides (e.g. CLI flags)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .versioning import CURRENT_VERSION

logger = logging.getLogger("hexwire")

ENV_MAPPINGS = {
    "HEXWIRE_LOG_LEVEL": "log_level",
    "HEXWIRE_LOG_FILE": "log_file",
    "HEXWIRE_PEER_VERSION": "peer_version",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class WireSettings(BaseModel):
    """Validated settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    log_level: str = "INFO"
    log_file: Optional[str] = None
    peer_version: int = Field(default=CURRENT_VERSION, gt=0)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return value

    @field_validator("log_file")
    @classmethod
    def _blank_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


def load_settings(
    env_file: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> WireSettings:
    """
    Build WireSettings from a .env file, the environment and overrides.

    Raises
    ------
    ConfigurationError
        If a value fails validation.
    """
    values: Dict[str, Any] = {}

    sources = []
    if env_file is not None:
        path = Path(env_file)
        if path.exists():
            sources.append(dotenv_values(path))
        else:
            logger.warning(f"Env file not found: {path}")
    sources.append(os.environ)

    for source in sources:
        for env_key, config_key in ENV_MAPPINGS.items():
            if source.get(env_key) is not None:
                values[config_key] = source[env_key]

    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    try:
        return WireSettings.model_validate(values)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError(
            errors, source=str(env_file) if env_file else None,
        ) from e
