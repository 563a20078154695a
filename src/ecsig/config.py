"""
Layered configuration for ecsig.

Defaults -> YAML file -> ``ECSIG__`` environment variables, validated into a
``Settings`` model. Curve, hash and text encoding are fixed and not part of
the configuration.
"""

import hashlib
import json
import logging
import os
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "ECSIG__"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BatchSettings(BaseModel):
    """Batch verification tuning."""

    parallel: bool = True
    parallel_threshold: int = Field(default=4, ge=0)
    max_workers: Optional[int] = Field(default=None, ge=1)

    model_config = ConfigDict(extra="ignore")


class Settings(BaseModel):
    log_level: str = "WARNING"
    batch: BatchSettings = Field(default_factory=BatchSettings)

    model_config = ConfigDict(extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class ConfigurationLoader:
    def __init__(self, app_name: str = "ecsig"):
        self.app_name = app_name
        # Defaults -> File -> Env
        self._config: Dict[str, Any] = {}

    def load(self,
             config_file: Optional[str] = None,
             env_prefix: str = ENV_PREFIX,
             defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:

        # 1. Defaults
        if defaults:
            self._recursive_update(self._config, defaults)

        # 2. File
        if not config_file:
            # Check standard locations
            candidates = [
                f"{self.app_name}.yaml",
                f"/etc/{self.app_name}/config.yaml",
            ]
            for c in candidates:
                if os.path.exists(c):
                    config_file = c
                    break

        if config_file:
            if not os.path.exists(config_file):
                raise ConfigurationError(f"Config file {config_file} does not exist")
            self._load_file(config_file)

        # 3. Environment Variables
        self._load_env(env_prefix)

        return self._config

    def settings(self) -> Settings:
        """
        Validate the loaded configuration into a Settings model.

        Raises:
            ConfigurationError: If any value is invalid
        """
        try:
            return Settings.model_validate(self._config)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s)",
                details={"errors": [err["msg"] for err in e.errors()]},
                cause=e,
            ) from e

    def digest(self) -> str:
        """Return the SHA-256 of the canonical JSON form of the configuration."""
        canonical = json.dumps(
            self._config, sort_keys=True, separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")
        return hashlib.sha256(canonical).hexdigest()

    def _load_file(self, filepath: str):
        # Security check for prod: ensure not world-writable
        if os.getenv("ECSIG_ENV", "dev").lower() == "prod":
            st = os.stat(filepath)
            # Check for world-writable bit (S_IWOTH = 0o002)
            if st.st_mode & 0o002:
                raise ConfigurationError(f"Config file {filepath} is world-writable. This is forbidden in production.")

        with open(filepath, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Config file {filepath} is not valid YAML: {e}", cause=e) from e
        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {filepath} must contain a mapping")
        logger.debug(f"Loaded configuration from {filepath}")
        self._recursive_update(self._config, data)

    def _load_env(self, prefix: str):
        for k, v in os.environ.items():
            if k.startswith(prefix):
                # ECSIG__BATCH__MAX_WORKERS -> batch.max_workers
                key_path = k[len(prefix):].lower().split("__")
                self._set_nested(self._config, key_path, v)

    def _recursive_update(self, d: Dict, u: Dict) -> Dict:
        for k, v in u.items():
            if isinstance(v, dict):
                d[k] = self._recursive_update(d.get(k, {}), v)
            else:
                d[k] = v
        return d

    def _set_nested(self, d: Dict, path: List[str], value: Any):
        for key in path[:-1]:
            d = d.setdefault(key, {})
        d[path[-1]] = value


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Load and cache process-wide settings."""
    global _settings
    if _settings is None:
        loader = ConfigurationLoader()
        loader.load()
        _settings = loader.settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging for applications embedding ecsig."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
