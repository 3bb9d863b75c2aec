from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dockit.exceptions import ConfigurationError

CONFIG_FILENAME = ".dockitrc.json"
CONFIG_PATH_ENV = "DOCKIT_CONFIG"

DEFAULT_BUCKET = "your-default-bucket"
DEFAULT_REGION = "us-west-2"

# Environment variables that take precedence over the config file.
ENV_OVERRIDES = {
    "default_bucket": "S3_BUCKET",
    "region": "AWS_REGION",
    "aws_access_key_id": "AWS_ACCESS_KEY_ID",
    "aws_secret_access_key": "AWS_SECRET_ACCESS_KEY",
}


def default_config_path() -> Path:
    """Per-user config location, overridable through ``DOCKIT_CONFIG``."""
    override = os.getenv(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_FILENAME


class Settings(BaseModel):
    """Process-wide configuration. Built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    default_bucket: str = Field(DEFAULT_BUCKET, alias="defaultBucket")
    region: str = Field(DEFAULT_REGION, alias="region")
    dry_run_default: bool = Field(True, alias="dryRunDefault")
    enable_nlp_tagging: bool = Field(True, alias="enableNlpTagging")
    aws_access_key_id: str = Field("", alias="awsAccessKeyId")
    aws_secret_access_key: str = Field("", alias="awsSecretAccessKey")

    @field_validator("default_bucket", mode="before")
    @classmethod
    def _default_bucket(cls, value: Any) -> Any:
        return _blank_to(value, DEFAULT_BUCKET)

    @field_validator("region", mode="before")
    @classmethod
    def _default_region(cls, value: Any) -> Any:
        return _blank_to(value, DEFAULT_REGION)

    @field_validator("aws_access_key_id", "aws_secret_access_key", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def has_credentials(self) -> bool:
        return bool(self.aws_access_key_id and self.aws_secret_access_key)

    def to_file_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        use_dotenv: bool = True,
    ) -> "Settings":
        """Load settings with precedence: environment > user config file > defaults.

        Args:
            path: Optional config file path. Defaults to ``DOCKIT_CONFIG`` or
                ``~/.dockitrc.json``.
            environ: Environment mapping, ``os.environ`` when omitted.
            use_dotenv: Load a ``.env`` file from the working directory first.

        Returns:
            Settings instance. A missing, malformed or invalid config file is
            reported as a warning and built-in defaults are used for it.
        """
        if use_dotenv and environ is None:
            load_dotenv(find_dotenv(usecwd=True))
        env = os.environ if environ is None else environ
        config_path = path or default_config_path()

        file_values = _read_config_file(config_path)
        try:
            base = cls(**file_values)
        except ValidationError as exc:
            logger.warning("Invalid values in {}, using defaults: {}", config_path, exc)
            base = cls()

        overrides = {
            field: env[name] for field, name in ENV_OVERRIDES.items() if env.get(name)
        }
        if not overrides:
            return base
        return cls(**{**base.model_dump(), **overrides})


def _blank_to(value: Any, default: str) -> Any:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip() or default
    return value


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        logger.debug("No config file at {}", path)
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Failed to parse {}, using defaults: {}", path, exc)
        return {}
    if not isinstance(payload, dict):
        logger.warning("Config file {} must contain a JSON object, using defaults", path)
        return {}
    return payload


def create_config_file(
    path: Path | None = None,
    *,
    force: bool = False,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Write a default config file.

    Returns True when a file was written, False when one already existed.
    Credentials present in the environment are embedded in the new file.
    """
    env = os.environ if environ is None else environ
    config_path = path or default_config_path()
    if config_path.exists() and not force:
        logger.info("Config file already exists at {}", config_path)
        return False

    defaults = Settings(
        aws_access_key_id=env.get("AWS_ACCESS_KEY_ID", ""),
        aws_secret_access_key=env.get("AWS_SECRET_ACCESS_KEY", ""),
    )
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(defaults.to_file_payload(), indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(
            f"Failed to create config file: {exc}", {"path": str(config_path)}
        ) from exc
    logger.info("Created default config file at {}", config_path)
    return True


__all__ = [
    "CONFIG_FILENAME",
    "Settings",
    "create_config_file",
    "default_config_path",
]
