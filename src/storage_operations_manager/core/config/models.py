"""Application configuration: connection profiles and logging defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from storage_operations_manager.integrations.ontap.config import ConnectionProfile
from storage_operations_manager.integrations.ontap.exceptions import OntapValidationError

CONFIG_DIR = Path.home() / ".config" / "storage-ops"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

VALID_ENVIRONMENTS = ("development", "staging", "production")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_HEADER = """\
# Storage Operations Manager Configuration
# Connection profiles are selected with --profile or default_profile.
# Credentials may be supplied through STORAGE_OPS_USERNAME / STORAGE_OPS_PASSWORD.
"""


class SystemConfig(BaseModel):
    """Root of ``~/.config/storage-ops/config.yaml``.

    Profiles are stored as raw dictionaries keyed by name; they are validated
    when selected so one broken profile does not prevent using the others.
    """

    model_config = ConfigDict(extra="forbid")

    version: str = "1.0"
    environment: str = "development"
    log_level: str = "WARNING"
    default_profile: str | None = None
    connection_profiles: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in VALID_ENVIRONMENTS:
            raise ValueError(f"Invalid environment: {v}. Must be one of {VALID_ENVIRONMENTS}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return level

    def get_profile(self, name: str | None = None) -> ConnectionProfile:
        """Return the named profile with environment overrides applied.

        Without a name the ``default_profile`` is used; with neither, a profile
        is built from environment variables alone.

        Raises:
            OntapValidationError: If the name is unknown or the profile is invalid.
        """
        profile_name = name or self.default_profile
        if profile_name is None:
            return _validated_profile("env", None)
        if profile_name not in self.connection_profiles:
            known = ", ".join(sorted(self.connection_profiles)) or "none"
            raise OntapValidationError(
                "connection profile not found",
                f"profile '{profile_name}' is not defined (known profiles: {known})",
            )
        return _validated_profile(profile_name, self.connection_profiles[profile_name])

    def to_yaml(self) -> str:
        body = yaml.safe_dump(self.model_dump(), default_flow_style=False, sort_keys=False)
        return _HEADER + body


def _validated_profile(name: str, raw: dict[str, Any] | None) -> ConnectionProfile:
    try:
        return ConnectionProfile.from_env(name, raw)
    except ValueError as e:
        raise OntapValidationError(
            "invalid connection profile",
            f"profile '{name}': {e}",
        ) from e


def load_raw_config(path: Path | None = None) -> dict[str, Any]:
    """Read the YAML file as a plain dict; {} when absent or unreadable."""
    config_path = path or CONFIG_FILE
    if not config_path.exists():
        return {}
    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(path: Path | None = None) -> SystemConfig | None:
    """Load and validate the configuration file.

    Returns:
        The configuration, or None if the file does not exist.

    Raises:
        ValueError: If the file is not valid YAML or fails validation.
    """
    config_path = path or CONFIG_FILE
    if not config_path.exists():
        return None
    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
    return SystemConfig.model_validate(data)
