"""ONTAP connection profile configuration models."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, SecretStr, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}


class OntapConnectionConfig(BaseModel):
    """ONTAP REST API connection settings."""

    model_config = ConfigDict(extra="forbid")

    hostname: str
    timeout: int = 30
    verify_ssl: bool = True
    retries: int = 3
    api_prefix: str = "/api"

    @field_validator("hostname")
    @classmethod
    def validate_hostname(cls, v: str) -> str:
        """Reject empty hostnames and strip trailing slashes."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("hostname must not be empty")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("retries")
    @classmethod
    def validate_retries(cls, v: int) -> int:
        if v < 1:
            raise ValueError("retries must be at least 1")
        return v

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        return "/" + v.strip("/") if v.strip("/") else ""

    @property
    def base_url(self) -> str:
        """Full API base URL; a bare hostname is reached over HTTPS."""
        if self.hostname.startswith(("http://", "https://")):
            host = self.hostname
        else:
            host = f"https://{self.hostname}"
        return f"{host}{self.api_prefix}"


class OntapAuthConfig(BaseModel):
    """HTTP basic credentials for the cluster management LIF."""

    model_config = ConfigDict(extra="forbid")

    username: str
    password: SecretStr

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("username must not be empty")
        return v


class ConnectionProfile(BaseModel):
    """A named connection profile binding a cluster address to credentials.

    Attributes:
        name: Profile name, as referenced by callers (``cx_profile_name``).
        connection: Where and how to reach the cluster.
        auth: Credentials for the cluster.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    connection: OntapConnectionConfig
    auth: OntapAuthConfig

    @classmethod
    def from_env(cls, name: str, base_config: dict[str, Any] | None = None) -> ConnectionProfile:
        """Build a profile with environment variable overrides.

        Environment variables take precedence over ``base_config`` values.

        Supported environment variables:
            STORAGE_OPS_HOSTNAME: Cluster management hostname or URL
            STORAGE_OPS_USERNAME: API user
            STORAGE_OPS_PASSWORD: API password
            STORAGE_OPS_VERIFY_SSL: Verify TLS certificates (true/false)
        """
        config_dict = dict(base_config) if base_config else {}
        connection = dict(config_dict.get("connection") or {})
        auth = dict(config_dict.get("auth") or {})

        if hostname := os.environ.get("STORAGE_OPS_HOSTNAME"):
            connection["hostname"] = hostname
        if verify_ssl := os.environ.get("STORAGE_OPS_VERIFY_SSL"):
            connection["verify_ssl"] = verify_ssl.strip().lower() in _TRUE_VALUES
        if username := os.environ.get("STORAGE_OPS_USERNAME"):
            auth["username"] = username
        if password := os.environ.get("STORAGE_OPS_PASSWORD"):
            auth["password"] = password

        config_dict.update(name=name, connection=connection, auth=auth)
        return cls.model_validate(config_dict)
