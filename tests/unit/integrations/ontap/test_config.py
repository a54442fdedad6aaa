"""Unit tests for ONTAP connection configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from storage_operations_manager.integrations.ontap.config import (
    ConnectionProfile,
    OntapAuthConfig,
    OntapConnectionConfig,
)


@pytest.mark.unit
class TestOntapConnectionConfig:
    """Tests for OntapConnectionConfig."""

    def test_defaults(self) -> None:
        config = OntapConnectionConfig(hostname="cluster1")

        assert config.timeout == 30
        assert config.verify_ssl is True
        assert config.retries == 3
        assert config.base_url == "https://cluster1/api"

    def test_explicit_scheme_kept(self) -> None:
        config = OntapConnectionConfig(hostname="http://127.0.0.1:8080/")

        assert config.base_url == "http://127.0.0.1:8080/api"

    def test_api_prefix_normalized(self) -> None:
        config = OntapConnectionConfig(hostname="cluster1", api_prefix="rest/")

        assert config.base_url == "https://cluster1/rest"

    def test_empty_api_prefix(self) -> None:
        config = OntapConnectionConfig(hostname="cluster1", api_prefix="/")

        assert config.base_url == "https://cluster1"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"hostname": "  "},
            {"hostname": "cluster1", "timeout": 0},
            {"hostname": "cluster1", "retries": 0},
            {"hostname": "cluster1", "port": 443},
        ],
    )
    def test_invalid(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            OntapConnectionConfig(**kwargs)  # type: ignore[arg-type]


@pytest.mark.unit
class TestOntapAuthConfig:
    """Tests for OntapAuthConfig."""

    def test_password_is_secret(self) -> None:
        auth = OntapAuthConfig(username="admin", password="secret")

        assert "secret" not in repr(auth)
        assert auth.password.get_secret_value() == "secret"

    def test_blank_username_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OntapAuthConfig(username=" ", password="secret")


@pytest.mark.unit
class TestConnectionProfile:
    """Tests for ConnectionProfile.from_env."""

    def test_from_config(self) -> None:
        profile = ConnectionProfile.from_env(
            "lab",
            {
                "connection": {"hostname": "cluster1"},
                "auth": {"username": "admin", "password": "secret"},
            },
        )

        assert profile.name == "lab"
        assert profile.connection.hostname == "cluster1"

    def test_environment_takes_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_OPS_HOSTNAME", "cluster9")
        monkeypatch.setenv("STORAGE_OPS_VERIFY_SSL", "false")

        profile = ConnectionProfile.from_env(
            "lab",
            {
                "connection": {"hostname": "cluster1", "verify_ssl": True},
                "auth": {"username": "admin", "password": "secret"},
            },
        )

        assert profile.connection.hostname == "cluster9"
        assert profile.connection.verify_ssl is False

    def test_environment_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_OPS_HOSTNAME", "cluster1")
        monkeypatch.setenv("STORAGE_OPS_USERNAME", "admin")
        monkeypatch.setenv("STORAGE_OPS_PASSWORD", "secret")
        monkeypatch.setenv("STORAGE_OPS_VERIFY_SSL", "yes")

        profile = ConnectionProfile.from_env("env")

        assert profile.auth.username == "admin"
        assert profile.connection.verify_ssl is True

    def test_missing_credentials(self) -> None:
        with pytest.raises(ValidationError):
            ConnectionProfile.from_env("lab", {"connection": {"hostname": "cluster1"}})

    def test_base_config_not_mutated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_OPS_PASSWORD", "override")
        base = {
            "connection": {"hostname": "cluster1"},
            "auth": {"username": "admin", "password": "secret"},
        }

        ConnectionProfile.from_env("lab", base)

        assert base["auth"]["password"] == "secret"
