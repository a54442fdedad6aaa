"""Shared pytest fixtures for storage_operations_manager tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from storage_operations_manager.cli.main import app


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a configuration file with two connection profiles."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
version: "1.0"
environment: development
log_level: info
default_profile: lab
connection_profiles:
  lab:
    connection:
      hostname: cluster1.lab.example.com
      verify_ssl: false
    auth:
      username: admin
      password: lab-secret
  prod:
    connection:
      hostname: https://cluster2.example.com
      timeout: 60
    auth:
      username: ops
      password: prod-secret
"""
    )
    return config_path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("STORAGE_OPS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def isolate_log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the rotating log file out of the real home directory."""
    log_dir = tmp_path / "logs"
    monkeypatch.setattr("storage_operations_manager.logging.config.LOG_DIR", log_dir)
    monkeypatch.setattr(
        "storage_operations_manager.logging.config.LOG_FILE", log_dir / "storage-ops.log"
    )


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app
