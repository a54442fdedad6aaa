"""Configuration management with Pydantic validation."""

from storage_operations_manager.core.config.models import (
    CONFIG_FILE,
    SystemConfig,
    load_config,
    load_raw_config,
)

__all__ = [
    "CONFIG_FILE",
    "SystemConfig",
    "load_config",
    "load_raw_config",
]
