"""Version information for storage_operations_manager."""

__version__ = "0.1.0"
