"""Storage Operations Manager - typed access to storage cluster management REST APIs."""

from storage_operations_manager.__version__ import __version__

__all__ = ["__version__"]
