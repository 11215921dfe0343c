"""
Configuration management for cssmodules-context

Handles loading, validation, and environment overrides of the editor options.
"""

from .loader import ConfigurationLoader
from .defaults import DEFAULT_SETTINGS

__all__ = ["ConfigurationLoader", "DEFAULT_SETTINGS"]
