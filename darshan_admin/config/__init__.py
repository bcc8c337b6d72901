"""
Configuration package for the Darshan Admin backend.
"""

from .settings import Environment, LogLevel, Settings, get_settings
from .loader import ConfigLoader, load_config_for_environment

__all__ = [
    "Environment",
    "LogLevel",
    "Settings",
    "get_settings",
    "ConfigLoader",
    "load_config_for_environment",
]
