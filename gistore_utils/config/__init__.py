"""Module de configuration."""

from gistore_utils.config.loader import ConfigLoader, FileConfigLoader
from gistore_utils.config.settings import (
    TEST_GIT_CONFIG_VARIABLE,
    GistoreSettings,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "GistoreSettings",
    "TEST_GIT_CONFIG_VARIABLE",
]
