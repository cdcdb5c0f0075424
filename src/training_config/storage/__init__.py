"""Persistence backends for configuration records."""

from .base import ConfigurationStore, InMemoryConfigurationStore
from .file_store import YamlFileConfigurationStore

__all__ = ["ConfigurationStore", "InMemoryConfigurationStore", "YamlFileConfigurationStore"]
