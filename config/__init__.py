"""Configuration management for files."""

from .loader import ConfigLoader, load_config
from .schema import FilesSettings

__all__ = ["ConfigLoader", "FilesSettings", "load_config"]
