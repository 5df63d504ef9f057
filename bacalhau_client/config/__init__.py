"""Configuration package for runtime settings and startup validation."""

from .settings import BacalhauSettings, SettingsLoadError, config_load_settings

__all__ = ["BacalhauSettings", "SettingsLoadError", "config_load_settings"]
