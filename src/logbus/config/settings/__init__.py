"""Config settings – 12-factor env-based configuration."""
from logbus.config.settings.base import LogBusSettings, Settings
from logbus.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "LogBusSettings", "Settings", "SettingsLoader"]
