"""Config – environment-based settings for a BusLogger."""
from logbus.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LogBusSettings,
    Settings,
    SettingsLoader,
)
from logbus.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LogBusSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
