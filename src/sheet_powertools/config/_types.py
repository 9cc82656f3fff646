"""Exception types shared by the settings layer."""


class ConfigError(Exception):
    """Base exception for settings problems."""
