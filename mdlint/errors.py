"""Exceptions raised by mdlint."""


class MdlintError(Exception):
    """Base class for mdlint errors."""


class ConfigError(MdlintError):
    """Invalid or unreadable lint configuration."""
