from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every error that aborts a generator run."""


class ConfigError(GeneratorError):
    pass


class ConfigReadError(ConfigError):
    pass


class ConfigParseError(ConfigError):
    pass


class HostnameError(GeneratorError):
    pass


class OutputWriteError(GeneratorError):
    pass
