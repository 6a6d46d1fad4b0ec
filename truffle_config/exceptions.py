"""Custom exceptions for Truffle Config."""


class TruffleConfigError(Exception):
    """Base exception for Truffle Config."""

    pass


class ConfigurationError(TruffleConfigError):
    """Configuration-related errors."""

    pass


class MissingConfigError(ConfigurationError):
    """Settings document is missing."""

    pass


class InvalidConfigError(ConfigurationError):
    """Settings document is malformed or holds an invalid value."""

    pass


class ExportError(TruffleConfigError):
    """Rendered settings could not be written."""

    pass
