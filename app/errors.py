# app/errors.py


class TypemasterError(Exception):
    """Base class for errors raised by the typing session engine."""


class ConfigError(TypemasterError):
    """A session configuration is missing keys or holds invalid values."""
