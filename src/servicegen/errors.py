from __future__ import annotations


class ServicegenError(Exception):
    """Base class for errors raised by servicegen."""


class SpecError(ServicegenError):
    """Raised when an input client document is malformed."""


class ConfigError(ServicegenError):
    """Raised when a generator configuration cannot be mapped to a consumer style."""
