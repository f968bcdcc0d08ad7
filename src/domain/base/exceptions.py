"""Base exceptions shared by every layer."""


class AWSClientError(Exception):
    """Base class for every error raised by the bindings."""


class InvalidArgumentError(AWSClientError, ValueError):
    """A caller passed an argument the bindings cannot work with."""
