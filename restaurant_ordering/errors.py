"""Exceptions raised by the ordering components."""


class InvalidArgumentError(ValueError):
    """A required input is missing, empty or out of range."""


class InvalidStateError(RuntimeError):
    """An operation was called before the setup it depends on."""
