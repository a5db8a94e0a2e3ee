"""Exceptions raised by the open guard and the default file opener."""

from typing import Any


class OpenGuardException(Exception):
    """Base class for errors detected before any I/O is attempted."""

    def __init__(self, message: str, target: Any = None):
        super().__init__(message)
        self.message = message
        self.target = target


class InvalidArgument(OpenGuardException, TypeError):
    """Raised when the open target (or a mode) is not a string."""

    def __init__(self, target: Any = None, message: str = "not a string"):
        super().__init__(message, target)


class UnsupportedOperation(OpenGuardException, ValueError):
    """Raised when the target asks for a subprocess pipe."""

    def __init__(
        self,
        target: Any = None,
        message: str = "pipe-based open is not supported on this platform",
    ):
        super().__init__(message, target)


class IllegalAccessMode(OpenGuardException, ValueError):
    """Raised when a mode string cannot be parsed.

    Args:
        mode: the offending mode string
    """

    def __init__(self, mode: str):
        super().__init__(f"illegal access mode {mode}")
        self.mode = mode
