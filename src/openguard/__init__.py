"""Guarded file opening that refuses pipe-style targets."""

from .exceptions import (
    IllegalAccessMode,
    InvalidArgument,
    OpenGuardException,
    UnsupportedOperation,
)
from .guards import GuardedOpen, guarded_open
from .opener import BuiltinFileOpener, FileOpener
from .types import AccessMode, GuardConfig, OpenMode

__version__ = "0.1.0"

__all__ = [
    "AccessMode",
    "BuiltinFileOpener",
    "FileOpener",
    "GuardConfig",
    "GuardedOpen",
    "IllegalAccessMode",
    "InvalidArgument",
    "OpenGuardException",
    "OpenMode",
    "UnsupportedOperation",
    "guarded_open",
]
