"""Core types for openguard."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, field_validator

from .exceptions import IllegalAccessMode, InvalidArgument


class AccessMode(Enum):
    """Primary access letter of a mode string."""
    READ = "r"
    WRITE = "w"
    APPEND = "a"


class OpenMode(BaseModel):
    """Parsed form of a mode string such as ``"r"``, ``"wb"`` or ``"a+"``."""
    access: AccessMode = AccessMode.READ
    binary: bool = False
    plus: bool = False

    @classmethod
    def parse(cls, mode: str) -> "OpenMode":
        """Parse a mode string.

        The first character selects the access mode; it may be followed by
        any of ``b`` and ``+``.

        Args:
            mode: Mode string to parse

        Returns:
            Parsed mode

        Raises:
            InvalidArgument: If mode is not a string
            IllegalAccessMode: If mode is empty or contains unknown flags
        """
        if not isinstance(mode, str):
            raise InvalidArgument(mode)

        try:
            access = AccessMode(mode[:1])
        except ValueError:
            raise IllegalAccessMode(mode) from None

        binary = plus = False
        for flag in mode[1:]:
            if flag == "b":
                binary = True
            elif flag == "+":
                plus = True
            else:
                raise IllegalAccessMode(mode)

        return cls(access=access, binary=binary, plus=plus)

    @property
    def readable(self) -> bool:
        return self.access is AccessMode.READ or self.plus

    @property
    def writable(self) -> bool:
        return self.access is not AccessMode.READ or self.plus

    @property
    def creates(self) -> bool:
        return self.access is not AccessMode.READ

    @property
    def truncates(self) -> bool:
        return self.access is AccessMode.WRITE

    def to_python_mode(self) -> str:
        """Render the mode for ``builtins.open``."""
        if self.truncates:
            base = "w"
        elif self.creates:
            base = "a"
        else:
            base = "r"
        both = self.readable and self.writable
        return base + ("b" if self.binary else "") + ("+" if both else "")


class GuardConfig(BaseModel):
    """Configuration for the open guard and its logging."""
    default_mode: str = "r"
    log_level: str = "INFO"
    enable_console: bool = True
    log_file: Path | None = None

    @field_validator("default_mode")
    @classmethod
    def _check_default_mode(cls, value: str) -> str:
        OpenMode.parse(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return value
