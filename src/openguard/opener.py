"""File openers that the guard delegates to."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from .types import OpenMode


class FileOpener(ABC):
    """Something that can open a target and, given a callback, scope it."""

    @abstractmethod
    def open(self, target: str, *options: Any,
             callback: Optional[Callable[[Any], Any]] = None, **kwargs: Any) -> Any:
        """Open target.

        Args:
            target: Path or name to open
            *options: Opener-specific positional options, mode first
            callback: Optional function called with the open handle
            **kwargs: Opener-specific keyword options

        Returns:
            The open handle, or the callback's result when a callback is
            given. In that case the handle must be released on every exit
            path of the callback.
        """


class BuiltinFileOpener(FileOpener):
    """Opens regular files with ``builtins.open``.

    Mode strings are limited to ``r``, ``w`` and ``a`` optionally followed by
    ``b`` and ``+``; anything else raises ``IllegalAccessMode``.
    """

    def __init__(self, default_mode: str = "r"):
        self.default_mode = default_mode

    def open(self, target, mode=None, *args, callback=None, **kwargs):
        if mode is None:
            mode = self.default_mode
        parsed = OpenMode.parse(mode)

        handle = open(target, parsed.to_python_mode(), *args, **kwargs)
        if callback is None:
            return handle

        with handle:
            return callback(handle)
