"""Guarded open entry point that refuses pipe-style targets."""

from typing import Any, Callable, Optional

from ..exceptions import InvalidArgument, UnsupportedOperation
from ..logging import GuardLogger
from ..opener import BuiltinFileOpener, FileOpener
from ..types import GuardConfig

PIPE_PREFIX = "|"


class GuardedOpen:
    """Validates an open target, then hands the call to a file opener.

    Two checks run before delegation: the target must be a ``str``, and its
    first character must not be ``|``. Everything else about the
    call (options, keyword options, callback) is forwarded untouched, and
    whatever the opener returns or raises reaches the caller as is.
    """

    def __init__(self,
                 opener: Optional[FileOpener] = None,
                 logger: Optional[GuardLogger] = None,
                 config: Optional[GuardConfig] = None):
        """Initialize the guard.

        Args:
            opener: Opener to delegate to; defaults to BuiltinFileOpener
            logger: Optional guard logger for structured logging
            config: Guard configuration; defaults to GuardConfig()
        """
        self.config = config or GuardConfig()
        self.opener = opener or BuiltinFileOpener(default_mode=self.config.default_mode)
        self.logger = logger

    def validate(self, target: Any) -> None:
        """Check that target may be opened.

        Args:
            target: First argument of the open call

        Raises:
            InvalidArgument: If target is not a string
            UnsupportedOperation: If target starts with "|"
        """
        if not isinstance(target, str):
            error = InvalidArgument(target)
            if self.logger:
                self.logger.open_rejected(target, "not_a_string", error.message)
            raise error

        # ""[:1] is "" so the empty string never matches
        if target[:1] == PIPE_PREFIX:
            error = UnsupportedOperation(target)
            if self.logger:
                self.logger.open_rejected(target, "pipe", error.message)
            raise error

    def open(self, target: Any, *options: Any,
             callback: Optional[Callable[[Any], Any]] = None, **kwargs: Any) -> Any:
        """Open target through the configured opener.

        Args:
            target: Path to open
            *options: Forwarded to the opener in order
            callback: Forwarded to the opener if given
            **kwargs: Forwarded to the opener

        Returns:
            Exactly what the opener returns
        """
        self.validate(target)

        if self.logger:
            self.logger.open_delegated(target, len(options), callback is not None)

        if callback is None:
            return self.opener.open(target, *options, **kwargs)
        return self.opener.open(target, *options, callback=callback, **kwargs)

    __call__ = open


_default_guard: Optional[GuardedOpen] = None


def get_default_guard() -> GuardedOpen:
    """Return the process-wide guard, creating it on first use."""
    global _default_guard
    if _default_guard is None:
        _default_guard = GuardedOpen()
    return _default_guard


def set_default_guard(guard: Optional[GuardedOpen]) -> None:
    """Replace the process-wide guard; None resets it to a fresh default."""
    global _default_guard
    _default_guard = guard


def guarded_open(target: Any, *options: Any,
                 callback: Optional[Callable[[Any], Any]] = None, **kwargs: Any) -> Any:
    """Drop-in for ``open`` that refuses non-string and pipe targets."""
    return get_default_guard().open(target, *options, callback=callback, **kwargs)
