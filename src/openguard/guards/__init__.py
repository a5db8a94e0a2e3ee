"""Guards placed in front of file opening."""

from .open_guard import GuardedOpen, get_default_guard, guarded_open, set_default_guard

__all__ = ['GuardedOpen', 'get_default_guard', 'guarded_open', 'set_default_guard']
