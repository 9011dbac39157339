"""
Exceptions raised for programming errors.

Expected failures travel as `Err` values and absence as `Nothing`; these
exceptions are reserved for misuse of the containers themselves.
"""


class FuncPatternsError(Exception):
    """Base class for all errors raised by funcpatterns."""


class UnwrapError(FuncPatternsError):
    """Raised when unwrapping an `Err` or `Nothing`."""


__all__ = ["FuncPatternsError", "UnwrapError"]
