"""
Error kinds raised by PrimeSieve.

InvalidArgument: a malformed input (bound, query value, index).
InvalidState: an operation called out of order.
"""


class SieveError(Exception):
    """Base class for sieve errors."""


class InvalidArgument(SieveError, ValueError):
    pass


class InvalidState(SieveError, RuntimeError):
    pass
