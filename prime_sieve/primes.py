"""
Prime flag primitives.

Responsibility: flag arrays and the prime lists derived from them.
No argument validation and no state; PrimeSieve owns both.
"""

import numpy as np
from math import isqrt


def initial_flags(N: int) -> np.ndarray:
    """
    Return the unsieved flag array for [0, N].

    Every entry is True except indices 0 and 1.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.ones(N + 1, dtype=bool)
    flags[0] = flags[1] = False
    return flags


def strike_composites(flags: np.ndarray) -> np.ndarray:
    """
    Sieve of Eratosthenes over an initial flag array, in place.

    Elimination for each surviving p starts at p*p; smaller multiples
    of p were already struck by a smaller prime factor.

    Parameters
    ----------
    flags : np.ndarray
        Array from initial_flags. Modified in place.

    Returns
    -------
    np.ndarray
        The same array, with flags[i] True iff i is prime.
    """
    N = len(flags) - 1
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def prime_flags_upto(N: int) -> np.ndarray:
    """Return boolean array where flags[i] is True iff i is prime, i <= N."""
    return strike_composites(initial_flags(N))


def primes_from_flags(flags: np.ndarray) -> np.ndarray:
    """Ascending array of the indices whose flag is set."""
    return np.nonzero(flags)[0]


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Array of primes, ascending.
    """
    return primes_from_flags(prime_flags_upto(N))
