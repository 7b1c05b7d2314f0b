"""
PrimeSieve: a one-shot Sieve of Eratosthenes over [0, n].

Construct with the bound, call evaluate() exactly once, then query.

    >>> sieve = PrimeSieve(10)
    >>> sieve.evaluate()
    >>> str(sieve)
    '[2, 3, 5, 7]'
    >>> sieve.nth_prime(2)
    3
"""

import numbers

import numpy as np

from .errors import InvalidArgument, InvalidState
from .primes import initial_flags, strike_composites, primes_from_flags


def _integral(value, name: str) -> int:
    """Return value as int, or raise InvalidArgument if it is not integral."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    return int(value)


class PrimeSieve:
    """
    Primality flags and the ordered prime list for [2, n].

    Parameters
    ----------
    n : int
        Inclusive upper bound, n >= 2.

    Raises
    ------
    InvalidArgument
        If n is not an integer or n < 2.
    """

    def __init__(self, n: int):
        n = _integral(n, "n")
        if n < 2:
            raise InvalidArgument(f"n must be greater than 1, got {n}")
        self._n = n
        self._flags = initial_flags(n)
        self._primes = None
        self._evaluated = False

    @property
    def n(self) -> int:
        return self._n

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    @property
    def primes(self) -> np.ndarray:
        """Read-only ascending array of the primes found."""
        self._require_evaluated()
        return self._primes

    def evaluate(self) -> None:
        """
        Run the sieve and derive the prime list.

        Raises
        ------
        InvalidState
            If the sieve has already been evaluated.
        """
        if self._evaluated:
            raise InvalidState("Sieve has already been evaluated.")
        strike_composites(self._flags)
        self._primes = primes_from_flags(self._flags)
        self._flags.flags.writeable = False
        self._primes.flags.writeable = False
        self._evaluated = True

    def is_prime(self, i: int) -> bool:
        """
        Return True iff i is prime.

        Raises
        ------
        InvalidState
            If the sieve has not been evaluated.
        InvalidArgument
            If i is not an integer in [2, n].
        """
        self._require_evaluated()
        i = _integral(i, "i")
        if i < 2:
            raise InvalidArgument(f"i must be greater than 1, got {i}")
        if i > self._n:
            raise InvalidArgument(f"i = {i} exceeds sieve range [2, {self._n}]")
        return bool(self._flags[i])

    def nth_prime(self, k: int) -> int:
        """
        Return the k-th smallest prime, counting from k = 1.

        Raises
        ------
        InvalidState
            If the sieve has not been evaluated.
        InvalidArgument
            If k is not an integer in [1, count_primes()].
        """
        self._require_evaluated()
        k = _integral(k, "k")
        if k < 1:
            raise InvalidArgument(f"k must be greater than 0, got {k}")
        if k > len(self._primes):
            raise InvalidArgument(
                f"k = {k} exceeds the {len(self._primes)} primes found up to {self._n}"
            )
        return int(self._primes[k - 1])

    def count_primes(self) -> int:
        """Number of primes in [2, n]."""
        self._require_evaluated()
        return len(self._primes)

    def _require_evaluated(self):
        if not self._evaluated:
            raise InvalidState("Sieve has not yet been evaluated.")

    def __len__(self):
        return self.count_primes()

    def __contains__(self, value):
        self._require_evaluated()
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            return False
        return 2 <= value <= self._n and bool(self._flags[value])

    def __str__(self):
        self._require_evaluated()
        return "[" + ", ".join(str(p) for p in self._primes) + "]"

    def __repr__(self):
        return f"PrimeSieve(n={self._n}, evaluated={self._evaluated})"
