#!/usr/bin/env python3
"""
Verify a PrimeSieve against trial division.

Checks:
1. is_prime(i) agrees with the trial-division oracle for every i in [2, n]
2. The prime list is strictly ascending
3. The prime count matches the oracle count
4. nth_prime(1) == 2

Usage:
    python -m prime_sieve.verify --N 1e4
"""

import argparse
import sys
import time
import numpy as np
from math import isqrt

from .errors import InvalidArgument
from .sieve import PrimeSieve


def is_prime_trial_division(i: int) -> bool:
    """Reference primality check: no divisor in [2, isqrt(i)]."""
    if i < 2:
        return False
    for d in range(2, isqrt(i) + 1):
        if i % d == 0:
            return False
    return True


def verify_sieve(sieve: PrimeSieve, verbose: bool = False) -> dict:
    """
    Compare an evaluated sieve with the trial-division oracle.

    Parameters
    ----------
    sieve : PrimeSieve
        An evaluated sieve. Raises InvalidState otherwise.
    verbose : bool
        Print a report.

    Returns
    -------
    dict
        n, count, mismatches, ascending, count_matches, ok.
    """
    primes = sieve.primes
    n = sieve.n

    if verbose:
        print(f"\n=== Verifying sieve for n={n:,} ===")

    t0 = time.time()
    mismatches = []
    expected_count = 0
    for i in range(2, n + 1):
        expected = is_prime_trial_division(i)
        expected_count += expected
        if sieve.is_prime(i) != expected:
            mismatches.append(i)
    t_oracle = time.time() - t0

    ascending = bool(np.all(np.diff(primes) > 0))
    count_matches = sieve.count_primes() == expected_count
    first_is_two = sieve.nth_prime(1) == 2

    results = {
        'n': n,
        'count': sieve.count_primes(),
        'mismatches': mismatches,
        'ascending': ascending,
        'count_matches': count_matches,
        'ok': not mismatches and ascending and count_matches and first_is_two,
    }

    if verbose:
        print(f"  Trial division: {t_oracle:.2f}s")
        print(f"  Primes found:   {results['count']:,} (oracle: {expected_count:,})")
        print(f"  Ascending:      {ascending}")
        print(f"  nth_prime(1):   {sieve.nth_prime(1)}")
        if mismatches:
            print(f"  Mismatches:     {len(mismatches):,} (first: {mismatches[:10]})")
        else:
            print("  Mismatches:     none")
        print(f"  Result:         {'PASS' if results['ok'] else 'FAIL'}")

    return results


def main():
    parser = argparse.ArgumentParser(description="Verify the sieve against trial division")
    parser.add_argument('--N', type=float, default=1e4, help='Sieve bound (default: 1e4)')
    args = parser.parse_args()

    try:
        sieve = PrimeSieve(int(args.N))
    except InvalidArgument as e:
        parser.error(str(e))
    sieve.evaluate()
    results = verify_sieve(sieve, verbose=True)
    sys.exit(0 if results['ok'] else 1)


if __name__ == '__main__':
    main()
