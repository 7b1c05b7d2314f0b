#!/usr/bin/env python3
"""
Command-line runner for the prime sieve.

Builds and evaluates a sieve, answers the configured queries and
optionally saves the prime table.

Usage:
    python run_sieve.py
    python run_sieve.py --config config/custom.yaml
    python run_sieve.py --N 1e6 --nth 1 1000 --check 999983 --save
"""

import argparse
import copy
import json
import time
import yaml
import pandas as pd
from pathlib import Path

from prime_sieve.sieve import PrimeSieve
from prime_sieve.verify import verify_sieve

DEFAULTS = {
    'N': 100,
    'nth': [],
    'check': [],
    'save': False,
    'output_dir': 'data/results',
    'show': False,
    'verify': False,
}


def load_config(path, overrides: dict = None) -> dict:
    """
    Read a YAML config and apply command-line overrides.

    Keys missing from the file fall back to DEFAULTS. Overrides whose
    value is None are ignored. N may be a float or a float string
    (YAML reads `1e6` as a string) and is truncated to int.
    """
    config = copy.deepcopy(DEFAULTS)
    if path is not None:
        with open(path) as f:
            config.update(yaml.safe_load(f) or {})
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    config['N'] = int(float(config['N']))
    return config


def save_results(sieve: PrimeSieve, output_dir: Path, evaluate_seconds: float) -> Path:
    """Write primes_N{N}.csv and metadata_N{N}.json to output_dir."""
    output_dir.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame({
        'k': range(1, sieve.count_primes() + 1),
        'prime': sieve.primes,
    })
    csv_path = output_dir / f'primes_N{sieve.n}.csv'
    df.to_csv(csv_path, index=False)

    metadata = {
        'N': sieve.n,
        'count': sieve.count_primes(),
        'largest': sieve.nth_prime(sieve.count_primes()),
        'evaluate_seconds': evaluate_seconds,
    }
    with open(output_dir / f'metadata_N{sieve.n}.json', 'w') as f:
        json.dump(metadata, f, indent=2)

    return csv_path


def run(config: dict, verbose: bool = True) -> dict:
    """
    Build, evaluate and query a sieve as described by config.

    Returns
    -------
    dict
        count, largest, nth ({k: prime}), check ({i: bool}), and
        verify / csv_path when those steps ran.
    """
    N = config['N']

    if verbose:
        print("=" * 60)
        print("Sieve of Eratosthenes")
        print("=" * 60)
        print(f"N = {N:,}")
        print()

    t0 = time.time()
    sieve = PrimeSieve(N)
    if verbose:
        print(f"  Flags allocated in {time.time() - t0:.3f}s")

    t0 = time.time()
    sieve.evaluate()
    evaluate_seconds = time.time() - t0

    results = {
        'count': sieve.count_primes(),
        'largest': sieve.nth_prime(sieve.count_primes()),
        'nth': {k: sieve.nth_prime(k) for k in config['nth']},
        'check': {i: sieve.is_prime(i) for i in config['check']},
    }

    if verbose:
        print(f"  Evaluated in {evaluate_seconds:.3f}s")
        print(f"  Primes <= {N:,}: {results['count']:,}")
        print(f"  Largest prime:  {results['largest']:,}")

        if results['nth']:
            print("-" * 60)
            for k, p in results['nth'].items():
                print(f"  nth_prime({k}) = {p}")
        if results['check']:
            print("-" * 60)
            for i, flag in results['check'].items():
                print(f"  is_prime({i}) = {flag}")
        if config['show']:
            print("-" * 60)
            print(sieve)

    if config['verify']:
        results['verify'] = verify_sieve(sieve, verbose=verbose)

    if config['save']:
        csv_path = save_results(sieve, Path(config['output_dir']), evaluate_seconds)
        results['csv_path'] = csv_path
        if verbose:
            print(f"\nSaved to {csv_path}")

    return results


def main():
    parser = argparse.ArgumentParser(description='Run the Sieve of Eratosthenes')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--N', type=float, help='Sieve bound (inclusive)')
    parser.add_argument('--nth', type=int, nargs='+', help='Print the k-th prime for each k')
    parser.add_argument('--check', type=int, nargs='+', help='Test each value for primality')
    parser.add_argument('--save', action='store_true', default=None,
                        help='Save the prime table to the output directory')
    parser.add_argument('--output-dir', type=str, help='Output directory')
    parser.add_argument('--show', action='store_true', default=None,
                        help='Print the full prime list')
    parser.add_argument('--verify', action='store_true', default=None,
                        help='Check the result against trial division')
    args = parser.parse_args()

    try:
        config = load_config(args.config, {
            'N': args.N,
            'nth': args.nth,
            'check': args.check,
            'save': args.save,
            'output_dir': args.output_dir,
            'show': args.show,
            'verify': args.verify,
        })
        run(config)
    except ValueError as e:
        parser.error(str(e))


if __name__ == '__main__':
    main()
