#!/usr/bin/env python3
"""
Command line driver for checking the fast transforms against the naive one.

Examples:
  %(prog)s check composite 15 --prime 31      # Cooley-Tukey 3x5 over Z/31
  %(prog)s check pfa 91 --num-tests 10 -v     # Good-Thomas 7x13, verbose
  %(prog)s check bluestein 7                  # chirp transform, prime found automatically
  %(prog)s check rader 13 --min-bits 16
  %(prog)s check negacyclic 8                 # forward/inverse round trip
  %(prog)s benchmark 12 --num-runs 50
"""

import argparse
import random
import sys
import time
from functools import partial
from math import gcd

from sympy import factorint, isprime

from bluestein import bluestein_ntt
from modular import find_ntt_prime, integers_mod, inverse_mod, root_of_unity
from negacyclic import naive_inverse_negacyclic_ntt, naive_negacyclic_ntt
from rader import rader_ntt
from transforms import composite_ntt, naive_ntt, pfa_ntt, radix2_dif, radix2_dit

ALGORITHMS = ["radix2-dit", "radix2-dif", "composite", "pfa", "bluestein", "rader", "negacyclic"]


def root_order(algorithm: str, N: int) -> int:
    """Order of the root of unity an algorithm needs for size N."""
    if algorithm in ("bluestein", "negacyclic"):
        return 2 * N
    return N


def split_size(N: int, coprime: bool):
    """Splits N into m * n using its smallest prime factor (its full prime power when coprime)."""
    factors = factorint(N)
    if N < 4 or (len(factors) == 1 and list(factors.values())[0] == 1):
        raise ValueError(f"N = {N} has no non-trivial factorization")
    q = min(factors)
    m = q ** factors[q] if coprime else q
    n = N // m
    if n == 1 or (coprime and gcd(m, n) != 1):
        raise ValueError(f"N = {N} has no coprime factorization")
    return m, n


def build_transform(algorithm: str, R, N: int, p: int, verbose: bool = False):
    """
    Returns (fast, reference), two functions of the input vector that must agree.
    """
    w = root_of_unity(root_order(algorithm, N), p)
    naive = partial(naive_ntt, R)

    if algorithm in ("radix2-dit", "radix2-dif"):
        if N % 2 != 0:
            raise ValueError(f"Radix-2 needs an even size, got N = {N}")
        composer = radix2_dit if algorithm == "radix2-dit" else radix2_dif
        return (lambda xs: composer(R, naive, w, xs)), (lambda xs: naive(w, xs))

    if algorithm in ("composite", "pfa"):
        m, n = split_size(N, coprime=algorithm == "pfa")
        if verbose:
            print(f"Factorization N = {m} x {n}")
        composer = composite_ntt if algorithm == "composite" else pfa_ntt
        return (lambda xs: composer(R, naive, naive, w, xs, m, n, verbose=verbose)), (lambda xs: naive(w, xs))

    if algorithm == "bluestein":
        u = w
        v = inverse_mod(u, p)
        root = R.mul(u, u)
        return (lambda xs: bluestein_ntt(R, u, v, xs)), (lambda xs: naive(root, xs))

    if algorithm == "rader":
        if not isprime(N):
            raise ValueError(f"Rader needs a prime size, got N = {N}")
        return (lambda xs: rader_ntt(R, w, xs)), (lambda xs: naive(w, xs))

    if algorithm == "negacyclic":
        w_inv = inverse_mod(w, p)
        scale = R.int(N)
        return (
            lambda xs: naive_inverse_negacyclic_ntt(R, w_inv, naive_negacyclic_ntt(R, w, xs)),
            lambda xs: [R.mul(scale, x) for x in xs],
        )

    raise ValueError(f"Unknown algorithm {algorithm}")


def check_algorithm(algorithm, N, num_tests=3, prime=None, min_bits=20, seed=None, verbose=False):
    """Compares an algorithm against its reference on random vectors mod p. Returns True if all agree."""
    p = prime if prime is not None else find_ntt_prime(root_order(algorithm, N), min_bits)
    R = integers_mod(p)
    rng = random.Random(seed)

    print(f"Checking {algorithm} with {num_tests} random vectors (N={N}, p={p})")
    print("=" * 60)

    fast, reference = build_transform(algorithm, R, N, p, verbose=verbose and num_tests <= 3)
    all_passed = True
    for i in range(num_tests):
        xs = [rng.randrange(p) for _ in range(N)]
        got = fast(xs)
        expected = reference(xs)
        if got == expected:
            status = "✓ PASS"
        else:
            status = "✗ FAIL"
            all_passed = False
        print(f"Test {i+1}: Random vector mod {p}, {status}")
        if verbose or got != expected:
            if got != expected:
                print(f"  Expected: {expected}")
                print(f"  Got:      {got}")
            elif verbose:
                print(f"  Input:  {xs}")
                print(f"  Output: {got}")

    print(f"\nSummary: {num_tests} tests completed, {'all passed' if all_passed else 'FAILURES'}")
    return all_passed


def benchmark(N, num_runs=20, prime=None, min_bits=20, seed=None):
    """Times every algorithm applicable to N against the naive transform."""
    rng = random.Random(seed)
    results = {}

    print(f"{'Algorithm':<12} {'Prime':<10} {'Naive (ms)':<12} {'Fast (ms)':<12} {'Speedup':<8}")
    print("-" * 60)
    for algorithm in ALGORITHMS:
        if algorithm == "negacyclic":
            continue
        p = prime if prime is not None else find_ntt_prime(root_order(algorithm, N), min_bits)
        R = integers_mod(p)
        try:
            fast, reference = build_transform(algorithm, R, N, p)
        except ValueError:
            continue
        xs = [rng.randrange(p) for _ in range(N)]

        start_time = time.time()
        for _ in range(num_runs):
            reference(xs)
        naive_time = (time.time() - start_time) * 1000 / num_runs

        start_time = time.time()
        for _ in range(num_runs):
            fast(xs)
        fast_time = (time.time() - start_time) * 1000 / num_runs

        speedup = naive_time / fast_time if fast_time > 0 else float('inf')
        results[algorithm] = {'prime': p, 'naive_ms': naive_time, 'fast_ms': fast_time}
        print(f"{algorithm:<12} {p:<10} {naive_time:<12.3f} {fast_time:<12.3f} {speedup:<8.2f}")

    return results


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Check and benchmark number theoretic transforms over Z/p',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    check = subparsers.add_parser('check', help='Compare an algorithm against the naive transform')
    check.add_argument('algorithm', choices=ALGORITHMS)
    check.add_argument('N', type=int, help='Transform size')
    check.add_argument('--num-tests', type=int, default=3, help='Number of random vectors (default: 3)')

    bench = subparsers.add_parser('benchmark', help='Time every applicable algorithm for size N')
    bench.add_argument('N', type=int, help='Transform size')
    bench.add_argument('--num-runs', type=int, default=20, help='Iterations per timing (default: 20)')

    for sub in (check, bench):
        sub.add_argument('--prime', type=int, default=None, help='Use this prime modulus')
        sub.add_argument('--min-bits', type=int, default=20, help='Minimum bit size of the searched prime (default: 20)')
        sub.add_argument('--seed', type=int, default=None, help='Random seed')
    check.add_argument('-v', '--verbose', action='store_true', help='Print inputs, outputs and intermediate grids')

    args = parser.parse_args(argv)

    if args.N < 1:
        print(f"Error: N must be positive, got {args.N}")
        return 1

    try:
        if args.command == 'check':
            passed = check_algorithm(args.algorithm, args.N, num_tests=args.num_tests, prime=args.prime,
                                     min_bits=args.min_bits, seed=args.seed, verbose=args.verbose)
            return 0 if passed else 1
        benchmark(args.N, num_runs=args.num_runs, prime=args.prime, min_bits=args.min_bits, seed=args.seed)
        return 0
    except ValueError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
