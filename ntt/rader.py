"""
Rader's algorithm for prime lengths.

The non-zero indices mod p form a cyclic group generated by a primitive root
g. Writing k = g^s and j = g^(-t), the non-trivial part of the transform
becomes the length p-1 cyclic convolution

    y[g^s] = x[0] + sum_t x[g^(-t)] * w^(g^(s-t))

while y[0] is simply the sum of all inputs.
"""

from functools import lru_cache

from sympy import isprime, primitive_root

from convolution import cyclic_convolution
from ring import Ring, ring_powers, ring_sum


@lru_cache(maxsize=128)
def rader_indices(p: int, g: int):
    """Returns (g^-t mod p, g^t mod p) for t = 0..p-2."""
    inverse = tuple(pow(g, -t, p) for t in range(p - 1))
    forward = tuple(pow(g, t, p) for t in range(p - 1))
    return inverse, forward


def rader_ntt(R: Ring, w, xs: list, g: int = None, convolve=None) -> list:
    """
    Transform of prime length p = len(xs) with root w.

    Args:
        R: Coefficient ring.
        w: Primitive p-th root of unity.
        xs: Input of prime length.
        g: Primitive root mod p; the smallest one is used when omitted.
        convolve: Cyclic convolution of length p-1, (a, b) -> list; defaults
            to the direct O(n^2) version.
    """
    p = len(xs)
    if not isprime(p):
        raise ValueError(f"Rader's algorithm needs a prime length, got {p}")
    if g is None:
        g = int(primitive_root(p))
    if convolve is None:
        convolve = lambda a, b: cyclic_convolution(R, a, b)

    inverse, forward = rader_indices(p, g)
    powers = ring_powers(R, w, p)
    a = [xs[k] for k in inverse]
    b = [powers[k] for k in forward]
    c = convolve(a, b)

    out = [None] * p
    out[0] = ring_sum(R, xs)
    for s, k in enumerate(forward):
        out[k] = R.add(xs[0], c[s])
    return out


def rader_inverse_ntt(R: Ring, w, xs: list, g: int = None, convolve=None) -> list:
    """Rader's algorithm with the reciprocal root w^(p-1); undoes rader_ntt up to a factor of p."""
    p = len(xs)
    return rader_ntt(R, ring_powers(R, w, p)[p - 1], xs, g, convolve)


def rader7(R: Ring, w, xs: list) -> list:
    if len(xs) != 7:
        raise ValueError(f"Input must have length 7, got {len(xs)}")
    return rader_ntt(R, w, xs, g=3)


def rader7a(R: Ring, w, xs: list) -> list:
    if len(xs) != 7:
        raise ValueError(f"Input must have length 7, got {len(xs)}")
    return rader_inverse_ntt(R, w, xs, g=3)


def rader_combined(R: Ring, w, xs: list) -> list:
    """rader7a after rader7: equals multiplying every entry by R.int(7)."""
    return rader7a(R, w, rader7(R, w, xs))
