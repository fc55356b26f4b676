"""
Concrete rings and roots of unity for driving the transforms: integers mod a
prime, the integers themselves, and binary extension fields.
"""

from typing import Optional

from sympy import factorint, isprime, mod_inverse
from sympy import primitive_root as _sympy_primitive_root

from polynomial import poly_ring
from ring import Ring

# 336 = 2^4 * 3 * 7, so roots of order 2, 3, 4, 6, 7, 8, 12, 14, 16, ... exist.
DEFAULT_MODULUS = 337


def integers_mod(p: int) -> Ring:
    """Z/p with canonical representatives 0..p-1."""
    if p < 2:
        raise ValueError(f"Modulus must be at least 2, got {p}")
    return Ring(
        zero=0,
        one=1,
        int=lambda k: k % p,
        add=lambda x, y: (x + y) % p,
        neg=lambda x: (-x) % p,
        sub=lambda x, y: (x - y) % p,
        mul=lambda x, y: (x * y) % p,
    )


def integers() -> Ring:
    return Ring(
        zero=0,
        one=1,
        int=lambda k: k,
        add=lambda x, y: x + y,
        neg=lambda x: -x,
        sub=lambda x, y: x - y,
        mul=lambda x, y: x * y,
    )


def binary_field(modulus: list) -> Ring:
    """
    GF(2)[X]/(m(X)).

    Args:
        modulus: Big-endian coefficients of m(X) without its leading 1, e.g.
            [0, 0, 1, 1] for X^4 + X + 1.
    """
    return poly_ring(integers_mod(2), [c % 2 for c in modulus])


def default_ring() -> Ring:
    return integers_mod(DEFAULT_MODULUS)


def primitive_root(p: int) -> int:
    """Smallest generator of the multiplicative group mod prime p."""
    if not isprime(p):
        raise ValueError(f"p = {p} is not prime")
    return int(_sympy_primitive_root(p))


def is_primitive_root_of_unity(w: int, order: int, p: int) -> bool:
    """Checks w^order = 1 and w^(order/q) != 1 for each prime q dividing order."""
    if pow(w, order, p) != 1:
        return False
    return all(pow(w, order // q, p) != 1 for q in factorint(order))


def root_of_unity(order: int, p: int, generator: Optional[int] = None) -> int:
    """
    Primitive root of unity of the given order mod prime p.

    Args:
        order: Multiplicative order of the returned element.
        p: Prime modulus with p = 1 (mod order).
        generator: Primitive root mod p to derive from; found when omitted.
    """
    if (p - 1) % order != 0:
        raise ValueError(f"Order {order} does not divide p - 1 = {p - 1}")
    g = primitive_root(p) if generator is None else generator
    return pow(g, (p - 1) // order, p)


def find_ntt_prime(order: int, min_bits: int = 20) -> int:
    """
    Smallest prime p = 1 (mod order) with p >= 2^min_bits.

    Candidates are scanned in the form k * order + 1.
    """
    if order < 1:
        raise ValueError(f"Order must be positive, got {order}")
    min_prime = 2 ** min_bits
    k = max(1, (min_prime - 1) // order)
    while True:
        candidate = k * order + 1
        if candidate >= min_prime and isprime(candidate):
            return candidate
        k += 1


def inverse_mod(a: int, p: int) -> int:
    return int(mod_inverse(a, p))
