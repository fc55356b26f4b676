"""
Ring capability records used by every transform in this package.

A Ring is a plain record of values and callables rather than a base class, so
any Python object can serve as a ring element and several rings (a base ring,
its pointwise lift, a quotient ring) can be used side by side.
"""

from dataclasses import dataclass
from typing import Any, Callable, List


@dataclass(frozen=True)
class Ring:
    """
    Operations of a commutative ring.

    The record is trusted: nothing here checks that the operations actually
    satisfy the ring axioms or that `int` is a homomorphism from the integers.
    """
    zero: Any
    one: Any
    int: Callable[[int], Any]
    add: Callable[[Any, Any], Any]
    neg: Callable[[Any], Any]
    sub: Callable[[Any, Any], Any]
    mul: Callable[[Any, Any], Any]


def ring_pow(R: Ring, x, e: int, width: int = 64):
    """Square-and-multiply over a fixed-width exponent, most significant bit first."""
    if e < 0 or e >= (1 << width):
        raise ValueError(f"exponent {e} does not fit in {width} unsigned bits")
    acc = R.one
    for bit in range(width - 1, -1, -1):
        acc = R.mul(acc, acc)
        if (e >> bit) & 1:
            acc = R.mul(acc, x)
    return acc


def ring_ipow(R: Ring, x, e: int):
    """Power by recursive halving for any non-negative integer exponent."""
    if e < 0:
        raise ValueError(f"negative exponent {e}")
    if e == 0:
        return R.one
    half = ring_ipow(R, x, e // 2)
    sq = R.mul(half, half)
    if e % 2 == 0:
        return sq
    return R.mul(x, sq)


def ring_sum(R: Ring, xs):
    acc = R.zero
    for x in xs:
        acc = R.add(acc, x)
    return acc


def ring_powers(R: Ring, x, n: int) -> List:
    """Returns [x^0, x^1, ..., x^(n-1)]."""
    powers = []
    acc = R.one
    for _ in range(n):
        powers.append(acc)
        acc = R.mul(acc, x)
    return powers


def pointwise_ring(R: Ring, n: int) -> Ring:
    """
    Componentwise ring over length-n lists of elements of R.

    This is the frequency-domain target: a transform is a ring homomorphism
    from a convolution ring into pointwise_ring(R, n).
    """
    def lift1(op):
        return lambda x: [op(a) for a in x]

    def lift2(op):
        return lambda x, y: [op(a, b) for a, b in zip(x, y)]

    return Ring(
        zero=[R.zero] * n,
        one=[R.one] * n,
        int=lambda k: [R.int(k)] * n,
        add=lift2(R.add),
        neg=lift1(R.neg),
        sub=lift2(R.sub),
        mul=lift2(R.mul),
    )
