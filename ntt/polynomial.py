"""
Dense polynomial arithmetic over an abstract ring.

Polynomials are big-endian coefficient lists: position 0 holds the highest
degree coefficient and the last position holds the constant term. A monic
modulus of degree u is stored as its u lower coefficients; the leading 1 is
implicit.
"""

from typing import List, Tuple
from ring import Ring


def _align(R: Ring, x: list, y: list):
    """Pads the shorter operand with leading zeros so constant terms line up."""
    size = max(len(x), len(y))
    return [R.zero] * (size - len(x)) + list(x), [R.zero] * (size - len(y)) + list(y)


def polyadd(R: Ring, x: list, y: list) -> list:
    a, b = _align(R, x, y)
    return [R.add(p, q) for p, q in zip(a, b)]


def polysub(R: Ring, x: list, y: list) -> list:
    a, b = _align(R, x, y)
    return [R.sub(p, q) for p, q in zip(a, b)]


def polyneg(R: Ring, x: list) -> list:
    return [R.neg(c) for c in x]


def polyscale(R: Ring, c, x: list) -> list:
    """Multiplies every coefficient of x by the scalar c."""
    return [R.mul(c, a) for a in x]


def polymul(R: Ring, x: list, y: list) -> list:
    """
    Full convolution of two polynomials.

    Args:
        R: Coefficient ring.
        x: Polynomial of degree u (length u + 1).
        y: Polynomial of degree v (length v + 1).

    Returns:
        The product, of length u + v + 1. Coefficient k is the ring sum of
        x[i] * y[j] over all i + j == k, i.e. the k-th anti-diagonal of the
        outer product of the two coefficient lists.
    """
    if not x or not y:
        return []
    outer = [[R.mul(a, b) for b in y] for a in x]
    out = [R.zero] * (len(x) + len(y) - 1)
    for i, row in enumerate(outer):
        for j, prod in enumerate(row):
            out[i + j] = R.add(out[i + j], prod)
    return out


def polyeval(R: Ring, p: list, x):
    """Horner's rule, folding coefficients from the highest degree down."""
    acc = R.zero
    for coeff in p:
        acc = R.add(R.mul(x, acc), coeff)
    return acc


def polyreduce(R: Ring, modulus: list, z: list) -> list:
    """
    One step of long division by a monic modulus of degree u.

    Args:
        R: Coefficient ring.
        modulus: The u non-leading coefficients of the monic modulus.
        z: Polynomial of length u + 1.

    Returns:
        z minus head(z) times the modulus, with the cancelled degree-u term
        dropped (length u).
    """
    u = len(modulus)
    if len(z) != u + 1:
        raise ValueError(f"Input must have length {u + 1}, got {len(z)}")
    head = z[0]
    return [R.sub(c, R.mul(head, m)) for c, m in zip(z[1:], modulus)]


def polydivmod(R: Ring, x: list, y: list) -> Tuple[List, List]:
    """
    Divides x (length u + v) by the monic modulus y (v stored coefficients).

    Returns (quotient, remainder) with lengths u and v. Quotient digits are
    produced from the top down, one per coefficient of x slid into the
    running remainder.
    """
    v = len(y)
    if len(x) < v:
        raise ValueError(f"Dividend must have at least {v} coefficients, got {len(x)}")
    remainder = list(x[:v])
    quotient = []
    for coeff in x[v:]:
        z = remainder + [coeff]
        quotient.append(z[0])
        remainder = polyreduce(R, y, z)
    return quotient, remainder


def polydiv(R: Ring, x: list, y: list) -> list:
    return polydivmod(R, x, y)[0]


def polymod(R: Ring, x: list, y: list) -> list:
    return polydivmod(R, x, y)[1]


def polymodmul(R: Ring, modulus: list, x: list, y: list) -> list:
    """
    Product of x and y reduced modulo a monic modulus of degree u.

    The convolution is folded in one row at a time (row i is x[i] * y), so the
    double-length product is never formed: acc <- reduce(acc * X) + row.
    """
    u = len(modulus)
    if len(x) != u or len(y) != u:
        raise ValueError(f"Operands must have length {u}")
    acc = [R.zero] * u
    for a in x:
        row = polyscale(R, a, y)
        shifted = polyreduce(R, modulus, acc + [R.zero])
        acc = [R.add(s, r) for s, r in zip(shifted, row)]
    return acc


def poly_ring(R: Ring, modulus: list) -> Ring:
    """The quotient ring R[X]/(modulus), elements being length-u coefficient lists."""
    u = len(modulus)

    def constant(c):
        return [R.zero] * (u - 1) + [c] if u > 0 else []

    return Ring(
        zero=[R.zero] * u,
        one=constant(R.one),
        int=lambda k: constant(R.int(k)),
        add=lambda x, y: [R.add(a, b) for a, b in zip(x, y)],
        neg=lambda x: polyneg(R, x),
        sub=lambda x, y: [R.sub(a, b) for a, b in zip(x, y)],
        mul=lambda x, y: polymodmul(R, modulus, x, y),
    )
