"""
Cyclic and negacyclic convolution, i.e. multiplication in R[X]/(X^n - 1) and
R[X]/(X^n + 1), together with the radix-2 split of a 2n-point cyclic
convolution into one n-point cyclic and one n-point negacyclic convolution.

Sequences here are little-endian (index i is the coefficient of X^i).
"""

from ring import Ring


def cyclic_convolution(R: Ring, x: list, y: list) -> list:
    """out[i] = sum_j x[j] * y[(i - j) mod n]; O(n^2)."""
    n = len(x)
    if len(y) != n:
        raise ValueError(f"Operands must have the same length, got {n} and {len(y)}")
    out = []
    for i in range(n):
        acc = R.zero
        for j in range(n):
            acc = R.add(acc, R.mul(x[j], y[(i - j) % n]))
        out.append(acc)
    return out


def negacyclic_convolution(R: Ring, x: list, y: list) -> list:
    """
    out[i] = sum_j x[j] * z[n + i - j] with z = (-y) ++ y, so that terms
    wrapping past X^n pick up a sign flip.
    """
    n = len(x)
    if len(y) != n:
        raise ValueError(f"Operands must have the same length, got {n} and {len(y)}")
    z = [R.neg(c) for c in y] + list(y)
    out = []
    for i in range(n):
        acc = R.zero
        for j in range(n):
            acc = R.add(acc, R.mul(x[j], z[n + i - j]))
        out.append(acc)
    return out


def split_cyclic_convolution(R: Ring, x: list, y: list, cyclic=None, negacyclic=None) -> list:
    """
    Computes twice the 2n-point cyclic convolution of x and y from half-size
    products.

    With x = x0 ++ x1 and y = y0 ++ y1:
        z0 = cyclic_n(x0 + x1, y0 + y1)       (product mod X^n - 1)
        z1 = negacyclic_n(x0 - x1, y0 - y1)   (product mod X^n + 1)
    and the result is (z0 + z1) ++ (z0 - z1). No division by 2 is performed,
    so the output equals 2 * cyclic_convolution(x, y).

    Args:
        R: Coefficient ring.
        x, y: Operands of even length 2n.
        cyclic: n-point cyclic convolution (x, y) -> list; defaults to the
            direct O(n^2) version. May itself be a split convolution.
        negacyclic: n-point negacyclic convolution; defaults to the direct one.
    """
    size = len(x)
    if size % 2 != 0 or len(y) != size:
        raise ValueError(f"Operands must have the same even length, got {size} and {len(y)}")
    if cyclic is None:
        cyclic = lambda a, b: cyclic_convolution(R, a, b)
    if negacyclic is None:
        negacyclic = lambda a, b: negacyclic_convolution(R, a, b)

    n = size // 2
    x0, x1 = x[:n], x[n:]
    y0, y1 = y[:n], y[n:]
    z0 = cyclic([R.add(a, b) for a, b in zip(x0, x1)], [R.add(a, b) for a, b in zip(y0, y1)])
    z1 = negacyclic([R.sub(a, b) for a, b in zip(x0, x1)], [R.sub(a, b) for a, b in zip(y0, y1)])
    return [R.add(a, b) for a, b in zip(z0, z1)] + [R.sub(a, b) for a, b in zip(z0, z1)]


def _unit_vector(R: Ring, n: int, c):
    return [c] + [R.zero] * (n - 1) if n > 0 else []


def convolution_ring(R: Ring, n: int) -> Ring:
    """R[X]/(X^n - 1) on length-n little-endian lists."""
    return Ring(
        zero=[R.zero] * n,
        one=_unit_vector(R, n, R.one),
        int=lambda k: _unit_vector(R, n, R.int(k)),
        add=lambda x, y: [R.add(a, b) for a, b in zip(x, y)],
        neg=lambda x: [R.neg(a) for a in x],
        sub=lambda x, y: [R.sub(a, b) for a, b in zip(x, y)],
        mul=lambda x, y: cyclic_convolution(R, x, y),
    )


def negacyclic_ring(R: Ring, n: int) -> Ring:
    """R[X]/(X^n + 1) on length-n little-endian lists."""
    return Ring(
        zero=[R.zero] * n,
        one=_unit_vector(R, n, R.one),
        int=lambda k: _unit_vector(R, n, R.int(k)),
        add=lambda x, y: [R.add(a, b) for a, b in zip(x, y)],
        neg=lambda x: [R.neg(a) for a in x],
        sub=lambda x, y: [R.sub(a, b) for a, b in zip(x, y)],
        mul=lambda x, y: negacyclic_convolution(R, x, y),
    )
