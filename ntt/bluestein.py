"""
Bluestein's chirp transform: a transform of any length n, prime lengths
included, computed with one linear convolution.

Uses jk = (j^2 + k^2 - (k - j)^2) / 2, so with u^2 = w and v = 1/u:

    y[k] = u^(k^2) * sum_j (x[j] * u^(j^2)) * v^((k - j)^2)
"""

from polynomial import polymul
from ring import Ring, ring_ipow


def chirp(R: Ring, u, n: int) -> list:
    """[u^(i^2) for i in 0..n-1]."""
    return [ring_ipow(R, u, i * i) for i in range(n)]


def padded_convolution(R: Ring, size: int, cyclic):
    """
    Wraps a cyclic convolution of length `size` as a linear convolution
    suitable for bluestein_ntt.

    Both operands are zero-padded to `size`. For an n-point transform the
    kernel has 2n - 1 entries; as long as size >= 2n - 1 the wrapped-around
    terms land below index n - 1 and the window Bluestein reads is exact.
    """
    def convolve(a: list, b: list) -> list:
        if len(a) > size or len(b) > size:
            raise ValueError(f"Operands longer than convolution size {size}")
        pa = list(a) + [R.zero] * (size - len(a))
        pb = list(b) + [R.zero] * (size - len(b))
        return cyclic(pa, pb)
    return convolve


def bluestein_ntt(R: Ring, u, v, xs: list, convolve=None) -> list:
    """
    Transform of xs with root u^2.

    Args:
        R: Coefficient ring.
        u: Square root of the transform root.
        v: Inverse of u.
        xs: Input of any length n >= 1.
        convolve: Linear convolution (a, b) -> list whose entries n-1 .. 2n-2
            are exact; defaults to schoolbook polynomial multiplication. See
            padded_convolution for plugging in a fast cyclic convolution.
    """
    n = len(xs)
    if n == 0:
        raise ValueError("Input must not be empty")
    if convolve is None:
        convolve = lambda a, b: polymul(R, a, b)

    us = chirp(R, u, n)
    vs = chirp(R, v, n)
    premul = [R.mul(a, b) for a, b in zip(xs, us)]
    kernel = list(reversed(vs[1:])) + vs
    product = convolve(premul, kernel)
    window = product[n - 1:2 * n - 1]
    return [R.mul(a, b) for a, b in zip(window, us)]
