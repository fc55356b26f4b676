"""
Negacyclic transform: evaluation at the odd powers w, w^3, ..., w^(2n-1) of a
root of unity w of order 2n. It maps multiplication in R[X]/(X^n + 1) to
pointwise multiplication.
"""

from ring import Ring, ring_powers
from transforms import naive_ntt


def naive_negacyclic_ntt(R: Ring, w, xs: list, fn=None) -> list:
    """
    Scales xs[j] by w^j and runs the ordinary transform with root w^2.

    Args:
        fn: Transform of length n used for the ordinary transform; defaults
            to naive_ntt over R.
    """
    if fn is None:
        fn = lambda root, seq: naive_ntt(R, root, seq)
    scaled = [R.mul(t, x) for t, x in zip(ring_powers(R, w, len(xs)), xs)]
    return fn(R.mul(w, w), scaled)


def naive_inverse_negacyclic_ntt(R: Ring, w, ys: list, fn=None) -> list:
    """
    Ordinary transform with root w^2, then scaling of entry j by w^j.

    Called with w the reciprocal of the forward root, this undoes
    naive_negacyclic_ntt up to a factor of R.int(n); no normalization is
    applied.
    """
    if fn is None:
        fn = lambda root, seq: naive_ntt(R, root, seq)
    out = fn(R.mul(w, w), ys)
    return [R.mul(t, y) for t, y in zip(ring_powers(R, w, len(ys)), out)]
