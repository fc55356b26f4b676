"""
Closed-form transforms of length 2, 3 and 4.

These use the identities of their fixed root (w^2 = -1 for length 4,
1 + w + w^2 = 0 for length 3) instead of raising w to generic powers.
"""

from ring import Ring


def fft2(R: Ring, x0, x1):
    """Length-2 transform with the root fixed at -1."""
    return R.add(x0, x1), R.sub(x0, x1)


def ntt2(R: Ring, w, x0, x1):
    return R.add(x0, x1), R.add(x0, R.mul(w, x1))


def ntt3(R: Ring, w, x0, x1, x2):
    """Three-point butterfly with a single twiddle multiplication."""
    t = R.mul(w, R.sub(x1, x2))
    y0 = R.add(R.add(x0, x1), x2)
    y1 = R.add(R.sub(x0, x2), t)
    y2 = R.sub(R.sub(x0, x1), t)
    return y0, y1, y2


def ntt4(R: Ring, w, x0, x1, x2, x3):
    """Two radix-2 stages: butterflies on (x0, x2) and (x1, x3), then one twiddle by w."""
    a0, a1 = fft2(R, x0, x2)
    b0, b1 = fft2(R, x1, x3)
    t = R.mul(w, b1)
    y0, y2 = fft2(R, a0, b0)
    y1, y3 = fft2(R, a1, t)
    return y0, y1, y2, y3


def butterfly_ntt(R: Ring, w, xs: list) -> list:
    """Dispatches a length-2, 3 or 4 sequence to its closed-form kernel."""
    kernels = {2: ntt2, 3: ntt3, 4: ntt4}
    if len(xs) not in kernels:
        raise ValueError(f"No closed-form butterfly for length {len(xs)}")
    return list(kernels[len(xs)](R, w, *xs))
