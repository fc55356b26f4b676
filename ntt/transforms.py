"""
Number theoretic transforms over an abstract ring.

Every transform function has the shape fn(w, xs) -> list, where w is a
primitive root of unity of order len(xs). The composers in this module build a
transform of a larger size out of smaller ones that are passed in explicitly,
e.g.

    inner = functools.partial(naive_ntt, R)
    ntt6 = functools.partial(radix2_dit, R, inner)
    ntt12 = functools.partial(radix2_dit, R, ntt6)

Roots of unity are trusted: nothing here checks primitivity, a wrong root just
yields a wrong transform.
"""

from functools import lru_cache
from math import gcd

import numpy as np
from sympy import mod_inverse

from butterflies import fft2
from polynomial import polyeval
from ring import Ring, ring_ipow, ring_powers


def _object_array(xs) -> np.ndarray:
    """1-D object array holding the ring elements as-is (elements may themselves be lists)."""
    arr = np.empty(len(xs), dtype=object)
    for k, x in enumerate(xs):
        arr[k] = x
    return arr


def _check_length(xs, size: int):
    if len(xs) != size:
        raise ValueError(f"Input must have length {size}, got {len(xs)}")


def naive_ntt(R: Ring, w, xs: list) -> list:
    """
    Reference O(n^2) transform: result[k] is xs, read as a polynomial with
    xs[j] the coefficient of X^j, evaluated at w^k.
    """
    coeffs = list(reversed(xs))
    return [polyeval(R, coeffs, point) for point in ring_powers(R, w, len(xs))]


def radix2_dit(R: Ring, fn, w, xs: list) -> list:
    """
    Decimation in time: doubles the size of the inner transform fn.

    The even and odd input samples are transformed separately with root w^2,
    the odd half is twiddled by w^0..w^(n-1), and each output pair goes
    through a length-2 butterfly.
    """
    if len(xs) % 2 != 0:
        raise ValueError(f"Input length must be even, got {len(xs)}")
    n = len(xs) // 2
    w2 = R.mul(w, w)
    evens = fn(w2, xs[0::2])
    odds = fn(w2, xs[1::2])
    twiddled = [R.mul(t, o) for t, o in zip(ring_powers(R, w, n), odds)]
    low, high = [], []
    for e, o in zip(evens, twiddled):
        s, d = fft2(R, e, o)
        low.append(s)
        high.append(d)
    return low + high


def radix2_dif(R: Ring, fn, w, xs: list) -> list:
    """
    Decimation in frequency: butterflies on the two input halves first, then
    the inner transform on each, with outputs interleaved.
    """
    if len(xs) % 2 != 0:
        raise ValueError(f"Input length must be even, got {len(xs)}")
    n = len(xs) // 2
    w2 = R.mul(w, w)
    sums, diffs = [], []
    for a, b in zip(xs[:n], xs[n:]):
        s, d = fft2(R, a, b)
        sums.append(s)
        diffs.append(d)
    diffs = [R.mul(t, d) for t, d in zip(ring_powers(R, w, n), diffs)]
    evens = fn(w2, sums)
    odds = fn(w2, diffs)
    out = []
    for e, o in zip(evens, odds):
        out.extend((e, o))
    return out


def composite_ntt(R: Ring, fm, fn, w, xs: list, m: int, n: int, verbose: bool = False) -> list:
    """
    Cooley-Tukey transform of length m*n for any factorization.

    Args:
        R: Coefficient ring.
        fm: Transform of length m.
        fn: Transform of length n.
        w: Primitive root of unity of order m*n.
        xs: Input sequence of length m*n.
        m, n: The factor sizes.
        verbose: Print the intermediate grids.

    The input is viewed as an m x n grid with grid[i][j] = xs[i + m*j]. Each
    row goes through fn with root w^m, entry (i, j) is twiddled by w^(i*j),
    then each column goes through fm with root w^n. Row-major flattening of
    the final grid is the output.
    """
    size = m * n
    _check_length(xs, size)
    if verbose:
        print(f" -> Composite NTT-{size} ({m}x{n}) input: {xs}")

    grid = _object_array(xs).reshape(n, m).T
    powers = _object_array(ring_powers(R, w, size))
    twiddles = powers[np.outer(np.arange(m), np.arange(n))]
    wm = ring_ipow(R, w, m)
    wn = ring_ipow(R, w, n)

    rows = np.empty((m, n), dtype=object)
    for i in range(m):
        out = fn(wm, list(grid[i]))
        for j in range(n):
            rows[i, j] = R.mul(twiddles[i, j], out[j])
    if verbose:
        print(f"    After {m} row transforms and twiddles: {rows.tolist()}")

    result = np.empty((m, n), dtype=object)
    for j in range(n):
        out = fm(wn, list(rows[:, j]))
        for i in range(m):
            result[i, j] = out[i]

    flat = list(result.reshape(-1))
    if verbose:
        print(f" <- Composite NTT-{size} output: {flat}")
    return flat


def _readonly(table: np.ndarray) -> np.ndarray:
    table.flags.writeable = False
    return table


@lru_cache(maxsize=128)
def crt_input_indices(m: int, n: int) -> np.ndarray:
    """table[i][j] = (i*n + j*m) mod m*n, the Ruritanian input mapping."""
    i = np.arange(m).reshape(m, 1)
    j = np.arange(n).reshape(1, n)
    return _readonly((i * n + j * m) % (m * n))


@lru_cache(maxsize=128)
def crt_output_indices(m: int, n: int) -> np.ndarray:
    """table[k] = flat position of grid cell (k mod m, k mod n) in a row-major m x n grid."""
    k = np.arange(m * n)
    return _readonly((k % m) * n + (k % n))


def _check_coprime(m: int, n: int):
    if gcd(m, n) != 1:
        raise ValueError(f"CRT factors must be coprime, got m={m}, n={n}")


def to_crt(xs: list, m: int, n: int) -> list:
    """Rearranges a flat sequence into the m x n grid with grid[k mod m][k mod n] = xs[k]."""
    _check_coprime(m, n)
    _check_length(xs, m * n)
    grid = np.empty(m * n, dtype=object)
    positions = crt_output_indices(m, n)
    for k, x in enumerate(xs):
        grid[positions[k]] = x
    return [list(row) for row in grid.reshape(m, n)]


def from_crt(grid: list, m: int, n: int) -> list:
    """Inverse of to_crt."""
    _check_coprime(m, n)
    if len(grid) != m or any(len(row) != n for row in grid):
        raise ValueError(f"Grid must be {m}x{n}")
    return [grid[k % m][k % n] for k in range(m * n)]


def pfa_ntt(R: Ring, fm, fn, w, xs: list, m: int, n: int, verbose: bool = False) -> list:
    """
    Prime factor (Good-Thomas) transform of length m*n with gcd(m, n) = 1.

    Input position (i*n + j*m) mod m*n is placed at grid cell (i, j); the rows
    go through fn with root w^m and the columns through fm with root w^n. The
    coprime factors leave no cross terms, so no twiddles are applied. Output k
    is read back from cell (k mod m, k mod n), a second CRT mapping that is
    not the inverse of the first.
    """
    if gcd(m, n) != 1:
        raise ValueError(f"PFA factors must be coprime, got m={m}, n={n}")
    size = m * n
    _check_length(xs, size)
    if verbose:
        print(f" -> PFA NTT-{size} ({m}x{n}) input: {xs}")

    grid = _object_array(xs)[crt_input_indices(m, n)]
    wm = ring_ipow(R, w, m)
    wn = ring_ipow(R, w, n)

    rows = np.empty((m, n), dtype=object)
    for i in range(m):
        out = fn(wm, list(grid[i]))
        for j in range(n):
            rows[i, j] = out[j]

    cols = np.empty((m, n), dtype=object)
    for j in range(n):
        out = fm(wn, list(rows[:, j]))
        for i in range(m):
            cols[i, j] = out[i]

    flat = list(cols.reshape(-1)[crt_output_indices(m, n)])
    if verbose:
        print(f" <- PFA NTT-{size} output: {flat}")
    return flat


def modified_pfa_ntt(R: Ring, fm, fn, w, grid: list, m: int, n: int, i: int = None, j: int = None) -> list:
    """
    Prime factor transform on data already in CRT grid form (see to_crt).

    With m*i = 1 (mod n) and n*j = 1 (mod m), the rows go through fn with root
    w^(m*i) and the columns through fm with root w^(n*j). The result is again
    an m x n grid in CRT form: from_crt of it equals pfa_ntt on from_crt(grid).

    Args:
        i: Inverse of m modulo n; computed when omitted.
        j: Inverse of n modulo m; computed when omitted.
    """
    if gcd(m, n) != 1:
        raise ValueError(f"PFA factors must be coprime, got m={m}, n={n}")
    if len(grid) != m or any(len(row) != n for row in grid):
        raise ValueError(f"Grid must be {m}x{n}")
    if i is None:
        i = int(mod_inverse(m, n)) if n > 1 else 0
    if j is None:
        j = int(mod_inverse(n, m)) if m > 1 else 0
    if (m * i) % n != 1 % n or (n * j) % m != 1 % m:
        raise ValueError(f"Need m*i = 1 (mod n) and n*j = 1 (mod m), got i={i}, j={j}")

    row_root = ring_ipow(R, w, m * i)
    col_root = ring_ipow(R, w, n * j)

    rows = np.empty((m, n), dtype=object)
    for a in range(m):
        out = fn(row_root, list(grid[a]))
        for b in range(n):
            rows[a, b] = out[b]

    cols = np.empty((m, n), dtype=object)
    for b in range(n):
        out = fm(col_root, list(rows[:, b]))
        for a in range(m):
            cols[a, b] = out[a]
    return [list(row) for row in cols]


def transform_convolution(R: Ring, fn, w, w_inv, n_inv, x: list, y: list) -> list:
    """
    Cyclic convolution through a transform: n_inv * fn(w_inv, fn(w, x) * fn(w, y)).

    n_inv must be the reciprocal of R.int(len(x)); the ring is not asked to
    divide.
    """
    _check_length(y, len(x))
    fx = fn(w, x)
    fy = fn(w, y)
    back = fn(w_inv, [R.mul(a, b) for a, b in zip(fx, fy)])
    return [R.mul(n_inv, c) for c in back]
