"""Tests for Bluestein's chirp transform."""

from functools import partial

import pytest

from bluestein import bluestein_ntt, chirp, padded_convolution
from butterflies import butterfly_ntt
from convolution import cyclic_convolution
from helpers import random_vector
from modular import integers_mod, inverse_mod, root_of_unity
from transforms import naive_ntt, radix2_dit, transform_convolution


class TestBluestein:

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 6, 7, 8])
    def test_matches_naive(self, rng, zp, n):
        u = root_of_unity(2 * n, 337)
        v = inverse_mod(u, 337)
        for _ in range(3):
            xs = random_vector(rng, 337, n)
            assert bluestein_ntt(zp, u, v, xs) == naive_ntt(zp, zp.mul(u, u), xs)

    def test_prime_length_7(self, rng, zp):
        u = root_of_unity(14, 337)
        xs = random_vector(rng, 337, 7)
        assert bluestein_ntt(zp, u, inverse_mod(u, 337), xs) == naive_ntt(zp, zp.mul(u, u), xs)

    def test_with_padded_power_of_two_convolution(self, rng):
        # Z/113: 112 = 16 * 7, so both a 14th and a 16th root exist
        R = integers_mod(113)
        u = root_of_unity(14, 113)
        w16 = root_of_unity(16, 113)
        ntt16 = partial(radix2_dit, R, partial(radix2_dit, R, partial(butterfly_ntt, R)))
        cyclic = partial(transform_convolution, R, ntt16, w16, inverse_mod(w16, 113), inverse_mod(16, 113))
        convolve = padded_convolution(R, 16, cyclic)
        xs = random_vector(rng, 113, 7)
        assert bluestein_ntt(R, u, inverse_mod(u, 113), xs, convolve=convolve) == naive_ntt(R, R.mul(u, u), xs)

    def test_padded_direct_cyclic_convolution(self, rng, zp):
        u = root_of_unity(12, 337)
        convolve = padded_convolution(zp, 11, partial(cyclic_convolution, zp))
        xs = random_vector(rng, 337, 6)
        assert bluestein_ntt(zp, u, inverse_mod(u, 337), xs, convolve=convolve) == naive_ntt(zp, zp.mul(u, u), xs)

    def test_padded_convolution_too_small(self, zp):
        convolve = padded_convolution(zp, 4, partial(cyclic_convolution, zp))
        with pytest.raises(ValueError):
            convolve([1, 2, 3], [1, 2, 3, 4, 5])

    def test_empty_input(self, zp):
        with pytest.raises(ValueError):
            bluestein_ntt(zp, 1, 1, [])

    def test_chirp(self, zp):
        assert chirp(zp, 2, 4) == [1, 2, 16, 512 % 337]
