"""Tests for the ring record, powering and the pointwise combinator."""

import pytest

from modular import integers, integers_mod
from ring import pointwise_ring, ring_ipow, ring_pow, ring_powers, ring_sum


class TestPowering:
    """Fixed-width and arbitrary exponent powering."""

    @pytest.mark.parametrize("x,e", [(3, 0), (3, 1), (3, 5), (2, 10), (7, 63)])
    def test_ring_pow_matches_builtin(self, x, e):
        assert ring_pow(integers(), x, e) == x ** e

    @pytest.mark.parametrize("x,e", [(3, 0), (5, 1), (5, 6), (2, 100), (10, 1000)])
    def test_ring_ipow_matches_builtin(self, x, e):
        assert ring_ipow(integers_mod(337), x, e) == pow(x, e, 337)

    def test_ring_pow_narrow_width(self):
        assert ring_pow(integers(), 2, 255, width=8) == 2 ** 255

    def test_ring_pow_rejects_oversized_exponent(self):
        with pytest.raises(ValueError):
            ring_pow(integers(), 2, 256, width=8)

    def test_negative_exponents_rejected(self):
        with pytest.raises(ValueError):
            ring_pow(integers(), 2, -1)
        with pytest.raises(ValueError):
            ring_ipow(integers(), 2, -1)

    def test_both_forms_agree_in_quotient_ring(self, gf16):
        x = [0, 0, 1, 0]
        for e in range(20):
            assert ring_pow(gf16, x, e, width=8) == ring_ipow(gf16, x, e)


class TestHelpers:

    def test_ring_sum(self, zp):
        assert ring_sum(zp, [300, 40, 5]) == (345 % 337)
        assert ring_sum(zp, []) == 0

    def test_ring_powers(self, zp):
        assert ring_powers(zp, 2, 5) == [1, 2, 4, 8, 16]
        assert ring_powers(zp, 2, 0) == []


class TestPointwiseRing:

    def test_componentwise_operations(self, zp):
        P = pointwise_ring(zp, 3)
        x, y = [1, 2, 3], [336, 5, 100]
        assert P.add(x, y) == [0, 7, 103]
        assert P.sub(x, y) == [2, 334, 240]
        assert P.mul(x, y) == [336, 10, 300]
        assert P.neg(x) == [336, 335, 334]

    def test_constants(self, zp):
        P = pointwise_ring(zp, 4)
        assert P.zero == [0] * 4
        assert P.one == [1] * 4
        assert P.int(340) == [3] * 4
