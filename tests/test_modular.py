"""Tests for concrete rings and root-of-unity supply."""

import pytest

from modular import (
    DEFAULT_MODULUS,
    binary_field,
    default_ring,
    find_ntt_prime,
    integers,
    integers_mod,
    inverse_mod,
    is_primitive_root_of_unity,
    primitive_root,
    root_of_unity,
)


class TestIntegersMod:

    def test_operations(self):
        R = integers_mod(7)
        assert R.add(5, 4) == 2
        assert R.sub(2, 5) == 4
        assert R.neg(3) == 4
        assert R.mul(3, 5) == 1
        assert R.int(-1) == 6
        assert (R.zero, R.one) == (0, 1)

    def test_rejects_trivial_modulus(self):
        with pytest.raises(ValueError):
            integers_mod(1)

    def test_default_ring(self):
        assert default_ring().int(DEFAULT_MODULUS + 3) == 3

    def test_integers_are_unbounded(self):
        Z = integers()
        assert Z.mul(2 ** 80, 2 ** 80) == 2 ** 160
        assert Z.int(-5) == -5


class TestRoots:

    def test_primitive_root(self):
        assert primitive_root(7) == 3
        assert primitive_root(13) == 2

    def test_primitive_root_rejects_composite(self):
        with pytest.raises(ValueError):
            primitive_root(15)

    @pytest.mark.parametrize("order,p", [(4, 13), (12, 13), (7, 29), (91, 547), (14, 337), (16, 337)])
    def test_root_of_unity_has_exact_order(self, order, p):
        w = root_of_unity(order, p)
        assert is_primitive_root_of_unity(w, order, p)
        assert all(pow(w, k, p) != 1 for k in range(1, order))

    def test_root_of_unity_known_value(self):
        assert root_of_unity(4, 13) == 8

    def test_root_of_unity_bad_order(self):
        with pytest.raises(ValueError):
            root_of_unity(5, 337)

    def test_is_primitive_rejects_lower_order(self):
        assert not is_primitive_root_of_unity(1, 4, 13)
        assert not is_primitive_root_of_unity(12, 4, 13)
        assert not is_primitive_root_of_unity(2, 4, 13)

    def test_inverse_mod(self):
        assert inverse_mod(3, 7) == 5


class TestPrimeSearch:

    def test_small_primes(self):
        assert find_ntt_prime(16, min_bits=4) == 17
        assert find_ntt_prime(30, min_bits=4) == 31

    @pytest.mark.parametrize("order", [6, 14, 91, 256])
    def test_congruence_and_size(self, order):
        p = find_ntt_prime(order, min_bits=20)
        assert p >= 2 ** 20
        assert (p - 1) % order == 0
        assert is_primitive_root_of_unity(root_of_unity(order, p), order, p)

    def test_bad_order(self):
        with pytest.raises(ValueError):
            find_ntt_prime(0)


class TestBinaryField:

    def test_aes_field_inverse(self):
        # GF(256) with X^8 + X^4 + X^3 + X + 1: 0x53 * 0xCA = 1
        F = binary_field([0, 0, 0, 1, 1, 0, 1, 1])
        a = [0, 1, 0, 1, 0, 0, 1, 1]
        b = [1, 1, 0, 0, 1, 0, 1, 0]
        assert F.mul(a, b) == F.one
