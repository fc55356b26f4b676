"""Pytest fixtures for transform tests."""

import random

import pytest

from modular import DEFAULT_MODULUS, binary_field, integers_mod


@pytest.fixture
def rng():
    """Random source with a fixed seed."""
    return random.Random(42)


@pytest.fixture
def zp():
    """Z/337, which has roots of unity of orders 2, 3, 4, 6, 7, 8, 12, 14, 16."""
    return integers_mod(DEFAULT_MODULUS)


@pytest.fixture
def gf16():
    """GF(16) = GF(2)[X]/(X^4 + X + 1); X generates the multiplicative group of order 15."""
    return binary_field([0, 0, 1, 1])
