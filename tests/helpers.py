"""Shared helpers for building random inputs."""


def random_vector(rng, p, n):
    return [rng.randrange(p) for _ in range(n)]


def random_gf16_vector(rng, n):
    return [[rng.randrange(2) for _ in range(4)] for _ in range(n)]
