from __future__ import annotations

import pytest

from syndicate_backend.shared import RandomService


def test_same_seed_gives_same_draws() -> None:
    first, second = RandomService(seed=7), RandomService(seed=7)

    assert [first.uniform(1, 3) for _ in range(5)] == [second.uniform(1, 3) for _ in range(5)]


@pytest.mark.parametrize(("low", "high"), [(1, 3), (3, 1), (2, 2)])
def test_uniform_stays_within_bounds(low: int, high: int) -> None:
    rng = RandomService(seed=1)

    for _ in range(200):
        assert min(low, high) <= rng.uniform(low, high) <= max(low, high)


def test_reseed_restarts_the_sequence() -> None:
    rng = RandomService(seed=3)
    draws = [rng.uniform(0, 1) for _ in range(3)]

    rng.reseed(3)

    assert rng.seed == 3
    assert [rng.uniform(0, 1) for _ in range(3)] == draws
