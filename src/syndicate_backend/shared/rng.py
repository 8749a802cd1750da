"""Random helpers used by the personnel recruitment draw."""

from __future__ import annotations

from random import Random


class RandomService:
    """Thin wrapper around :class:`random.Random` so draws can be substituted in tests."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._random = Random(seed)  # noqa: S311

    @property
    def seed(self) -> int | None:
        """Return the base seed for the service."""
        return self._seed

    def reseed(self, seed: int | None) -> None:
        """Reset the random generator to a new seed."""
        self._seed = seed
        self._random = Random(seed)  # noqa: S311

    def uniform(self, low: float, high: float) -> float:
        """Return a continuous draw between *low* and *high* (either order)."""
        low, high = min(low, high), max(low, high)
        value = self._random.uniform(low, high)
        # float rounding in Random.uniform can step just past the bounds
        return min(max(value, low), high)


__all__ = ["RandomService"]
