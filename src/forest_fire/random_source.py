"""Random number service used for ignition placement and fire spread."""

import random
from typing import Optional


class RandomSource:
    """Draws uniform integers from half-open ranges.

    By default it wraps the model's ``random.Random`` instance so a seeded
    model is reproducible. Subclasses can override :meth:`random_int` to
    script the outcomes in tests.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def random_int(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)``."""
        if high <= low:
            raise ValueError(f"empty range [{low}, {high})")
        return self.rng.randrange(low, high)

    def burn_chance_happens(self, burn_chance: int) -> bool:
        """Draw once and report whether a burning neighbour ignites a tree."""
        return self.random_int(0, 100) < burn_chance

    def ignition_point(self, width: int, height: int) -> tuple[int, int]:
        """Pick an interior cell; x is drawn before y."""
        x = self.random_int(1, width - 1)
        y = self.random_int(1, height - 1)
        return x, y
