from __future__ import annotations

import random
from typing import List, Optional

from .config import ConfigError


class RandomInteger:
    """Callable source of integers in ``[0, value_range - 1]``.

    Each instance owns its own ``random.Random`` so a seed gives the same
    sequence regardless of what else in the process uses ``random``.
    """

    __slots__ = ("value_range", "_rng")

    def __init__(self, value_range: int, seed: Optional[int] = None) -> None:
        if value_range < 1:
            raise ConfigError(f"range must be at least 1 (got {value_range})")
        self.value_range = value_range
        self._rng = random.Random(seed)

    def __call__(self) -> int:
        return self._rng.randrange(self.value_range)

    def take(self, count: int) -> List[int]:
        """Draw *count* values."""
        return [self() for _ in range(count)]
