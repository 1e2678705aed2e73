from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_OFFSET = 16.0
DEFAULT_SPREAD = 6.0


@dataclass
class Sensor:
    """
    Default pseudo-random radioactivity sensor.

    Behavior
    --------
    - Draws ``r`` uniformly from ``[0, 1)``
    - Returns ``offset + spread * r * r``

    With the defaults readings lie in ``[16, 22)`` and cluster towards the
    low end, so a long run produces both in-range and out-of-range values.

    Parameters
    ----------
    offset
        Lowest value the sensor can report.
    spread
        Width of the reporting band above ``offset``. Must be >= 0.
    seed
        RNG seed for deterministic runs. None seeds from the OS.
    """

    offset: float = DEFAULT_OFFSET
    spread: float = DEFAULT_SPREAD
    seed: Optional[int] = None

    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.spread < 0:
            raise ValueError(f"spread must be >= 0, got {self.spread}")
        self._rng = random.Random(self.seed)

    def next_measurement(self) -> float:
        r = self._rng.random()
        return float(self.offset) + float(self.spread) * r * r
