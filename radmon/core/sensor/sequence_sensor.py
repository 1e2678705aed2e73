from __future__ import annotations

from collections import deque
from typing import Deque, Iterable


class SequenceSensor:
    """
    Measurement source replaying a prepared sequence of values.

    Values are returned in order. Once the sequence is exhausted the last
    returned value is repeated; an empty sequence reports ``0.0``.

    Parameters
    ----------
    values
        Readings to replay.
    """

    def __init__(self, values: Iterable[float]):
        self._values: Deque[float] = deque(float(v) for v in values)
        self._last = 0.0

    @property
    def remaining(self) -> int:
        """Number of prepared values not yet returned."""
        return len(self._values)

    def next_measurement(self) -> float:
        if self._values:
            self._last = self._values.popleft()
        return self._last
