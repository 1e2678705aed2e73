"""
Latching radioactivity alarm.

The alarm pulls one reading from its measurement source per ``check()`` and
compares it with fixed bounds. Any out-of-range reading latches the alarm on
and bumps a counter; in-range readings never clear it. Only ``reset()``
returns the alarm to the quiet state.

State machine
-------------
- QUIET   --check(in range)-->  QUIET
- QUIET   --check(out)------->  ALARMED (count += 1)
- ALARMED --check(in range)-->  ALARMED
- ALARMED --check(out)------->  ALARMED (count += 1)
- any     --reset()---------->  QUIET   (count := 0)

The alarm is not thread-safe. Callers sharing one instance across threads
must serialise ``check``/``reset``/accessor calls themselves.
"""

from __future__ import annotations

import logging
from typing import Optional

from radmon.core.sensor.base import MeasurementSource
from radmon.core.sensor.random_sensor import Sensor
from radmon.domain.models import AlarmSnapshot, AlarmStatus

logger = logging.getLogger(__name__)

LOW_THRESHOLD = 17.0
HIGH_THRESHOLD = 21.0


def is_out_of_range(value: float) -> bool:
    """
    Return True when ``value`` lies outside ``[LOW_THRESHOLD, HIGH_THRESHOLD]``.

    Both bounds are inclusive, so exactly 17.0 and 21.0 are in range.
    """
    return value < LOW_THRESHOLD or value > HIGH_THRESHOLD


class Alarm:
    """
    Latching alarm bound to a single measurement source.

    Parameters
    ----------
    source
        Measurement source polled once per ``check()``. Fixed for the
        lifetime of the alarm.

    Raises
    ------
    ValueError
        If ``source`` is None.
    """

    def __init__(self, source: MeasurementSource):
        if source is None:
            raise ValueError("missing measurement source")
        self._source = source
        self._triggered = False
        self._trigger_count = 0

    @classmethod
    def with_default_sensor(cls, seed: Optional[int] = None) -> "Alarm":
        """
        Build an alarm bound to the default pseudo-random ``Sensor``.

        Parameters
        ----------
        seed
            Optional RNG seed for reproducible runs.
        """
        return cls(Sensor(seed=seed))

    @property
    def source(self) -> MeasurementSource:
        return self._source

    @property
    def status(self) -> AlarmStatus:
        return AlarmStatus.ALARMED if self._triggered else AlarmStatus.QUIET

    def check(self) -> None:
        """
        Take one reading and update the alarm state.

        Exceptions raised by the source propagate unchanged and leave the
        state untouched.
        """
        value = self._source.next_measurement()

        if is_out_of_range(value):
            self._triggered = True
            self._trigger_count += 1
            logger.warning(
                "Reading %.3f outside [%s, %s] (count=%d)",
                value,
                LOW_THRESHOLD,
                HIGH_THRESHOLD,
                self._trigger_count,
            )
        else:
            logger.debug("Reading %.3f in range", value)

    def reset(self) -> None:
        """Clear the latch and the trigger counter."""
        self._triggered = False
        self._trigger_count = 0
        logger.info("Alarm reset")

    def is_triggered(self) -> bool:
        return self._triggered

    def trigger_count(self) -> int:
        return self._trigger_count

    def snapshot(self) -> AlarmSnapshot:
        """
        Return an immutable copy of the current state.

        Returns
        -------
        AlarmSnapshot
            ``triggered`` and ``trigger_count`` as of this call.
        """
        return AlarmSnapshot(triggered=self._triggered, trigger_count=self._trigger_count)
