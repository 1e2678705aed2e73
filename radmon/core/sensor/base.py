"""
Measurement source contract.

The alarm only needs one capability from whatever it watches: "give me the
next scalar reading". Anything with a ``next_measurement()`` method satisfies
this protocol, which keeps real sensors, replayed sequences and test doubles
interchangeable without a mocking layer.
"""

from __future__ import annotations

from typing import Protocol


class MeasurementSource(Protocol):
    """
    Protocol interface for scalar measurement sources.

    Methods
    -------
    next_measurement()
        Produce the next reading. May return a different value on every call.
    """

    def next_measurement(self) -> float:
        """
        Return the next scalar reading.

        Returns
        -------
        float
            The measured value. Implementations decide their own failure
            policy; exceptions raised here reach the caller unchanged.
        """
        ...
