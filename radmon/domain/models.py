"""
Domain models and enums.

This module defines the domain-level types shared by the alarm and its callers:
- AlarmStatus, the two states of the latching alarm
- AlarmSnapshot, an immutable copy of an alarm's state for polling callers

Snapshots are frozen dataclasses so they can be handed to UI/reporting code
without exposing the live alarm.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AlarmStatus(str, Enum):
    """
    State of a latching alarm.

    Members
    -------
    QUIET : str
        No out-of-range reading since construction or the last reset.
    ALARMED : str
        At least one out-of-range reading was seen; stays until reset.
    """

    QUIET = "QUIET"
    ALARMED = "ALARMED"


@dataclass(frozen=True)
class AlarmSnapshot:
    """
    Point-in-time copy of an alarm's state.

    Parameters
    ----------
    triggered
        Whether the alarm is latched on.
    trigger_count
        Number of out-of-range readings since construction or the last reset.
    """

    triggered: bool
    trigger_count: int

    @property
    def status(self) -> AlarmStatus:
        return AlarmStatus.ALARMED if self.triggered else AlarmStatus.QUIET
