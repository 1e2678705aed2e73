"""
Unit tests for radmon.bootstrap.

Validates that configuration is turned into the right measurement source and
an Alarm bound to it.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from radmon.bootstrap import build_app_system, build_measurement_source
from radmon.core.alarm.alarm import Alarm
from radmon.core.config.yaml_config import SourceConfig
from radmon.core.sensor.random_sensor import Sensor
from radmon.core.sensor.sequence_sensor import SequenceSensor


def test_build_random_source() -> None:
    src = build_measurement_source(SourceConfig(kind="random", seed=9, offset=10.0, spread=2.0))

    assert isinstance(src, Sensor)
    assert (src.offset, src.spread, src.seed) == (10.0, 2.0, 9)


def test_build_sequence_source() -> None:
    src = build_measurement_source(SourceConfig(kind="sequence", values=[19.0, 30.0]))

    assert isinstance(src, SequenceSensor)
    assert src.next_measurement() == 19.0


def test_build_unknown_source_raises() -> None:
    with pytest.raises(ValueError):
        build_measurement_source(SourceConfig(kind="serial"))


def test_build_app_system_wires_alarm_to_source(tmp_path: Path) -> None:
    p = tmp_path / "config.yaml"
    p.write_text("source:\n  kind: sequence\n  values: [16.0]\n", encoding="utf-8")

    wiring = build_app_system(str(p))

    assert isinstance(wiring.alarm, Alarm)
    assert wiring.alarm.source is wiring.source

    wiring.alarm.check()
    assert wiring.alarm.is_triggered() is True
    assert wiring.alarm.trigger_count() == 1
