from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from radmon.core.alarm.alarm import Alarm
from radmon.core.config.yaml_config import AppConfig, SourceConfig, load_app_config
from radmon.core.sensor.base import MeasurementSource
from radmon.core.sensor.random_sensor import Sensor
from radmon.core.sensor.sequence_sensor import SequenceSensor


@dataclass(frozen=True)
class AppWiring:
    """Everything a caller needs to drive the alarm."""
    config: AppConfig
    source: MeasurementSource
    alarm: Alarm


def build_measurement_source(cfg: SourceConfig) -> MeasurementSource:
    if cfg.kind == "sequence":
        return SequenceSensor(cfg.values)
    if cfg.kind == "random":
        return Sensor(offset=cfg.offset, spread=cfg.spread, seed=cfg.seed)
    raise ValueError(f"Unknown source kind: {cfg.kind!r}")


def build_app_system(config_path: Optional[str] = None) -> AppWiring:
    cfg = load_app_config(config_path)

    # --- SOURCE ---
    source = build_measurement_source(cfg.source)

    # --- ALARM ---
    alarm = Alarm(source)

    return AppWiring(config=cfg, source=source, alarm=alarm)
