from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from radmon.core.sensor.random_sensor import DEFAULT_OFFSET, DEFAULT_SPREAD

SOURCE_KINDS = ("random", "sequence")


@dataclass(frozen=True)
class SourceConfig:
    """Measurement source selection and parameters."""
    kind: str = "random"
    seed: Optional[int] = None
    offset: float = DEFAULT_OFFSET
    spread: float = DEFAULT_SPREAD
    values: List[float] = field(default_factory=list)


@dataclass(frozen=True)
class DemoConfig:
    """Settings for the bounded developer demo run."""
    checks: int = 10


@dataclass(frozen=True)
class AppConfig:
    """
    Root application configuration loaded from YAML.

    Alarm thresholds are fixed in code and not read from config.
    """
    log_level: str
    source: SourceConfig
    demo: DemoConfig


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError("config.yaml must contain a YAML mapping at the root")
    return data


def _resolve_default_config_path() -> Path:
    """
    Resolve config.yaml location.

    Priority:
    1) RADMON_CONFIG env var if provided
    2) ./config.yaml in current working directory
    """
    env = os.getenv("RADMON_CONFIG")
    if env:
        return Path(env).expanduser().resolve()
    return Path("config.yaml").resolve()


def _parse_source(raw: Dict[str, Any]) -> SourceConfig:
    kind = str(raw.get("kind", "random")).lower()
    if kind not in SOURCE_KINDS:
        raise ValueError(f"source.kind must be one of {SOURCE_KINDS}, got {kind!r}")

    seed = raw.get("seed")
    spread = float(raw.get("spread", DEFAULT_SPREAD))
    if spread < 0:
        raise ValueError(f"source.spread must be >= 0, got {spread}")

    values = [float(v) for v in (raw.get("values") or [])]
    if kind == "sequence" and not values:
        raise ValueError("source.values must be a non-empty list when kind is 'sequence'")

    return SourceConfig(
        kind=kind,
        seed=int(seed) if seed is not None else None,
        offset=float(raw.get("offset", DEFAULT_OFFSET)),
        spread=spread,
        values=values,
    )


def load_app_config(path: Optional[str] = None) -> AppConfig:
    """
    Load application configuration from YAML and convert into typed config objects.

    Parameters
    ----------
    path
        Explicit path to config.yaml. If None, uses default resolution.

    Returns
    -------
    AppConfig
        Parsed and validated configuration.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If fields are missing or invalid.
    """
    cfg_path = Path(path).expanduser().resolve() if path else _resolve_default_config_path()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config not found: {cfg_path}")

    raw = _read_yaml(cfg_path)

    # ---- logging ----
    log_level = str(raw.get("log_level", "INFO")).upper()

    # ---- source ----
    source = _parse_source(raw.get("source") or {})

    # ---- demo ----
    d = raw.get("demo") or {}
    checks = int(d.get("checks", 10))
    if checks < 0:
        raise ValueError(f"demo.checks must be >= 0, got {checks}")

    return AppConfig(
        log_level=log_level,
        source=source,
        demo=DemoConfig(checks=checks),
    )
