from __future__ import annotations

import logging
import sys
from typing import List, Optional

from radmon.bootstrap import build_app_system
from radmon.core.config.logging_config import setup_logging
from radmon.domain.models import AlarmSnapshot

logger = logging.getLogger("radmon.demo")


def _arg_value(argv: List[str], flag: str) -> Optional[str]:
    if flag in argv:
        i = argv.index(flag)
        if i + 1 < len(argv):
            return argv[i + 1]
    return None


def main(argv: Optional[List[str]] = None) -> AlarmSnapshot:
    """
    Run a fixed number of alarm checks and log the outcome.

    Notes
    -----
    - Loads configuration from `config.yaml` by default.
    - Optional CLI usage:
        python -m radmon.dev.demo_alarm --config path/to/config.yaml --checks 50
    - Checks run back to back; there is no timer or scheduling.
    """
    argv = sys.argv[1:] if argv is None else argv

    wiring = build_app_system(config_path=_arg_value(argv, "--config"))
    setup_logging(wiring.config.log_level)

    checks_arg = _arg_value(argv, "--checks")
    checks = int(checks_arg) if checks_arg is not None else wiring.config.demo.checks

    logger.info("Running %d checks with %s source", checks, wiring.config.source.kind)
    for _ in range(checks):
        wiring.alarm.check()

    snap = wiring.alarm.snapshot()
    logger.info("Status=%s triggered=%s count=%d", snap.status.value, snap.triggered, snap.trigger_count)
    return snap


if __name__ == "__main__":
    main()
