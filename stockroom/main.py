"""Stockroom demo entry point: runs one scripted warehouse session.

Invariants:
    - Logging configured exactly once, before the manager is built
    - Exit code is 0 even when the session reports failures (all are non-fatal)
"""

import logging

from stockroom.config import get_settings
from stockroom.infrastructure.observability import setup_logging
from stockroom.services.warehouse_manager import WarehouseManager

logger = logging.getLogger(__name__)


def _discard(line: str) -> None:
    pass


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = WarehouseManager(out=print if settings.echo_diagnostics else _discard)
    logger.info("Stockroom session started")
    reports = manager.run(seed=settings.seed_demo_data)
    failures = sum(1 for r in reports if r["status"] == "error")
    logger.info(
        f"Stockroom session finished: {len(reports)} operations, "
        f"{failures} reported failures",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
