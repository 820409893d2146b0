"""
Logging helpers for test execution.

Browser tests are long, linear user journeys; when one fails in CI the
log is often the only record of how far it got.  These helpers add a
thin narrative layer (numbered steps, assertion outcomes, structured
payloads) on top of the standard ``logging`` module so every suite
writes the same shape of output.

Key Concepts Demonstrated:
- Module-level loggers (``logging.getLogger(__name__)``)
- One-time root configuration via ``logging.basicConfig``
- Lazy ``%s`` formatting so disabled levels cost nothing
"""

from __future__ import annotations

import json
import logging
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("storefront_e2e.steps")


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logging for a test session.

    Args:
        level: Logging level as an int or a level name such as ``"DEBUG"``.
            Unknown names raise ``ValueError``.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("storefront_e2e").setLevel(level)


def log_step(step_name: str, step_number: int | None = None) -> None:
    """Log a numbered (or unnumbered) test step."""
    prefix = f"Step {step_number}:" if step_number else "Step:"
    logger.info("%s %s", prefix, step_name)


def log_assertion(assertion: str, passed: bool) -> None:
    """
    Log the outcome of an assertion.

    Failed assertions are logged at WARNING so they stand out even when
    the session runs at INFO.
    """
    status = "✓" if passed else "✗"
    level = logging.INFO if passed else logging.WARNING
    logger.log(level, "%s Assertion: %s | passed=%s", status, assertion, passed)


def log_data(message: str, data: Any = None) -> None:
    """Log a message with an optional JSON-encoded payload."""
    if data is None:
        logger.info("%s", message)
        return
    logger.info("%s | Data: %s", message, json.dumps(data, default=str, sort_keys=True))
