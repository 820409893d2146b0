"""Live-site helpers for the browser suites."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest
import requests

from storefront_e2e.waits import wait_until

logger = logging.getLogger(__name__)


def is_site_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the storefront answers with any non-5xx status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.debug("Site %s not reachable: %s", url, exc)
        return False
    return response.status_code < 500


def wait_for_site_reachable(url: str, timeout_ms: int = 60000, interval_ms: int = 1000) -> None:
    """Poll the storefront until it responds or ``timeout_ms`` passes."""
    wait_until(
        lambda: is_site_reachable(url, timeout=2),
        timeout_ms=timeout_ms,
        description=f"storefront at {url} to respond",
        poll_interval_ms=interval_ms,
    )


def live_site_url(
    *,
    base_url_env: str = "SAUCE_BASE_URL",
    base_url_default: str = "https://www.saucedemo.com",
    suite_name: str = "browser",
    timeout_ms: int = 60000,
) -> Generator[str, None, None]:
    """
    Yield a reachable storefront base URL.

    Priority:
    1. Use the explicit URL from ``base_url_env`` and wait for it; an
       explicitly configured site that never comes up is a failure.
    2. Use ``base_url_default`` if it answers now, otherwise skip the
       suite (offline runs, sandboxed CI).
    """
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        wait_for_site_reachable(provided_base_url, timeout_ms=timeout_ms)
        logger.info("Running %s tests against %s", suite_name, provided_base_url)
        yield provided_base_url.rstrip("/")
        return

    if not is_site_reachable(base_url_default):
        pytest.skip(
            f"{base_url_default} is not reachable; set {base_url_env} to run {suite_name} tests"
        )

    logger.info("Running %s tests against %s", suite_name, base_url_default)
    yield base_url_default.rstrip("/")
