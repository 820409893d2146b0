"""
Suite configuration module.

This module defines configuration classes for the environments the
browser suite runs in (local workstation, CI). Configuration values are
loaded from environment variables with sensible defaults, so a run can
be pointed at a different storefront or given longer timeouts without
touching code.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to *default* when unset."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}") from exc


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("SAUCE_BASE_URL", "https://www.saucedemo.com")

    # Timing, all in milliseconds
    WAIT_TIMEOUT_MS: int = _env_int("E2E_WAIT_TIMEOUT_MS", 10000)
    PAGE_LOAD_TIMEOUT_MS: int = _env_int("E2E_PAGE_LOAD_TIMEOUT_MS", 30000)
    POLL_INTERVAL_MS: int = _env_int("E2E_POLL_INTERVAL_MS", 250)
    RETRY_COUNT: int = _env_int("E2E_RETRY_COUNT", 3)
    RETRY_DELAY_MS: int = _env_int("E2E_RETRY_DELAY_MS", 1000)

    # Demo accounts published on the SauceDemo login page
    STANDARD_USER: str = os.environ.get("SAUCE_STANDARD_USER", "standard_user")
    LOCKED_OUT_USER: str = os.environ.get("SAUCE_LOCKED_OUT_USER", "locked_out_user")
    PASSWORD: str = os.environ.get("SAUCE_PASSWORD", "secret_sauce")

    SCREENSHOT_DIR: str = os.environ.get(
        "E2E_SCREENSHOT_DIR", str(BASE_DIR / "test-results" / "screenshots")
    )
    VIEWPORT: dict = {"width": 1280, "height": 720}
    HEADLESS: bool = os.environ.get("E2E_HEADLESS", "1") != "0"
    LOG_LEVEL: str = os.environ.get("E2E_LOG_LEVEL", "INFO")


class LocalConfig(Config):
    """Local workstation configuration."""

    HEADLESS: bool = os.environ.get("E2E_HEADLESS", "0") != "0"
    LOG_LEVEL: str = os.environ.get("E2E_LOG_LEVEL", "DEBUG")


class CIConfig(Config):
    """CI configuration: shared runners are slower, so wait and retry longer."""

    WAIT_TIMEOUT_MS: int = _env_int("E2E_WAIT_TIMEOUT_MS", 20000)
    PAGE_LOAD_TIMEOUT_MS: int = _env_int("E2E_PAGE_LOAD_TIMEOUT_MS", 60000)
    RETRY_COUNT: int = _env_int("E2E_RETRY_COUNT", 5)
    HEADLESS: bool = True


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses the E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "local")
    return config.get(env, config["default"])
