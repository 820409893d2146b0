"""
Support package for the SauceDemo end-to-end suite.

Contents:
- waits: bounded polling (wait_until) and retry (retry_with_delay)
- element_waits: element-state waits built on wait_until
- config: environment-aware settings
- logger: step/assertion logging helpers
- data_generator: Faker-backed customer and product data
- helpers: parsing/formatting utilities
- live_site: reachability checks for the storefront under test
"""

from storefront_e2e.waits import (
    PollingWaiter,
    WaitRequest,
    WaitTimeoutError,
    async_retry_with_delay,
    async_wait_until,
    retry_with_delay,
    wait_until,
)

__all__ = [
    "PollingWaiter",
    "WaitRequest",
    "WaitTimeoutError",
    "async_retry_with_delay",
    "async_wait_until",
    "retry_with_delay",
    "wait_until",
]
