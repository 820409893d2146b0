"""
Polling and retry primitives.

Browser state changes asynchronously: a click returns long before the
cart badge updates, a navigation resolves before the next page has
rendered its products.  Tests that assert immediately are flaky; tests
that ``sleep`` are slow.  This module bridges the gap with two bounded
loops:

- :func:`wait_until` polls a predicate until it holds or a deadline passes.
- :func:`retry_with_delay` re-invokes an action until it stops raising or
  an attempt budget is spent.

Both have asyncio counterparts (:func:`async_wait_until`,
:func:`async_retry_with_delay`) that accept plain callables or coroutine
functions.

Predicate-error policy for ``wait_until``: an exception raised by the
predicate while polling counts as "not yet true" and is retried.  Only
when the final evaluation (the one at the deadline boundary) raises is
that exception propagated as-is.  If the final evaluation merely returned
a falsy value, :class:`WaitTimeoutError` is raised and keeps the most
recent polling exception in ``last_error``.

Key Concepts Demonstrated:
- Monotonic deadlines checked on every iteration
- Sleep clipped to the remaining budget so the last check lands on the deadline
- Re-raising the original exception to keep its traceback
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT_MS = 10000
DEFAULT_POLL_INTERVAL_MS = 250
DEFAULT_RETRY_COUNT = 3
DEFAULT_RETRY_DELAY_MS = 1000


class WaitTimeoutError(TimeoutError):
    """
    Raised when a polled condition does not hold before its deadline.

    Attributes:
        description: Human-readable label of the awaited condition.
        timeout_ms: The budget that was exceeded.
        elapsed_ms: Time actually spent polling.
        attempts: Number of predicate evaluations performed.
        last_error: Most recent exception raised by the predicate while
            polling, or None if every evaluation returned normally.
    """

    def __init__(
        self,
        description: str,
        timeout_ms: int,
        elapsed_ms: int,
        attempts: int,
        last_error: BaseException | None = None,
    ):
        message = (
            f"Timed out after {timeout_ms}ms waiting for: {description} "
            f"({attempts} attempts, {elapsed_ms}ms elapsed)"
        )
        if last_error is not None:
            message += f"; last error: {last_error!r}"
        super().__init__(message)
        self.description = description
        self.timeout_ms = timeout_ms
        self.elapsed_ms = elapsed_ms
        self.attempts = attempts
        self.last_error = last_error


@dataclass(frozen=True)
class WaitRequest:
    """A single polling operation: what to evaluate, for how long, how often."""

    predicate: Callable[[], Any]
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    description: str = "condition"

    def __post_init__(self) -> None:
        if self.timeout_ms < 0:
            raise ValueError(f"timeout_ms must be >= 0, got {self.timeout_ms}")
        if self.poll_interval_ms <= 0:
            raise ValueError(f"poll_interval_ms must be > 0, got {self.poll_interval_ms}")


class _Deadline:
    """Monotonic deadline started at construction."""

    def __init__(self, timeout_ms: int):
        self.started = time.monotonic()
        self.expires = self.started + timeout_ms / 1000

    def remaining(self) -> float:
        return self.expires - time.monotonic()

    def elapsed_ms(self) -> int:
        return round((time.monotonic() - self.started) * 1000)


def _validate_retry(max_retries: int, delay_ms: int) -> None:
    if max_retries < 1:
        raise ValueError(f"max_retries must be >= 1, got {max_retries}")
    if delay_ms < 0:
        raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")


def _timed_out(
    request: WaitRequest,
    deadline: _Deadline,
    attempts: int,
    last_error: BaseException | None,
    final_raised: bool,
) -> BaseException:
    """Build the exception to raise once the deadline has passed."""
    if final_raised and last_error is not None:
        logger.warning(
            "Wait for %r failed: predicate still raising at deadline (%s)",
            request.description,
            last_error,
        )
        return last_error
    error = WaitTimeoutError(
        description=request.description,
        timeout_ms=request.timeout_ms,
        elapsed_ms=deadline.elapsed_ms(),
        attempts=attempts,
        last_error=last_error,
    )
    logger.warning("%s", error)
    return error


def _poll(request: WaitRequest) -> None:
    deadline = _Deadline(request.timeout_ms)
    interval = request.poll_interval_ms / 1000
    attempts = 0
    last_error: BaseException | None = None

    while True:
        attempts += 1
        final_raised = False
        try:
            if request.predicate():
                logger.debug("Wait for %r satisfied after %d attempts", request.description, attempts)
                return
        except Exception as exc:
            last_error = exc
            final_raised = True

        remaining = deadline.remaining()
        if remaining <= 0:
            error = _timed_out(request, deadline, attempts, last_error, final_raised)
            if error is last_error:
                raise error
            raise error from last_error

        time.sleep(min(interval, remaining))


async def _async_poll(request: WaitRequest) -> None:
    deadline = _Deadline(request.timeout_ms)
    interval = request.poll_interval_ms / 1000
    attempts = 0
    last_error: BaseException | None = None

    while True:
        attempts += 1
        final_raised = False
        try:
            outcome = request.predicate()
            if inspect.isawaitable(outcome):
                outcome = await outcome
            if outcome:
                logger.debug("Wait for %r satisfied after %d attempts", request.description, attempts)
                return
        except Exception as exc:
            last_error = exc
            final_raised = True

        remaining = deadline.remaining()
        if remaining <= 0:
            error = _timed_out(request, deadline, attempts, last_error, final_raised)
            if error is last_error:
                raise error
            raise error from last_error

        await asyncio.sleep(min(interval, remaining))


class PollingWaiter:
    """
    Bounded polling and retry with shared defaults.

    A waiter carries the default timeout, poll interval and retry budget
    for a test session (usually built from configuration via
    :meth:`from_config`).  Every argument can still be overridden per call.

    Attributes:
        default_timeout_ms: Timeout used when a call does not pass one.
        poll_interval_ms: Delay between unsuccessful predicate evaluations.
        default_retries: Total attempt count for ``retry_with_delay``.
        default_delay_ms: Delay between ``retry_with_delay`` attempts.
    """

    def __init__(
        self,
        default_timeout_ms: int = DEFAULT_TIMEOUT_MS,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
        default_retries: int = DEFAULT_RETRY_COUNT,
        default_delay_ms: int = DEFAULT_RETRY_DELAY_MS,
    ):
        self.default_timeout_ms = default_timeout_ms
        self.poll_interval_ms = poll_interval_ms
        self.default_retries = default_retries
        self.default_delay_ms = default_delay_ms

    @classmethod
    def from_config(cls, settings: Any) -> "PollingWaiter":
        """Build a waiter from a configuration class (see ``storefront_e2e.config``)."""
        return cls(
            default_timeout_ms=settings.WAIT_TIMEOUT_MS,
            poll_interval_ms=settings.POLL_INTERVAL_MS,
            default_retries=settings.RETRY_COUNT,
            default_delay_ms=settings.RETRY_DELAY_MS,
        )

    def _request(
        self,
        predicate: Callable[[], Any],
        timeout_ms: int | None,
        description: str,
        poll_interval_ms: int | None,
    ) -> WaitRequest:
        return WaitRequest(
            predicate=predicate,
            timeout_ms=self.default_timeout_ms if timeout_ms is None else timeout_ms,
            poll_interval_ms=self.poll_interval_ms if poll_interval_ms is None else poll_interval_ms,
            description=description,
        )

    def wait_until(
        self,
        predicate: Callable[[], Any],
        timeout_ms: int | None = None,
        description: str = "condition",
        poll_interval_ms: int | None = None,
    ) -> None:
        """
        Block until ``predicate()`` returns a truthy value.

        Args:
            predicate: Zero-argument callable, evaluated repeatedly.
            timeout_ms: Budget measured from the first evaluation.
            description: Label used in the timeout message.
            poll_interval_ms: Delay between unsuccessful evaluations.

        Raises:
            WaitTimeoutError: If the last evaluation at the deadline was falsy.
            Exception: The predicate's own exception, if the last evaluation raised.
            ValueError: On a negative timeout or non-positive poll interval.
        """
        _poll(self._request(predicate, timeout_ms, description, poll_interval_ms))

    async def async_wait_until(
        self,
        predicate: Callable[[], Any] | Callable[[], Awaitable[Any]],
        timeout_ms: int | None = None,
        description: str = "condition",
        poll_interval_ms: int | None = None,
    ) -> None:
        """Asyncio counterpart of :meth:`wait_until`; the predicate may be a coroutine function."""
        await _async_poll(self._request(predicate, timeout_ms, description, poll_interval_ms))

    def retry_with_delay(
        self,
        action: Callable[[], T],
        max_retries: int | None = None,
        delay_ms: int | None = None,
    ) -> T:
        """
        Invoke ``action`` until it returns without raising.

        ``max_retries`` is the total number of attempts, not the number
        of retries after the first one.  No delay follows the final
        failed attempt.

        Returns:
            The result of the first successful invocation.

        Raises:
            Exception: The exception from the last attempt, unchanged.
            ValueError: If ``max_retries`` < 1 or ``delay_ms`` < 0.
        """
        max_retries = self.default_retries if max_retries is None else max_retries
        delay_ms = self.default_delay_ms if delay_ms is None else delay_ms
        _validate_retry(max_retries, delay_ms)

        last_error: Exception | None = None
        for attempt in range(1, max_retries + 1):
            try:
                return action()
            except Exception as exc:
                last_error = exc
                if attempt < max_retries:
                    logger.debug(
                        "Attempt %d/%d failed (%s); retrying in %dms",
                        attempt, max_retries, exc, delay_ms,
                    )
                    time.sleep(delay_ms / 1000)

        logger.warning("All %d attempts failed; last error: %s", max_retries, last_error)
        raise last_error

    async def async_retry_with_delay(
        self,
        action: Callable[[], T] | Callable[[], Awaitable[T]],
        max_retries: int | None = None,
        delay_ms: int | None = None,
    ) -> T:
        """Asyncio counterpart of :meth:`retry_with_delay`; the action may be a coroutine function."""
        max_retries = self.default_retries if max_retries is None else max_retries
        delay_ms = self.default_delay_ms if delay_ms is None else delay_ms
        _validate_retry(max_retries, delay_ms)

        last_error: Exception | None = None
        for attempt in range(1, max_retries + 1):
            try:
                result = action()
                if inspect.isawaitable(result):
                    result = await result
                return result
            except Exception as exc:
                last_error = exc
                if attempt < max_retries:
                    logger.debug(
                        "Attempt %d/%d failed (%s); retrying in %dms",
                        attempt, max_retries, exc, delay_ms,
                    )
                    await asyncio.sleep(delay_ms / 1000)

        logger.warning("All %d attempts failed; last error: %s", max_retries, last_error)
        raise last_error


_default_waiter = PollingWaiter()


def wait_until(
    predicate: Callable[[], Any],
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    description: str = "condition",
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> None:
    """Poll ``predicate`` until truthy; see :meth:`PollingWaiter.wait_until`."""
    _default_waiter.wait_until(predicate, timeout_ms, description, poll_interval_ms)


def retry_with_delay(
    action: Callable[[], T],
    max_retries: int = DEFAULT_RETRY_COUNT,
    delay_ms: int = DEFAULT_RETRY_DELAY_MS,
) -> T:
    """Retry ``action`` up to ``max_retries`` total attempts; see :meth:`PollingWaiter.retry_with_delay`."""
    return _default_waiter.retry_with_delay(action, max_retries, delay_ms)


async def async_wait_until(
    predicate: Callable[[], Any] | Callable[[], Awaitable[Any]],
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    description: str = "condition",
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> None:
    await _default_waiter.async_wait_until(predicate, timeout_ms, description, poll_interval_ms)


async def async_retry_with_delay(
    action: Callable[[], T] | Callable[[], Awaitable[T]],
    max_retries: int = DEFAULT_RETRY_COUNT,
    delay_ms: int = DEFAULT_RETRY_DELAY_MS,
) -> T:
    return await _default_waiter.async_retry_with_delay(action, max_retries, delay_ms)
