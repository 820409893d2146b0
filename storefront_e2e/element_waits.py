"""
Element-level waits built on :func:`storefront_e2e.waits.wait_until`.

Playwright's ``expect`` assertions already retry, but they fail with an
``AssertionError`` and only cover the states Playwright knows about.
These helpers cover the remaining cases (attribute values, counts,
enabled/disabled) and raise :class:`~storefront_e2e.waits.WaitTimeoutError`
with a descriptive message, so page objects can use them as
preconditions rather than assertions.

Anything satisfying :class:`ElementHandle` works; Playwright's
``Locator`` does out of the box.
"""

from __future__ import annotations

from typing import Protocol

from storefront_e2e.waits import DEFAULT_POLL_INTERVAL_MS, DEFAULT_TIMEOUT_MS, wait_until


class ElementHandle(Protocol):
    """The subset of a UI element the waits depend on."""

    def inner_text(self) -> str: ...

    def get_attribute(self, name: str) -> str | None: ...

    def is_visible(self) -> bool: ...

    def is_enabled(self) -> bool: ...

    def wait_for(self, *, state: str, timeout: float | None = None) -> None: ...

    def count(self) -> int: ...


class UrlSource(Protocol):
    """Anything exposing the current URL (Playwright ``Page``)."""

    @property
    def url(self) -> str: ...


def wait_for_text_to_contain(
    element: ElementHandle,
    text: str,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> None:
    wait_until(
        lambda: text in element.inner_text(),
        timeout_ms=timeout_ms,
        description=f'element text to contain "{text}"',
        poll_interval_ms=poll_interval_ms,
    )


def wait_for_attribute_value(
    element: ElementHandle,
    attribute: str,
    value: str,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> None:
    wait_until(
        lambda: element.get_attribute(attribute) == value,
        timeout_ms=timeout_ms,
        description=f'attribute "{attribute}" to equal "{value}"',
        poll_interval_ms=poll_interval_ms,
    )


def wait_for_url_to_contain(
    page: UrlSource,
    url_part: str,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> None:
    wait_until(
        lambda: url_part in page.url,
        timeout_ms=timeout_ms,
        description=f'URL to contain "{url_part}"',
        poll_interval_ms=poll_interval_ms,
    )


def wait_for_element_count(
    elements: ElementHandle,
    expected_count: int,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> None:
    """Wait until a multi-element locator matches exactly ``expected_count`` nodes."""
    wait_until(
        lambda: elements.count() == expected_count,
        timeout_ms=timeout_ms,
        description=f"element count to equal {expected_count}",
        poll_interval_ms=poll_interval_ms,
    )


def wait_for_enabled(
    element: ElementHandle,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> None:
    wait_until(
        element.is_enabled,
        timeout_ms=timeout_ms,
        description="element to be enabled",
        poll_interval_ms=poll_interval_ms,
    )


def wait_for_disabled(
    element: ElementHandle,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> None:
    wait_until(
        lambda: not element.is_enabled(),
        timeout_ms=timeout_ms,
        description="element to be disabled",
        poll_interval_ms=poll_interval_ms,
    )


def smart_wait(
    element: ElementHandle,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> None:
    """
    Wait until an element is attached, visible, and enabled.

    Each stage gets the full ``timeout_ms``, matching how the stages
    would behave if called one after another.
    """
    element.wait_for(state="attached", timeout=timeout_ms)
    element.wait_for(state="visible", timeout=timeout_ms)
    wait_for_enabled(element, timeout_ms=timeout_ms, poll_interval_ms=poll_interval_ms)
