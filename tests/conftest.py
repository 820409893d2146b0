"""
Shared pytest fixtures for the SauceDemo test suite.

Unit tests under ``tests/unit`` only use ``settings``; the browser suites
(smoke, regression, e2e) use the Playwright fixtures below.  Browser
fixtures resolve ``live_site`` before the browser itself, so when the
storefront is unreachable the whole browser suite is skipped before
Playwright launches anything.

Key SDET Concepts Demonstrated:
- Overriding pytest-playwright's context/page fixtures for isolation
- Page object fixtures built from an explicitly passed page and base URL
- Session-scoped live-site resolution with skip-on-unreachable
- Screenshot capture on failure
"""

from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, Playwright

from storefront_e2e.config import Config, get_config
from storefront_e2e.data_generator import UserData, generate_user
from storefront_e2e.live_site import live_site_url
from storefront_e2e.logger import configure_logging
from tests.pages.cart_page import CartPage
from tests.pages.checkout_page import CheckoutPage
from tests.pages.inventory_page import InventoryPage
from tests.pages.login_page import LoginPage


def pytest_configure(config):
    configure_logging(get_config().LOG_LEVEL)


# -----------------------------------------------------------------------------
# Settings & Site Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def settings() -> type[Config]:
    """Configuration class for the active environment (``E2E_ENV``)."""
    return get_config()


@pytest.fixture(scope="session")
def live_site(settings: type[Config]) -> Generator[str, None, None]:
    """
    Return a reachable storefront base URL.

    If SAUCE_BASE_URL is set, that site must come up; otherwise the
    default site is used when reachable and the suite is skipped when not.
    """
    yield from live_site_url(
        base_url_env="SAUCE_BASE_URL",
        base_url_default=settings.BASE_URL,
        suite_name="browser",
    )


@pytest.fixture(scope="session")
def credentials(settings: type[Config]) -> dict[str, str]:
    return {"username": settings.STANDARD_USER, "password": settings.PASSWORD}


@pytest.fixture
def customer() -> UserData:
    """Fresh random customer details for checkout forms."""
    return generate_user()


# -----------------------------------------------------------------------------
# Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def testid_attribute(playwright: Playwright) -> str:
    """Point ``get_by_test_id`` at SauceDemo's ``data-test`` attribute."""
    playwright.selectors.set_test_id_attribute("data-test")
    return "data-test"


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict, settings: type[Config]) -> dict:
    return {
        **browser_context_args,
        "viewport": settings.VIEWPORT,
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict, testid_attribute: str
) -> Generator[BrowserContext, None, None]:
    """
    Create a fresh browser context for each test.

    A new context ensures test isolation - cookies, localStorage,
    and the SauceDemo cart (kept in localStorage) are not shared.
    """
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


# -----------------------------------------------------------------------------
# Page Object Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def login_page(live_site: str, page: Page, settings: type[Config]) -> LoginPage:
    return LoginPage(page, live_site, settings)


@pytest.fixture
def inventory_page(live_site: str, page: Page, settings: type[Config]) -> InventoryPage:
    return InventoryPage(page, live_site, settings)


@pytest.fixture
def cart_page(live_site: str, page: Page, settings: type[Config]) -> CartPage:
    return CartPage(page, live_site, settings)


@pytest.fixture
def checkout_page(live_site: str, page: Page, settings: type[Config]) -> CheckoutPage:
    return CheckoutPage(page, live_site, settings)


@pytest.fixture
def authenticated_user(
    login_page: LoginPage,
    inventory_page: InventoryPage,
    credentials: dict[str, str],
) -> dict[str, str]:
    """Log the standard user in within the current browser context."""
    login_page.navigate()
    login_page.login(credentials["username"], credentials["password"])
    assert inventory_page.is_inventory_page_displayed()
    return credentials


# -----------------------------------------------------------------------------
# Screenshot on Failure
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on browser test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            screenshot_dir = get_config().SCREENSHOT_DIR
            os.makedirs(screenshot_dir, exist_ok=True)
            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = os.path.join(screenshot_dir, f"{test_name}.png")
            try:
                page.screenshot(path=screenshot_path)
                print(f"\nScreenshot saved: {screenshot_path}")
            except Exception as exc:  # pragma: no cover - best effort logging
                print(f"\nFailed to capture screenshot: {exc}")
