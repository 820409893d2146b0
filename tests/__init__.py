"""
Test suite for the SauceDemo storefront.

This package contains:
- unit/: browser-free tests for the polling, data and helper modules
- pages/: Page Object Model classes shared by the browser suites
- smoke/: critical-path login checks
- regression/: cart and checkout coverage
- e2e/: full purchase journeys
"""
