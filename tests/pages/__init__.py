"""
Page Object Model (POM) classes for the SauceDemo storefront.

This package contains page objects that encapsulate page-specific
locators and interactions. The POM pattern provides:
- Separation of test logic from page details
- Reusable page interactions
- Maintainable test code (changes to UI only require updates in one place)
"""

from tests.pages.base_page import BasePage
from tests.pages.cart_page import CartPage
from tests.pages.checkout_page import CheckoutPage
from tests.pages.inventory_page import InventoryPage
from tests.pages.login_page import LoginPage

__all__ = ["BasePage", "CartPage", "CheckoutPage", "InventoryPage", "LoginPage"]
