"""
End-to-end test package for the SauceDemo storefront.

This package contains Playwright-based purchase journeys and demonstrates:
- Page Object Model (POM) pattern
- Step logging across long user flows
- User flow testing from login to order confirmation
"""
